import logging
from pathlib import Path
from typing import Optional, Union

from tree_sitter import Language, Node, Parser, Tree

from go_scan.classify import infer_purpose
from go_scan.errors import GrammarUnavailableError, ParseError, TraversalError
from go_scan.models.ast_models import Declaration
from go_scan.tree_sitter_helpers import first_error_node, node_line, node_text

log = logging.getLogger(__name__)

# Receiver type wrappers stripped down to the base identifier:
# `*T`, `(T)`, `T[K]` and combinations like `*List[T]`.
_RECEIVER_WRAPPERS = ("pointer_type", "parenthesized_type", "generic_type")

# The grammar also accepts statements at the top level; Go only allows these.
_TOP_LEVEL_NODES = frozenset({
    "package_clause",
    "import_declaration",
    "function_declaration",
    "method_declaration",
    "type_declaration",
    "var_declaration",
    "const_declaration",
    "comment",
})


# --- Tree-sitter language loading -------------------------------------------

def load_go_language() -> Language:
    """
    Loads the Tree-sitter Go grammar from the `tree_sitter_go` wheel.
    """
    try:
        import tree_sitter_go
    except ImportError as e:
        raise GrammarUnavailableError(
            "Could not load Go grammar.\n"
            "- Install `tree-sitter-go` (pip install tree-sitter-go)."
        ) from e
    return Language(tree_sitter_go.language())


# --- The Indexer -------------------------------------------------------------

class GoIndexer:
    """
    Reads the top level of a Tree-sitter Go AST: the package clause plus every
    function and method declaration.
    """

    def __init__(self):
        self.language = load_go_language()
        self.parser = Parser(self.language)

    def parse(self, source: bytes) -> Tree:
        return self.parser.parse(source)

    def index_file(self, path: Union[str, Path]) -> list[Declaration]:
        """
        Reads and indexes one .go file. Raises TraversalError when the file
        can't be read and ParseError when it isn't valid Go.
        """
        try:
            source = Path(path).read_bytes()
        except OSError as e:
            raise TraversalError(path, e.strerror or str(e)) from e
        return self.index_source(source, str(path))

    def index_source(self, source: Union[str, bytes], file_path: str) -> list[Declaration]:
        """
        Parses a Go source and returns its declarations in source order.
        """
        source_bytes = source.encode("utf-8") if isinstance(source, str) else source
        try:
            source_bytes.decode("utf-8")
        except UnicodeDecodeError as e:
            line = source_bytes[:e.start].count(b"\n") + 1
            raise ParseError(file_path, "invalid UTF-8", line=line) from e

        tree = self.parse(source_bytes)
        root: Node = tree.root_node

        bad = first_error_node(root)
        if bad is not None:
            what = f"missing {bad.type}" if bad.is_missing else "syntax error"
            raise ParseError(file_path, what, line=node_line(bad))

        self._check_top_level(root, file_path)
        package = self._find_package(source_bytes, root)

        declarations = []
        for child in root.children:
            if child.type in ("function_declaration", "method_declaration"):
                declarations.append(self._declaration(source_bytes, child, file_path, package))
        log.debug("Indexed %s: package %s, %d declarations", file_path, package, len(declarations))
        return declarations

    # -- AST helpers ----------------------------------------------------------

    def _check_top_level(self, root: Node, file_path: str):
        """
        Requires exactly one package clause, ahead of everything but comments,
        and nothing but declarations after it.
        """
        top = [c for c in root.named_children if c.type != "comment"]
        if not top or top[0].type != "package_clause":
            raise ParseError(file_path, "no package clause", line=node_line(top[0]) if top else None)
        for node in top[1:]:
            if node.type == "package_clause":
                raise ParseError(file_path, "duplicate package clause", line=node_line(node))
            if node.type not in _TOP_LEVEL_NODES:
                raise ParseError(file_path, f"unexpected {node.type} at top level", line=node_line(node))

    def _find_package(self, source_bytes: bytes, root: Node) -> Optional[str]:
        for child in root.children:
            if child.type == "package_clause":
                for part in child.named_children:
                    if part.type == "package_identifier":
                        return node_text(source_bytes, part)
        return None

    def _declaration(self, source_bytes: bytes, node: Node, file_path: str, package: str) -> Declaration:
        name_node = node.child_by_field_name("name")
        name = node_text(source_bytes, name_node) if name_node else "<anonymous>"

        receiver = ""
        is_method = node.type == "method_declaration"
        if is_method:
            receiver = self._receiver_type(source_bytes, node.child_by_field_name("receiver"))

        return Declaration(
            name=name,
            source_file=file_path,
            package_name=package,
            line_number=node_line(node),
            is_method=is_method,
            receiver_type=receiver,
            inferred_purpose=infer_purpose(name),
        )

    def _receiver_type(self, source_bytes: bytes, receiver: Optional[Node]) -> str:
        """
        Base type name of a receiver list like `(w *Widget)` -> "Widget".
        """
        if receiver is None:
            return ""
        params = [p for p in receiver.named_children if p.type == "parameter_declaration"]
        if not params:
            return ""
        type_node = params[0].child_by_field_name("type")
        while type_node is not None and type_node.type in _RECEIVER_WRAPPERS:
            if type_node.type == "generic_type":
                type_node = type_node.child_by_field_name("type")
            else:
                inner = [c for c in type_node.named_children if c.type != "comment"]
                type_node = inner[0] if inner else None
        return node_text(source_bytes, type_node) if type_node is not None else ""
