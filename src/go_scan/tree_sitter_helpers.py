# --- Tree-sitter plumbing ----------------------------------------------------
from typing import Optional

from tree_sitter import Node


def node_text(source_bytes: bytes, node: Node) -> str:
    """
    Source text of a node, e.g. a function name or receiver type. Nodes carry
    byte offsets into the UTF-8 source rather than text.
    """
    return source_bytes[node.start_byte:node.end_byte].decode("utf-8", errors="replace")


def node_line(node: Node) -> int:
    """1-based line of a node's start (tree-sitter rows are 0-based)."""
    return node.start_point[0] + 1


def first_error_node(root: Node) -> Optional[Node]:
    """
    Finds the first ERROR or MISSING node in source order, or None when the
    tree is clean. Subtrees without errors are not descended into.
    """
    if not root.has_error:
        return None
    stack = [root]
    while stack:
        node = stack.pop()
        if node.type == "ERROR" or node.is_missing:
            return node
        stack.extend(child for child in reversed(node.children) if child.has_error or child.is_missing)
    return None
