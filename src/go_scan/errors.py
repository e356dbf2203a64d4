# --- Scan errors -------------------------------------------------------------
from typing import Optional


class ScanError(Exception):
    """A scan could not continue past `path`."""

    def __init__(self, path, message: str):
        self.path = str(path)
        self.message = message
        super().__init__(f"{self.path}: {message}")


class TraversalError(ScanError):
    """A directory could not be listed or a file could not be read."""


class ParseError(ScanError):
    """A .go file does not conform to the Go grammar."""

    def __init__(self, path, message: str, line: Optional[int] = None):
        self.line = line
        if line is not None:
            message = f"line {line}: {message}"
        super().__init__(path, message)


class GrammarUnavailableError(RuntimeError):
    """The tree-sitter Go grammar could not be loaded."""
