# --- Data models for our index ----------------------------------------------
from dataclasses import dataclass, field
from typing import Optional

from tree_sitter import Node


@dataclass(frozen=True)
class VariableRecord:
    """A name bound by an assignment inside a function body."""
    name: str  # identifier on the left-hand side, e.g. "err"
    type: str  # source text of the matching right-hand side, or "unknown"
    line: int = 0
    col: int = 0


@dataclass(frozen=True)
class Signature:
    """The function type: rendered type parameters, parameters and results."""
    type_parameters: tuple[str, ...] = ()
    parameters: tuple[str, ...] = ()  # e.g. ("a, b int", "opts ...Option")
    results: tuple[str, ...] = ()  # e.g. ("*User", "error")


@dataclass(frozen=True)
class FunctionRecord:
    """Metadata about one function or method declaration."""
    doc: str  # doc comment text, "" if undocumented
    recv: str  # receiver list without parentheses, e.g. "t *T"; "" for functions
    name: str
    signature: Signature
    variables: tuple[VariableRecord, ...]
    body: Optional[Node] = field(default=None, repr=False, compare=False)  # keeps the parsed tree alive
    recv_type: str = ""  # e.g. "*T"
    package: str = ""
    path: str = ""
    line: int = 0
    col: int = 0
    source: bytes = field(default=b"", repr=False, compare=False)  # file contents, to render `body`

    @property
    def is_method(self) -> bool:
        return bool(self.recv)
