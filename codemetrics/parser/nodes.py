"""Read-only syntax node interface.

The analysis algorithms never touch a parser library directly. They see
the tree through ``SyntaxNode``, which exposes the node kind, position,
children, parent and source text. Two implementations are provided:

- ``TreeSitterNode`` wraps a ``tree_sitter.Node`` produced by the parser.
- ``MemoryNode`` is a hand-built in-memory tree, useful for tests and for
  callers that produce trees from another parser.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from tree_sitter import Node


class SyntaxNode(ABC):
    """Abstract handle into a syntax tree owned by an external parser."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Node-kind tag (for tree-sitter, the grammar node type)."""
        ...

    @property
    @abstractmethod
    def is_named(self) -> bool:
        """False for anonymous tokens such as operators and punctuation."""
        ...

    @property
    @abstractmethod
    def line(self) -> int:
        """Starting line number (1-indexed)."""
        ...

    @property
    @abstractmethod
    def column(self) -> int:
        """Starting column number (1-indexed)."""
        ...

    @property
    @abstractmethod
    def text(self) -> str:
        """Source text covered by the node."""
        ...

    @property
    @abstractmethod
    def children(self) -> list["SyntaxNode"]:
        """Child nodes in source order."""
        ...

    @property
    @abstractmethod
    def parent(self) -> Optional["SyntaxNode"]:
        """Parent node, None for the root."""
        ...

    @abstractmethod
    def child_by_field(self, name: str) -> Optional["SyntaxNode"]:
        """Get the child stored under a grammar field name, if any.

        Args:
            name: Field name (e.g. 'name', 'operator', 'left').

        Returns:
            The child node, or None when the field is absent.
        """
        ...

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.kind} [{self.line}:{self.column}]>"


class TreeSitterNode(SyntaxNode):
    """SyntaxNode adapter over a tree-sitter node.

    Attributes:
        raw: The wrapped tree-sitter node.
    """

    __slots__ = ("raw",)

    def __init__(self, raw: "Node") -> None:
        self.raw = raw

    @property
    def kind(self) -> str:
        return self.raw.type

    @property
    def is_named(self) -> bool:
        return self.raw.is_named

    @property
    def line(self) -> int:
        return self.raw.start_point[0] + 1

    @property
    def column(self) -> int:
        return self.raw.start_point[1] + 1

    @property
    def text(self) -> str:
        raw_text = self.raw.text
        if raw_text is None:
            return ""
        return raw_text.decode("utf-8", errors="replace")

    @property
    def children(self) -> list[SyntaxNode]:
        return [TreeSitterNode(child) for child in self.raw.children]

    @property
    def parent(self) -> SyntaxNode | None:
        parent = self.raw.parent
        return TreeSitterNode(parent) if parent is not None else None

    def child_by_field(self, name: str) -> SyntaxNode | None:
        child = self.raw.child_by_field_name(name)
        return TreeSitterNode(child) if child is not None else None

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TreeSitterNode):
            return NotImplemented
        return self.raw == other.raw

    def __hash__(self) -> int:
        return hash(self.raw)


class MemoryNode(SyntaxNode):
    """Hand-built syntax node.

    Children get their parent link set on construction. When no text is
    given, anonymous tokens render as their kind and named nodes render
    as their children's text joined by spaces.

    Example:
        >>> plus = MemoryNode("+", named=False)
        >>> expr = MemoryNode(
        ...     "binary_expression",
        ...     children=[MemoryNode("identifier", "a"), plus, MemoryNode("identifier", "b")],
        ...     fields={"operator": plus},
        ... )
        >>> expr.text
        'a + b'
    """

    def __init__(
        self,
        kind: str,
        text: str | None = None,
        children: Iterable["MemoryNode"] = (),
        *,
        fields: Mapping[str, "MemoryNode"] | None = None,
        named: bool = True,
        line: int = 1,
        column: int = 1,
    ) -> None:
        self._kind = kind
        self._text = text
        self._children = list(children)
        self._fields = dict(fields or {})
        self._named = named
        self._line = line
        self._column = column
        self._parent: MemoryNode | None = None

        for child in self._children:
            child._parent = self

    @property
    def kind(self) -> str:
        return self._kind

    @property
    def is_named(self) -> bool:
        return self._named

    @property
    def line(self) -> int:
        return self._line

    @property
    def column(self) -> int:
        return self._column

    @property
    def text(self) -> str:
        if self._text is not None:
            return self._text
        if not self._named:
            return self._kind
        return " ".join(child.text for child in self._children)

    @property
    def children(self) -> list[SyntaxNode]:
        return list(self._children)

    @property
    def parent(self) -> SyntaxNode | None:
        return self._parent

    def child_by_field(self, name: str) -> SyntaxNode | None:
        return self._fields.get(name)
