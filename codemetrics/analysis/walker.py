"""Depth-first traversal over syntax trees.

Both walkers are iterative, so deeply nested sources do not run into the
interpreter's recursion limit, and lazy, so a consumer can stop early.
Each call starts from scratch; nothing is shared between traversals.
Exceptions raised by the consumer propagate untouched.
"""

from collections.abc import Iterator

from codemetrics.parser.nodes import SyntaxNode


def walk(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield ``root`` and every descendant in pre-order.

    Children are visited in source order.

    Args:
        root: Node to start from.

    Yields:
        Each node exactly once.
    """
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def walk_scoped(root: SyntaxNode) -> Iterator[tuple[SyntaxNode, bool]]:
    """Yield enter and leave events in depth-first order.

    A node's enter event ``(node, True)`` comes before any event of its
    descendants and its leave event ``(node, False)`` after all of them,
    which lets consumers keep push/pop state such as a nesting level.

    Args:
        root: Node to start from.

    Yields:
        ``(node, entering)`` pairs.
    """
    stack: list[tuple[SyntaxNode, bool]] = [(root, True)]
    while stack:
        node, entering = stack.pop()
        yield node, entering
        if entering:
            stack.append((node, False))
            stack.extend((child, True) for child in reversed(node.children))
