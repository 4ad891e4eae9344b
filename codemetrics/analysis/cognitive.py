"""Cognitive complexity.

Every branch, loop, catch, and short-circuit ``&&``/``||`` costs
``1 + nesting``, where nesting counts the enclosing control-flow
constructs. Function bodies start at nesting 0; a function defined inside
another function or inside control flow nests one level deeper, like a
block would.

The nesting level is local to one call, i.e. to one file's walk.
"""

from codemetrics.parser.languages import BaseLanguageProfile
from codemetrics.parser.nodes import SyntaxNode

from .walker import walk_scoped


def calculate_cognitive_complexity(root: SyntaxNode, profile: BaseLanguageProfile) -> int:
    """Calculate the cognitive complexity of a syntax tree.

    Args:
        root: Root of the tree, typically a whole file.
        profile: Language profile classifying the node kinds.

    Returns:
        Cognitive complexity score (0 for straight-line code).
    """
    total = 0
    nesting = 0
    function_depth = 0
    # One frame per nesting-relevant node on the current path: (is_function, pushed)
    frames: list[tuple[bool, bool]] = []

    for node, entering in walk_scoped(root):
        is_function = profile.is_function_like(node)
        is_control_flow = profile.increases_nesting(node)

        if entering:
            increment = profile.cognitive_increment(node)
            if increment:
                total += increment + nesting

            if is_function:
                pushed = function_depth > 0 or nesting > 0
                function_depth += 1
            else:
                pushed = is_control_flow

            if is_function or is_control_flow:
                frames.append((is_function, pushed))
                if pushed:
                    nesting += 1

        elif is_function or is_control_flow:
            was_function, pushed = frames.pop()
            if pushed:
                nesting -= 1
            if was_function:
                function_depth -= 1

    return total
