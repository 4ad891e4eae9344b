"""McCabe cyclomatic complexity.

A function starts with one path. Every decision point in its subtree
(branches, loops, case clauses, catch clauses, and short-circuit
operators) adds one. Nested functions are part of the subtree, so their
branches count toward the enclosing function as well as toward their
own score.
"""

from codemetrics.parser.languages import BaseLanguageProfile
from codemetrics.parser.nodes import SyntaxNode

from .walker import walk


def calculate_cyclomatic_complexity(node: SyntaxNode, profile: BaseLanguageProfile) -> int:
    """Calculate the cyclomatic complexity of a function-like subtree.

    Args:
        node: Root of the subtree (usually a function-like node).
        profile: Language profile classifying the node kinds.

    Returns:
        Cyclomatic complexity (minimum 1).
    """
    complexity = 1  # Base complexity

    for descendant in walk(node):
        if profile.is_decision_point(descendant):
            complexity += 1

    return complexity
