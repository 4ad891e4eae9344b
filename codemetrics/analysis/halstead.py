"""Halstead metrics.

Operators are assignment, binary and compound-assignment operator
tokens; operands are identifiers, string and numeric literals, and
property accesses. Uniqueness is decided by source text, across every
tree added to the counter.
"""

from collections.abc import Iterable

import structlog

from codemetrics.parser.languages import BaseLanguageProfile
from codemetrics.parser.nodes import SyntaxNode

from .models import HalsteadMetrics
from .walker import walk

logger = structlog.get_logger(__name__)


class HalsteadCounter:
    """Accumulates operator and operand counts over many trees."""

    def __init__(self) -> None:
        self._operators: set[str] = set()
        self._operands: set[str] = set()
        self._total_operators = 0
        self._total_operands = 0

    def add_tree(self, root: SyntaxNode, profile: BaseLanguageProfile) -> None:
        """Count every operator and operand in a tree.

        Args:
            root: Root of the tree.
            profile: Language profile classifying the node kinds.
        """
        for node in walk(root):
            if profile.is_operator(node):
                self._operators.add(node.text)
                self._total_operators += 1
            elif profile.is_operand(node):
                self._operands.add(node.text)
                self._total_operands += 1

    def metrics(self) -> HalsteadMetrics:
        """Build the metrics for everything counted so far."""
        metrics = HalsteadMetrics(
            distinct_operators=len(self._operators),
            distinct_operands=len(self._operands),
            total_operators=self._total_operators,
            total_operands=self._total_operands,
        )
        logger.debug(
            "Halstead counts",
            n1=metrics.distinct_operators,
            n2=metrics.distinct_operands,
            N1=metrics.total_operators,
            N2=metrics.total_operands,
        )
        return metrics


def calculate_halstead_metrics(
    trees: Iterable[tuple[SyntaxNode, BaseLanguageProfile]],
) -> HalsteadMetrics:
    """Calculate Halstead metrics over a set of trees.

    Args:
        trees: ``(root, profile)`` pairs, one per file.

    Returns:
        HalsteadMetrics for all trees together.
    """
    counter = HalsteadCounter()
    for root, profile in trees:
        counter.add_tree(root, profile)
    return counter.metrics()
