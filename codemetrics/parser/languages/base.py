"""Abstract base class for language profiles.

A language profile tells the complexity scorers how to read one grammar:
which node kinds are function-like, which are decision points, which
tokens are Halstead operators or operands, and how a function's name is
resolved from its surroundings. Scorers stay grammar-agnostic and only
ask the profile.
"""

from abc import ABC, abstractmethod

from ..nodes import SyntaxNode

ANONYMOUS = "<anonymous>"


class BaseLanguageProfile(ABC):
    """Node-kind classification for one grammar.

    Subclasses fill in the kind sets; the classification methods below
    work from them and rarely need overriding.

    Attributes:
        language: Language identifier this profile handles.
        function_kinds: Function-like node kinds (scored individually).
        decision_kinds: Kinds adding one cyclomatic path each.
        logical_expression_kinds: Binary expression kinds whose operator
            is inspected for short-circuit operators.
        cyclomatic_operators: Short-circuit operators counted by the
            cyclomatic scorer (includes null-coalescing).
        cognitive_kinds: Kinds scored ``1 + nesting`` by the cognitive scorer.
        cognitive_operators: Short-circuit operators scored by the
            cognitive scorer (no null-coalescing).
        nesting_kinds: Control-flow kinds that increase nesting.
        operator_parent_kinds: Expression kinds whose operator token is a
            Halstead operator.
        operator_tokens: Operator token texts counted as Halstead operators.
        operand_kinds: Node kinds counted as Halstead operands.
    """

    language: str = ""

    function_kinds: frozenset[str] = frozenset()
    decision_kinds: frozenset[str] = frozenset()
    logical_expression_kinds: frozenset[str] = frozenset()
    cyclomatic_operators: frozenset[str] = frozenset()
    cognitive_kinds: frozenset[str] = frozenset()
    cognitive_operators: frozenset[str] = frozenset()
    nesting_kinds: frozenset[str] = frozenset()
    operator_parent_kinds: frozenset[str] = frozenset()
    operator_tokens: frozenset[str] = frozenset()
    operand_kinds: frozenset[str] = frozenset()

    @abstractmethod
    def function_name(self, node: SyntaxNode) -> str:
        """Resolve the name of a function-like node.

        Args:
            node: A node for which ``is_function_like`` is True.

        Returns:
            The resolved identifier, or ``<anonymous>``.
        """
        ...

    def is_function_like(self, node: SyntaxNode) -> bool:
        # Keyword tokens share their type with some node kinds ("function", "lambda").
        return node.is_named and node.kind in self.function_kinds

    def logical_operator(self, node: SyntaxNode) -> str | None:
        """Get the operator text of a binary logical expression.

        Args:
            node: Any node.

        Returns:
            The operator token text, or None if the node is not one of
            the profile's binary expression kinds.
        """
        if node.kind not in self.logical_expression_kinds:
            return None

        operator = node.child_by_field("operator")
        if operator is not None:
            return operator.text

        # Grammars without an operator field: the operator is the only
        # anonymous child between the operands.
        for child in node.children:
            if not child.is_named:
                return child.text
        return None

    def is_decision_point(self, node: SyntaxNode) -> bool:
        """Check whether a node adds a cyclomatic path."""
        if node.is_named and node.kind in self.decision_kinds:
            return True
        return self.logical_operator(node) in self.cyclomatic_operators

    def cognitive_increment(self, node: SyntaxNode) -> int:
        """Base cognitive increment of a node (before nesting is added)."""
        if node.is_named and node.kind in self.cognitive_kinds:
            return 1
        if self.logical_operator(node) in self.cognitive_operators:
            return 1
        return 0

    def increases_nesting(self, node: SyntaxNode) -> bool:
        """Check whether a control-flow node nests its children.

        Function-like nodes are handled by the cognitive scorer, which
        only nests them when they are themselves nested.
        """
        return node.is_named and node.kind in self.nesting_kinds

    def is_operator(self, node: SyntaxNode) -> bool:
        """Check whether a node is a Halstead operator token."""
        if node.is_named or node.kind not in self.operator_tokens:
            return False
        parent = node.parent
        return parent is not None and parent.kind in self.operator_parent_kinds

    def is_operand(self, node: SyntaxNode) -> bool:
        """Check whether a node is a Halstead operand."""
        return node.is_named and node.kind in self.operand_kinds

    @staticmethod
    def field_text(node: SyntaxNode | None, field: str) -> str | None:
        """Get the text of a node's field child, if present."""
        if node is None:
            return None
        child = node.child_by_field(field)
        return child.text if child is not None else None
