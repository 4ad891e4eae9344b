"""Python language profile for the tree-sitter Python grammar."""

from ..nodes import SyntaxNode
from .base import ANONYMOUS, BaseLanguageProfile

_CONTROL_FLOW = frozenset(
    {
        "if_statement",
        "elif_clause",
        "conditional_expression",
        "match_statement",
        "for_statement",
        "while_statement",
        "except_clause",
        "except_group_clause",
    }
)


class PythonProfile(BaseLanguageProfile):
    """Profile for Python sources.

    ``elif`` is treated as a nested ``if`` and ``match`` as a switch, so
    scores line up with the brace languages. Comprehension ``for`` and
    ``if`` clauses are cyclomatic decision points but carry no cognitive
    increment.
    """

    language: str = "python"

    function_kinds = frozenset({"function_definition", "lambda"})

    decision_kinds = frozenset(
        {
            "if_statement",
            "elif_clause",
            "conditional_expression",
            "case_clause",
            "except_clause",
            "except_group_clause",
            "while_statement",
            "for_statement",
            "for_in_clause",
            "if_clause",
        }
    )

    logical_expression_kinds = frozenset({"boolean_operator"})
    cyclomatic_operators = frozenset({"and", "or"})

    cognitive_kinds = _CONTROL_FLOW
    cognitive_operators = frozenset({"and", "or"})
    nesting_kinds = _CONTROL_FLOW

    operator_parent_kinds = frozenset(
        {
            "binary_operator",
            "comparison_operator",
            "boolean_operator",
            "assignment",
            "augmented_assignment",
        }
    )
    operator_tokens = frozenset(
        {
            "+",
            "-",
            "*",
            "/",
            "//",
            "%",
            "**",
            "<<",
            ">>",
            "&",
            "|",
            "^",
            "@",
            "<",
            ">",
            "<=",
            ">=",
            "==",
            "!=",
            "<>",
            "and",
            "or",
            "=",
            "+=",
            "-=",
            "*=",
            "/=",
            "//=",
            "%=",
            "**=",
            "<<=",
            ">>=",
            "&=",
            "|=",
            "^=",
            "@=",
        }
    )

    operand_kinds = frozenset({"identifier", "string", "integer", "float", "attribute"})

    def function_name(self, node: SyntaxNode) -> str:
        if node.kind == "function_definition":
            return self.field_text(node, "name") or ANONYMOUS

        parent = node.parent
        if parent is None:
            return ANONYMOUS
        if parent.kind == "assignment":
            return self.field_text(parent, "left") or ANONYMOUS
        if parent.kind == "keyword_argument":
            return self.field_text(parent, "name") or ANONYMOUS
        if parent.kind == "pair":
            return self.field_text(parent, "key") or ANONYMOUS
        return ANONYMOUS
