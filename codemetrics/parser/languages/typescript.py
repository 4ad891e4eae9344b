"""TypeScript, TSX and JavaScript language profiles.

The three grammars share node kinds for everything the complexity
scorers look at, so TSX and JavaScript only differ by identifier.
"""

from ..nodes import SyntaxNode
from .base import ANONYMOUS, BaseLanguageProfile

_CONTROL_FLOW = frozenset(
    {
        "if_statement",
        "ternary_expression",
        "switch_statement",
        "for_statement",
        "for_in_statement",  # covers both for-in and for-of
        "while_statement",
        "do_statement",
        "catch_clause",
    }
)

_ASSIGNMENT_OPERATORS = frozenset(
    {
        "=",
        "+=",
        "-=",
        "*=",
        "**=",
        "/=",
        "%=",
        "<<=",
        ">>=",
        ">>>=",
        "&=",
        "|=",
        "^=",
        "&&=",
        "||=",
        "??=",
    }
)

# Arrow and conditional-expression punctuation, counted like binary operators
_PUNCTUATION_OPERATORS = frozenset({"=>", "?", ":"})

_BINARY_OPERATORS = frozenset(
    {
        "<",
        ">",
        "<=",
        ">=",
        "==",
        "!=",
        "===",
        "!==",
        "+",
        "-",
        "*",
        "**",
        "/",
        "%",
        "<<",
        ">>",
        ">>>",
        "&",
        "|",
        "^",
        "&&",
        "||",
        "??",
    }
)


class TypeScriptProfile(BaseLanguageProfile):
    """Profile for the tree-sitter TypeScript grammar."""

    language: str = "typescript"

    function_kinds = frozenset(
        {
            "function_declaration",
            "generator_function_declaration",
            "function_expression",
            "function",
            "generator_function",
            "arrow_function",
            "method_definition",
        }
    )

    decision_kinds = frozenset(
        {
            "if_statement",
            "ternary_expression",
            "switch_case",
            "catch_clause",
            "while_statement",
            "do_statement",
            "for_statement",
            "for_in_statement",
        }
    )

    logical_expression_kinds = frozenset({"binary_expression"})
    cyclomatic_operators = frozenset({"&&", "||", "??"})

    cognitive_kinds = _CONTROL_FLOW
    cognitive_operators = frozenset({"&&", "||"})
    nesting_kinds = _CONTROL_FLOW

    operator_parent_kinds = frozenset(
        {
            "binary_expression",
            "assignment_expression",
            "augmented_assignment_expression",
            "arrow_function",
            "ternary_expression",
        }
    )
    operator_tokens = _ASSIGNMENT_OPERATORS | _BINARY_OPERATORS | _PUNCTUATION_OPERATORS

    operand_kinds = frozenset(
        {
            "identifier",
            "property_identifier",
            "private_property_identifier",
            "shorthand_property_identifier",
            "shorthand_property_identifier_pattern",
            "type_identifier",
            "string",
            "number",
            "member_expression",
        }
    )

    _declaration_kinds = frozenset({"function_declaration", "generator_function_declaration"})

    _expression_kinds = frozenset(
        {"function_expression", "function", "generator_function", "arrow_function"}
    )

    # (parent kind, field holding the binding name)
    _binding_fields = {"variable_declarator": "name", "pair": "key"}

    def function_name(self, node: SyntaxNode) -> str:
        """Resolve a function's name.

        Declarations and plain methods use their own name. Function
        expressions are named only by the variable or object key they are
        bound to; a function expression's own name is ignored.
        Constructors, accessors and everything else are anonymous.
        """
        if node.kind in self._declaration_kinds:
            return self.field_text(node, "name") or ANONYMOUS

        if node.kind == "method_definition":
            if self._is_constructor_or_accessor(node):
                return ANONYMOUS
            return self.field_text(node, "name") or ANONYMOUS

        parent = node.parent
        if node.kind in self._expression_kinds and parent is not None:
            field = self._binding_fields.get(parent.kind)
            if field is not None:
                return self.field_text(parent, field) or ANONYMOUS

        return ANONYMOUS

    def _is_constructor_or_accessor(self, node: SyntaxNode) -> bool:
        if self.field_text(node, "name") == "constructor":
            return True
        return any(not child.is_named and child.kind in ("get", "set") for child in node.children)


class TsxProfile(TypeScriptProfile):
    """Profile for the tree-sitter TSX grammar."""

    language: str = "tsx"


class JavaScriptProfile(TypeScriptProfile):
    """Profile for the tree-sitter JavaScript grammar (JSX included)."""

    language: str = "javascript"
