"""Pytest configuration and shared fixtures for codemetrics tests.

This module provides a builder for hand-made TypeScript-shaped syntax
trees (so scorers can be tested without a parser), sample source
snippets, and temporary project layouts for discovery and CLI tests.
"""

import json
from collections.abc import Callable
from pathlib import Path

import pytest

from codemetrics.config import Settings
from codemetrics.parser import MemoryNode

# ---------------------------------------------------------------------------
# In-memory tree builder
# ---------------------------------------------------------------------------


class TsTreeBuilder:
    """Builds MemoryNode trees shaped like tree-sitter TypeScript output."""

    def token(self, text: str) -> MemoryNode:
        return MemoryNode(text, named=False)

    def ident(self, name: str) -> MemoryNode:
        return MemoryNode("identifier", name)

    def number(self, value: int) -> MemoryNode:
        return MemoryNode("number", str(value))

    def binary(self, left: MemoryNode, operator: str, right: MemoryNode) -> MemoryNode:
        op = self.token(operator)
        return MemoryNode(
            "binary_expression",
            children=[left, op, right],
            fields={"left": left, "operator": op, "right": right},
        )

    def assign(self, left: MemoryNode, right: MemoryNode, operator: str = "=") -> MemoryNode:
        op = self.token(operator)
        kind = "assignment_expression" if operator == "=" else "augmented_assignment_expression"
        return MemoryNode(
            kind,
            children=[left, op, right],
            fields={"left": left, "operator": op, "right": right},
        )

    def statement(self, expression: MemoryNode) -> MemoryNode:
        return MemoryNode("expression_statement", children=[expression, self.token(";")])

    def block(self, *statements: MemoryNode) -> MemoryNode:
        return MemoryNode(
            "statement_block", children=[self.token("{"), *statements, self.token("}")]
        )

    def ret(self, expression: MemoryNode | None = None) -> MemoryNode:
        children = [self.token("return")]
        if expression is not None:
            children.append(expression)
        return MemoryNode("return_statement", children=children)

    def if_(self, condition: MemoryNode, *body: MemoryNode, line: int = 1) -> MemoryNode:
        consequence = self.block(*body)
        return MemoryNode(
            "if_statement",
            children=[self.token("if"), condition, consequence],
            fields={"condition": condition, "consequence": consequence},
            line=line,
        )

    def ternary(self, condition: MemoryNode, yes: MemoryNode, no: MemoryNode) -> MemoryNode:
        return MemoryNode(
            "ternary_expression",
            children=[condition, self.token("?"), yes, self.token(":"), no],
        )

    def while_(self, condition: MemoryNode, *body: MemoryNode) -> MemoryNode:
        return MemoryNode(
            "while_statement", children=[self.token("while"), condition, self.block(*body)]
        )

    def function(self, name: str, *body: MemoryNode, line: int = 1, column: int = 1) -> MemoryNode:
        name_node = self.ident(name)
        return MemoryNode(
            "function_declaration",
            children=[
                self.token("function"),
                name_node,
                MemoryNode("formal_parameters", "()"),
                self.block(*body),
            ],
            fields={"name": name_node},
            line=line,
            column=column,
        )

    def arrow(self, *body: MemoryNode, line: int = 1) -> MemoryNode:
        return MemoryNode(
            "arrow_function",
            children=[MemoryNode("formal_parameters", "()"), self.token("=>"), self.block(*body)],
            line=line,
        )

    def const(self, name: str, value: MemoryNode) -> MemoryNode:
        name_node = self.ident(name)
        declarator = MemoryNode(
            "variable_declarator",
            children=[name_node, self.token("="), value],
            fields={"name": name_node, "value": value},
        )
        return MemoryNode("lexical_declaration", children=[self.token("const"), declarator])

    def program(self, *statements: MemoryNode) -> MemoryNode:
        return MemoryNode("program", children=list(statements))


@pytest.fixture
def ts() -> TsTreeBuilder:
    """Builder for in-memory TypeScript trees."""
    return TsTreeBuilder()


@pytest.fixture
def nested_if_function(ts: TsTreeBuilder) -> MemoryNode:
    """``function f(x){ if(x>0){ if(x>1){ return 1; } } return 0; }``"""
    x = ts.ident
    inner = ts.if_(ts.binary(x("x"), ">", ts.number(1)), ts.ret(ts.number(1)), line=1)
    outer = ts.if_(ts.binary(x("x"), ">", ts.number(0)), inner, line=1)
    return ts.function("f", outer, ts.ret(ts.number(0)))


# ---------------------------------------------------------------------------
# Sample Source Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def nested_if_source() -> str:
    """Function with two nested ifs."""
    return "function f(x){ if(x>0){ if(x>1){ return 1; } } return 0; }\n"


@pytest.fixture
def mixed_functions_source() -> str:
    """Arrow function, class method and anonymous callback."""
    return """const check = (a: boolean, b: boolean) => {
  return a && b;
};

class Runner {
  run(items: number[]) {
    for (const item of items) {
      console.log(item);
    }
  }
}

const values = [1, 2].map(function () {
  return 1;
});
"""


@pytest.fixture
def complex_function_source() -> str:
    """A function with cyclomatic complexity 12."""
    branches = "\n".join(f"  if (x === {i}) {{ return {i}; }}" for i in range(11))
    return f"export function pick(x: number): number {{\n{branches}\n  return -1;\n}}\n"


# ---------------------------------------------------------------------------
# Project Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def write_project(tmp_path: Path) -> Callable[..., Path]:
    """Factory creating a project directory with a tsconfig.json.

    Usage: ``write_project({"src/a.ts": "..."}, config={...})`` returns the
    path to the written tsconfig.json.
    """

    def _write(files: dict[str, str], config: dict | None = None) -> Path:
        for relative, content in files.items():
            path = tmp_path / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        config_path = tmp_path / "tsconfig.json"
        config_path.write_text(json.dumps(config or {}), encoding="utf-8")
        return config_path

    return _write


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None)
