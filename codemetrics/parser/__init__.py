"""Parser module for source code parsing.

This module provides tree-sitter based parsing for TypeScript, TSX,
JavaScript and Python, exposing every tree through the read-only
``SyntaxNode`` interface the complexity scorers consume.

Example:
    >>> from codemetrics.parser import TreeSitterParser
    >>> parser = TreeSitterParser()
    >>> parsed = parser.parse_source("const x = a && b;", language="typescript")
    >>> parsed.root.kind
    'program'
"""

from .base import BaseParser, ParserError
from .languages import BaseLanguageProfile, get_profile, register_profile, supported_languages
from .models import ParsedTree
from .nodes import MemoryNode, SyntaxNode, TreeSitterNode
from .tree_sitter import TreeSitterParser

__all__ = [
    # Base classes
    "BaseParser",
    "ParserError",
    # Parser implementations
    "TreeSitterParser",
    # Syntax nodes
    "SyntaxNode",
    "TreeSitterNode",
    "MemoryNode",
    # Language profiles
    "BaseLanguageProfile",
    "get_profile",
    "register_profile",
    "supported_languages",
    # Models
    "ParsedTree",
]
