"""Pydantic models for parser output."""

from pydantic import BaseModel, ConfigDict, Field

from .nodes import SyntaxNode


class ParsedTree(BaseModel):
    """Result of parsing one source file.

    Attributes:
        file_path: Path of the parsed file (absolute for files on disk).
        relative_path: Path relative to the project root, used in reports.
        language: Language identifier the file was parsed as.
        root: Root node of the syntax tree.
        parse_errors: Syntax errors found by the parser.
        success: Whether the file parsed without errors.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    file_path: str = Field(..., description="Path of the parsed file")
    relative_path: str = Field(..., description="Path relative to the project root")
    language: str = Field(..., description="Language identifier")
    root: SyntaxNode = Field(..., description="Root syntax node")
    parse_errors: list[str] = Field(default_factory=list, description="Syntax errors")
    success: bool = Field(default=True, description="Parsed without errors")
