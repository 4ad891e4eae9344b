"""Tree-sitter parser for the complexity analyzer.

Grammars are imported on first use. A grammar package that is not
installed only disables its language; files in that language then fail
with ``ParserError``.
"""

import importlib
from pathlib import Path
from typing import TYPE_CHECKING

import structlog

from .base import BaseParser, ParserError
from .models import ParsedTree
from .nodes import TreeSitterNode

if TYPE_CHECKING:
    from tree_sitter import Node, Parser

logger = structlog.get_logger(__name__)

# language -> (grammar package, factory returning the language pointer)
GRAMMARS: dict[str, tuple[str, str]] = {
    "typescript": ("tree_sitter_typescript", "language_typescript"),
    "tsx": ("tree_sitter_typescript", "language_tsx"),
    "javascript": ("tree_sitter_javascript", "language"),
    "python": ("tree_sitter_python", "language"),
}


class TreeSitterParser(BaseParser):
    """Parses source files into ``ParsedTree`` objects with tree-sitter.

    Attributes:
        supported_languages: Languages with a loaded grammar. Before the
            first parse this lists every language the parser knows.
    """

    supported_languages: set[str] = set(GRAMMARS)

    def __init__(self) -> None:
        self._parsers: dict[str, Parser] | None = None

    def _load_grammars(self) -> dict[str, "Parser"]:
        if self._parsers is not None:
            return self._parsers

        parsers: dict[str, Parser] = {}
        for language, (package, factory) in GRAMMARS.items():
            try:
                from tree_sitter import Language, Parser

                grammar = importlib.import_module(package)
            except ImportError as e:
                logger.warning("Grammar unavailable", language=language, error=str(e))
                continue
            parsers[language] = Parser(Language(getattr(grammar, factory)()))

        self._parsers = parsers
        self.supported_languages = set(parsers)
        logger.info("Grammars loaded", languages=sorted(parsers))
        return parsers

    def parse_file(
        self,
        file_path: Path | str,
        *,
        relative_path: str | None = None,
        encoding: str = "utf-8",
    ) -> ParsedTree:
        """Read and parse one source file.

        Args:
            file_path: File to parse; its extension selects the grammar.
            relative_path: Path to report. Defaults to the absolute path.
            encoding: Source encoding.

        Returns:
            ParsedTree for the file.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnicodeDecodeError: If the file cannot be decoded.
            ParserError: If the path is not a file or its language is
                unknown or unsupported.
        """
        path = Path(file_path)
        abs_path = str(path.resolve())

        if not path.exists():
            raise FileNotFoundError(f"File not found: {abs_path}")
        if not path.is_file():
            raise ParserError(f"Path is not a file: {abs_path}", file_path=abs_path)

        language = self.detect_language(path)
        if language is None:
            raise ParserError(f"Cannot detect language for file: {path.name}", file_path=abs_path)

        logger.debug("Parsing file", path=abs_path, language=language)
        return self.parse_source(
            path.read_text(encoding=encoding),
            file_path=abs_path,
            language=language,
            relative_path=relative_path,
        )

    def parse_source(
        self,
        source_code: str,
        *,
        file_path: str | None = None,
        language: str | None = None,
        relative_path: str | None = None,
    ) -> ParsedTree:
        """Parse source text.

        tree-sitter recovers from syntax errors, so a broken file still
        yields a tree; the errors are listed on the result.

        Args:
            source_code: Text to parse.
            file_path: Path used in results and errors.
            language: Grammar to use; detected from file_path when omitted.
            relative_path: Path to report. Defaults to file_path.

        Returns:
            ParsedTree for the text.

        Raises:
            ValueError: If no language is given or detectable.
            ParserError: If the language has no loaded grammar.
        """
        effective_path = file_path or "<string>"
        language = language or (self.detect_language(file_path) if file_path else None)
        if not language:
            raise ValueError("Language must be specified or inferrable from file_path")

        parser = self._load_grammars().get(language.lower())
        if parser is None:
            raise ParserError(f"Unsupported language: {language}", file_path=effective_path)

        tree = parser.parse(source_code.encode("utf-8"))
        parse_errors = self._syntax_errors(tree.root_node) if tree.root_node.has_error else []
        if parse_errors:
            logger.warning(
                "Parse tree contains errors",
                path=effective_path,
                error_count=len(parse_errors),
            )

        return ParsedTree(
            file_path=effective_path,
            relative_path=relative_path or effective_path,
            language=language.lower(),
            root=TreeSitterNode(tree.root_node),
            parse_errors=parse_errors,
            success=not parse_errors,
        )

    @staticmethod
    def _syntax_errors(root: "Node") -> list[str]:
        """Describe every ERROR and MISSING node, in source order."""
        messages: list[str] = []
        pending = [root]
        while pending:
            node = pending.pop()
            if node.type == "ERROR" or node.is_missing:
                row, col = node.start_point
                messages.append(f"Syntax error at line {row + 1}, column {col + 1}")
            pending.extend(reversed(node.children))
        return messages
