"""Abstract base parser interface.

This module defines the abstract base class that all parsers must
implement. A parser turns a source file into a ``ParsedTree`` whose root
is a read-only ``SyntaxNode``; the complexity engine never depends on a
concrete parser library.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from .models import ParsedTree


class BaseParser(ABC):
    """Abstract base class for source code parsers.

    Attributes:
        supported_languages: Set of language identifiers this parser supports.
    """

    supported_languages: set[str] = set()

    @abstractmethod
    def parse_file(
        self,
        file_path: Path | str,
        *,
        relative_path: str | None = None,
        encoding: str = "utf-8",
    ) -> ParsedTree:
        """Parse a source code file into a syntax tree.

        Args:
            file_path: Path to the source file to parse.
            relative_path: Path reported in results. Defaults to file_path.
            encoding: Character encoding of the file. Defaults to utf-8.

        Returns:
            ParsedTree with the root node and any syntax errors.

        Raises:
            FileNotFoundError: If the file does not exist.
            UnicodeDecodeError: If the file cannot be decoded with the
                specified encoding.
            ParserError: If the language is unsupported.
        """
        ...

    @abstractmethod
    def parse_source(
        self,
        source_code: str,
        *,
        file_path: str | None = None,
        language: str | None = None,
        relative_path: str | None = None,
    ) -> ParsedTree:
        """Parse source code from a string.

        Args:
            source_code: The source code to parse.
            file_path: Optional virtual file path. If not provided, a
                placeholder will be used.
            language: Language identifier. If not provided, must be
                inferrable from file_path.
            relative_path: Path reported in results. Defaults to file_path.

        Returns:
            ParsedTree with the root node and any syntax errors.

        Raises:
            ValueError: If language cannot be determined.
            ParserError: If the language is unsupported.
        """
        ...

    def supports_language(self, language: str) -> bool:
        """Check if this parser supports the given language.

        Args:
            language: Language identifier to check (e.g., 'typescript').

        Returns:
            True if the language is supported, False otherwise.
        """
        return language.lower() in self.supported_languages

    @staticmethod
    def detect_language(file_path: Path | str) -> str | None:
        """Detect the programming language from a file path.

        Uses file extension to determine the likely programming language.
        TSX gets its own identifier since it needs its own grammar.

        Args:
            file_path: Path to the file.

        Returns:
            Language identifier if detected, None otherwise.
        """
        extension_map: dict[str, str] = {
            ".py": "python",
            ".pyi": "python",
            ".js": "javascript",
            ".mjs": "javascript",
            ".cjs": "javascript",
            ".jsx": "javascript",
            ".ts": "typescript",
            ".mts": "typescript",
            ".cts": "typescript",
            ".tsx": "tsx",
        }

        path = Path(file_path) if isinstance(file_path, str) else file_path
        suffix = path.suffix.lower()

        return extension_map.get(suffix)


class ParserError(Exception):
    """Exception raised for parser errors.

    Attributes:
        message: Explanation of the error.
        file_path: Path to the file being parsed when error occurred.
    """

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.message = message
        self.file_path = file_path

        full_message = f"{message} (file={file_path})" if file_path else message

        super().__init__(full_message)
