"""Language profiles for the complexity scorers.

Each profile knows how to classify the node kinds of one tree-sitter
grammar for complexity scoring.

Supported languages:
    - TypeScript (typescript.py)
    - TSX (typescript.py)
    - JavaScript (typescript.py)
    - Python (python.py)
"""

from .base import ANONYMOUS, BaseLanguageProfile
from .python import PythonProfile
from .typescript import JavaScriptProfile, TsxProfile, TypeScriptProfile

# Registry of language profiles
_profiles: dict[str, type[BaseLanguageProfile]] = {
    "typescript": TypeScriptProfile,
    "tsx": TsxProfile,
    "javascript": JavaScriptProfile,
    "python": PythonProfile,
}


def register_profile(language: str, profile_class: type[BaseLanguageProfile]) -> None:
    """Register a language profile.

    Args:
        language: Language identifier (e.g., 'typescript', 'python').
        profile_class: The profile class to register.
    """
    _profiles[language.lower()] = profile_class


def get_profile(language: str) -> BaseLanguageProfile:
    """Get a profile instance for the given language.

    Args:
        language: Language identifier.

    Returns:
        An instance of the appropriate profile.

    Raises:
        ValueError: If no profile is registered for the language.
    """
    language = language.lower()
    if language not in _profiles:
        raise ValueError(f"No language profile registered for language: {language}")
    return _profiles[language]()


def supported_languages() -> list[str]:
    """Get list of languages with registered profiles.

    Returns:
        List of supported language identifiers.
    """
    return list(_profiles.keys())


__all__ = [
    "ANONYMOUS",
    "BaseLanguageProfile",
    "JavaScriptProfile",
    "PythonProfile",
    "TsxProfile",
    "TypeScriptProfile",
    "get_profile",
    "register_profile",
    "supported_languages",
]
