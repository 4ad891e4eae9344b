"""Project configuration loading and source discovery.

The project configuration is a tsconfig file: JSON with comments and
trailing commas allowed, optionally extending other configurations. It
is read once, and its ``files``/``include``/``exclude`` entries are
resolved into the list of source files to analyze. Declaration files and
anything under ``node_modules`` are never analyzed.
"""

import fnmatch
import os
import posixpath
from collections.abc import Iterable
from pathlib import Path
from typing import Any

import json5
import structlog
from pydantic import ValidationError

from codemetrics.parser import BaseParser

from .models import ProjectConfig, SourceFile

logger = structlog.get_logger(__name__)

DECLARATION_SUFFIXES = (".d.ts", ".d.mts", ".d.cts")
DEPENDENCY_DIRECTORY = "node_modules"

# Languages that are always part of a project
BASE_LANGUAGES = frozenset({"typescript", "tsx"})

# Entries holding paths relative to the configuration that declares them
PATH_LIST_KEYS = ("files", "include", "exclude")


class ConfigurationError(Exception):
    """Raised when the project configuration cannot be read or parsed.

    Attributes:
        message: Underlying error message.
        config_path: Path of the configuration file.
    """

    def __init__(self, message: str, config_path: str | None = None) -> None:
        self.message = message
        self.config_path = config_path
        super().__init__(f"Error reading project config: {message}")


def _read_document(path: Path) -> dict[str, Any]:
    try:
        raw_text = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigurationError(f"Cannot read file '{path}': {e}", str(path)) from e

    try:
        raw = json5.loads(raw_text)
    except ValueError as e:
        raise ConfigurationError(str(e), str(path)) from e

    if not isinstance(raw, dict):
        raise ConfigurationError("Configuration root must be a JSON object", str(path))
    return raw


def _resolve_extends(spec: str, config_path: Path) -> Path:
    """Locate an ``extends`` target.

    Relative and absolute specifiers resolve against the extending file's
    directory, with ``.json`` appended when needed. Anything else is a
    package specifier looked up in ``node_modules`` directories from the
    extending file upwards.
    """
    config_dir = config_path.parent

    if spec.startswith(("./", "../")) or Path(spec).is_absolute():
        target = config_dir / spec
        candidates = [target, target.with_name(target.name + ".json")]
    else:
        candidates = []
        for directory in (config_dir, *config_dir.parents):
            target = directory / DEPENDENCY_DIRECTORY / spec
            candidates += [target, target.with_name(target.name + ".json"), target / "tsconfig.json"]

    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()
    raise ConfigurationError(f"Extended configuration '{spec}' not found", str(config_path))


def _rebase(layer: dict[str, Any], base_dir: Path, config_dir: Path) -> dict[str, Any]:
    """Make a base configuration's paths relative to the extending one."""
    prefix = Path(os.path.relpath(base_dir, config_dir)).as_posix()
    if prefix == ".":
        return layer

    def move(entry: Any) -> Any:
        if not isinstance(entry, str):
            return entry
        return posixpath.normpath(posixpath.join(prefix, entry))

    rebased = dict(layer)
    for key in PATH_LIST_KEYS:
        if isinstance(layer.get(key), list):
            rebased[key] = [move(entry) for entry in layer[key]]

    options = layer.get("compilerOptions")
    if isinstance(options, dict) and "outDir" in options:
        rebased["compilerOptions"] = {**options, "outDir": move(options["outDir"])}
    return rebased


def _merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Overlay a configuration on its base; compiler options merge per key."""
    merged = dict(base)
    for key, value in override.items():
        if key == "compilerOptions" and isinstance(value, dict):
            merged[key] = {**(base.get(key) or {}), **value}
        else:
            merged[key] = value
    return merged


def _load_layers(path: Path, chain: list[Path], extended: list[str]) -> dict[str, Any]:
    """Read a configuration and everything it extends, bases first."""
    if path in chain:
        cycle = " -> ".join(str(p) for p in [*chain, path])
        raise ConfigurationError(f"Circular extends: {cycle}", str(chain[0]))

    raw = _read_document(path)
    specs = raw.pop("extends", None)
    if isinstance(specs, str):
        specs = [specs]
    if specs is not None and not (
        isinstance(specs, list) and all(isinstance(spec, str) for spec in specs)
    ):
        raise ConfigurationError("'extends' must be a string or a list of strings", str(path))

    merged: dict[str, Any] = {}
    for spec in specs or []:
        base_path = _resolve_extends(spec, path)
        extended.append(str(base_path))
        base = _load_layers(base_path, [*chain, path], extended)
        merged = _merge(merged, _rebase(base, base_path.parent, path.parent))

    return _merge(merged, raw)


def load_project_config(config_path: str | Path) -> ProjectConfig:
    """Read and validate a project configuration file.

    Settings from ``extends`` targets are applied first and overridden by
    the extending file. Inherited ``files``/``include``/``exclude`` and
    ``outDir`` stay relative to the file that declared them.

    Args:
        config_path: Path to the tsconfig file.

    Returns:
        The resolved ProjectConfig.

    Raises:
        ConfigurationError: If a file is missing, unreadable, not valid
            JSON5, has the wrong shape, or extends itself.
    """
    path = Path(config_path).resolve()
    extended: list[str] = []
    raw = _load_layers(path, [], extended)

    try:
        config = ProjectConfig(
            config_path=str(path),
            root=str(path.parent),
            files=raw.get("files"),
            include=raw.get("include"),
            exclude=raw.get("exclude"),
            compiler_options=raw.get("compilerOptions") or {},
            extends=extended,
        )
    except ValidationError as e:
        raise ConfigurationError(str(e), str(path)) from e

    logger.debug(
        "Project configuration loaded",
        path=str(path),
        extends=extended,
        allow_js=config.allow_js,
    )
    return config


class SourceDiscovery:
    """Resolves a project configuration into source files.

    Attributes:
        languages: Language identifiers eligible for analysis.
    """

    def __init__(self, languages: Iterable[str] = ()) -> None:
        self.languages = BASE_LANGUAGES | {language.lower() for language in languages}
        self._logger = logger.bind(component="source_discovery")

    def discover(self, project: ProjectConfig) -> list[SourceFile]:
        """List the project's source files.

        Explicit ``files`` come first in the order given, then include
        matches sorted by path. Duplicates are dropped.

        Args:
            project: The resolved project configuration.

        Returns:
            Source files in analysis order.

        Raises:
            ConfigurationError: If a file listed under ``files`` does not exist.
        """
        root = project.root_path
        languages = self.languages | ({"javascript"} if project.allow_js else set())
        exclude = [self._normalize(pattern) for pattern in project.effective_exclude()]
        listed = self._listed(project)

        candidates: list[Path] = []
        for entry in project.files or []:
            path = (root / entry).resolve()
            if not path.is_file():
                raise ConfigurationError(f"File '{entry}' not found", project.config_path)
            candidates.append(path)

        matched: set[Path] = set()
        for pattern in project.effective_include():
            for path in root.glob(self._expand_include(pattern)):
                if path.is_file():
                    matched.add(path.resolve())
        candidates.extend(sorted(matched))

        sources: list[SourceFile] = []
        seen: set[Path] = set()
        for path in candidates:
            if path in seen:
                continue
            seen.add(path)

            relative = self._relative_path(path, root)
            if self._is_skipped(relative):
                continue
            if relative not in listed and self._matches_any(relative, exclude):
                continue

            language = BaseParser.detect_language(path)
            if language is None or language not in languages:
                continue

            sources.append(SourceFile(path=str(path), relative_path=relative, language=language))

        self._logger.info("Source discovery complete", root=str(root), file_count=len(sources))
        return sources

    @staticmethod
    def _listed(project: ProjectConfig) -> set[str]:
        return {SourceDiscovery._normalize(entry) for entry in project.files or []}

    @staticmethod
    def _normalize(pattern: str) -> str:
        pattern = pattern.replace("\\", "/")
        while pattern.startswith("./"):
            pattern = pattern[2:]
        return pattern.rstrip("/")

    @classmethod
    def _expand_include(cls, pattern: str) -> str:
        """Turn a directory entry into a recursive glob."""
        pattern = cls._normalize(pattern)
        last_segment = pattern.rsplit("/", 1)[-1]
        if not any(char in last_segment for char in "*?.") and last_segment:
            return f"{pattern}/**/*"
        return pattern or "**/*"

    @staticmethod
    def _relative_path(path: Path, root: Path) -> str:
        try:
            return path.relative_to(root.resolve()).as_posix()
        except ValueError:
            return path.as_posix()

    @staticmethod
    def _is_skipped(relative_path: str) -> bool:
        """Declaration files and dependency directories are never analyzed."""
        if relative_path.endswith(DECLARATION_SUFFIXES):
            return True
        return DEPENDENCY_DIRECTORY in relative_path.split("/")

    @staticmethod
    def _matches_any(relative_path: str, patterns: list[str]) -> bool:
        """Check a path against exclude patterns.

        A pattern matches the path itself or any directory containing it.
        """
        for pattern in patterns:
            if not pattern:
                continue
            if relative_path == pattern or relative_path.startswith(pattern + "/"):
                return True
            if fnmatch.fnmatch(relative_path, pattern):
                return True
            if fnmatch.fnmatch(relative_path, pattern + "/*"):
                return True
            if pattern.startswith("**/") and fnmatch.fnmatch(relative_path, pattern[3:]):
                return True
        return False
