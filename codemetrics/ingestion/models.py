"""Pydantic models for the ingestion module.

This module defines the resolved project configuration and the source
files discovered from it.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_INCLUDE = ["**/*"]
DEFAULT_EXCLUDE = ["node_modules", "bower_components", "jspm_packages"]


class ProjectConfig(BaseModel):
    """A project configuration read from a tsconfig-style JSON file.

    Attributes:
        config_path: Absolute path to the configuration file.
        root: Project root (the configuration file's directory).
        files: Explicit file list, None if not given.
        include: Include glob patterns, None if not given.
        exclude: Exclude patterns, None if not given.
        compiler_options: Raw ``compilerOptions`` object.
        extends: Resolved paths of the configurations this one extends.
    """

    model_config = ConfigDict(frozen=True)

    config_path: str = Field(..., description="Absolute path to the configuration file")
    root: str = Field(..., description="Project root directory")
    files: list[str] | None = Field(None, description="Explicit file list")
    include: list[str] | None = Field(None, description="Include glob patterns")
    exclude: list[str] | None = Field(None, description="Exclude patterns")
    compiler_options: dict[str, Any] = Field(
        default_factory=dict, description="Compiler options"
    )
    extends: list[str] = Field(default_factory=list, description="Extended configurations")

    @property
    def root_path(self) -> Path:
        return Path(self.root)

    @property
    def allow_js(self) -> bool:
        """Whether JavaScript sources belong to the project."""
        return bool(self.compiler_options.get("allowJs", False))

    def effective_include(self) -> list[str]:
        """Include patterns with the default applied.

        An explicit ``files`` list without ``include`` disables globbing.
        """
        if self.include is not None:
            return self.include
        if self.files is not None:
            return []
        return list(DEFAULT_INCLUDE)

    def effective_exclude(self) -> list[str]:
        """Exclude patterns with the defaults and ``outDir`` applied."""
        patterns = list(self.exclude) if self.exclude is not None else list(DEFAULT_EXCLUDE)
        out_dir = self.compiler_options.get("outDir")
        if isinstance(out_dir, str) and out_dir:
            patterns.append(out_dir)
        return patterns


class SourceFile(BaseModel):
    """A source file selected for analysis.

    Attributes:
        path: Absolute path on disk.
        relative_path: Path relative to the project root (POSIX separators).
        language: Detected language identifier.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Absolute path on disk")
    relative_path: str = Field(..., description="Path relative to the project root")
    language: str = Field(..., description="Detected language")
