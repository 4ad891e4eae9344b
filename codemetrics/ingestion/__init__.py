"""Project ingestion for codemetrics.

This module reads the project configuration and resolves it into the
source files handed to the parser.
"""

from .models import ProjectConfig, SourceFile
from .project import ConfigurationError, SourceDiscovery, load_project_config

__all__ = [
    "ConfigurationError",
    "ProjectConfig",
    "SourceDiscovery",
    "SourceFile",
    "load_project_config",
]
