"""codemetrics - code complexity analysis and build gate.

Parses a project's sources with tree-sitter and reports cyclomatic,
cognitive and Halstead complexity, optionally failing a build when
configured thresholds are exceeded.
"""

__version__ = "0.1.0"
