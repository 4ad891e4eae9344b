"""Per-file scoring and codebase aggregation.

``analyze_tree`` scores one parsed file, ``aggregate`` folds file results
into the codebase snapshot, and ``ComplexityAnalyzer`` ties them to a
project configuration and the tree-sitter parser.
"""

from collections.abc import Iterable
from pathlib import Path

import structlog

from codemetrics.config import Settings, get_settings
from codemetrics.ingestion import SourceDiscovery, SourceFile, load_project_config
from codemetrics.parser import BaseParser, ParsedTree, ParserError, TreeSitterParser
from codemetrics.parser.languages import BaseLanguageProfile, get_profile

from .cognitive import calculate_cognitive_complexity
from .cyclomatic import calculate_cyclomatic_complexity
from .halstead import HalsteadCounter
from .models import ComplexityMetrics, FileComplexity, FunctionComplexity, HalsteadMetrics
from .report import generate_report
from .utils import round_half_up
from .walker import walk

logger = structlog.get_logger(__name__)

HIGH_COMPLEXITY = 10
MEDIUM_COMPLEXITY = 5


def _profile_for(tree: ParsedTree) -> BaseLanguageProfile:
    try:
        return get_profile(tree.language)
    except ValueError as e:
        raise ParserError(str(e), file_path=tree.file_path) from e


def analyze_tree(tree: ParsedTree, profile: BaseLanguageProfile | None = None) -> FileComplexity:
    """Score every function in one parsed file.

    Args:
        tree: The parsed file.
        profile: Language profile; looked up from the tree's language if omitted.

    Returns:
        FileComplexity with functions in source order.
    """
    profile = profile or _profile_for(tree)
    functions: list[FunctionComplexity] = []

    for node in walk(tree.root):
        if profile.is_function_like(node):
            functions.append(
                FunctionComplexity(
                    name=profile.function_name(node),
                    complexity=calculate_cyclomatic_complexity(node, profile),
                    line=node.line,
                    column=node.column,
                )
            )

    return FileComplexity(
        path=tree.relative_path,
        functions=functions,
        cognitive_complexity=calculate_cognitive_complexity(tree.root, profile),
    )


def aggregate(files: list[FileComplexity], halstead: HalsteadMetrics) -> ComplexityMetrics:
    """Build the codebase snapshot from per-file results.

    The median is the element at index ``n // 2`` of the sorted
    complexities (the upper middle for an even count). Files are ordered
    by their most complex function, not by their total.

    Args:
        files: Per-file results in discovery order.
        halstead: Halstead metrics for the same files.

    Returns:
        ComplexityMetrics snapshot.
    """
    complexities = [function.complexity for file in files for function in file.functions]

    high = sum(1 for c in complexities if c > HIGH_COMPLEXITY)
    medium = sum(1 for c in complexities if MEDIUM_COMPLEXITY < c <= HIGH_COMPLEXITY)
    low = len(complexities) - high - medium

    average = sum(complexities) / len(complexities) if complexities else 0.0
    ordered = sorted(complexities)
    median = ordered[len(ordered) // 2] if ordered else 0

    return ComplexityMetrics(
        average=round_half_up(average, 1),
        median=median,
        max=max(complexities, default=0),
        min=min(complexities, default=0),
        high=high,
        medium=medium,
        low=low,
        files=sorted(files, key=lambda file: file.max_complexity, reverse=True),
        cognitive_complexity=sum(file.cognitive_complexity for file in files),
        halstead_metrics=halstead,
    )


def analyze_trees(trees: Iterable[ParsedTree]) -> ComplexityMetrics:
    """Analyze already parsed files.

    Each tree is scored independently; only Halstead uniqueness is shared
    across files.

    Args:
        trees: Parsed files, consumed once.

    Returns:
        ComplexityMetrics snapshot.
    """
    files: list[FileComplexity] = []
    halstead = HalsteadCounter()

    for tree in trees:
        if not tree.success:
            logger.warning(
                "Analyzing file with syntax errors",
                path=tree.relative_path,
                errors=tree.parse_errors[:5],
            )
        profile = _profile_for(tree)
        files.append(analyze_tree(tree, profile))
        halstead.add_tree(tree.root, profile)

    return aggregate(files, halstead.metrics())


class ComplexityAnalyzer:
    """Analyzes the complexity of a project.

    The project configuration is read and the source files resolved once,
    at construction. A configuration problem raises ``ConfigurationError``
    immediately.

    Attributes:
        settings: Settings in effect.
        project: The resolved project configuration.
        sources: Source files selected for analysis.
        parser: Parser used to read the sources.
    """

    def __init__(
        self,
        config_path: str | Path | None = None,
        *,
        settings: Settings | None = None,
        parser: BaseParser | None = None,
    ) -> None:
        """Initialize the analyzer.

        Args:
            config_path: Project configuration path. Defaults to the
                ``project_config`` setting.
            settings: Settings override.
            parser: Parser override. Defaults to TreeSitterParser.

        Raises:
            ConfigurationError: If the project configuration is unusable.
        """
        self.settings = settings or get_settings()
        self.project = load_project_config(config_path or self.settings.project_config)
        self.sources: list[SourceFile] = SourceDiscovery(self.settings.languages).discover(
            self.project
        )
        self.parser = parser or TreeSitterParser()
        self._logger = logger.bind(component="complexity_analyzer")

    def _parse_sources(self) -> Iterable[ParsedTree]:
        for source in self.sources:
            yield self.parser.parse_file(source.path, relative_path=source.relative_path)

    def analyze(self) -> ComplexityMetrics:
        """Analyze complexity across the project.

        Returns:
            ComplexityMetrics snapshot.

        Raises:
            OSError: If a source file cannot be read.
            ParserError: If a source file's language cannot be parsed.
        """
        self._logger.info("Starting complexity analysis", file_count=len(self.sources))

        metrics = analyze_trees(self._parse_sources())

        self._logger.info(
            "Complexity analysis complete",
            functions=metrics.total_functions,
            average=metrics.average,
            max=metrics.max,
            cognitive=metrics.cognitive_complexity,
        )
        return metrics

    def generate_report(self, metrics: ComplexityMetrics) -> str:
        """Render the text report for metrics produced by this analyzer."""
        return generate_report(metrics)
