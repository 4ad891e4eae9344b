"""Report rendering.

``generate_report`` produces the human-readable Markdown-style report;
``render_json`` serializes the snapshot for CI artifacts. Halstead values
are rounded here and nowhere else.
"""

from .models import ComplexityMetrics
from .utils import format_number, round_half_up

REPORTED_FILES = 10
COMPLEX_FUNCTION = 10


def generate_report(metrics: ComplexityMetrics) -> str:
    """Render a complexity report.

    The "Most Complex Files" section only appears when a function scores
    above 10. It lists up to ten files in the snapshot's order, each with
    its functions above 10.

    Args:
        metrics: Snapshot to render.

    Returns:
        Report text, lines joined with newlines.
    """
    halstead = metrics.halstead_metrics

    lines = [
        "# Code Complexity Report",
        "",
        "## Summary",
        f"- Average Complexity: {format_number(metrics.average)}",
        f"- Median Complexity: {metrics.median}",
        f"- Maximum Complexity: {metrics.max}",
        f"- Cognitive Complexity: {metrics.cognitive_complexity}",
        "",
        "## Distribution",
        f"- High Complexity (>10): {metrics.high} functions",
        f"- Medium Complexity (6-10): {metrics.medium} functions",
        f"- Low Complexity (1-5): {metrics.low} functions",
        "",
        "## Halstead Metrics",
        f"- Vocabulary: {halstead.vocabulary}",
        f"- Program Length: {halstead.length}",
        f"- Volume: {format_number(round_half_up(halstead.volume))}",
        f"- Difficulty: {format_number(round_half_up(halstead.difficulty, 1))}",
        f"- Effort: {format_number(round_half_up(halstead.effort))}",
        f"- Time to Understand: {format_number(round_half_up(halstead.time / 60))} minutes",
        f"- Estimated Bugs: {format_number(round_half_up(halstead.bugs, 2))}",
        "",
    ]

    complex_files = [
        file
        for file in metrics.files
        if any(function.complexity > COMPLEX_FUNCTION for function in file.functions)
    ][:REPORTED_FILES]

    if complex_files:
        lines.append("## Most Complex Files")
        for file in complex_files:
            lines.append(f"- {file.path} (max: {file.max_complexity})")
            for function in file.functions:
                if function.complexity > COMPLEX_FUNCTION:
                    lines.append(
                        f"  - {function.name}: {function.complexity} (line {function.line})"
                    )

    return "\n".join(lines)


def render_json(metrics: ComplexityMetrics, indent: int | None = 2) -> str:
    """Serialize a snapshot, derived values included, as JSON."""
    return metrics.model_dump_json(indent=indent)
