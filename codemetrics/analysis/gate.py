"""Threshold gate for build pipelines.

The gate compares a complexity snapshot with configured limits. All
checks run (average, then maximum, then cognitive) before a decision is
made, and a failure carries every violation together with the full
report.
"""

from pathlib import Path

import structlog

from .aggregator import ComplexityAnalyzer
from .models import ComplexityMetrics, ComplexityThresholds, GateResult, GateStatus, Violation
from .report import generate_report
from .utils import format_number

logger = structlog.get_logger(__name__)


class ThresholdViolation(Exception):
    """Raised when complexity metrics exceed their thresholds.

    Attributes:
        violations: Violation messages in check order.
        report: Full rendered report.
        metrics: The metrics that failed the gate.
    """

    def __init__(
        self,
        violations: list[str],
        report: str,
        metrics: ComplexityMetrics | None = None,
    ) -> None:
        self.violations = violations
        self.report = report
        self.metrics = metrics
        listing = "\n".join(violations)
        super().__init__(f"Complexity violations:\n{listing}\n\n{report}")


def evaluate_thresholds(
    metrics: ComplexityMetrics,
    thresholds: ComplexityThresholds | None = None,
) -> GateResult:
    """Check metrics against thresholds.

    Comparisons are strict: a value equal to its threshold passes.

    Args:
        metrics: Snapshot to check.
        thresholds: Limits; defaults when omitted.

    Returns:
        GateResult with every triggered violation.
    """
    thresholds = thresholds or ComplexityThresholds()
    details: list[Violation] = []

    if metrics.average > thresholds.max_average:
        details.append(
            Violation(
                metric="complexity.average",
                actual=metrics.average,
                threshold=thresholds.max_average,
                message=(
                    f"Average complexity {format_number(metrics.average)} "
                    f"exceeds threshold {format_number(thresholds.max_average)}"
                ),
            )
        )

    if metrics.max > thresholds.max_function:
        details.append(
            Violation(
                metric="complexity.max",
                actual=metrics.max,
                threshold=thresholds.max_function,
                message=(
                    f"Maximum complexity {metrics.max} "
                    f"exceeds threshold {thresholds.max_function}"
                ),
            )
        )

    if metrics.cognitive_complexity > thresholds.max_cognitive:
        details.append(
            Violation(
                metric="complexity.cognitive",
                actual=metrics.cognitive_complexity,
                threshold=thresholds.max_cognitive,
                message=(
                    f"Cognitive complexity {metrics.cognitive_complexity} "
                    f"exceeds threshold {thresholds.max_cognitive}"
                ),
            )
        )

    status = GateStatus.FAIL if details else GateStatus.PASS
    logger.info("Threshold check complete", status=status.value, violations=len(details))

    return GateResult(status=status, details=details, metrics=metrics)


def enforce_thresholds(
    metrics: ComplexityMetrics,
    thresholds: ComplexityThresholds | None = None,
) -> ComplexityMetrics:
    """Pass metrics through the gate.

    Args:
        metrics: Snapshot to check.
        thresholds: Limits; defaults when omitted.

    Returns:
        The metrics, unchanged, when every check passes.

    Raises:
        ThresholdViolation: If any threshold is exceeded.
    """
    result = evaluate_thresholds(metrics, thresholds)
    if not result.passed:
        raise ThresholdViolation(result.violations, generate_report(metrics), metrics)
    return metrics


class ComplexityChecker:
    """Analyzes a project and enforces thresholds in one step.

    Attributes:
        thresholds: Limits enforced by ``check``.
    """

    def __init__(self, thresholds: ComplexityThresholds | None = None) -> None:
        self.thresholds = thresholds or ComplexityThresholds()

    def check(
        self,
        config_path: str | Path | None = None,
        *,
        analyzer: ComplexityAnalyzer | None = None,
    ) -> ComplexityMetrics:
        """Analyze the project and apply the gate.

        Args:
            config_path: Project configuration path.
            analyzer: Pre-built analyzer; one is created from config_path
                when omitted.

        Returns:
            The metrics when the gate passes.

        Raises:
            ConfigurationError: If the project configuration is unusable.
            ThresholdViolation: If any threshold is exceeded.
        """
        analyzer = analyzer or ComplexityAnalyzer(config_path)
        return enforce_thresholds(analyzer.analyze(), self.thresholds)
