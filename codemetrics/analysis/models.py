"""Data models for complexity analysis.

This module defines the Pydantic models produced by the complexity
engine: per-function and per-file scores, Halstead metrics, the
codebase-wide snapshot, thresholds, and the gate's decision.
"""

import math
from enum import Enum
from typing import Any

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationInfo,
    computed_field,
    field_validator,
)


class FunctionComplexity(BaseModel):
    """Cyclomatic complexity of one function-like node.

    Attributes:
        name: Resolved identifier, or ``<anonymous>``.
        complexity: Cyclomatic complexity (1 for straight-line code).
        line: Line of the function's start (1-indexed).
        column: Column of the function's start (1-indexed).
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Function name")
    complexity: int = Field(..., ge=1, description="Cyclomatic complexity")
    line: int = Field(..., ge=1, description="Start line")
    column: int = Field(..., ge=1, description="Start column")


class FileComplexity(BaseModel):
    """Complexity of one source file.

    ``complexity`` is derived from the functions, so it always equals
    their sum.

    Attributes:
        path: Path relative to the project root.
        functions: Functions in source order.
        cognitive_complexity: File-local cognitive complexity.
    """

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path relative to the project root")
    functions: list[FunctionComplexity] = Field(
        default_factory=list, description="Functions in source order"
    )
    cognitive_complexity: int = Field(default=0, ge=0, description="Cognitive complexity")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def complexity(self) -> int:
        """Sum of the functions' cyclomatic complexities."""
        return sum(function.complexity for function in self.functions)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def max_complexity(self) -> int:
        """Complexity of the file's most complex function (0 if none)."""
        return max((function.complexity for function in self.functions), default=0)


class HalsteadMetrics(BaseModel):
    """Halstead software-science metrics.

    Only the four counts are stored; everything else is derived and
    unrounded. Rounding happens when a report is rendered.

    Attributes:
        distinct_operators: n1, unique operators.
        distinct_operands: n2, unique operands.
        total_operators: N1, operator occurrences.
        total_operands: N2, operand occurrences.
    """

    model_config = ConfigDict(frozen=True)

    distinct_operators: int = Field(default=0, ge=0, description="n1")
    distinct_operands: int = Field(default=0, ge=0, description="n2")
    total_operators: int = Field(default=0, ge=0, description="N1")
    total_operands: int = Field(default=0, ge=0, description="N2")

    @computed_field  # type: ignore[prop-decorator]
    @property
    def vocabulary(self) -> int:
        return self.distinct_operators + self.distinct_operands

    @computed_field  # type: ignore[prop-decorator]
    @property
    def length(self) -> int:
        return self.total_operators + self.total_operands

    @computed_field  # type: ignore[prop-decorator]
    @property
    def volume(self) -> float:
        if self.vocabulary == 0:
            return 0.0
        return self.length * math.log2(self.vocabulary)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def difficulty(self) -> float:
        if self.distinct_operands == 0:
            return 0.0
        return (self.distinct_operators / 2) * (self.total_operands / self.distinct_operands)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def effort(self) -> float:
        return self.difficulty * self.volume

    @computed_field  # type: ignore[prop-decorator]
    @property
    def time(self) -> float:
        """Estimated seconds to understand the code."""
        return self.effort / 18

    @computed_field  # type: ignore[prop-decorator]
    @property
    def bugs(self) -> float:
        """Estimated number of delivered bugs."""
        return self.volume / 3000


class ComplexityMetrics(BaseModel):
    """Codebase-wide complexity snapshot.

    Attributes:
        average: Mean function complexity, one decimal place.
        median: Element at index n // 2 of the sorted complexities.
        max: Highest function complexity (0 without functions).
        min: Lowest function complexity (0 without functions).
        high: Functions with complexity above 10.
        medium: Functions with complexity 6 to 10.
        low: Functions with complexity 5 or less.
        files: Files, most complex single function first.
        cognitive_complexity: Sum of the files' cognitive complexity.
        halstead_metrics: Halstead metrics over the whole codebase.
    """

    model_config = ConfigDict(frozen=True)

    average: float = Field(default=0.0, ge=0.0, description="Average complexity")
    median: int = Field(default=0, ge=0, description="Median complexity")
    max: int = Field(default=0, ge=0, description="Maximum complexity")
    min: int = Field(default=0, ge=0, description="Minimum complexity")
    high: int = Field(default=0, ge=0, description="High complexity count")
    medium: int = Field(default=0, ge=0, description="Medium complexity count")
    low: int = Field(default=0, ge=0, description="Low complexity count")
    files: list[FileComplexity] = Field(default_factory=list, description="Per-file results")
    cognitive_complexity: int = Field(default=0, ge=0, description="Cognitive complexity")
    halstead_metrics: HalsteadMetrics = Field(
        default_factory=HalsteadMetrics, description="Halstead metrics"
    )

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_functions(self) -> int:
        return self.high + self.medium + self.low


class ComplexityThresholds(BaseModel):
    """Limits enforced by the threshold gate.

    Passing None for a limit selects its default.

    Attributes:
        max_average: Maximum average function complexity.
        max_function: Maximum complexity of any single function.
        max_cognitive: Maximum codebase cognitive complexity.
    """

    model_config = ConfigDict(frozen=True)

    max_average: float = Field(default=5, ge=0, description="Maximum average complexity")
    max_function: int = Field(default=10, ge=0, description="Maximum function complexity")
    max_cognitive: int = Field(default=100, ge=0, description="Maximum cognitive complexity")

    @field_validator("max_average", "max_function", "max_cognitive", mode="before")
    @classmethod
    def _default_when_none(cls, value: Any, info: ValidationInfo) -> Any:
        if value is None:
            return cls.model_fields[info.field_name].default
        return value


class GateStatus(str, Enum):
    """Outcome of a threshold check."""

    PASS = "pass"
    FAIL = "fail"


class Violation(BaseModel):
    """One exceeded threshold.

    Attributes:
        metric: Metric identifier (e.g. 'complexity.average').
        actual: Measured value.
        threshold: Configured limit.
        message: Human-readable description.
    """

    model_config = ConfigDict(frozen=True)

    metric: str = Field(..., description="Metric identifier")
    actual: float = Field(..., description="Measured value")
    threshold: float = Field(..., description="Configured limit")
    message: str = Field(..., description="Violation message")


class GateResult(BaseModel):
    """Decision of the threshold gate.

    Attributes:
        status: PASS or FAIL.
        details: Violations in check order (average, max, cognitive).
        metrics: The metrics that were checked.
    """

    model_config = ConfigDict(frozen=True)

    status: GateStatus = Field(..., description="Gate outcome")
    details: list[Violation] = Field(default_factory=list, description="Violations")
    metrics: ComplexityMetrics = Field(..., description="Checked metrics")

    @property
    def violations(self) -> list[str]:
        """Violation messages in check order."""
        return [violation.message for violation in self.details]

    @property
    def passed(self) -> bool:
        return self.status == GateStatus.PASS
