"""Complexity analysis for codemetrics.

This module provides the complexity engine:
- Tree walking (pre-order and scoped enter/leave traversal)
- Cyclomatic complexity per function
- Cognitive complexity per file and codebase
- Halstead metrics over the codebase
- Aggregation, threshold gating and report rendering
"""

from .aggregator import ComplexityAnalyzer, aggregate, analyze_tree, analyze_trees
from .cognitive import calculate_cognitive_complexity
from .cyclomatic import calculate_cyclomatic_complexity
from .gate import ComplexityChecker, ThresholdViolation, enforce_thresholds, evaluate_thresholds
from .halstead import HalsteadCounter, calculate_halstead_metrics
from .models import (
    ComplexityMetrics,
    ComplexityThresholds,
    FileComplexity,
    FunctionComplexity,
    GateResult,
    GateStatus,
    HalsteadMetrics,
    Violation,
)
from .report import generate_report, render_json
from .walker import walk, walk_scoped

__all__ = [
    # Models
    "ComplexityMetrics",
    "ComplexityThresholds",
    "FileComplexity",
    "FunctionComplexity",
    "GateResult",
    "GateStatus",
    "HalsteadMetrics",
    "Violation",
    # Traversal
    "walk",
    "walk_scoped",
    # Scorers
    "calculate_cyclomatic_complexity",
    "calculate_cognitive_complexity",
    "calculate_halstead_metrics",
    "HalsteadCounter",
    # Aggregation
    "ComplexityAnalyzer",
    "aggregate",
    "analyze_tree",
    "analyze_trees",
    # Gate and report
    "ComplexityChecker",
    "ThresholdViolation",
    "enforce_thresholds",
    "evaluate_thresholds",
    "generate_report",
    "render_json",
]
