"""Command line interface for the complexity gate.

    codemetrics check  --config tsconfig.json --max-function 12
    codemetrics report --config tsconfig.json --format json --output metrics.json

``check`` exits 0 when every threshold holds, 1 on threshold violations
and 2 when the project configuration cannot be used.
"""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import structlog
import typer
from rich.console import Console
from rich.table import Table

from codemetrics.analysis import (
    ComplexityAnalyzer,
    ComplexityMetrics,
    ComplexityThresholds,
    ThresholdViolation,
    enforce_thresholds,
    generate_report,
    render_json,
)
from codemetrics.config import Settings, get_settings
from codemetrics.ingestion import ConfigurationError
from codemetrics.parser import ParserError

app = typer.Typer(add_completion=False, help="Code complexity analysis and build gate")
console = Console()
err_console = Console(stderr=True)


class ReportFormat(str, Enum):
    TEXT = "text"
    JSON = "json"


def configure_logging(level: str) -> None:
    """Route structlog output to stderr, filtered at the given level."""
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(
            getattr(logging, level.upper(), logging.WARNING)
        ),
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


def _analyze(config: Optional[Path], settings: Settings) -> ComplexityMetrics:
    try:
        analyzer = ComplexityAnalyzer(config, settings=settings)
        return analyzer.analyze()
    except (ConfigurationError, ParserError) as e:
        err_console.print(str(e), style="red", markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=2) from e


def _summary_table(metrics: ComplexityMetrics) -> Table:
    table = Table(title="Complexity")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Functions", str(metrics.total_functions))
    table.add_row("Average", str(metrics.average))
    table.add_row("Median", str(metrics.median))
    table.add_row("Maximum", str(metrics.max))
    table.add_row("Cognitive", str(metrics.cognitive_complexity))
    return table


@app.command("check")
def check(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Project configuration (defaults to settings)"
    ),
    max_average: Optional[float] = typer.Option(None, help="Maximum average complexity"),
    max_function: Optional[int] = typer.Option(None, help="Maximum function complexity"),
    max_cognitive: Optional[int] = typer.Option(None, help="Maximum cognitive complexity"),
    report_file: Optional[Path] = typer.Option(None, help="Also write the report to this file"),
) -> None:
    """Analyze the project and fail when a threshold is exceeded."""
    settings = get_settings()
    configure_logging(settings.log_level)

    thresholds = ComplexityThresholds(
        max_average=max_average if max_average is not None else settings.max_average,
        max_function=max_function if max_function is not None else settings.max_function,
        max_cognitive=max_cognitive if max_cognitive is not None else settings.max_cognitive,
    )

    metrics = _analyze(config, settings)

    if report_file is not None:
        report_file.write_text(generate_report(metrics) + "\n", encoding="utf-8")

    try:
        enforce_thresholds(metrics, thresholds)
    except ThresholdViolation as e:
        console.print(str(e), markup=False, highlight=False, soft_wrap=True)
        raise typer.Exit(code=1) from e

    console.print(_summary_table(metrics))
    console.print("[green]Complexity gate passed[/]")


@app.command("report")
def report(
    config: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Project configuration (defaults to settings)"
    ),
    output_format: ReportFormat = typer.Option(ReportFormat.TEXT, "--format", "-f"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write to file"),
) -> None:
    """Print the complexity report without enforcing thresholds."""
    settings = get_settings()
    configure_logging(settings.log_level)

    metrics = _analyze(config, settings)
    rendered = render_json(metrics) if output_format == ReportFormat.JSON else generate_report(metrics)

    if output is not None:
        output.write_text(rendered + "\n", encoding="utf-8")
        console.print(f"[green]Report written:[/] {output}")
    else:
        console.print(rendered, markup=False, highlight=False, soft_wrap=True)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
