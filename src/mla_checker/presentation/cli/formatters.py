"""Rich formatting utilities for the CLI.

All Rich rendering (tables, panels, syntax) lives here; the module knows
nothing about how reports are produced.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

if TYPE_CHECKING:
    from mla_checker.domain.models.report import AnalysisReport, RuleDefinition

console = Console()

_STATUS_STYLES = {
    "passed": "green",
    "failed": "red",
    "unable_to_verify": "dim",
}


# ---------------------------------------------------------------------------
# Success / error panels
# ---------------------------------------------------------------------------


def success_panel(message: str, title: str = "MLA Checker") -> None:
    """Print a green success panel."""
    console.print(Panel(message, title=title, border_style="green"))


def error_message(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]❌ {escape(message)}[/]")


# ---------------------------------------------------------------------------
# JSON / config rendering
# ---------------------------------------------------------------------------


def json_panel(raw_json: str, title: str = "⚙️  Active MLA 9 Configuration") -> None:
    """Render JSON inside a syntax-highlighted panel."""
    console.print(
        Panel(
            Syntax(raw_json, "json", theme="monokai", line_numbers=True),
            title=title,
            border_style="blue",
        )
    )


# ---------------------------------------------------------------------------
# Rule catalog table
# ---------------------------------------------------------------------------


def rules_table(rules: list[RuleDefinition]) -> None:
    """Print the rule catalog."""
    table = Table(
        title="📐 MLA 9th Edition Rules",
        show_header=True,
        border_style="blue",
    )
    table.add_column("ID", style="cyan")
    table.add_column("Name")
    table.add_column("Category", style="magenta")
    table.add_column("Severity")
    table.add_column("Description", style="dim")

    for rule in rules:
        severity_style = {"error": "red", "warning": "yellow"}.get(rule.severity.value, "blue")
        table.add_row(
            rule.id,
            escape(rule.name),
            rule.category.value,
            f"[{severity_style}]{rule.severity.value}[/]",
            escape(rule.description),
        )

    console.print(table)


# ---------------------------------------------------------------------------
# Compliance report rendering
# ---------------------------------------------------------------------------


def report_table(report: AnalysisReport, show_suggestions: bool = True) -> None:
    """Print a Rich compliance report table plus summary panel."""
    table = Table(
        title="📋 MLA 9 Compliance Report",
        show_header=True,
        border_style="blue",
    )
    table.add_column("", width=3)
    table.add_column("Rule", style="cyan", width=28)
    table.add_column("Status", width=16)
    table.add_column("Details")

    for r in report.results:
        style = _STATUS_STYLES[r.status.value]
        details = escape(r.details)
        if r.affected_elements:
            details += f"\n[dim]Affected: {escape(', '.join(r.affected_elements))}[/]"
        if show_suggestions and r.suggestions:
            details += "".join(f"\n[italic]• {escape(s)}[/]" for s in r.suggestions)
        table.add_row(r.icon, escape(r.rule.name), f"[{style}]{r.status.value}[/]", details)

    console.print(table)

    score = report.overall_score
    score_color = "green" if score >= 80 else "yellow" if score >= 60 else "red"
    status = "✅ COMPLIANT" if report.is_compliant else "❌ NOT COMPLIANT"

    console.print(
        Panel(
            f"Result: [bold {score_color}]{status}[/]\n"
            f"Score: [bold {score_color}]{score}%[/] "
            f"({report.passed_rules}/{report.passed_rules + report.failed_rules} verifiable rules)\n"
            f"  ✅ Passed: {report.summary.passed}  |  ❌ Errors: {report.summary.errors}  |  "
            f"⚠️  Warnings: {report.summary.warnings}  |  ❔ Unverifiable: "
            f"{report.summary.unverifiable}",
            title="📊 Summary",
            border_style=score_color,
        )
    )
