"""Thin CLI wrapper: Typer commands that delegate to Use Cases.

All domain logic is accessed through the Container (bootstrap.py).
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from mla_checker.domain.errors import ConfigurationError, MLACheckerError
from mla_checker.presentation.cli.formatters import (
    console,
    error_message,
    json_panel,
    report_table,
    rules_table,
    success_panel,
)

app = typer.Typer(
    name="mla",
    help="📄 MLA 9th Edition compliance checker for Word (.docx) documents",
    rich_markup_mode="rich",
    no_args_is_help=True,
)

# Sub-app for config commands
config_app = typer.Typer(
    name="config",
    help="⚙️  Manage the MLA 9 rule catalog configuration",
    rich_markup_mode="rich",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

ConfigOption = Annotated[
    Optional[str],
    typer.Option("--config", "-c", help="Path to a JSON rule catalog"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable debug logging")
    ] = False,
) -> None:
    """MLA 9 document checker."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _container(config: Optional[str]):
    from mla_checker.bootstrap import Container

    try:
        return Container(config_path=Path(config) if config else None)
    except (FileNotFoundError, ValidationError, ConfigurationError) as e:
        error_message(f"Invalid configuration: {e}")
        raise typer.Exit(code=1)


# ---------------------------------------------------------------------------
# mla check
# ---------------------------------------------------------------------------


@app.command()
def check(
    source: Annotated[str, typer.Argument(help=".docx file to check")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the report as JSON")
    ] = False,
    config: ConfigOption = None,
) -> None:
    """Check an existing .docx document for MLA 9 compliance."""
    container = _container(config)
    try:
        report = container.check_compliance().execute(Path(source))
    except (MLACheckerError, FileNotFoundError) as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        report_table(report)


# ---------------------------------------------------------------------------
# mla extract
# ---------------------------------------------------------------------------


@app.command()
def extract(
    source: Annotated[str, typer.Argument(help=".docx file to extract")],
) -> None:
    """Print the structural model extracted from a .docx document as JSON."""
    container = _container(None)
    source_path = Path(source)
    if not source_path.is_file():
        error_message(f"File not found: {source}")
        raise typer.Exit(code=1)

    try:
        model = container.extractor.extract(source_path.read_bytes())
    except MLACheckerError as e:
        error_message(str(e))
        raise typer.Exit(code=1)

    typer.echo(model.model_dump_json(indent=2))


# ---------------------------------------------------------------------------
# mla rules
# ---------------------------------------------------------------------------


@app.command()
def rules(
    category: Annotated[
        Optional[str],
        typer.Option(
            "--category", help="Only show one category (formatting, structure, citations, page-setup)"
        ),
    ] = None,
    config: ConfigOption = None,
) -> None:
    """Show the MLA 9 rules the checker evaluates."""
    from mla_checker.domain.models.enums import RuleCategory

    engine = _container(config).engine
    if category is None:
        rules_table(engine.all_rules())
        return

    try:
        selected = RuleCategory(category)
    except ValueError:
        error_message(f"Unknown category: {category}")
        raise typer.Exit(code=1)
    rules_table(engine.rules_by_category(selected))


# ---------------------------------------------------------------------------
# mla demo
# ---------------------------------------------------------------------------


@app.command()
def demo(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Output file")
    ] = "demo_mla9.docx",
) -> None:
    """Generate a sample MLA 9 paper and check it."""
    container = _container(None)
    paper = container.generate_demo().execute()
    output_path = container.renderer.render(paper, Path(output))
    report = container.check_compliance().execute(output_path)

    success_panel(
        f"✅ Sample paper generated: [bold green]{output_path}[/]\n\n"
        "📋 Includes:\n"
        "  • MLA heading block and running header\n"
        "  • Centered title and indented body paragraphs\n"
        "  • Parenthetical in-text citations\n"
        "  • Works Cited page with hanging indents\n\n"
        f"Compliance score: [bold]{report.overall_score}%[/]",
        title="🎓 MLA 9 Demo",
    )


# ---------------------------------------------------------------------------
# mla config show / init / validate
# ---------------------------------------------------------------------------


@config_app.command("show")
def config_show(config: ConfigOption = None) -> None:
    """Show the active rule catalog (formatted)."""
    cfg = _container(config).config
    json_panel(cfg.model_dump_json(indent=2))


@config_app.command("init")
def config_init(
    output: Annotated[
        str, typer.Option("--output", "-o", help="Destination file name")
    ] = "mla9_config.json",
) -> None:
    """Copy the default configuration to the current directory for customization."""
    from mla_checker.config.loader import _DEFAULT_CONFIG_PATH

    dest = Path(output)
    if dest.exists():
        console.print(f"[bold yellow]⚠️  File already exists:[/] {dest}")
        overwrite = typer.confirm("Overwrite it?")
        if not overwrite:
            raise typer.Abort()

    shutil.copy2(_DEFAULT_CONFIG_PATH, dest)
    success_panel(
        f"✅ Configuration copied to: [bold green]{dest}[/]\n\n"
        "Edit this file and use it with [bold]--config[/]:\n"
        f'  mla check paper.docx --config "{dest}"',
        title="⚙️  Config Init",
    )


@config_app.command("validate")
def config_validate(
    config_file: Annotated[str, typer.Argument(help="JSON configuration file to validate")],
) -> None:
    """Validate an MLA 9 JSON configuration file."""
    from mla_checker.config import load_config

    path = Path(config_file)
    if not path.is_file():
        error_message(f"File not found: {path}")
        raise typer.Exit(code=1)

    try:
        cfg = load_config(path)
    except (ValidationError, ConfigurationError) as e:
        error_message(f"Validation error:\n\n{e}")
        raise typer.Exit(code=1)

    success_panel(
        f"✅ Valid configuration\n\n"
        f"  Standard: [cyan]{cfg.metadata.standard} {cfg.metadata.edition} ed.[/]\n"
        f"  Language: [cyan]{cfg.metadata.language}[/]\n"
        f"  Rules: [cyan]{len(cfg.rules)}[/] defined",
        title="✅ Validation",
    )


if __name__ == "__main__":
    app()
