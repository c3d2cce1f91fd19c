"""ABOUTME: CLI entry point for typeanalyzer commands.
ABOUTME: Provides analyze and ui commands via Typer."""

import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path

import typer
from rich.console import Console
from rich.table import Table

from typeanalyzer.analysis import TypeAnalysis, normalize_query, run_analysis
from typeanalyzer.config import DisplayConfig, load_display_config
from typeanalyzer.core.report import TypeMultiplier, format_multiplier
from typeanalyzer.exceptions import TypeAnalyzerError
from typeanalyzer.logs import init_logging
from typeanalyzer.settings import settings

app = typer.Typer(
    name="typeanalyzer",
    help="Pokemon type weakness and resistance analyzer.",
    no_args_is_help=True,
)

console = Console()


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"typeanalyzer {settings.VERSION}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show the version and exit"
    ),
) -> None:
    """Pokemon type weakness and resistance analyzer."""


def _styled_type(type_name: str, display: DisplayConfig) -> str:
    """Return Rich markup for a colored type name."""
    return f"[bold white on {display.color_for(type_name)}] {type_name} [/]"


def _multiplier_table(title: str, entries: Sequence[TypeMultiplier], display: DisplayConfig) -> Table:
    """Build a two column table of types and multipliers."""
    table = Table(title=title, show_header=False, title_justify="left")
    table.add_column("Type")
    table.add_column("Damage")
    for type_name, multiplier in entries:
        table.add_row(_styled_type(type_name, display), format_multiplier(multiplier))
    return table


def _print_analysis(analysis: TypeAnalysis, display: DisplayConfig) -> None:
    """Print header, weaknesses and resistances."""
    types = " ".join(_styled_type(type_name, display) for type_name in analysis.types)
    console.print(f"[bold]{analysis.name.capitalize()}[/]  {types}")
    if analysis.sprite:
        console.print(f"[dim]{analysis.sprite}[/]")

    if analysis.report.weaknesses:
        console.print(_multiplier_table("Weak Against", analysis.report.weaknesses, display))
    else:
        console.print("[italic]No weaknesses found![/]")

    if analysis.report.resistances:
        console.print(_multiplier_table("Resistant To", analysis.report.resistances, display))
    else:
        console.print("[italic]No resistances found![/]")


@app.command()
def analyze(
    name: str = typer.Argument(..., help="Pokemon name, e.g. charizard"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show detailed output"),
) -> None:
    """Show what types a Pokemon is weak against and resistant to."""
    if verbose:
        init_logging(settings.logging_config_path, level="DEBUG")

    if normalize_query(name) is None:
        console.print("[yellow]Nothing to look up.[/]")
        return

    try:
        display = load_display_config()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    if verbose:
        console.print(f"[blue]Querying {settings.API_BASE_URL}[/]")

    try:
        analysis = run_analysis(name)
    except TypeAnalyzerError as e:
        console.print(f"[red]Error:[/] {e}")
        raise typer.Exit(1) from None

    _print_analysis(analysis, display)


@app.command()
def ui(
    port: int = typer.Option(8501, "--port", "-p", help="Port for Streamlit server"),
) -> None:
    """Launch the Streamlit analyzer UI."""
    app_path = Path(__file__).parent / "app" / "main.py"

    if not app_path.exists():
        console.print(f"[red]Error:[/] Streamlit app not found at {app_path}")
        raise typer.Exit(1)

    console.print(f"[blue]Starting Streamlit UI on port {port}...[/]")

    try:
        # All arguments are controlled/validated - not user-provided strings
        subprocess.run(  # noqa: S603
            [sys.executable, "-m", "streamlit", "run", str(app_path), "--server.port", str(port)],
            check=True,
        )
    except KeyboardInterrupt:
        console.print("\n[yellow]UI stopped.[/]")
    except subprocess.CalledProcessError as e:
        console.print(f"[red]Streamlit failed:[/] {e}")
        raise typer.Exit(1) from None


if __name__ == "__main__":
    app()
