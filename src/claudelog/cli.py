"""Command-line interface for claudelog."""

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from claudelog.config import ConfigError, EnvConfig, configure_logging, load_config
from claudelog.reminder import check_reminder, save_last_run
from claudelog.scanner import find_log_files, scan_paths
from claudelog.schema import SCHEMA_DESCRIPTORS, get_supported_versions, validate_log_entry

app = typer.Typer(
    name="claudelog",
    help="claudelog: validate Claude Code JSONL logs and keep a regular analysis habit",
)
console = Console()


def _config(ctx: typer.Context) -> EnvConfig:
    return ctx.obj["config"]


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None,
        "--config",
        help="YAML config file (default: $CLAUDELOG_CONFIG)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
) -> None:
    """Load configuration and set up logging."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    configure_logging("DEBUG" if verbose else config.log_level)
    ctx.obj = {"config": config}


@app.command()
def validate(
    ctx: typer.Context,
    files: Optional[list[Path]] = typer.Argument(
        None, help="JSONL files to validate (default: all Claude Code logs)"
    ),
    max_warnings: int = typer.Option(
        5,
        "--max-warnings",
        "-w",
        help="Warnings to show per file",
    ),
) -> None:
    """Validate log entries against the known schema versions."""
    config = _config(ctx)
    paths = list(files) if files else find_log_files(config.projects_dir)
    if not paths:
        console.print(f"[red]No log files found in {config.projects_dir}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    try:
        results = scan_paths(paths)
    except OSError as e:
        console.print(f"[red]Could not read log file: {e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    table = Table(title="Schema Validation")
    table.add_column("File", style="cyan")
    table.add_column("Lines", justify="right")
    table.add_column("Valid", justify="right", style="green")
    table.add_column("Skipped", justify="right")
    table.add_column("Malformed", justify="right")
    table.add_column("Unsupported", justify="right")

    for result in results:
        table.add_row(
            str(result.path),
            str(result.total_lines),
            str(result.valid),
            str(result.skipped),
            str(result.malformed),
            str(result.unsupported),
        )
    console.print(table)

    for result in results:
        for warning in result.warnings[:max_warnings]:
            console.print(f"[yellow]{warning}[/yellow]", highlight=False, soft_wrap=True)
        hidden = len(result.warnings) - max_warnings
        if hidden > 0:
            console.print(f"[dim]... {hidden} more warnings in {result.path}[/dim]")

    if not all(r.clean for r in results):
        raise typer.Exit(2)


@app.command()
def check_entry(
    entry: str = typer.Argument(..., help="A single JSON log entry"),
) -> None:
    """Validate one JSON log entry and print the result."""
    try:
        decoded = json.loads(entry)
    except json.JSONDecodeError as e:
        console.print(f"[red]Invalid JSON: {e}[/red]", soft_wrap=True)
        raise typer.Exit(1)

    result = validate_log_entry(decoded)
    typer.echo(json.dumps(result.to_dict(), indent=2))
    if not result.is_valid:
        raise typer.Exit(2)


@app.command()
def versions() -> None:
    """List known and supported schema versions."""
    supported = get_supported_versions()

    table = Table(title="Schema Versions")
    table.add_column("Version", style="cyan")
    table.add_column("Required Fields")
    table.add_column("Supported", justify="center")

    for label, descriptor in SCHEMA_DESCRIPTORS.items():
        table.add_row(
            label,
            ", ".join(descriptor.required_fields),
            "✓" if label in supported else "✗",
        )

    console.print(table)


@app.command()
def reminder(
    ctx: typer.Context,
    touch: bool = typer.Option(
        False,
        "--touch",
        help="Record now as the last analysis run",
    ),
) -> None:
    """Check whether it's time to re-run analysis."""
    config = _config(ctx)
    proceed = check_reminder(config, console=console)

    # Only a run the user went ahead with resets the clock
    if touch and proceed:
        try:
            save_last_run(config.last_run_file)
        except OSError as e:
            console.print(f"[red]Could not record last run: {e}[/red]", soft_wrap=True)
            raise typer.Exit(1)

    if not proceed:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
