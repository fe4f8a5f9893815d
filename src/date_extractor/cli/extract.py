"""``date-extractor extract``: print the dates found in a message.

Examples:
    date-extractor extract "8/1（火）19時半以降"
    date-extractor extract --file reply.txt --json
    cat reply.txt | date-extractor extract -
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from date_extractor.configuration.settings import DEFAULT_CONFIG_PATH, bootstrap_settings
from date_extractor.errors import DateExtractorError
from date_extractor.extraction.extractor import DateExtractor
from date_extractor.extraction.models import ExtractionResult

logger = logging.getLogger(__name__)

console = Console()


def _read_text(text: Optional[str], file: Optional[Path]) -> str:
    if file is not None:
        return file.read_text(encoding="utf-8")
    if text is None:
        raise typer.BadParameter("Provide TEXT, '-' for stdin, or --file")
    if text == "-":
        return sys.stdin.read()
    return text


def _render_table(result: ExtractionResult) -> Table:
    table = Table(title=f"Extracted dates ({len(result)} total)")
    table.add_column("Text", style="cyan")
    table.add_column("Date", style="green")
    table.add_column("Start", style="yellow")
    table.add_column("End", style="magenta")

    for entry in result.entries:
        table.add_row(
            entry.text,
            entry.date.isoformat() if entry.date else "-",
            entry.start.strftime("%H:%M") if entry.start else "-",
            entry.end.strftime("%H:%M") if entry.end else "-",
        )
    return table


def extract_command(
    text: Optional[str] = typer.Argument(None, help="Message text, or '-' to read stdin"),
    file: Optional[Path] = typer.Option(
        None,
        "--file",
        "-f",
        exists=True,
        dir_okay=False,
        readable=True,
        help="Read message text from a file",
    ),
    fallback_month: Optional[int] = typer.Option(None, help="Month for dates without one"),
    fallback_year: Optional[int] = typer.Option(None, help="Year for dates without one"),
    keep_invalid: Optional[bool] = typer.Option(
        None, "--keep-invalid/--drop-invalid", help="Keep matches that are not valid dates"
    ),
    config_path: Path = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file"),
    output_json: bool = typer.Option(False, "--json", help="Output as JSON"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Extract dates and time ranges from TEXT."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        settings = bootstrap_settings(
            path=config_path,
            overrides={
                "fallback_month": fallback_month,
                "fallback_year": fallback_year,
                "keep_invalid": keep_invalid,
            },
        )
    except DateExtractorError as e:
        typer.echo(f"Error: {e.message}", err=True)
        raise typer.Exit(code=1)

    body = _read_text(text, file)
    extractor = DateExtractor.from_settings(settings.extraction)
    result = extractor.extract(body)
    logger.debug("Extracted %d entries", len(result))

    if output_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False, indent=2))
        return

    if not result.entries:
        console.print("[yellow]No dates found[/yellow]")
        return
    console.print(_render_table(result))
