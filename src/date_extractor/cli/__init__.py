"""Command line entry points for date_extractor."""

from typer import Typer

from .extract import extract_command


cli = Typer(help="Extract dates and time ranges from schedule text")
cli.command("extract")(extract_command)


@cli.callback()
def main() -> None:
    """Extract dates and time ranges from schedule text."""


__all__ = ["cli", "extract_command"]
