"""
gendex CLI.

Command-line entry point: ``gendex -o dex.py``. Respects ANDROID_HOME to locate
the Android SDK; javac must be on the PATH.
"""

from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .core.config import get_config
from .core.exceptions import FormatError, GendexError, ToolInvocationError
from .core.logging import setup_logging

app = typer.Typer(
    name="gendex",
    help="Generate the embedded DEX module used by the mobile toolchain",
    add_completion=False,
)

err_console = Console(stderr=True)


def version_callback(value: bool) -> None:
    """Show version and exit."""
    if value:
        from . import __version__
        typer.echo(f"gendex v{__version__}")
        raise typer.Exit()


def report_error(error: GendexError) -> None:
    """Print an error and any captured diagnostics to stderr."""
    if isinstance(error, ToolInvocationError):
        err_console.print(escape(str(error.command)))
        if error.output:
            err_console.print(escape(error.output), end="")
    elif isinstance(error, FormatError):
        err_console.print(escape(error.raw_source), end="")
    err_console.print(f"[bold red]✗ gendex failed:[/bold red] {escape(str(error))}")


@app.command()
def main(
    output: str = typer.Option(
        "",
        "--output",
        "-o",
        help="result will be written to this file",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        help="Enable verbose logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Compile the platform Java sources to DEX and embed them in a module."""
    from .orchestration import run_pipeline

    try:
        config = get_config()
        if verbose:
            config = config.model_copy(update={"log_level": "DEBUG"})
        setup_logging(config)
        run_pipeline(Path(output), config=config)
    except GendexError as e:
        report_error(e)
        raise typer.Exit(1)


def run() -> None:
    """Entry point for the console script."""
    app()


if __name__ == "__main__":
    run()
