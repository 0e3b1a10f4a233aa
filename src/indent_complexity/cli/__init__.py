"""CLI entry point -- registers all subcommands."""

from typing import Optional

import typer

from .. import __version__
from ..logging_config import setup_logging
from ._common import console

app = typer.Typer(
    name="indent-complexity",
    help="Indentation-based complexity scoring for source files and diffs",
    add_completion=False,
    rich_markup_mode="rich",
    no_args_is_help=True,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"indent-complexity {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Show debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    log_file: Optional[str] = typer.Option(None, "--log-file", help="Also write logs to this file"),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """
    Score how deeply nested code is, from indentation alone.

    [bold cyan]Examples:[/bold cyan]

      indent-complexity file src/app.py

      git diff | indent-complexity diff

      indent-complexity diff --git main --fail-on high
    """
    setup_logging(debug=debug, quiet=quiet, log_file=log_file)


# Import subcommands to register them
from .file import file as _file  # noqa: F401, E402
from .diff import diff as _diff  # noqa: F401, E402
