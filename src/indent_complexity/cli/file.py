"""File CLI command -- score whole source files."""

from pathlib import Path
from typing import List, Optional, Tuple

import typer
from rich.markup import escape

from ..api import analyze_complexity
from ..exceptions import FileAccessError
from ..logging_config import get_logger
from ..models import ComplexityResult
from . import app
from ._common import (
    EXIT_FAIL_LEVEL,
    EXIT_INPUT_ERROR,
    STDIN,
    console,
    err_console,
    read_source,
    resolve_config,
)
from ._display import print_json, render_results

logger = get_logger(__name__)


@app.command()
def file(
    paths: List[str] = typer.Argument(..., help="Source files to analyze ('-' reads stdin)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show all statistical moments"),
    lines: bool = typer.Option(False, "--lines", help="Show per-line depths (implies --verbose)"),
    medium: Optional[float] = typer.Option(None, "--medium", help="Score for 'medium' (default 4)"),
    high: Optional[float] = typer.Option(None, "--high", help="Score for 'high' (default 10)"),
    comment_pattern: Optional[str] = typer.Option(
        None, "--comment-pattern", help="Regex for comment lines (replaces the default)"
    ),
    no_comment_filter: bool = typer.Option(
        False, "--no-comment-filter", help="Count comment lines too"
    ),
    fail_on: Optional[str] = typer.Option(
        None, "--fail-on", help="Exit 1 if any file reaches this level (low/medium/high)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Explicit TOML config file"),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
):
    """
    Score the indentation complexity of source files.

    [bold cyan]Examples:[/bold cyan]

      indent-complexity file src/app.ts

      indent-complexity file -v src/*.py

      cat main.go | indent-complexity file - --json
    """
    cfg = resolve_config(
        config=config,
        medium=medium,
        high=high,
        comment_pattern=comment_pattern,
        no_comment_filter=no_comment_filter,
        fail_on=fail_on,
        verbose=verbose,
        lines=lines,
    )

    results: List[Tuple[str, ComplexityResult]] = []
    for source in paths:
        try:
            content = read_source(source)
        except FileAccessError as e:
            err_console.print(f"[red]Error:[/red] {escape(str(e))}")
            raise typer.Exit(EXIT_INPUT_ERROR)

        label = "<stdin>" if source == STDIN else source
        logger.debug(f"Analyzing {label}")
        results.append(
            (
                label,
                analyze_complexity(
                    content,
                    comment_pattern=cfg.pattern,
                    thresholds=cfg.thresholds,
                    verbose=cfg.verbose,
                    include_lines=cfg.include_lines,
                ),
            )
        )

    if json_output:
        print_json(results)
    else:
        render_results(console, results)

    if any(cfg.fails(result.level) for _, result in results):
        raise typer.Exit(EXIT_FAIL_LEVEL)
