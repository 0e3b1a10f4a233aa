"""Diff CLI command -- score the changed lines of a unified diff."""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from ..api import analyze_diff_complexity
from ..exceptions import AnalysisError
from . import app
from ._common import (
    EXIT_FAIL_LEVEL,
    EXIT_INPUT_ERROR,
    STDIN,
    console,
    err_console,
    git_diff,
    read_source,
    resolve_config,
)
from ._display import print_json, render_results


@app.command()
def diff(
    source: Optional[str] = typer.Argument(
        None, help="Diff file to analyze (default: stdin, unless --git/--staged)"
    ),
    git_ref: Optional[str] = typer.Option(
        None, "--git", help="Run 'git diff REF' and analyze its output"
    ),
    staged: bool = typer.Option(False, "--staged", help="Analyze 'git diff --cached'"),
    path: Optional[Path] = typer.Option(
        None,
        "-C",
        "--path",
        help="Repository to run git in (default: current directory)",
        exists=True,
        file_okay=False,
        dir_okay=True,
    ),
    include: Optional[str] = typer.Option(
        None, "--include", "-i", help="Lines to analyze: additions (default), deletions or both"
    ),
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
        None, "--fail-on", help="Exit 1 if the diff reaches this level (low/medium/high)"
    ),
    config: Optional[Path] = typer.Option(None, "--config", "-c", help="Explicit TOML config file"),
    json_output: bool = typer.Option(False, "--json", help="Output in machine-readable JSON format"),
):
    """
    Score the indentation complexity of changed lines in a unified diff.

    Context lines are never counted; headers are skipped.

    [bold cyan]Examples:[/bold cyan]

      git diff | indent-complexity diff

      indent-complexity diff changes.patch --include both

      indent-complexity diff --git origin/main --fail-on high
    """
    cfg = resolve_config(
        config=config,
        medium=medium,
        high=high,
        comment_pattern=comment_pattern,
        no_comment_filter=no_comment_filter,
        include=include,
        fail_on=fail_on,
        verbose=verbose,
        lines=lines,
    )

    try:
        if git_ref is not None or staged:
            text = git_diff(git_ref, staged, cwd=path)
            label = f"git diff {'--cached ' if staged else ''}{git_ref or ''}".strip()
        else:
            text = read_source(source or STDIN)
            label = "<stdin>" if source in (None, STDIN) else source
    except AnalysisError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_INPUT_ERROR)

    result = analyze_diff_complexity(
        text,
        include=cfg.include,
        comment_pattern=cfg.pattern,
        thresholds=cfg.thresholds,
        verbose=cfg.verbose,
        include_lines=cfg.include_lines,
    )

    if json_output:
        print_json([(label, result)])
    else:
        render_results(console, [(label, result)])

    if cfg.fails(result.level):
        raise typer.Exit(EXIT_FAIL_LEVEL)
