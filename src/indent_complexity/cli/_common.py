"""Shared CLI helpers: option resolution and input loading."""

import subprocess
import sys
from pathlib import Path
from typing import List, Optional

import typer
from rich.console import Console
from rich.markup import escape

from ..config import ComplexityConfig, load_config
from ..exceptions import ConfigurationError, DiffSourceError, FileAccessError
from ..logging_config import get_logger

console = Console()
err_console = Console(stderr=True)

logger = get_logger(__name__)

EXIT_FAIL_LEVEL = 1
EXIT_INPUT_ERROR = 2
EXIT_CONFIG_ERROR = 3

STDIN = "-"


def resolve_config(
    config: Optional[Path] = None,
    medium: Optional[float] = None,
    high: Optional[float] = None,
    comment_pattern: Optional[str] = None,
    no_comment_filter: bool = False,
    include: Optional[str] = None,
    fail_on: Optional[str] = None,
    verbose: bool = False,
    lines: bool = False,
) -> ComplexityConfig:
    """Build config from CLI options, exiting with code 3 on bad values."""
    overrides = {
        "medium_threshold": medium,
        "high_threshold": high,
        "comment_pattern": comment_pattern,
        "include": include,
        "fail_on": fail_on,
    }
    if no_comment_filter:
        overrides["filter_comments"] = False
    if verbose:
        overrides["verbose"] = True
    if lines:
        overrides["include_lines"] = True

    try:
        return load_config(config_file=config, **overrides)
    except ConfigurationError as e:
        err_console.print(f"[red]Configuration error:[/red] {escape(str(e))}")
        raise typer.Exit(EXIT_CONFIG_ERROR)


def read_source(source: str) -> str:
    """Read a file path, or stdin for '-'.

    Raises:
        FileAccessError: If the file cannot be read
    """
    if source == STDIN:
        return sys.stdin.read()

    path = Path(source)
    try:
        return path.read_text(encoding="utf-8", errors="replace")
    except OSError as e:
        raise FileAccessError(path, e.strerror or str(e))


def git_diff(ref: Optional[str], staged: bool, cwd: Optional[Path] = None) -> str:
    """Run ``git diff`` and return its output.

    Raises:
        DiffSourceError: If git is missing or exits non-zero
    """
    cmd: List[str] = ["git"]
    if cwd is not None:
        cmd += ["-C", str(cwd)]
    cmd.append("diff")
    if staged:
        cmd.append("--cached")
    if ref:
        cmd.append(ref)

    command = " ".join(cmd)
    logger.debug(f"Running {command}")
    try:
        proc = subprocess.run(cmd, capture_output=True, text=True, timeout=30)
    except FileNotFoundError:
        raise DiffSourceError(command, "git executable not found")
    except subprocess.TimeoutExpired:
        raise DiffSourceError(command, "timed out")

    if proc.returncode != 0:
        raise DiffSourceError(command, proc.stderr.strip() or f"exit code {proc.returncode}")
    return proc.stdout
