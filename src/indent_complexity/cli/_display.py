"""Rich and JSON rendering of complexity results."""

import json
from typing import Any, Dict, List, Tuple

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ..models import ComplexityResult, LineComplexityResult, VerboseComplexityResult

LEVEL_COLORS = {
    "low": "green",
    "medium": "yellow",
    "high": "red",
}


def _level_markup(level: str) -> str:
    color = LEVEL_COLORS.get(level, "white")
    return f"[{color}]{level.upper()}[/{color}]"


def _histogram_str(histogram: Dict[int, int]) -> str:
    return "  ".join(f"{depth}:{count}" for depth, count in histogram.items())


def result_payload(label: str, result: ComplexityResult) -> Dict[str, Any]:
    """JSON-ready dict; histogram keys become strings only via json.dumps."""
    return {"source": label, **result.to_dict()}


def print_json(results: List[Tuple[str, ComplexityResult]]) -> None:
    payload = [result_payload(label, result) for label, result in results]
    print(json.dumps(payload if len(payload) != 1 else payload[0], indent=2))


def render_results(console: Console, results: List[Tuple[str, ComplexityResult]]) -> None:
    """Summary table, one row per analyzed source."""
    verbose = any(isinstance(r, VerboseComplexityResult) for _, r in results)

    table = Table(show_header=True, show_lines=False, pad_edge=True)
    table.add_column("Source", min_width=20)
    table.add_column("Score", justify="right")
    table.add_column("Level")
    if verbose:
        table.add_column("Lines", justify="right")
        table.add_column("Max", justify="right")
        table.add_column("Mean", justify="right")
        table.add_column("Median", justify="right")
        table.add_column("Std dev", justify="right")

    for label, result in results:
        row = [escape(label), f"{result.score:.2f}", _level_markup(result.level)]
        if isinstance(result, VerboseComplexityResult):
            row += [
                str(result.line_count),
                str(result.max),
                f"{result.mean:.2f}",
                f"{result.median:g}",
                f"{result.std_dev:.2f}",
            ]
        elif verbose:
            row += [""] * 5
        table.add_row(*row)

    console.print()
    console.print(table)

    for label, result in results:
        if len(results) > 1:
            console.print(f"[bold]{escape(label)}[/bold]: {result.reason}")
        else:
            console.print(result.reason)
        if isinstance(result, VerboseComplexityResult) and result.depth_histogram:
            console.print(f"  [dim]depths[/dim] {_histogram_str(result.depth_histogram)}")
        if isinstance(result, LineComplexityResult):
            render_lines(console, result)


def render_lines(console: Console, result: LineComplexityResult) -> None:
    """Per-line depth listing, indented by depth."""
    for detail in result.lines:
        bar = "│ " * detail.depth
        console.print(
            f"  [dim]{detail.line:>5}[/dim] [cyan]{detail.depth:>2}[/cyan]  [dim]{bar}[/dim]{escape(detail.content)}",
            markup=True,
            highlight=False,
        )
