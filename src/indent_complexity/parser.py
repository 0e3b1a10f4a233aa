"""Line parsing: indentation depth extraction and noise filtering.

Two input shapes are supported:

    parse_content  whole source text, line numbers are file positions
    parse_diff     unified diff, only +/- hunk lines are considered and line
                   numbers are a diff-local counter (see parse_diff)
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import List, Optional, Pattern, Union

from .constants import DEFAULT_COMMENT_PATTERN, DIFF_HEADER_PREFIXES, INCLUDE_CHOICES
from .exceptions import InvalidConfigError
from .indent import detect_indent, indent_unit
from .logging_config import get_logger
from .models import CountedLine

logger = get_logger(__name__)

CommentPattern = Optional[Union[Pattern[str], str]]

_LEADING_WS_RE = re.compile(r"^[\t ]*")


@dataclass
class ParseResult:
    """Counted lines plus the indent unit they were measured with."""

    lines: List[CountedLine] = field(default_factory=list)
    indent_unit: int = 1


def compile_comment_pattern(pattern: CommentPattern) -> Optional[Pattern[str]]:
    """Normalize a comment pattern option.

    ``None`` disables comment filtering, strings are compiled, compiled
    patterns pass through unchanged.

    Raises:
        TypeError: If ``pattern`` is neither a regex, a string nor None
    """
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    if isinstance(pattern, str):
        return re.compile(pattern)
    raise TypeError(f"comment_pattern must be a regex, a string or None, got {type(pattern).__name__}")


def compute_indent_depth(line: str, unit: int) -> int:
    """Logical depth of ``line``: leading columns // unit.

    A tab counts ``unit`` columns and a space counts one, so mixed tab/space
    indentation lands on the same depth as long as ``unit`` is right.
    """
    leading = _LEADING_WS_RE.match(line).group(0)
    columns = sum(unit if char == "\t" else 1 for char in leading)
    return columns // unit


def _is_skipped(line: str, trimmed: str, pattern: Optional[Pattern[str]]) -> bool:
    if not trimmed:
        return True
    return pattern is not None and pattern.search(line) is not None


def parse_content(content: str, comment_pattern: CommentPattern = DEFAULT_COMMENT_PATTERN) -> ParseResult:
    """Parse source text into counted lines.

    Args:
        content: Source code
        comment_pattern: Regex marking comment lines, None to keep comments

    Returns:
        ParseResult with one CountedLine per non-blank, non-comment line
    """
    pattern = compile_comment_pattern(comment_pattern)
    info = detect_indent(content)
    unit = indent_unit(info)

    lines: List[CountedLine] = []
    for index, line in enumerate(content.split("\n")):
        trimmed = line.strip()
        if _is_skipped(line, trimmed, pattern):
            continue
        lines.append(
            CountedLine(line_number=index + 1, depth=compute_indent_depth(line, unit), content=trimmed)
        )

    logger.debug(f"Parsed {len(lines)} counted lines (indent {info.indent!r}, unit {unit})")
    return ParseResult(lines=lines, indent_unit=unit)


def _is_diff_header(line: str) -> bool:
    return line.startswith(DIFF_HEADER_PREFIXES)


def _is_included(line: str, include: str) -> bool:
    is_addition = line.startswith("+")
    is_deletion = line.startswith("-")
    if include == "additions":
        return is_addition
    if include == "deletions":
        return is_deletion
    return is_addition or is_deletion


def _diff_code_lines(raw_lines: List[str]) -> List[str]:
    """Changed lines with the marker stripped, used for indent detection."""
    return [
        line[1:]
        for line in raw_lines
        if line.startswith(("+", "-")) and not line.startswith(("+++", "---"))
    ]


def parse_diff(
    diff: str,
    include: str = "additions",
    comment_pattern: CommentPattern = DEFAULT_COMMENT_PATTERN,
) -> ParseResult:
    """Parse a unified diff into counted lines.

    Header lines (``diff ``, ``index ``, ``+++``, ``---``, ``@@``) and context
    lines are never counted. Line numbers come from a counter bumped once per
    line that passes the header and include checks, before blank and comment
    filtering, so the numbering can have gaps and does not match either side
    of the diff.

    Args:
        diff: Unified diff text
        include: "additions", "deletions" or "both"
        comment_pattern: Regex marking comment lines, None to keep comments

    Raises:
        InvalidConfigError: If ``include`` is not a known choice
    """
    if include not in INCLUDE_CHOICES:
        raise InvalidConfigError("include", include, f"expected one of {', '.join(INCLUDE_CHOICES)}")

    pattern = compile_comment_pattern(comment_pattern)
    raw_lines = diff.split("\n")
    info = detect_indent("\n".join(_diff_code_lines(raw_lines)))
    unit = indent_unit(info)

    lines: List[CountedLine] = []
    line_number = 0
    for raw in raw_lines:
        if _is_diff_header(raw) or not _is_included(raw, include):
            continue

        line = raw[1:]
        trimmed = line.strip()
        line_number += 1

        if _is_skipped(line, trimmed, pattern):
            continue
        lines.append(
            CountedLine(line_number=line_number, depth=compute_indent_depth(line, unit), content=trimmed)
        )

    logger.debug(
        f"Parsed {len(lines)} counted {include} lines from diff (indent {info.indent!r}, unit {unit})"
    )
    return ParseResult(lines=lines, indent_unit=unit)
