"""Indentation unit detection.

Infers the dominant indentation step of a text by counting how often each
indentation *difference* between consecutive indented lines occurs:

    "s2" used 14 times, "s4" used 3 times  ->  2 spaces per level

A changed difference counts as one use of the (type, difference) key. A line
at the same indentation as the previous one adds one unit of weight to the
previous key, which only matters for breaking ties between equally used keys.
Single-space indents are skipped on a first pass (they are mostly block
comment continuations like `` * foo``) and only used if nothing else is found.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Literal, Optional, Tuple

IndentType = Literal["space", "tab"]

_INDENT_RE = re.compile(r"^(?:( )+|\t+)")

_IndentKey = Tuple[str, int]


@dataclass(frozen=True)
class IndentInfo:
    """Detected indentation convention.

    ``amount`` is 0 and ``type`` is None when the text has no indentation.
    """

    amount: int
    type: Optional[IndentType]

    @property
    def indent(self) -> str:
        if self.type == "tab":
            return "\t" * self.amount
        if self.type == "space":
            return " " * self.amount
        return ""


def _make_indents_map(text: str, ignore_single_spaces: bool) -> Dict[_IndentKey, list]:
    indents: Dict[_IndentKey, list] = {}
    previous_size = 0
    previous_type: Optional[str] = None
    key: Optional[_IndentKey] = None

    for line in text.split("\n"):
        if not line:
            continue

        match = _INDENT_RE.match(line)
        if match is None:
            previous_size = 0
            previous_type = None
            continue

        size = len(match.group(0))
        indent_type = "space" if match.group(1) else "tab"

        if ignore_single_spaces and indent_type == "space" and size == 1:
            continue

        if indent_type != previous_type:
            previous_size = 0
        previous_type = indent_type

        difference = size - previous_size
        previous_size = size

        if difference == 0:
            # Same indent as the previous line: reuse its key, tie-break weight only
            use, weight = 0, 1
        else:
            use, weight = 1, 0
            key = (indent_type, abs(difference))

        entry = indents.get(key)
        if entry is None:
            indents[key] = [1, 0]
        else:
            entry[0] += use
            entry[1] += weight

    return indents


def _most_used_key(indents: Dict[_IndentKey, list]) -> Optional[_IndentKey]:
    result = None
    max_used = 0
    max_weight = 0
    for key, (used, weight) in indents.items():
        if used > max_used or (used == max_used and weight > max_weight):
            max_used = used
            max_weight = weight
            result = key
    return result


def detect_indent(text: str) -> IndentInfo:
    """Detect the indentation step used in ``text``.

    Args:
        text: Source text (any language)

    Returns:
        IndentInfo with the most used step, or ``IndentInfo(0, None)``
    """
    indents = _make_indents_map(text, ignore_single_spaces=True)
    if not indents:
        indents = _make_indents_map(text, ignore_single_spaces=False)

    key = _most_used_key(indents)
    if key is None:
        return IndentInfo(amount=0, type=None)

    indent_type, amount = key
    return IndentInfo(amount=amount, type=indent_type)  # type: ignore[arg-type]


def indent_unit(info: IndentInfo) -> int:
    """Columns per depth level: 1 for tabs, the detected step for spaces."""
    if info.type == "tab":
        return 1
    return info.amount or 1
