"""Data models for indentation complexity results.

Results come in three tiers, each a strict superset of the previous one:

    ComplexityResult          score, level, reason
    VerboseComplexityResult   + line_count, max, variance, mean, std_dev,
                                median, sum, depth_histogram
    LineComplexityResult      + lines (per-line depth detail)
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal

ComplexityLevel = Literal["low", "medium", "high"]
IncludeMode = Literal["additions", "deletions", "both"]


@dataclass(frozen=True)
class CountedLine:
    """A retained source line with its computed depth."""

    line_number: int  # 1-based; diff-local counter for diffs
    depth: int
    content: str  # trimmed


@dataclass(frozen=True)
class LineDetail:
    """Per-line record attached to LineComplexityResult."""

    line: int
    depth: int
    content: str


@dataclass(frozen=True)
class Thresholds:
    """Score cut points for complexity levels.

    A score at or above ``medium`` is medium, at or above ``high`` is high.
    ``medium < high`` is expected but not enforced; with ``medium > high``
    the medium tier is unreachable for scores between the two.
    """

    medium: float = 4.0
    high: float = 10.0


@dataclass(frozen=True)
class ComplexityResult:
    """Default analysis result."""

    score: float  # sum(depth^2) / line_count
    level: ComplexityLevel
    reason: str

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class VerboseComplexityResult(ComplexityResult):
    """Result with the full set of statistical moments."""

    line_count: int
    max: int
    variance: float
    mean: float
    std_dev: float
    median: float
    sum: int
    depth_histogram: Dict[int, int] = field(default_factory=dict)


@dataclass(frozen=True)
class LineComplexityResult(VerboseComplexityResult):
    """Verbose result plus line-by-line depth detail."""

    lines: List[LineDetail] = field(default_factory=list)
