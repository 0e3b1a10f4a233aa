"""
indent-complexity - Indentation-Based Complexity Scoring

Language-agnostic complexity signal from the statistical moments of
indentation depth, for whole files or the changed lines of a diff.
No parsing: the shape of the whitespace is the measurement.
"""

__version__ = "1.0.0"

from .api import (
    analyze,
    analyze_complexity,
    analyze_diff_complexity,
    analyze_verbose,
    analyze_with_lines,
)
from .constants import DEFAULT_COMMENT_PATTERN, DEFAULT_THRESHOLDS
from .models import (
    ComplexityLevel,
    ComplexityResult,
    LineComplexityResult,
    LineDetail,
    Thresholds,
    VerboseComplexityResult,
)

__all__ = [
    "analyze_complexity",  # Whole source text
    "analyze_diff_complexity",  # Changed lines of a unified diff
    "analyze",
    "analyze_verbose",
    "analyze_with_lines",
    "ComplexityLevel",
    "ComplexityResult",
    "VerboseComplexityResult",
    "LineComplexityResult",
    "LineDetail",
    "Thresholds",
    "DEFAULT_COMMENT_PATTERN",
    "DEFAULT_THRESHOLDS",
]
