"""Public API for indent-complexity.

Uses statistical moments of indentation as a language-agnostic proxy for
code complexity (Hindle, Godfrey and Holt, "Reading Beside the Lines").

Example:
    >>> from indent_complexity import analyze_complexity, analyze_diff_complexity
    >>>
    >>> result = analyze_complexity(source)
    >>> result.score, result.level
    (1.2, 'low')
    >>>
    >>> detailed = analyze_complexity(source, verbose=True)
    >>> detailed.variance, detailed.max
    (0.56, 2)
    >>>
    >>> # Only the added lines of a change
    >>> analyze_diff_complexity(diff_text, include="additions").level
    'medium'

Every call is a pure function of its arguments: the indent unit and all
statistics are re-derived on each call.
"""

from __future__ import annotations

from .assessment import ThresholdOverrides
from .constants import DEFAULT_COMMENT_PATTERN
from .logging_config import get_logger
from .models import ComplexityResult, LineComplexityResult, VerboseComplexityResult
from .parser import CommentPattern, parse_content, parse_diff
from .result_builder import build_result

logger = get_logger(__name__)


def analyze_complexity(
    content: str,
    *,
    comment_pattern: CommentPattern = DEFAULT_COMMENT_PATTERN,
    thresholds: ThresholdOverrides = None,
    verbose: bool = False,
    include_lines: bool = False,
) -> ComplexityResult:
    """Analyze indentation-based complexity of source text.

    Args:
        content: Source code
        comment_pattern: Regex for comment lines; None keeps comments.
            A custom pattern replaces the default one.
        thresholds: Partial or full override of {medium: 4, high: 10}
        verbose: Return a VerboseComplexityResult
        include_lines: Return a LineComplexityResult (implies verbose)

    Returns:
        ComplexityResult, VerboseComplexityResult or LineComplexityResult
    """
    parsed = parse_content(content, comment_pattern=comment_pattern)
    result = build_result(
        parsed.lines, verbose=verbose, include_lines=include_lines, thresholds=thresholds
    )
    logger.debug(f"Content score {result.score:.2f} ({result.level}) over {len(parsed.lines)} lines")
    return result


def analyze_diff_complexity(
    diff: str,
    *,
    include: str = "additions",
    comment_pattern: CommentPattern = DEFAULT_COMMENT_PATTERN,
    thresholds: ThresholdOverrides = None,
    verbose: bool = False,
    include_lines: bool = False,
) -> ComplexityResult:
    """Analyze complexity of the changed lines of a unified diff.

    Useful for git hooks, CI pipelines and review tooling: only added lines
    are scored by default, context lines never are.

    Args:
        diff: Unified diff text
        include: "additions" (default), "deletions" or "both"
        comment_pattern: Regex for comment lines; None keeps comments
        thresholds: Partial or full override of {medium: 4, high: 10}
        verbose: Return a VerboseComplexityResult
        include_lines: Return a LineComplexityResult (implies verbose)

    Raises:
        InvalidConfigError: If ``include`` is not a known choice
    """
    parsed = parse_diff(diff, include=include, comment_pattern=comment_pattern)
    result = build_result(
        parsed.lines, verbose=verbose, include_lines=include_lines, thresholds=thresholds
    )
    logger.debug(f"Diff score {result.score:.2f} ({result.level}) over {len(parsed.lines)} lines")
    return result


def analyze(text: str, *, diff: bool = False, **options) -> ComplexityResult:
    """Score, level and reason only."""
    options.update(verbose=False, include_lines=False)
    if diff:
        return analyze_diff_complexity(text, **options)
    return analyze_complexity(text, **options)


def analyze_verbose(text: str, *, diff: bool = False, **options) -> VerboseComplexityResult:
    """Score plus all statistical moments and the depth histogram."""
    options.update(verbose=True, include_lines=False)
    if diff:
        return analyze_diff_complexity(text, **options)  # type: ignore[return-value]
    return analyze_complexity(text, **options)  # type: ignore[return-value]


def analyze_with_lines(text: str, *, diff: bool = False, **options) -> LineComplexityResult:
    """Verbose result plus per-line depth detail."""
    options.update(verbose=True, include_lines=True)
    if diff:
        return analyze_diff_complexity(text, **options)  # type: ignore[return-value]
    return analyze_complexity(text, **options)  # type: ignore[return-value]
