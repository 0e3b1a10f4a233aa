"""Assemble tiered results from counted lines."""

from __future__ import annotations

from typing import List

from .assessment import ThresholdOverrides, assess_complexity, resolve_thresholds
from .math import DepthStatistics
from .models import (
    ComplexityResult,
    CountedLine,
    LineComplexityResult,
    LineDetail,
    VerboseComplexityResult,
)


def build_result(
    lines: List[CountedLine],
    verbose: bool = False,
    include_lines: bool = False,
    thresholds: ThresholdOverrides = None,
) -> ComplexityResult:
    """Build the result tier selected by ``verbose`` and ``include_lines``.

    ``include_lines`` implies the verbose fields.
    """
    depths = [line.depth for line in lines]
    stats = DepthStatistics.compute(depths)
    assessment = assess_complexity(stats.score, resolve_thresholds(thresholds))

    if not verbose and not include_lines:
        return ComplexityResult(score=stats.score, level=assessment.level, reason=assessment.reason)

    verbose_fields = dict(
        score=stats.score,
        level=assessment.level,
        reason=assessment.reason,
        line_count=len(lines),
        max=stats.max,
        variance=stats.variance,
        mean=stats.mean,
        std_dev=stats.std_dev,
        median=stats.median,
        sum=stats.sum,
        depth_histogram=DepthStatistics.histogram(depths),
    )

    if include_lines:
        details = [
            LineDetail(line=line.line_number, depth=line.depth, content=line.content) for line in lines
        ]
        return LineComplexityResult(**verbose_fields, lines=details)

    return VerboseComplexityResult(**verbose_fields)
