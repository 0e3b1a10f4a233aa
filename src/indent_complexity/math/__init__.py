"""Mathematical utilities for indentation analysis."""

from .statistics import DepthStatistics, StatisticalMoments

__all__ = [
    "DepthStatistics",
    "StatisticalMoments",
]
