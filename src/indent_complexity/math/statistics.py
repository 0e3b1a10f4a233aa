"""Statistical moments of indentation depth.

    score     = sum(d^2) / n          (headline metric)
    variance  = sum((d - mean)^2) / n (population variance)

Since score = variance + mean^2, a single deeply nested line raises the
score even in an otherwise flat file, while variance alone would partly
cancel it against the mean.
"""

from collections import Counter
from dataclasses import dataclass
from typing import Dict, Sequence

import numpy as np


@dataclass(frozen=True)
class StatisticalMoments:
    """Aggregate statistics over a list of depths."""

    score: float
    sum: int
    mean: float
    variance: float
    std_dev: float
    median: float
    max: int


_EMPTY = StatisticalMoments(
    score=0.0, sum=0, mean=0.0, variance=0.0, std_dev=0.0, median=0.0, max=0
)


class DepthStatistics:
    """Statistics over per-line indentation depths."""

    @staticmethod
    def compute(depths: Sequence[int]) -> StatisticalMoments:
        """
        Compute all moments from one array of depths.

        Args:
            depths: Non-negative integer depths, in any order

        Returns:
            StatisticalMoments; all zeros for empty input
        """
        if len(depths) == 0:
            return _EMPTY

        # Canonical order keeps float sums independent of line order
        arr = np.sort(np.asarray(depths, dtype=np.int64))
        as_float = arr.astype(np.float64)

        mean = float(np.mean(as_float))
        variance = float(np.mean((as_float - mean) ** 2))

        return StatisticalMoments(
            score=float(np.mean(as_float**2)),
            sum=int(np.sum(arr)),
            mean=mean,
            variance=variance,
            std_dev=float(np.sqrt(variance)),
            median=float(np.median(as_float)),
            max=int(np.max(arr)),
        )

    @staticmethod
    def histogram(depths: Sequence[int]) -> Dict[int, int]:
        """Count of lines per depth, only for depths that occur, ascending."""
        counts = Counter(int(d) for d in depths)
        return {depth: counts[depth] for depth in sorted(counts)}
