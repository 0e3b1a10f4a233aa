"""Score-based complexity assessment."""

from __future__ import annotations

from dataclasses import dataclass, fields, replace
from decimal import ROUND_HALF_UP, Decimal
from typing import Mapping, Optional, Union

from .constants import DEFAULT_THRESHOLDS
from .exceptions import InvalidConfigError
from .models import ComplexityLevel, Thresholds

ThresholdOverrides = Optional[Union[Thresholds, Mapping[str, float]]]

_THRESHOLD_FIELDS = frozenset(f.name for f in fields(Thresholds))


@dataclass(frozen=True)
class Assessment:
    level: ComplexityLevel
    reason: str


def resolve_thresholds(user_thresholds: ThresholdOverrides = None) -> Thresholds:
    """Merge user thresholds over the defaults.

    Accepts a full Thresholds or a partial mapping such as ``{"high": 6}``.
    Values are taken as-is; ``medium > high`` is the caller's business.
    """
    if user_thresholds is None:
        return DEFAULT_THRESHOLDS
    if isinstance(user_thresholds, Thresholds):
        return user_thresholds

    unknown = set(user_thresholds) - _THRESHOLD_FIELDS
    if unknown:
        raise InvalidConfigError(
            "thresholds", dict(user_thresholds), f"unknown keys: {', '.join(sorted(unknown))}"
        )
    overrides = {k: v for k, v in user_thresholds.items() if v is not None}
    return replace(DEFAULT_THRESHOLDS, **overrides)


def _format_score(score: float) -> str:
    """One decimal, ties rounded up (4.25 -> 4.3)."""
    return str(Decimal(score).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))


def _format_threshold(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return repr(value)


def assess_complexity(score: float, thresholds: Thresholds) -> Assessment:
    """Classify a score. High is checked first; lower bounds are inclusive."""
    if score >= thresholds.high:
        return Assessment(
            level="high",
            reason=f"Score {_format_score(score)} exceeds high threshold "
            f"({_format_threshold(thresholds.high)})",
        )

    if score >= thresholds.medium:
        return Assessment(
            level="medium",
            reason=f"Score {_format_score(score)} exceeds medium threshold "
            f"({_format_threshold(thresholds.medium)})",
        )

    return Assessment(level="low", reason="Score indicates simple, low-nesting code")
