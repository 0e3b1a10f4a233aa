"""Configuration loading for indent-complexity.

Configuration sources are merged in priority order:
    1. Defaults (defined in ComplexityConfig)
    2. Global config (~/.indent-complexity.toml)
    3. Project config (./indent-complexity.toml)
    4. Explicit config file
    5. Environment variables (INDENT_COMPLEXITY_* prefix)
    6. Keyword overrides (typically CLI flags)

Example project config::

    include = "both"
    fail_on = "high"

    [thresholds]
    medium = 3
    high = 8

Example:
    >>> config = load_config(high_threshold=8)
    >>> config.thresholds
    Thresholds(medium=4.0, high=8)
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from numbers import Real
from pathlib import Path
from typing import Any, Literal, Optional, Pattern, get_type_hints

from .constants import DEFAULT_COMMENT_PATTERN, DEFAULT_THRESHOLDS, INCLUDE_CHOICES, LEVEL_ORDER
from .exceptions import ConfigurationError, InvalidConfigError
from .models import IncludeMode, Thresholds

ENV_PREFIX = "INDENT_COMPLEXITY_"

GLOBAL_CONFIG_NAME = ".indent-complexity.toml"
PROJECT_CONFIG_NAME = "indent-complexity.toml"


@dataclass(frozen=True)
class ComplexityConfig:
    """Options for an analysis run.

    Attributes:
        Assessment:
            medium_threshold: Score at or above this is 'medium'
            high_threshold: Score at or above this is 'high'
            fail_on: Level that makes the CLI exit non-zero (None = never)

        Line filtering:
            comment_pattern: Regex source for comment lines
            filter_comments: False keeps comment lines in the analysis
            include: Diff lines to analyze (additions/deletions/both)

        Output:
            verbose: Report all statistical moments
            include_lines: Report per-line depths (implies verbose)
    """

    medium_threshold: float = DEFAULT_THRESHOLDS.medium
    high_threshold: float = DEFAULT_THRESHOLDS.high
    fail_on: Optional[str] = None

    comment_pattern: str = DEFAULT_COMMENT_PATTERN.pattern
    filter_comments: bool = True
    include: IncludeMode = "additions"

    verbose: bool = False
    include_lines: bool = False

    def __post_init__(self) -> None:
        """Validate option values. Thresholds are not related to each other."""
        for field_name in ("medium_threshold", "high_threshold"):
            value = getattr(self, field_name)
            if isinstance(value, bool) or not isinstance(value, Real):
                raise ValueError(f"{field_name} must be a number, got {value!r}")
        if self.include not in INCLUDE_CHOICES:
            raise ValueError(f"include must be one of {', '.join(INCLUDE_CHOICES)}")
        if self.fail_on is not None and self.fail_on not in LEVEL_ORDER:
            raise ValueError(f"fail_on must be one of {', '.join(LEVEL_ORDER)}")
        try:
            re.compile(self.comment_pattern)
        except re.error as e:
            raise ValueError(f"comment_pattern is not a valid regex: {e}")

    @property
    def thresholds(self) -> Thresholds:
        return Thresholds(medium=self.medium_threshold, high=self.high_threshold)

    @property
    def pattern(self) -> Optional[Pattern[str]]:
        """Compiled comment pattern, or None when comment filtering is off."""
        if not self.filter_comments:
            return None
        if self.comment_pattern == DEFAULT_COMMENT_PATTERN.pattern:
            return DEFAULT_COMMENT_PATTERN
        return re.compile(self.comment_pattern)

    def fails(self, level: str) -> bool:
        """True if ``level`` reaches the configured fail_on level."""
        if self.fail_on is None:
            return False
        return LEVEL_ORDER.index(level) >= LEVEL_ORDER.index(self.fail_on)


def load_config(config_file: Optional[Path] = None, **overrides) -> ComplexityConfig:
    """Load configuration with auto-discovery and merging.

    Args:
        config_file: Optional explicit config file path
        **overrides: Direct overrides; None values are ignored

    Returns:
        Validated ComplexityConfig instance

    Raises:
        ConfigurationError: If a config file is missing or unreadable
        InvalidConfigError: If a value is rejected
    """
    merged: dict = {}

    global_config = Path.home() / GLOBAL_CONFIG_NAME
    if global_config.exists():
        merged.update(_read_config_file(global_config, "global config"))

    project_config = Path.cwd() / PROJECT_CONFIG_NAME
    if project_config.exists():
        merged.update(_read_config_file(project_config, "project config"))

    if config_file is not None:
        if not config_file.exists():
            raise ConfigurationError(f"Config file not found: {config_file}")
        merged.update(_read_config_file(config_file, "config file"))

    merged.update(_load_env_vars())
    merged.update({k: v for k, v in overrides.items() if v is not None})

    try:
        return ComplexityConfig(**merged)
    except TypeError as e:
        # Unknown field
        raise ConfigurationError(f"Invalid configuration: {e}")
    except ValueError as e:
        raise InvalidConfigError("config", merged, str(e))


def _read_config_file(path: Path, label: str) -> dict[str, Any]:
    try:
        data = _load_toml_file(path)
    except ConfigurationError:
        raise
    except Exception as e:
        raise ConfigurationError(f"Invalid {label} '{path}': {e}")
    return _flatten_thresholds(data, path)


def _flatten_thresholds(data: dict[str, Any], path: Path) -> dict[str, Any]:
    """Map a [thresholds] table onto medium_threshold/high_threshold."""
    thresholds = data.pop("thresholds", None)
    if thresholds is None:
        return data
    if not isinstance(thresholds, dict):
        raise InvalidConfigError("thresholds", thresholds, f"expected a table in {path}")

    for name, value in thresholds.items():
        if name not in ("medium", "high"):
            raise InvalidConfigError(f"thresholds.{name}", value, "unknown threshold")
        data[f"{name}_threshold"] = value
    return data


def _load_env_vars() -> dict[str, Any]:
    """Load configuration from INDENT_COMPLEXITY_* environment variables.

    Supported environment variables:
        INDENT_COMPLEXITY_MEDIUM_THRESHOLD: float
        INDENT_COMPLEXITY_HIGH_THRESHOLD: float
        INDENT_COMPLEXITY_FAIL_ON: low/medium/high
        INDENT_COMPLEXITY_COMMENT_PATTERN: regex
        INDENT_COMPLEXITY_FILTER_COMMENTS: bool (true/false/1/0)
        INDENT_COMPLEXITY_INCLUDE: additions/deletions/both
        INDENT_COMPLEXITY_VERBOSE: bool
        INDENT_COMPLEXITY_INCLUDE_LINES: bool
    """
    type_hints = get_type_hints(ComplexityConfig)

    result: dict[str, Any] = {}
    for field_name in ComplexityConfig.__dataclass_fields__:
        env_key = f"{ENV_PREFIX}{field_name.upper()}"
        env_value = os.environ.get(env_key)
        if env_value is None:
            continue

        try:
            parsed = _parse_env_value(env_value, type_hints[field_name])
        except ValueError as e:
            raise InvalidConfigError(env_key, env_value, str(e))
        if parsed is not None:
            result[field_name] = parsed

    return result


def _parse_env_value(value: str, type_hint: Any) -> Any:
    """Parse an environment variable string to the field's type."""
    # Optional[X] is Union[X, None]
    args = getattr(type_hint, "__args__", ())
    origin = getattr(type_hint, "__origin__", None)
    if type(None) in args:
        non_none = [t for t in args if t is not type(None)]
        if non_none:
            type_hint = non_none[0]
            origin = getattr(type_hint, "__origin__", None)

    if type_hint is bool:
        lower = value.lower()
        if lower in ("true", "1", "yes", "on"):
            return True
        elif lower in ("false", "0", "no", "off"):
            return False
        else:
            raise ValueError(f"expected true/false, got '{value}'")

    if type_hint is float:
        return float(value)

    if type_hint is str or origin is Literal:
        return value

    return None


def _load_toml_file(path: Path) -> dict:
    """Load TOML file and return parsed dict.

    Raises:
        ConfigurationError: If tomllib/tomli not available
        Exception: If TOML parsing fails
    """
    try:
        # Python 3.11+ has tomllib in stdlib
        import tomllib
    except ModuleNotFoundError:
        try:
            import tomli as tomllib  # type: ignore
        except ImportError:
            raise ConfigurationError(
                "TOML support requires Python 3.11+ or 'tomli' package. "
                "Install with: pip install tomli"
            )

    with open(path, "rb") as f:
        return tomllib.load(f)
