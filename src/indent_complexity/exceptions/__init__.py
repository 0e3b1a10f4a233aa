"""Exception hierarchy for indent-complexity."""

from .analysis import AnalysisError, DiffSourceError, FileAccessError
from .base import IndentComplexityError
from .config import ConfigurationError, InvalidConfigError

__all__ = [
    "IndentComplexityError",
    "AnalysisError",
    "FileAccessError",
    "DiffSourceError",
    "ConfigurationError",
    "InvalidConfigError",
]
