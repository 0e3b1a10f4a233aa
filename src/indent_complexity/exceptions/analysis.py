"""Input exceptions raised around the analysis core."""

from pathlib import Path

from .base import IndentComplexityError


class AnalysisError(IndentComplexityError):
    """Base class for errors while collecting input for analysis."""

    pass


class FileAccessError(AnalysisError):
    """Raised when a file cannot be accessed or read."""

    def __init__(self, filepath: Path, reason: str):
        super().__init__(
            f"Cannot access file: {filepath}",
            details={"filepath": str(filepath), "reason": reason},
        )
        self.filepath = filepath
        self.reason = reason


class DiffSourceError(AnalysisError):
    """Raised when a diff cannot be obtained from git."""

    def __init__(self, command: str, reason: str):
        super().__init__(
            f"Could not obtain diff from: {command}",
            details={"command": command, "reason": reason},
        )
        self.command = command
        self.reason = reason
