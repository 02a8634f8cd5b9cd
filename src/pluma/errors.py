"""Exception classes for Pluma.

The tokenize/generate/serialize pipeline is total and never raises for any
input string. These exceptions are only raised at the file I/O edge.
"""

from __future__ import annotations

from pathlib import Path


class PlumaError(Exception):
    """Base exception for all Pluma errors.

    Subclass this for specific error categories.
    """

    pass


class SourceReadError(PlumaError):
    """Input Markdown file could not be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Initialize read error.

        Args:
            path: Path that failed to open
            reason: Underlying OS error message
        """
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: cannot read input: {reason}")


class OutputWriteError(PlumaError):
    """Rendered output could not be written."""

    def __init__(self, path: str | Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{self.path}: cannot write output: {reason}")
