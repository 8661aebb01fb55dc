"""Exception types raised while producing a dependency report."""

from __future__ import annotations

from pathlib import Path


class PkgDepsError(Exception):
    """Base class for all pkgdeps errors."""


class RecordDecodeError(PkgDepsError):
    """One input line could not be decoded into a dependency record.

    Recoverable: the extractor logs it, skips the line and moves on.
    """

    def __init__(self, line: str, reason: str, line_number: int | None = None):
        self.line = line
        self.reason = reason
        self.line_number = line_number
        where = f"line {line_number}" if line_number is not None else "line"
        super().__init__(f"Could not decode {where}: {reason}")


class InputUnavailableError(PkgDepsError):
    """The input source cannot be opened or read."""

    def __init__(self, path: Path | str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Input file '{path}' is unavailable: {reason}")


class OutputUnwritableError(PkgDepsError):
    """The report destination cannot be created or written."""

    def __init__(self, path: Path | str, reason: str):
        self.path = path
        self.reason = reason
        super().__init__(f"Cannot write output '{path}': {reason}")
