"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from pathlib import Path


class ScaffoldError(Exception):
    """Base class for every failure that aborts a generator run."""


class InputError(ScaffoldError):
    """Raised when the operator's answers cannot be obtained."""


class EmissionError(ScaffoldError):
    """Raised when a directory or file cannot be written.

    Files rendered before the failure are left in place.
    """

    def __init__(self, path: str | Path, message: str) -> None:
        self.path = Path(path)
        super().__init__(f"{self.path}: {message}")
