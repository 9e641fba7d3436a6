"""Errors raised while loading weapon, monster kind and scenario definitions."""
from __future__ import annotations

from pathlib import Path


class DataError(Exception):
    """Base error for the definition layer; ``source`` names the offending file when known."""

    def __init__(self, message: str, *, source: Path | None = None) -> None:
        super().__init__(message)
        self.source = source


class DataLoadError(DataError):
    """A definition file could not be read or decoded."""


class DataValidationError(DataError):
    """A definition has the wrong shape, a bad value or a duplicated rank or name."""


class DataReferenceError(DataError):
    """A definition names a weapon or monster kind that is not defined."""
