"""Error types raised by the stub generation pipeline.

Every failure is fatal for the run. Catching `AutocompleteError` catches
enumeration, reflection and write errors alike; `stage` names the part of the
pipeline that failed so the CLI can report it.
"""

from __future__ import annotations

from pathlib import Path
from typing import ClassVar

__all__ = [
    'AutocompleteError',
    'EnumerationFailure',
    'ReflectionFailure',
    'WriteFailure',
]


class AutocompleteError(Exception):
    """Base exception for all autocomplete generation errors."""

    stage: ClassVar[str] = 'generation'

    def diagnostic(self) -> str:
        """Returns a one-line message naming the failed stage."""
        return f'{self.stage} failed: {self}'


class EnumerationFailure(AutocompleteError):
    """Raised when the callable catalog cannot be read."""

    stage = 'enumeration'


class ReflectionFailure(AutocompleteError):
    """Raised when one callable's parameter list cannot be introspected."""

    stage = 'reflection'

    def __init__(self, name: str, reason: str) -> None:
        super().__init__(f'cannot introspect {name!r}: {reason}')
        self.name = name


class WriteFailure(AutocompleteError):
    """Raised when the generated stub cannot be written to disk."""

    stage = 'write'

    def __init__(self, path: Path, reason: str) -> None:
        super().__init__(f'cannot write {path}: {reason}')
        self.path = path
