"""Exceptions raised while generating a project.

Every error is terminal for the run. The generator raises them; only the CLI
catches them, reports the message and exits non-zero.
"""

from __future__ import annotations

from pathlib import Path


class GenerationError(Exception):
    """Base class for every failure of a generation run."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class AlreadyExistsError(GenerationError):
    """Raised when the target path is already occupied."""

    def __init__(self, target: Path) -> None:
        self.target = target
        super().__init__(f"Directory {target.name} already exists.")


class CopyError(GenerationError):
    """Raised when the template tree cannot be copied into the target."""

    def __init__(self, source: Path, target: Path, reason: str) -> None:
        self.source = source
        self.target = target
        super().__init__(f"Failed to copy template {source} to {target}: {reason}")


class WriteError(GenerationError):
    """Raised when a single generated file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        super().__init__(f"Failed to write {path}: {reason}")


class UnexpectedError(GenerationError):
    """Raised for malformed arguments and anything else not covered above."""
