"""Data models for the project generator.

``ProjectRequest`` is the validated user input, ``GeneratedFileSpec``
describes one file the generator may write, and ``GenerationResult`` is what a
successful run returns.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProjectRequest(BaseModel):
    """The project to create. Immutable for the run."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, used as directory and package name")

    @field_validator("name")
    @classmethod
    def _single_path_segment(cls, value: str) -> str:
        if not value:
            raise ValueError("project name must not be empty")
        if value in (".", ".."):
            raise ValueError(f"'{value}' is not a valid project name")
        if any(sep in value for sep in ("/", "\\", "\0")):
            raise ValueError(f"project name must be a single path segment: {value!r}")
        return value


@dataclass(frozen=True)
class GeneratedFileSpec:
    """A file the generator writes after copying the template tree.

    ``render`` is a pure function of the request, so content can be compared
    without touching the file system. When ``create_if_missing`` is set the
    file is only written if the template did not already provide it.
    """

    relative_path: str
    render: Callable[[ProjectRequest], str]
    create_if_missing: bool = True
    message: str = ""

    def content_for(self, request: ProjectRequest) -> str:
        return self.render(request)

    @property
    def created_message(self) -> str:
        return self.message or f"Created {self.relative_path}"


class GenerationResult(BaseModel):
    """Outcome of a successful generation run."""

    target: Path
    created: list[str] = Field(default_factory=list)
    skipped: list[str] = Field(default_factory=list)
