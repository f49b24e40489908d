"""nodegen configuration.

Typed configuration for the project generator. Settings use a Pydantic v2
model so they are validated at construction time and can be overridden from
environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

__version__ = "1.0.0"

PROGRAM_NAME = "create-node-app"

DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "scaffolder" / "skeleton"


class Config(BaseModel):
    """Global nodegen configuration.

    Instances are created once by the CLI entry point (usually through
    :meth:`from_env`) and handed to ``ProjectGenerator``.
    """

    template_dir: Path = Field(
        default=DEFAULT_TEMPLATE_DIR,
        description="Template source tree copied into every new project",
    )
    cwd: Path | None = Field(
        default=None,
        description="Parent directory for new projects (process cwd when unset)",
    )
    version: str = Field(default=__version__)
    program_name: str = Field(default=PROGRAM_NAME)

    def resolved_cwd(self) -> Path:
        """Return the directory new projects are created in."""
        return self.cwd if self.cwd is not None else Path.cwd()

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            NODEGEN_TEMPLATE_DIR
        """
        kwargs: dict[str, Path] = {}
        if os.environ.get("NODEGEN_TEMPLATE_DIR"):
            kwargs["template_dir"] = Path(os.environ["NODEGEN_TEMPLATE_DIR"])
        return cls(**kwargs)
