"""Main scaffolding orchestrator.

Takes a project name, copies the bundled template tree into ``<cwd>/<name>``
and backfills the fixed files listed in ``GENERATED_FILES``.  Every step is
sequential and fails fast; partial output is left on disk.
"""

from __future__ import annotations

import asyncio
import shutil
from collections.abc import Sequence
from pathlib import Path

from pydantic import ValidationError

from nodegen.config import Config
from nodegen.errors import AlreadyExistsError, CopyError, UnexpectedError, WriteError
from nodegen.utils import path_exists, print_info, print_success, write_text

from .files import GENERATED_FILES
from .models import GeneratedFileSpec, GenerationResult, ProjectRequest


class ProjectGenerator:
    """Creates a new Node.js project from the template source.

    The run has three steps:
    - refuse to touch a target path that already exists
    - copy the template tree verbatim
    - write each ``GeneratedFileSpec``, skipping ``create_if_missing`` files
      the template already supplied
    """

    def __init__(
        self,
        config: Config | None = None,
        files: Sequence[GeneratedFileSpec] = GENERATED_FILES,
    ) -> None:
        self.config = config or Config()
        self.files = tuple(files)

    # -- Public API --------------------------------------------------------

    async def generate(self, name: str, cwd: str | Path | None = None) -> GenerationResult:
        """Generate the project *name* under *cwd*.

        Args:
            name: Project name; becomes the directory and package name.
            cwd: Parent directory. Defaults to ``config.resolved_cwd()``.

        Returns:
            A ``GenerationResult`` listing created and skipped files.

        Raises:
            AlreadyExistsError: ``<cwd>/<name>`` is already occupied.
            CopyError: The template tree could not be copied.
            WriteError: A generated file could not be written.
            UnexpectedError: *name* is not a valid path segment.
        """
        request = build_request(name)
        parent = Path(cwd) if cwd is not None else self.config.resolved_cwd()
        target = parent / request.name

        # Not atomic with the copy below; a concurrent writer surfaces as CopyError.
        if await asyncio.to_thread(path_exists, target):
            raise AlreadyExistsError(target)

        await self.copy_template(target)
        return await self.backfill(target, request)

    async def copy_template(self, target: Path) -> None:
        """Recursively copy the template source into *target*."""
        source = self.config.template_dir
        try:
            await asyncio.to_thread(shutil.copytree, source, target)
        except OSError as exc:
            raise CopyError(source, target, str(exc)) from exc

    async def backfill(self, target: Path, request: ProjectRequest) -> GenerationResult:
        """Write every generated file into *target*.

        Files marked ``create_if_missing`` are left untouched when present.
        """
        result = GenerationResult(target=target)
        for spec in self.files:
            path = target / spec.relative_path
            if spec.create_if_missing and await asyncio.to_thread(path_exists, path):
                result.skipped.append(spec.relative_path)
                print_info(f"Skipped {spec.relative_path} (already exists)")
                continue

            content = spec.content_for(request)
            try:
                await asyncio.to_thread(write_text, path, content)
            except OSError as exc:
                raise WriteError(path, str(exc)) from exc
            result.created.append(spec.relative_path)
            print_success(spec.created_message)

        return result


def build_request(name: str) -> ProjectRequest:
    """Validate *name* into a ``ProjectRequest``."""
    try:
        return ProjectRequest(name=name)
    except ValidationError as exc:
        reason = "; ".join(err["msg"] for err in exc.errors())
        raise UnexpectedError(f"Invalid project name {name!r}: {reason}") from exc
