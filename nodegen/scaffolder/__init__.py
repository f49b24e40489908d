"""nodegen scaffolder -- creates new Node.js + Express + MongoDB projects.

Copies the bundled template tree into ``<cwd>/<name>`` and backfills
``package.json``, ``.gitignore``, ``README.md``, ``.env`` and the ``src/``
entry points.

Quick usage::

    from nodegen.scaffolder import ProjectGenerator

    generator = ProjectGenerator()
    result = await generator.generate("my-project", cwd="/tmp/output")
"""

from nodegen.scaffolder.files import DEFAULT_DEPENDENCIES, GENERATED_FILES
from nodegen.scaffolder.generator import ProjectGenerator, build_request
from nodegen.scaffolder.models import GeneratedFileSpec, GenerationResult, ProjectRequest
from nodegen.scaffolder.templates import TemplateRenderer

__all__ = [
    "DEFAULT_DEPENDENCIES",
    "GENERATED_FILES",
    "GeneratedFileSpec",
    "GenerationResult",
    "ProjectGenerator",
    "ProjectRequest",
    "TemplateRenderer",
    "build_request",
]
