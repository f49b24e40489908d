"""Fixed files written into every generated project.

``GENERATED_FILES`` is the ordered table the generator walks after copying
the template tree.  Contents are rendered from the Jinja2 templates in
``templates/`` except ``package.json``, which is serialised from
``DEFAULT_DEPENDENCIES``.
"""

from __future__ import annotations

import json
from typing import Any, Callable

from .models import GeneratedFileSpec, ProjectRequest
from .templates import TemplateRenderer


# ---------------------------------------------------------------------------
# package.json
# ---------------------------------------------------------------------------

DEFAULT_DEPENDENCIES: dict[str, str] = {
    "express": "^4.17.1",
    "dotenv": "^10.0.0",
    "mongoose": "^6.0.12",
    "body-parser": "^1.19.0",
}

ENTRY_POINT = "src/index.js"


def package_json_data(request: ProjectRequest) -> dict[str, Any]:
    """Return the ``package.json`` object for *request*."""
    return {
        "name": request.name,
        "version": "1.0.0",
        "main": ENTRY_POINT,
        "scripts": {"start": f"node {ENTRY_POINT}"},
        "dependencies": dict(DEFAULT_DEPENDENCIES),
    }


def render_package_json(request: ProjectRequest) -> str:
    return json.dumps(package_json_data(request), indent=2, ensure_ascii=False) + "\n"


# ---------------------------------------------------------------------------
# Template-backed files
# ---------------------------------------------------------------------------

_renderer = TemplateRenderer()


def _from_template(template_name: str) -> Callable[[ProjectRequest], str]:
    def render(request: ProjectRequest) -> str:
        return _renderer.render(template_name, {"name": request.name})

    return render


# Order only affects progress output; each write is independent.
GENERATED_FILES: tuple[GeneratedFileSpec, ...] = (
    GeneratedFileSpec(
        "package.json",
        render_package_json,
        message="Created package.json with default dependencies",
    ),
    GeneratedFileSpec(".gitignore", _from_template("gitignore.j2")),
    GeneratedFileSpec("README.md", _from_template("README.md.j2")),
    GeneratedFileSpec("src/app.js", _from_template("app.js.j2"), create_if_missing=False),
    GeneratedFileSpec("src/index.js", _from_template("index.js.j2"), create_if_missing=False),
    GeneratedFileSpec(
        ".env",
        _from_template("env.j2"),
        message="Created .env with MONGO_URI and PORT variables",
    ),
)
