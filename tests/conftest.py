"""Shared pytest fixtures for the nodegen test suite.

Provides reusable fixtures for:
- An empty working directory new projects are created in
- A small custom template source tree
- Configs and generators wired to either template source
"""

from __future__ import annotations

from pathlib import Path

import pytest

from nodegen.config import Config
from nodegen.scaffolder import ProjectGenerator, ProjectRequest


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def work_dir(tmp_path: Path) -> Path:
    """Empty directory that plays the role of the process cwd."""
    cwd = tmp_path / "work"
    cwd.mkdir()
    return cwd


@pytest.fixture
def custom_template(tmp_path: Path) -> Path:
    """A minimal template source with one nested file and no backfill targets."""
    root = tmp_path / "template"
    (root / "src" / "routes").mkdir(parents=True)
    (root / "src" / "routes" / "userRoutes.js").write_text(
        "module.exports = {};\n", encoding="utf-8"
    )
    (root / "LICENSE").write_text("MIT\n", encoding="utf-8")
    return root


# ---------------------------------------------------------------------------
# Configs & generators
# ---------------------------------------------------------------------------

@pytest.fixture
def config(work_dir: Path) -> Config:
    """Config using the bundled template, rooted at ``work_dir``."""
    return Config(cwd=work_dir)


@pytest.fixture
def custom_config(work_dir: Path, custom_template: Path) -> Config:
    """Config using ``custom_template``, rooted at ``work_dir``."""
    return Config(cwd=work_dir, template_dir=custom_template)


@pytest.fixture
def generator(config: Config) -> ProjectGenerator:
    return ProjectGenerator(config)


@pytest.fixture
def custom_generator(custom_config: Config) -> ProjectGenerator:
    return ProjectGenerator(custom_config)


@pytest.fixture
def demo_request() -> ProjectRequest:
    return ProjectRequest(name="demo")
