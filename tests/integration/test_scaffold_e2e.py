"""Integration tests for the full generate run.

These tests drive the real generator against the bundled template in a
temporary directory and check that the resulting project is complete and
self-consistent.  No Node.js toolchain is required.
"""

from __future__ import annotations

import json
import re
from pathlib import Path

import pytest

from nodegen.cli import main
from nodegen.config import Config
from nodegen.scaffolder import ProjectGenerator


@pytest.mark.integration
class TestScaffoldValidation:
    """Test that the scaffolder generates complete projects."""

    async def test_bundled_template_project(self, tmp_path: Path) -> None:
        gen = ProjectGenerator(Config(cwd=tmp_path))
        result = await gen.generate("shop-api")
        root = result.target

        package = json.loads((root / "package.json").read_text(encoding="utf-8"))
        assert package == {
            "name": "shop-api",
            "version": "1.0.0",
            "main": "src/index.js",
            "scripts": {"start": "node src/index.js"},
            "dependencies": {
                "express": "^4.17.1",
                "dotenv": "^10.0.0",
                "mongoose": "^6.0.12",
                "body-parser": "^1.19.0",
            },
        }
        assert (root / "README.md").read_text(encoding="utf-8").startswith("# shop-api\n")
        assert (root / ".env").read_bytes() == b"MONGO_URI=your_mongo_uri_here\nPORT=3000\n"

    async def test_local_requires_resolve(self, tmp_path: Path) -> None:
        """Every relative ``require`` in the generated sources points at a file."""
        gen = ProjectGenerator(Config(cwd=tmp_path))
        result = await gen.generate("demo")
        src = result.target / "src"

        pattern = re.compile(r"require\('(\.{1,2}/[^']+)'\)")
        for js_file in src.rglob("*.js"):
            for rel in pattern.findall(js_file.read_text(encoding="utf-8")):
                base = (js_file.parent / rel).resolve()
                candidates = [base.with_suffix(".js"), base / "index.js"]
                assert any(c.is_file() for c in candidates), f"{js_file.name}: {rel}"

    async def test_required_packages_are_declared(self, tmp_path: Path) -> None:
        gen = ProjectGenerator(Config(cwd=tmp_path))
        result = await gen.generate("demo")
        declared = json.loads((result.target / "package.json").read_text(encoding="utf-8"))[
            "dependencies"
        ]

        pattern = re.compile(r"require\('([a-z@][^'./]*)'\)")
        for js_file in (result.target / "src").rglob("*.js"):
            for package in pattern.findall(js_file.read_text(encoding="utf-8")):
                assert package in declared, f"{js_file.name} requires {package}"


@pytest.mark.integration
class TestCliEndToEnd:
    def test_run_twice_rejects_second(self, tmp_path: Path, capsys, monkeypatch) -> None:
        monkeypatch.delenv("NODEGEN_TEMPLATE_DIR", raising=False)
        assert main(["demo"], cwd=tmp_path) == 0
        env_file = tmp_path / "demo" / ".env"
        env_file.write_text("MONGO_URI=mongodb://db/prod\n", encoding="utf-8")

        assert main(["demo"], cwd=tmp_path) == 1

        assert "already exists" in capsys.readouterr().err
        assert env_file.read_text(encoding="utf-8") == "MONGO_URI=mongodb://db/prod\n"
