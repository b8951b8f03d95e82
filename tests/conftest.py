"""Shared fixtures: a small Arvia project on disk."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from arvia.config import ProjectConfig

INDEX_HTML = "<!DOCTYPE html>\n<html><body>Hi</body></html>\n"


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Create a project with a source tree, an assets tree and arvia.json."""
    root = tmp_path / "site"
    (root / "src" / "js").mkdir(parents=True)
    (root / "src" / "blog").mkdir()
    (root / "assets" / "css").mkdir(parents=True)

    (root / "src" / "index.html").write_text(INDEX_HTML)
    (root / "src" / "about.html").write_text("<html><body><div></div></body></html>")
    (root / "src" / "blog" / "index.html").write_text("<html><body>Blog</body></html>")
    (root / "src" / "js" / "main.js").write_text("console.log('main');\n")
    (root / "assets" / "css" / "style.css").write_text("body { color: red; }\n")

    (root / "arvia.json").write_text(
        json.dumps(
            {
                "name": "site",
                "version": "0.1.0",
                "source": "src",
                "build": "dist",
                "assets": "assets",
                "port": 8080,
            }
        )
    )
    return root


@pytest.fixture
def project(project_dir: Path) -> ProjectConfig:
    """Loaded configuration of the fixture project."""
    return ProjectConfig.load(project_dir)
