"""Centralized path definitions for Arvia projects.

An Arvia project looks like:

    my-app/
    ├── arvia.json      # Project descriptor
    ├── src/            # Pages served (and built) 1:1
    ├── assets/         # Served under /assets/, copied to dist/assets/
    └── dist/           # Build output (recreated by `arvia build`)
"""

from __future__ import annotations

from pathlib import Path

# Project descriptor stays at project root
CONFIG_FILE = "arvia.json"

# Subdirectory of the build output receiving the assets tree
BUILD_ASSETS_DIR = "assets"

# Page served for "/" and for directory requests
INDEX_FILE = "index.html"


def get_config_path(root: Path | str = ".") -> Path:
    """Get the project descriptor path.

    Args:
        root: Project root directory (default: current directory)

    Returns:
        Path to arvia.json
    """
    return Path(root).resolve() / CONFIG_FILE


def is_within(path: Path, base: Path) -> bool:
    """Return True if path resolves to base or somewhere beneath it."""
    try:
        path.resolve().relative_to(base.resolve())
    except ValueError:
        return False
    return True


__all__ = [
    "CONFIG_FILE",
    "BUILD_ASSETS_DIR",
    "INDEX_FILE",
    "get_config_path",
    "is_within",
]
