"""Build pipeline: mirror source and assets into a clean output directory.

    dist/            <- src/ copied 1:1
    dist/assets/     <- assets/ copied 1:1 (only if assets/ exists)

No manifest is written and nothing is transformed; file bytes are copied
verbatim and directory permission bits are preserved.
"""

from __future__ import annotations

import logging
import os
import shutil
from pathlib import Path
from typing import Any

from arvia.config import ProjectConfig
from arvia.errors import BuildError, ConfigError
from arvia.paths import BUILD_ASSETS_DIR

logger = logging.getLogger(__name__)


class BuildReport:
    """Result of one build run."""

    def __init__(self, build_dir: Path) -> None:
        self.build_dir = build_dir
        self.files: list[str] = []
        self.directories: list[str] = []
        self.warnings: list[str] = []
        self.assets_copied: bool = False

    def add_warning(self, message: str) -> None:
        """Record a non-fatal problem (e.g. stale output not removed)."""
        self.warnings.append(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert report to dictionary for JSON output."""
        return {
            "build_dir": str(self.build_dir),
            "files": len(self.files),
            "directories": len(self.directories),
            "assets_copied": self.assets_copied,
            "warnings": self.warnings,
        }


def clean_build_dir(build_dir: Path, report: BuildReport) -> None:
    """Remove a previous build, best-effort.

    Failure is recorded as a warning; the build then overwrites in place.
    """
    if not build_dir.exists():
        return
    try:
        shutil.rmtree(build_dir)
    except OSError as e:
        message = f"Could not clean build directory: {e}"
        logger.warning(message)
        report.add_warning(message)


def _reraise(error: OSError) -> None:
    raise error


def copy_tree(src: Path, dst: Path, report: BuildReport) -> None:
    """Recursively mirror ``src`` into ``dst``.

    Raises:
        BuildError: On the first directory or file that cannot be copied
    """
    src = src.resolve()
    dst = dst.resolve()

    try:
        for dirpath, dirnames, filenames in os.walk(src, onerror=_reraise):
            current = Path(dirpath)
            # Never copy the output into itself when it lives inside src
            dirnames[:] = sorted(d for d in dirnames if (current / d).resolve() != dst)
            target = dst / current.relative_to(src)

            try:
                target.mkdir(parents=True, exist_ok=True)
                shutil.copymode(current, target)
            except OSError as e:
                raise BuildError(f"Error creating directory {target}: {e}", path=str(target)) from e
            report.directories.append(str(target))

            for name in sorted(filenames):
                source_file = current / name
                try:
                    shutil.copyfile(source_file, target / name)
                except OSError as e:
                    raise BuildError(
                        f"Error copying {source_file}: {e}", path=str(source_file)
                    ) from e
                report.files.append(str(target / name))
    except OSError as e:
        path = getattr(e, "filename", None) or str(src)
        raise BuildError(f"Error reading {path}: {e}", path=str(path)) from e


def build_project(config: ProjectConfig) -> BuildReport:
    """Produce the deployable bundle for ``config``.

    Missing assets are skipped; assets that exist but cannot be copied
    fail the build just like source files do. Partial output is left on
    disk when a build fails.

    Args:
        config: Project configuration with absolute directories

    Returns:
        BuildReport describing what was written

    Raises:
        ConfigError: If the source directory does not exist
        BuildError: If any source or asset file cannot be copied
    """
    if not config.source_dir.is_dir():
        raise ConfigError(
            f"Source directory '{config.source_dir}' not found",
            path=str(config.source_dir),
        )

    report = BuildReport(config.build_dir)
    clean_build_dir(config.build_dir, report)

    copy_tree(config.source_dir, config.build_dir, report)
    logger.info(f"Copied source files from {config.source_dir}")

    if config.assets_dir.exists():
        if not config.assets_dir.is_dir():
            raise BuildError(
                f"Assets path is not a directory: {config.assets_dir}",
                path=str(config.assets_dir),
            )
        copy_tree(config.assets_dir, config.build_dir / BUILD_ASSETS_DIR, report)
        report.assets_copied = True
        logger.info(f"Copied assets from {config.assets_dir}")
    else:
        logger.debug(f"No assets directory at {config.assets_dir}, skipping")

    return report


__all__ = ["BuildReport", "build_project", "clean_build_dir", "copy_tree"]
