"""Dev and preview server lifecycle.

Both servers run in the foreground under uvicorn. Ctrl+C (SIGINT) or
SIGTERM triggers uvicorn's graceful shutdown: the listener stops, open
connections are closed, and the dev app's lifespan teardown stops the
file watcher and drops every live-reload session.
"""

from __future__ import annotations

import logging

import uvicorn
from fastapi import FastAPI
from starlette.staticfiles import StaticFiles

from arvia.config import ProjectConfig, ServerSettings
from arvia.errors import ConfigError

logger = logging.getLogger(__name__)

# The preview server listens next to the dev server
PREVIEW_PORT_OFFSET = 1


def check_source(project: ProjectConfig) -> None:
    """Raise ConfigError unless the source directory exists."""
    if not project.source_dir.is_dir():
        raise ConfigError(
            f"Source directory '{project.source_dir}' not found",
            path=str(project.source_dir),
        )


def run_dev_server(project: ProjectConfig, settings: ServerSettings | None = None) -> None:
    """Serve the project with live reload until interrupted.

    Args:
        project: Project configuration with absolute directories
        settings: Server settings (default: read from ARVIA_* env)

    Raises:
        ConfigError: If the source directory does not exist
    """
    from arvia.server.app import create_app

    check_source(project)
    cfg = settings or ServerSettings()

    app = create_app(project, cfg)
    logger.debug(f"Starting dev server on {cfg.host}:{project.port}")
    uvicorn.run(
        app,
        host=cfg.host,
        port=project.port,
        log_level="warning",
    )


def create_preview_app(project: ProjectConfig) -> FastAPI:
    """Bare static file server over the build output."""
    if not project.build_dir.is_dir():
        raise ConfigError(
            "Build not found. Run 'arvia build' first.",
            path=str(project.build_dir),
        )

    app = FastAPI(
        title="Arvia Preview",
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.mount("/", StaticFiles(directory=project.build_dir, html=True), name="build")
    return app


def preview_port(project: ProjectConfig) -> int:
    return project.port + PREVIEW_PORT_OFFSET


def run_preview_server(project: ProjectConfig, host: str = "127.0.0.1") -> None:
    """Serve the build output until interrupted.

    Raises:
        ConfigError: If the project has not been built yet
    """
    app = create_preview_app(project)
    uvicorn.run(app, host=host, port=preview_port(project), log_level="warning")


__all__ = [
    "check_source",
    "run_dev_server",
    "create_preview_app",
    "preview_port",
    "run_preview_server",
]
