"""FastAPI application for the Arvia dev server.

Serves the project's source tree with the live-reload client injected
into HTML pages, falls back to the assets tree under /assets/, and pushes
a reload over WebSocket whenever the watcher accepts a file change.
"""

from __future__ import annotations

import logging
import time
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, HTTPException, Response, WebSocket, WebSocketDisconnect
from fastapi.responses import FileResponse
from pydantic import BaseModel, Field

from arvia import __version__
from arvia.config import ProjectConfig, ServerSettings
from arvia.server.content import Origin, inject_reload_script, resolve_request
from arvia.server.events import FileChange
from arvia.server.hub import ReloadHub
from arvia.server.watcher import FileWatcher

logger = logging.getLogger(__name__)

NO_CACHE = {"Cache-Control": "no-cache"}

# Reserved prefix for the dev server's own endpoints
INTERNAL_PREFIX = "/__arvia"


class StatusResponse(BaseModel):
    """Response model for the dev server status endpoint."""

    status: str = Field(description="Server status (running)")
    name: str = Field(description="Project name")
    version: str = Field(description="Project version")
    source_dir: str = Field(description="Directory being served")
    sessions: int = Field(description="Connected live-reload sessions")
    live_reload: bool = Field(description="Whether the file watcher is running")
    uptime_seconds: float = Field(description="Server uptime in seconds")


class AppState:
    """Shared state of one dev server instance."""

    def __init__(self, project: ProjectConfig, settings: ServerSettings) -> None:
        self.project = project
        self.settings = settings
        self.start_time = time.time()
        self.hub = ReloadHub()
        self.watcher: FileWatcher | None = None

    @property
    def live_reload_active(self) -> bool:
        return self.watcher is not None and self.watcher.is_running


def create_app(project: ProjectConfig, settings: ServerSettings | None = None) -> FastAPI:
    """Create the dev server application.

    Args:
        project: Project configuration with absolute directories
        settings: Server settings (default: read from ARVIA_* env)

    Returns:
        Configured FastAPI application
    """
    settings = settings or ServerSettings()
    state = AppState(project, settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Start the watcher on startup; stop it and drop sessions on shutdown."""
        if settings.live_reload:

            async def on_file_change(change: FileChange) -> None:
                await state.hub.broadcast()

            state.watcher = FileWatcher(
                [project.source_dir, project.assets_dir],
                on_file_change,
                debounce_ms=settings.debounce_ms,
                step_ms=settings.watch_step_ms,
            )
            await state.watcher.start()

        yield

        logger.debug("Shutting down dev server")
        if state.watcher:
            await state.watcher.stop()
        await state.hub.close_all()

    app = FastAPI(
        title="Arvia Dev Server",
        version=__version__,
        lifespan=lifespan,
        # The whole URL space belongs to the site being served
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )
    app.state.dev = state

    # -------------------------------------------------------------------------
    # Live-reload WebSocket
    # -------------------------------------------------------------------------

    @app.websocket(settings.reload_path)
    async def reload_endpoint(websocket: WebSocket) -> None:
        """One session per browser tab; inbound data is discarded."""
        await websocket.accept()
        await state.hub.register(websocket)
        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    break
        except (WebSocketDisconnect, RuntimeError) as e:
            logger.debug(f"Live-reload session read ended: {e!r}")
        finally:
            await state.hub.unregister(websocket)

    # -------------------------------------------------------------------------
    # Diagnostics
    # -------------------------------------------------------------------------

    @app.get(f"{INTERNAL_PREFIX}/status", response_model=StatusResponse)
    async def get_status() -> StatusResponse:
        """Report the project being served and connected sessions."""
        return StatusResponse(
            status="running",
            name=project.name,
            version=project.version,
            source_dir=str(project.source_dir),
            sessions=state.hub.session_count,
            live_reload=state.live_reload_active,
            uptime_seconds=time.time() - state.start_time,
        )

    # -------------------------------------------------------------------------
    # Content
    # -------------------------------------------------------------------------

    @app.get("/{request_path:path}")
    def serve_content(request_path: str) -> Response:
        """Serve a page or asset, injecting the reload client into HTML."""
        resolved = resolve_request(request_path, project)
        if resolved is None:
            raise HTTPException(status_code=404, detail="File not found")

        if resolved.is_html:
            try:
                html = resolved.path.read_bytes()
            except OSError as e:
                logger.warning(f"Could not read {resolved.path}: {e}")
                raise HTTPException(status_code=404, detail="File not found") from e
            body = inject_reload_script(html, project.port, settings.reload_path)
            return Response(content=body, headers={"Content-Type": "text/html", **NO_CACHE})

        if resolved.origin is Origin.ASSETS:
            return FileResponse(resolved.path, headers=NO_CACHE)
        return FileResponse(resolved.path)

    return app


__all__ = ["create_app", "AppState", "StatusResponse"]
