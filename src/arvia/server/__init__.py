"""Arvia dev server - static serving with live reload.

Provides a foreground development server that:
- Serves the project's source tree, with /assets/ falling back to the assets tree
- Injects a live-reload client into every HTML page it serves
- Watches source and assets for writes, debounced to one reload per burst
- Pushes the reload to every connected browser tab over WebSocket

Example:
    Start the server from the CLI:

        $ arvia serve
        Serving: /home/me/my-app/src
        URL: http://localhost:8080

    Or use the Python API:

        >>> from arvia.config import ProjectConfig, ServerSettings
        >>> from arvia.server import run_dev_server
        >>>
        >>> project = ProjectConfig.load(".")
        >>> run_dev_server(project, ServerSettings(debounce_ms=200))

Endpoints:
    GET /{path}           - Page or asset (HTML gets the reload client)
    GET /__arvia/status   - Server status and session count
    WS  /ws               - Live-reload session
"""

from arvia.server.app import AppState, create_app
from arvia.server.content import inject_reload_script, reload_script, resolve_request
from arvia.server.events import DebounceGate, FileChange
from arvia.server.hub import ReloadHub
from arvia.server.lifecycle import create_preview_app, run_dev_server, run_preview_server
from arvia.server.watcher import FileWatcher, collect_watch_set

__all__ = [
    # App
    "create_app",
    "AppState",
    # Content
    "inject_reload_script",
    "reload_script",
    "resolve_request",
    # Events
    "DebounceGate",
    "FileChange",
    # Hub
    "ReloadHub",
    # Lifecycle
    "run_dev_server",
    "create_preview_app",
    "run_preview_server",
    # Watcher
    "FileWatcher",
    "collect_watch_set",
]
