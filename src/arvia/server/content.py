"""Request path resolution and HTML rewriting for the dev server.

Pages come from the source tree, falling back to the assets tree under
the ``/assets/`` prefix. HTML pages get the live-reload client spliced in
before their closing body tag.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from arvia.config import ProjectConfig
from arvia.paths import INDEX_FILE, is_within

ASSETS_PREFIX = "/assets/"
BODY_CLOSE = b"</body>"

RELOAD_SCRIPT_TEMPLATE = """
<script>
    (function () {{
        const ws = new WebSocket('ws://' + location.hostname + ':{port}{path}');
        ws.onmessage = function (event) {{
            if (event.data === 'reload') {{
                location.reload();
            }}
        }};
    }})();
</script>"""


class Origin(str, Enum):
    """Which tree a request was resolved against."""

    SOURCE = "source"
    ASSETS = "assets"


@dataclass(frozen=True)
class ResolvedFile:
    """A request path resolved to a file on disk."""

    path: Path
    origin: Origin

    @property
    def is_html(self) -> bool:
        return self.origin is Origin.SOURCE and self.path.name.endswith(".html")


def reload_script(port: int, reload_path: str = "/ws") -> str:
    """Live-reload client that reloads the page when it receives 'reload'."""
    return RELOAD_SCRIPT_TEMPLATE.format(port=port, path=reload_path)


def inject_reload_script(html: bytes, port: int, reload_path: str = "/ws") -> bytes:
    """Splice the reload client in front of the last ``</body>``.

    Documents without a closing body tag are returned unchanged.
    """
    idx = html.rfind(BODY_CLOSE)
    if idx == -1:
        return html
    script = reload_script(port, reload_path).encode("utf-8")
    return html[:idx] + script + html[idx:]


def _lookup(root: Path, relative: str) -> Path | None:
    """Join ``relative`` onto ``root``; None if missing or outside root."""
    candidate = root / relative.lstrip("/")
    if not is_within(candidate, root):
        return None
    if candidate.is_dir():
        candidate = candidate / INDEX_FILE
        # The index itself may be a link pointing elsewhere
        if not is_within(candidate, root):
            return None
    if candidate.is_file():
        return candidate.resolve()
    return None


def resolve_request(request_path: str, config: ProjectConfig) -> ResolvedFile | None:
    """Resolve a URL path against the source tree, then the assets tree.

    Args:
        request_path: URL path, with or without leading slash
        config: Project configuration with absolute directories

    Returns:
        The file to serve, or None for a not-found response
    """
    path = "/" + request_path.lstrip("/")
    if path == "/":
        path = "/" + INDEX_FILE

    found = _lookup(config.source_dir, path)
    if found is not None:
        return ResolvedFile(found, Origin.SOURCE)

    relative = path[len(ASSETS_PREFIX):] if path.startswith(ASSETS_PREFIX) else path
    found = _lookup(config.assets_dir, relative)
    if found is not None:
        return ResolvedFile(found, Origin.ASSETS)

    return None


__all__ = [
    "ASSETS_PREFIX",
    "Origin",
    "ResolvedFile",
    "reload_script",
    "inject_reload_script",
    "resolve_request",
]
