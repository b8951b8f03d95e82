"""arvia serve - Development server with live reload."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arvia.cli import pass_context

if TYPE_CHECKING:
    from arvia.cli import ArviaContext


@click.command("serve")
@click.option("--host", type=str, default=None, help="Bind address (default: ARVIA_HOST or 127.0.0.1)")
@click.option("--no-reload", is_flag=True, help="Serve without watching for changes")
@pass_context
def serve(ctx: ArviaContext, host: str | None, no_reload: bool) -> None:
    """Start development server with live reload.

    Serves the source directory at the configured port. Saving any file
    under the source or assets directory reloads every open page.

    \b
    Examples:
        arvia serve              # http://localhost:8080
        arvia serve --no-reload  # Plain serving, no file watcher
    """
    from arvia.config import ServerSettings
    from arvia.errors import ArviaError
    from arvia.logging import print_info
    from arvia.server.lifecycle import check_source, run_dev_server

    project = ctx.load_project()

    overrides: dict[str, object] = {}
    if host is not None:
        overrides["host"] = host
    if no_reload:
        overrides["live_reload"] = False
    settings = ServerSettings(**overrides)

    try:
        check_source(project)
    except ArviaError as e:
        ctx.fail(e)

    print_info("Starting Arvia development server...")
    print_info(f"Serving: {project.source_dir}")
    print_info(f"URL: http://localhost:{project.port}")
    print_info(f"Live reload: {'enabled' if settings.live_reload else 'disabled'}")
    print_info("")
    print_info("Press Ctrl+C to stop")

    try:
        run_dev_server(project, settings)
    except ArviaError as e:
        ctx.fail(e)
    except KeyboardInterrupt:
        print_info("\nShutting down...")


__all__ = ["serve"]
