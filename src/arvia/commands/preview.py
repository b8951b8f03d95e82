"""arvia preview - Serve the build output."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from arvia.cli import pass_context

if TYPE_CHECKING:
    from arvia.cli import ArviaContext


@click.command("preview")
@click.option("--host", type=str, default="127.0.0.1", help="Bind address")
@pass_context
def preview(ctx: ArviaContext, host: str) -> None:
    """Preview built project.

    Serves the build directory as-is (no live reload) on the port after
    the dev server's.
    """
    from arvia.errors import ConfigError
    from arvia.logging import print_info
    from arvia.server.lifecycle import preview_port, run_preview_server

    project = ctx.load_project()

    if not project.build_dir.is_dir():
        ctx.fail(ConfigError("Build not found. Run 'arvia build' first.", path=str(project.build_dir)))

    print_info("Starting preview server...")
    print_info(f"Serving: {project.build_dir}")
    print_info(f"URL: http://localhost:{preview_port(project)}")
    print_info("")
    print_info("Press Ctrl+C to stop")

    try:
        run_preview_server(project, host=host)
    except KeyboardInterrupt:
        print_info("\nShutting down...")


__all__ = ["preview"]
