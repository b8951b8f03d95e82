"""arvia build - Build the project for deployment."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from arvia.cli import pass_context

if TYPE_CHECKING:
    from arvia.cli import ArviaContext


@click.command("build")
@click.option("--json", "as_json", is_flag=True, help="Print the build report as JSON")
@pass_context
def build(ctx: ArviaContext, as_json: bool) -> None:
    """Build project for production.

    Recreates the build directory as a copy of the source directory, with
    the assets directory (if any) copied to <build>/assets.
    """
    from arvia.builder import build_project
    from arvia.errors import ArviaError
    from arvia.logging import print_info, print_success, print_warning

    project = ctx.load_project()

    if not as_json:
        print_info("Building Arvia project...")

    try:
        report = build_project(project)
    except ArviaError as e:
        ctx.fail(e)

    if as_json:
        click.echo(json.dumps(report.to_dict(), indent=2))
        return

    for warning in report.warnings:
        print_warning(warning)
    print_success(f"Copied {len(report.files)} files")
    if report.assets_copied:
        print_success("Copied assets")
    print_success(f"Build completed: {project.build_dir}")
    print_info("Ready for deployment!")


__all__ = ["build"]
