"""arvia init - Create a new project."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import click

from arvia.cli import pass_context
from arvia.scaffold import DEFAULT_PROJECT_NAME

if TYPE_CHECKING:
    from arvia.cli import ArviaContext


@click.command()
@click.argument("name", default=DEFAULT_PROJECT_NAME)
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing arvia.json")
@pass_context
def init(ctx: ArviaContext, name: str, force: bool) -> None:
    """Create a new Arvia project in directory NAME.

    \b
    Creates:
        NAME/src/index.html
        NAME/assets/css/style.css
        NAME/assets/js/app.js
        NAME/arvia.json
    """
    from arvia.errors import ArviaError, ExitCode
    from arvia.logging import print_error, print_info, print_success
    from arvia.scaffold import create_project

    print_info(f"Creating Arvia project: {name}")

    try:
        report = create_project(ctx.project_root, name, force=force)
    except ArviaError as e:
        ctx.fail(e)
    except OSError as e:
        print_error(f"Failed to create project: {e}")
        sys.exit(ExitCode.FATAL_ERROR)

    print_success(f"Project '{name}' created successfully!")
    print_info("Structure:")
    for line in report.tree_lines():
        print_info(f"   {line}")
    print_info("")
    print_info("Get started:")
    print_info(f"   cd {name}")
    print_info("   arvia serve")


__all__ = ["init"]
