"""Arvia CLI - static-site toolchain command-line interface."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TYPE_CHECKING, Literal, NoReturn

from dotenv import load_dotenv

# Load .env before anything reads ARVIA_* settings
load_dotenv()

import click  # noqa: E402

from arvia import __version__  # noqa: E402
from arvia.commands.lazy import LazyGroup  # noqa: E402

if TYPE_CHECKING:
    from arvia.config import ProjectConfig
    from arvia.errors import ArviaError

VerbosityLevel = Literal["quiet", "normal", "verbose"]


class ArviaContext:
    """Shared context for CLI commands."""

    def __init__(self) -> None:
        self.project_root: Path = Path(".")
        self.verbosity: VerbosityLevel = "normal"
        self.debug: bool = False

    def load_project(self) -> ProjectConfig:
        """Load arvia.json from the project root, exiting on failure."""
        from arvia.config import ProjectConfig
        from arvia.errors import ConfigError

        try:
            return ProjectConfig.load(self.project_root)
        except ConfigError as e:
            self.fail(e)

    def fail(self, error: ArviaError) -> NoReturn:
        """Report an Arvia error and exit with its exit code."""
        from arvia.logging import print_error

        print_error(error.message)
        sys.exit(error.exit_code)


pass_context = click.make_pass_decorator(ArviaContext, ensure=True)


# Define lazy subcommands: name -> (module_path, attribute_name)
LAZY_COMMANDS: dict[str, tuple[str, str]] = {
    "init": ("arvia.commands.init_cmd", "init"),
    "serve": ("arvia.commands.serve", "serve"),
    "build": ("arvia.commands.build", "build"),
    "preview": ("arvia.commands.preview", "preview"),
}

# Aliases (still work, not listed in --help)
HIDDEN_COMMANDS: dict[str, tuple[str, str]] = {
    "dev": ("arvia.commands.serve", "serve"),
}


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_COMMANDS, hidden_subcommands=HIDDEN_COMMANDS)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@click.option("-q", "--quiet", is_flag=True, help="Suppress non-error output")
@click.option("--debug", is_flag=True, help="Show full tracebacks on errors")
@click.option(
    "--project",
    "-C",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    default=".",
    help="Project root containing arvia.json (default: current directory)",
)
@click.version_option(version=__version__, prog_name="Arvia Framework")
@pass_context
def cli(
    ctx: ArviaContext,
    verbose: bool,
    quiet: bool,
    debug: bool,
    project: Path,
) -> None:
    """Arvia - simple static-site development.

    \b
    Commands:
      init [name]  Create new project
      serve        Start development server with live reload
      build        Build project for production
      preview      Preview built project

    \b
    Examples:
      arvia init my-app
      cd my-app
      arvia serve
      arvia build

    Use --debug to show full tracebacks on errors.
    """
    from arvia.logging import setup_logging

    ctx.debug = debug
    ctx.project_root = project

    if quiet:
        ctx.verbosity = "quiet"
    elif verbose:
        ctx.verbosity = "verbose"
    else:
        ctx.verbosity = "normal"

    setup_logging(ctx.verbosity)


def main() -> None:
    """Entry point for the CLI."""
    debug_mode = "--debug" in sys.argv

    try:
        cli()
    except click.ClickException:
        raise
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        from arvia.errors import ExitCode
        from arvia.logging import print_error, print_info

        print_error(f"Error: {e}")
        if debug_mode:
            print_info("")
            print_info("Full traceback (--debug mode):")
            import traceback

            traceback.print_exc()
        else:
            print_info("")
            print_info("Run with --debug for full traceback.")

        sys.exit(ExitCode.FATAL_ERROR)


if __name__ == "__main__":
    main()
