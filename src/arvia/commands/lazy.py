"""Lazy-loading Click group for fast CLI startup."""

from __future__ import annotations

import importlib
from typing import Any

import click


class LazyGroup(click.Group):
    """A Click group that lazily loads subcommands on first access.

    Server commands pull in FastAPI, uvicorn and watchfiles; deferring the
    import keeps ``arvia build`` and ``arvia --help`` fast.
    """

    def __init__(
        self,
        *args: Any,
        lazy_subcommands: dict[str, tuple[str, str]] | None = None,
        hidden_subcommands: dict[str, tuple[str, str]] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize lazy group.

        Args:
            lazy_subcommands: Dict mapping command name to (module_path, attr_name)
                Example: {'build': ('arvia.commands.build', 'build')}
            hidden_subcommands: Same mapping, for commands left out of --help
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands: dict[str, tuple[str, str]] = lazy_subcommands or {}
        self._hidden_subcommands: dict[str, tuple[str, str]] = hidden_subcommands or {}
        self._loaded_commands: dict[str, click.Command] = {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List visible commands (lazy + already registered)."""
        base = super().list_commands(ctx)
        lazy = list(self._lazy_subcommands.keys())
        return sorted(set(base + lazy))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get command, loading lazily if needed."""
        if cmd_name in self._loaded_commands:
            return self._loaded_commands[cmd_name]

        cmd = super().get_command(ctx, cmd_name)
        if cmd is not None:
            return cmd

        target = self._lazy_subcommands.get(cmd_name) or self._hidden_subcommands.get(cmd_name)
        if target is None:
            return None

        module_path, attr_name = target
        try:
            module = importlib.import_module(module_path)
            loaded_cmd: click.Command = getattr(module, attr_name)
        except (ImportError, AttributeError) as e:
            raise click.ClickException(f"Failed to load command '{cmd_name}': {e}") from None
        self._loaded_commands[cmd_name] = loaded_cmd
        return loaded_cmd


__all__ = ["LazyGroup"]
