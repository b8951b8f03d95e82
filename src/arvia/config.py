"""Configuration models for Arvia projects and the dev server."""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from arvia.errors import ConfigError
from arvia.paths import CONFIG_FILE, get_config_path


class ProjectConfig(BaseModel):
    """Project descriptor loaded from arvia.json.

    Immutable once loaded. Directory fields keep the JSON keys of the
    descriptor (``source``, ``build``, ``assets``) as aliases.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(default="arvia-app", description="Project name")
    version: str = Field(default="1.0.0", description="Project version")
    source_dir: Path = Field(
        default=Path("src"),
        alias="source",
        description="Directory served and built 1:1",
    )
    build_dir: Path = Field(
        default=Path("dist"),
        alias="build",
        description="Build output directory (recreated on every build)",
    )
    assets_dir: Path = Field(
        default=Path("assets"),
        alias="assets",
        description="Assets directory, served under /assets/",
    )
    port: PositiveInt = Field(default=8080, description="Dev server port")

    @classmethod
    def load(cls, root: Path | str = ".") -> ProjectConfig:
        """Load and validate the descriptor of the project at ``root``.

        Relative directories are resolved against ``root``.

        Raises:
            ConfigError: If arvia.json is missing, unreadable or invalid
        """
        config_path = get_config_path(root)
        if not config_path.exists():
            raise ConfigError(
                f"{CONFIG_FILE} not found. Run 'arvia init' first.",
                path=str(config_path),
            )

        try:
            raw = config_path.read_text(encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Error reading config: {e}", path=str(config_path)) from e

        try:
            config = cls.model_validate_json(raw)
        except ValidationError as e:
            raise ConfigError(f"Error parsing config: {e}", path=str(config_path)) from e

        return config.resolve(config_path.parent)

    def resolve(self, root: Path | str) -> ProjectConfig:
        """Return a copy whose directories are absolute, anchored at ``root``."""
        base = Path(root).resolve()

        def _anchor(path: Path) -> Path:
            return path if path.is_absolute() else (base / path).resolve()

        return self.model_copy(
            update={
                "source_dir": _anchor(self.source_dir),
                "build_dir": _anchor(self.build_dir),
                "assets_dir": _anchor(self.assets_dir),
            }
        )

    def to_json(self) -> str:
        """Serialize to the indented descriptor format written by ``init``."""
        return json.dumps(self.model_dump(mode="json", by_alias=True), indent=2)


class ServerSettings(BaseSettings):
    """Dev server settings, overridable through ARVIA_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="ARVIA_", extra="ignore")

    host: str = Field(
        default="127.0.0.1",
        description="Address the dev server binds to",
    )
    debounce_ms: int = Field(
        default=100,
        ge=0,
        description="Quiet interval between two accepted file changes",
    )
    reload_path: str = Field(
        default="/ws",
        description="WebSocket endpoint the injected script connects to",
    )
    live_reload: bool = Field(
        default=True,
        description="Watch the project and push reloads to browsers",
    )
    watch_step_ms: int = Field(
        default=50,
        gt=0,
        description="How long watchfiles waits for further changes before yielding a batch",
    )

    @field_validator("reload_path")
    @classmethod
    def _absolute_reload_path(cls, value: str) -> str:
        if not value.startswith("/"):
            return f"/{value}"
        return value


__all__ = ["ProjectConfig", "ServerSettings"]
