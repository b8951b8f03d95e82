"""Tests for Arvia configuration."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from pydantic import ValidationError

from arvia.config import ProjectConfig, ServerSettings
from arvia.errors import ConfigError, ExitCode


class TestProjectConfig:
    """Test descriptor loading and defaults."""

    def test_defaults(self) -> None:
        """Defaults match the scaffolded descriptor."""
        config = ProjectConfig()
        assert config.name == "arvia-app"
        assert config.version == "1.0.0"
        assert config.source_dir == Path("src")
        assert config.build_dir == Path("dist")
        assert config.assets_dir == Path("assets")
        assert config.port == 8080

    def test_load_resolves_directories(self, project_dir: Path) -> None:
        """Relative directories are anchored at the project root."""
        config = ProjectConfig.load(project_dir)
        root = project_dir.resolve()
        assert config.name == "site"
        assert config.version == "0.1.0"
        assert config.source_dir == root / "src"
        assert config.build_dir == root / "dist"
        assert config.assets_dir == root / "assets"

    def test_load_missing_descriptor(self, tmp_path: Path) -> None:
        """A missing arvia.json is a precondition error."""
        with pytest.raises(ConfigError, match="arvia.json not found") as exc_info:
            ProjectConfig.load(tmp_path)
        assert exc_info.value.exit_code == ExitCode.CONFIG_ERROR

    def test_load_invalid_json(self, tmp_path: Path) -> None:
        """Malformed JSON is reported as a config error."""
        (tmp_path / "arvia.json").write_text("{not json")
        with pytest.raises(ConfigError, match="Error parsing config"):
            ProjectConfig.load(tmp_path)

    def test_load_rejects_non_positive_port(self, tmp_path: Path) -> None:
        """Port must be a positive integer."""
        (tmp_path / "arvia.json").write_text(json.dumps({"port": 0}))
        with pytest.raises(ConfigError):
            ProjectConfig.load(tmp_path)

    def test_load_partial_descriptor_uses_defaults(self, tmp_path: Path) -> None:
        """Keys missing from the descriptor fall back to defaults."""
        (tmp_path / "arvia.json").write_text(json.dumps({"name": "tiny", "port": 3000}))
        config = ProjectConfig.load(tmp_path)
        assert config.name == "tiny"
        assert config.port == 3000
        assert config.source_dir == tmp_path.resolve() / "src"

    def test_absolute_directories_kept(self, tmp_path: Path) -> None:
        """Absolute directories are not re-anchored."""
        elsewhere = tmp_path / "elsewhere"
        config = ProjectConfig(source=elsewhere).resolve(tmp_path / "root")
        assert config.source_dir == elsewhere

    def test_frozen(self) -> None:
        """Configuration is immutable after load."""
        config = ProjectConfig()
        with pytest.raises(ValidationError):
            config.port = 9000  # type: ignore[misc]

    def test_to_json_uses_descriptor_keys(self) -> None:
        """to_json writes the arvia.json key names."""
        data = json.loads(ProjectConfig(name="demo").to_json())
        assert data == {
            "name": "demo",
            "version": "1.0.0",
            "source": "src",
            "build": "dist",
            "assets": "assets",
            "port": 8080,
        }


class TestServerSettings:
    """Test dev server settings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default values."""
        for var in ("ARVIA_HOST", "ARVIA_DEBOUNCE_MS", "ARVIA_RELOAD_PATH", "ARVIA_LIVE_RELOAD"):
            monkeypatch.delenv(var, raising=False)
        settings = ServerSettings()
        assert settings.host == "127.0.0.1"
        assert settings.debounce_ms == 100
        assert settings.reload_path == "/ws"
        assert settings.live_reload is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """ARVIA_* environment variables override defaults."""
        monkeypatch.setenv("ARVIA_DEBOUNCE_MS", "250")
        monkeypatch.setenv("ARVIA_LIVE_RELOAD", "false")
        settings = ServerSettings()
        assert settings.debounce_ms == 250
        assert settings.live_reload is False

    def test_reload_path_gets_leading_slash(self) -> None:
        """A bare endpoint name is made absolute."""
        assert ServerSettings(reload_path="livereload").reload_path == "/livereload"
