"""Tests for config discovery, models, and TodoSettings."""

from __future__ import annotations

from pathlib import Path

import click
import pytest
from pydantic import ValidationError

from todoctl.config.models import DisplayConfig, StorageConfig
from todoctl.config.settings import CONFIG_FILENAME, TodoSettings, find_config


def _write_config(root: Path, body: str) -> Path:
    path = root / CONFIG_FILENAME
    path.write_text(body, encoding="utf-8")
    return path


class TestModels:
    def test_defaults(self) -> None:
        storage, display = StorageConfig(), DisplayConfig()
        assert storage.key == "todoList"
        assert storage.data_dir == Path(".todoctl")
        assert display.width == 100

    def test_width_floor(self) -> None:
        with pytest.raises(ValidationError):
            DisplayConfig(width=5)


class TestDiscovery:
    def test_walks_up(self, tmp_path: Path) -> None:
        cfg = _write_config(tmp_path, "")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        assert find_config(nested) == cfg.resolve()

    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        cfg = _write_config(tmp_path, "")
        monkeypatch.setenv("TODOCTL_CONFIG", str(cfg))
        assert find_config(Path("/")) == cfg

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TODOCTL_CONFIG", str(tmp_path / "nope.toml"))
        assert find_config(tmp_path) is None


class TestTodoSettings:
    def test_defaults_without_config(self, tmp_path: Path) -> None:
        settings = TodoSettings.from_cli(project_root=tmp_path)
        assert settings.project_root == tmp_path
        assert settings.data_path == tmp_path / ".todoctl"
        assert settings.storage.ephemeral is False

    def test_toml_sections(self, tmp_path: Path) -> None:
        _write_config(
            tmp_path,
            '[storage]\nkey = "work"\ndata_dir = "lists"\n\n[display]\nshow_index = false\n',
        )
        settings = TodoSettings.from_cli(project_root=tmp_path)
        assert settings.config_path is not None
        assert settings.storage.key == "work"
        assert settings.data_path == tmp_path / "lists"
        assert settings.display.show_index is False

    def test_project_root_from_config_location(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        _write_config(tmp_path, "")
        nested = tmp_path / "sub"
        nested.mkdir()
        monkeypatch.chdir(nested)
        settings = TodoSettings.from_cli()
        assert settings.project_root.resolve() == tmp_path.resolve()

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        _write_config(tmp_path, '[storage]\nkey = "from-toml"\n')
        monkeypatch.setenv("TODOCTL_STORAGE__KEY", "from-env")
        settings = TodoSettings.from_cli(project_root=tmp_path)
        assert settings.storage.key == "from-env"

    def test_cli_overrides(self, tmp_path: Path) -> None:
        _write_config(tmp_path, '[storage]\ndata_dir = "lists"\n')
        settings = TodoSettings.from_cli(
            project_root=tmp_path,
            data_dir=tmp_path / "override",
            ephemeral=True,
            json_output=True,
        )
        assert settings.data_path == tmp_path / "override"
        assert settings.storage.ephemeral is True
        assert settings.json_output is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        other = tmp_path / "other.toml"
        other.write_text('[storage]\nkey = "explicit"\n', encoding="utf-8")
        settings = TodoSettings.from_cli(config_path=str(other), project_root=tmp_path)
        assert settings.storage.key == "explicit"

    def test_invalid_toml(self, tmp_path: Path) -> None:
        _write_config(tmp_path, "[storage\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TodoSettings.from_cli(project_root=tmp_path)

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TodoSettings.from_cli(project_root=tmp_path)
        with pytest.raises(ValidationError):
            settings.quiet = True  # type: ignore[misc]
