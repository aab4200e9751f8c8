"""Unit tests for adapters/config/loader.py."""

from pathlib import Path

import pytest
from sitedeploy.adapters.config.loader import ConfigLoader
from sitedeploy.core.exceptions import ConfigError


class TestConfigLoader:
    """Tests for ConfigLoader priority handling."""

    def test_load_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "deploy.toml"
        path.write_text('mode = "generate"\n[sections.www]\nremote = "ftp://host/"\n')
        cfg = ConfigLoader().load(toml_path=path, use_env=False)
        assert cfg == {"mode": "generate", "sections": {"www": {"remote": "ftp://host/"}}}

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            ConfigLoader().load_toml(tmp_path / "missing.toml")

    def test_invalid_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "deploy.toml"
        path.write_text("mode = ")
        with pytest.raises(ConfigError, match="Failed to parse"):
            ConfigLoader().load_toml(path)

    def test_cli_overrides_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "deploy.toml"
        path.write_text('mode = "deploy"\ncolors = true\n')
        cfg = ConfigLoader().load(toml_path=path, cli_overrides={"mode": "generate"}, use_env=False)
        assert cfg == {"mode": "generate", "colors": True}

    def test_env_overrides_cli(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("SITEDEPLOY_MODE", "deploy")
        monkeypatch.setenv("SITEDEPLOY_COLORS", "no")
        cfg = ConfigLoader().load(cli_overrides={"mode": "generate"})
        assert cfg["mode"] == "deploy"
        assert cfg["colors"] is False

    def test_deep_merge_keeps_nested_keys(self) -> None:
        merged = ConfigLoader().merge_configs(
            {"sections": {"a": {"remote": "ftp://a/"}}},
            {"sections": {"b": {"remote": "ftp://b/"}}},
        )
        assert list(merged["sections"]) == ["a", "b"]
