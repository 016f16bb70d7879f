"""Tests for TreeLayoutSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from treelayout.config.settings import TreeLayoutSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = TreeLayoutSettings.from_cli(start=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.check.tolerance == 0.0
        assert settings.check.allow_non_finite is False

    def test_frozen(self, tmp_path: Path) -> None:
        settings = TreeLayoutSettings.from_cli(start=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_from_toml(self, tmp_path: Path) -> None:
        toml = tmp_path / "treelayout.toml"
        toml.write_text("[check]\ntolerance = 0.25\n")
        settings = TreeLayoutSettings.from_cli(start=tmp_path)
        assert settings.config_path is not None
        assert settings.config_path.resolve() == toml.resolve()
        assert settings.check.tolerance == 0.25
        assert settings.check.allow_non_finite is False  # default preserved

    def test_walks_up_from_subdirectory(self, tmp_path: Path) -> None:
        (tmp_path / "treelayout.toml").write_text("[check]\nallow_non_finite = true\n")
        nested = tmp_path / "a" / "b"
        nested.mkdir(parents=True)
        settings = TreeLayoutSettings.from_cli(start=nested)
        assert settings.check.allow_non_finite is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("[check]\ntolerance = 0.5\n")
        settings = TreeLayoutSettings.from_cli(config_path=str(custom))
        assert settings.check.tolerance == 0.5

    def test_missing_explicit_config_uses_defaults(self, tmp_path: Path) -> None:
        settings = TreeLayoutSettings.from_cli(config_path=str(tmp_path / "absent.toml"))
        assert settings.config_path is None
        assert settings.check.tolerance == 0.0

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "treelayout.toml").write_text("[check\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            TreeLayoutSettings.from_cli(start=tmp_path)

    def test_negative_tolerance_rejected(self, tmp_path: Path) -> None:
        (tmp_path / "treelayout.toml").write_text("[check]\ntolerance = -1.0\n")
        with pytest.raises(Exception):
            TreeLayoutSettings.from_cli(start=tmp_path)


class TestPrecedence:
    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "treelayout.toml").write_text("[check]\ntolerance = 0.25\n")
        monkeypatch.setenv("TREELAYOUT_CHECK__TOLERANCE", "0.75")
        settings = TreeLayoutSettings.from_cli(start=tmp_path)
        assert settings.check.tolerance == 0.75

    def test_cli_flag_overrides_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TREELAYOUT_QUIET", "true")
        settings = TreeLayoutSettings.from_cli(start=tmp_path, quiet=False)
        assert settings.quiet is False

    def test_env_without_cli_flag(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("TREELAYOUT_VERBOSE", "1")
        settings = TreeLayoutSettings.from_cli(start=tmp_path)
        assert settings.verbose is True
