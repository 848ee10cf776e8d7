"""Tests for CubicWeightSettings — flags, env vars, and TOML source."""

from pathlib import Path

import click
import pytest

from cubicweight.config.discovery import CONFIG_ENV_VAR
from cubicweight.config.settings import CubicWeightSettings


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)
    monkeypatch.delenv("CUBICWEIGHT_REPORT__DECIMAL_PLACES", raising=False)


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = CubicWeightSettings.from_cli(search_from=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.api.timeout_seconds is None
        assert settings.report.decimal_places == 4
        assert settings.report.unit == "kg"

    def test_frozen(self, tmp_path: Path) -> None:
        settings = CubicWeightSettings.from_cli(search_from=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestSources:
    def test_loads_discovered_toml(self, tmp_path: Path) -> None:
        (tmp_path / "cubicweight.toml").write_text("[report]\ndecimal_places = 2\n")
        settings = CubicWeightSettings.from_cli(search_from=tmp_path)
        assert settings.report.decimal_places == 2
        assert settings.config_path == tmp_path / "cubicweight.toml"

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.toml"
        custom.write_text("[api]\ntimeout_seconds = 10\n")
        settings = CubicWeightSettings.from_cli(config_path=str(custom))
        assert settings.api.timeout_seconds == 10
        assert settings.config_path == custom

    def test_missing_explicit_config_is_error(self, tmp_path: Path) -> None:
        with pytest.raises(click.ClickException, match="not found"):
            CubicWeightSettings.from_cli(config_path=str(tmp_path / "nope.toml"))

    def test_invalid_toml_is_error(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.toml"
        bad.write_text("[report\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            CubicWeightSettings.from_cli(config_path=str(bad))

    def test_env_beats_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / "cubicweight.toml").write_text("[report]\ndecimal_places = 2\n")
        monkeypatch.setenv("CUBICWEIGHT_REPORT__DECIMAL_PLACES", "6")
        settings = CubicWeightSettings.from_cli(search_from=tmp_path)
        assert settings.report.decimal_places == 6

    def test_cli_flags_win(self, tmp_path: Path) -> None:
        settings = CubicWeightSettings.from_cli(search_from=tmp_path, quiet=True, verbose=True)
        assert settings.quiet is True
        assert settings.verbose is True
