"""Unit tests for StubkitSettings and its loaders."""
from __future__ import annotations

import logging
from pathlib import Path

import pytest

from stubkit.config import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    SettingsFactory,
    StubkitSettings,
    load_settings,
)
from stubkit.errors import ConfigError, InvalidSettingValueError
from stubkit.mocking import AutospecMockCreator, MagicMockCreator
from stubkit.stubs import Stubs

_VARS = ("STUBKIT_MOCK_BACKEND", "STUBKIT_SEED", "STUBKIT_LOG_LEVEL", "STUBKIT_LOG_JSON")


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


# ---------------------------------------------------------------------------
# StubkitSettings
# ---------------------------------------------------------------------------


class TestStubkitSettings:
    def test_defaults(self) -> None:
        settings = StubkitSettings()
        assert settings.mock_backend == "autospec"
        assert settings.seed is None
        assert settings.log_level == "WARNING"
        assert settings.log_json is False

    def test_unknown_backend_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            StubkitSettings(mock_backend="mockito")
        assert exc_info.value.setting_name == "mock_backend"

    def test_unknown_log_level_rejected(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            StubkitSettings(log_level="LOUD")

    def test_log_level_number(self) -> None:
        assert StubkitSettings(log_level="debug").log_level_number == logging.DEBUG


# ---------------------------------------------------------------------------
# Environment loading
# ---------------------------------------------------------------------------


class TestEnvLoading:
    def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STUBKIT_MOCK_BACKEND", "magicmock")
        monkeypatch.setenv("STUBKIT_SEED", "1234")
        monkeypatch.setenv("STUBKIT_LOG_JSON", "true")
        settings = EnvSettingsLoader().load(StubkitSettings)
        assert settings.mock_backend == "magicmock"
        assert settings.seed == 1234
        assert settings.log_json is True

    def test_empty_seed_is_none(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STUBKIT_SEED", "")
        assert load_settings().seed is None

    def test_non_numeric_seed(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STUBKIT_SEED", "abc")
        with pytest.raises(InvalidSettingValueError) as exc_info:
            load_settings()
        assert exc_info.value.setting_name == "STUBKIT_SEED"

    def test_invalid_backend_propagates_through_factory(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STUBKIT_MOCK_BACKEND", "mockito")
        with pytest.raises(InvalidSettingValueError):
            load_settings()

    def test_overrides_win(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("STUBKIT_SEED", "1")
        assert load_settings({"seed": 2}).seed == 2

    def test_invalid_override(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(StubkitSettings, overrides={"log_level": "LOUD"})

    def test_unknown_override_key(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            SettingsFactory.create(StubkitSettings, overrides={"colour": "blue"})
        assert exc_info.value.code == "config_error"


class TestDotenvLoading:
    def test_reads_env_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("STUBKIT_SEED=17\n")
        monkeypatch.setenv("STUBKIT_SEED", "1")
        settings = DotenvSettingsLoader(str(env_file), override=True).load(StubkitSettings)
        assert settings.seed == 17

    def test_process_environment_wins_without_override(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text("STUBKIT_SEED=17\n")
        monkeypatch.setenv("STUBKIT_SEED", "1")
        settings = DotenvSettingsLoader(str(env_file)).load(StubkitSettings)
        assert settings.seed == 1


# ---------------------------------------------------------------------------
# Stubs.from_settings
# ---------------------------------------------------------------------------


class TestStubsFromSettings:
    def test_backend_selects_creator(self) -> None:
        stubs = Stubs.from_settings(StubkitSettings(mock_backend="magicmock"))
        assert isinstance(stubs.mock_creator, MagicMockCreator)

    def test_default_backend(self) -> None:
        assert isinstance(Stubs.from_settings(StubkitSettings()).mock_creator, AutospecMockCreator)
