"""Unit tests for ErrorSettings and its loaders."""

from __future__ import annotations

import dataclasses
import pathlib
from typing import ClassVar

import pytest

from xerror.config import (
    ConfigError,
    DotenvSettingsLoader,
    EnvSettingsLoader,
    ErrorSettings,
    InvalidSettingValueError,
    MissingRequiredSettingError,
    Settings,
)
from xerror.kernel.errors import Rendering


# ---------------------------------------------------------------------------
# ErrorSettings
# ---------------------------------------------------------------------------


class TestErrorSettings:
    def test_defaults(self) -> None:
        s = ErrorSettings()
        assert s.rendering_mode is Rendering.COMPACT_HEX
        assert s.token_length == 4
        assert s.token_alphabet == "0123456789"
        assert s.default_status == 500
        assert s.logger_name == "xerror"

    def test_is_settings(self) -> None:
        assert isinstance(ErrorSettings(), Settings)

    def test_prefix_is_not_a_field(self) -> None:
        names = {f.name for f in dataclasses.fields(ErrorSettings)}
        assert "_prefix" not in names

    @pytest.mark.parametrize(
        ("kwargs", "setting"),
        [
            ({"rendering": "json"}, "rendering"),
            ({"token_length": 0}, "token_length"),
            ({"token_alphabet": ""}, "token_alphabet"),
            ({"default_status": 42}, "default_status"),
            ({"default_status": 600}, "default_status"),
        ],
    )
    def test_invalid_values(self, kwargs: dict, setting: str) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            ErrorSettings(**kwargs)
        assert info.value.setting_name == setting

    def test_config_errors_are_value_errors(self) -> None:
        assert issubclass(ConfigError, ValueError)
        assert issubclass(InvalidSettingValueError, ConfigError)
        assert issubclass(MissingRequiredSettingError, ConfigError)


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_empty_environment_gives_defaults(self) -> None:
        assert EnvSettingsLoader(environ={}).load(ErrorSettings) == ErrorSettings()

    def test_reads_prefixed_variables(self) -> None:
        env = {
            "XERROR_RENDERING": "verbose",
            "XERROR_TOKEN_LENGTH": "6",
            "XERROR_TOKEN_ALPHABET": "ABCDEF",
            "XERROR_DEFAULT_STATUS": "503",
            "XERROR_LOGGER_NAME": "api.errors",
        }
        s = EnvSettingsLoader(environ=env).load(ErrorSettings)
        assert s.rendering_mode is Rendering.VERBOSE
        assert s.token_length == 6
        assert s.token_alphabet == "ABCDEF"
        assert s.default_status == 503
        assert s.logger_name == "api.errors"

    def test_reads_os_environ(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("XERROR_DEFAULT_STATUS", "502")
        assert EnvSettingsLoader().load(ErrorSettings).default_status == 502

    def test_non_integer(self) -> None:
        with pytest.raises(InvalidSettingValueError) as info:
            EnvSettingsLoader(environ={"XERROR_TOKEN_LENGTH": "four"}).load(ErrorSettings)
        assert info.value.setting_name == "XERROR_TOKEN_LENGTH"

    def test_validation_error_propagates(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader(environ={"XERROR_RENDERING": "json"}).load(ErrorSettings)

    def test_missing_required_setting(self) -> None:
        @dataclasses.dataclass
        class Needs(Settings):
            _prefix: ClassVar[str] = "APP"
            token: str

        with pytest.raises(MissingRequiredSettingError, match="APP_TOKEN"):
            EnvSettingsLoader(environ={}).load(Needs)


# ---------------------------------------------------------------------------
# DotenvSettingsLoader
# ---------------------------------------------------------------------------


class TestDotenvSettingsLoader:
    def test_loads_env_file(self, tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> None:
        # registered with monkeypatch so teardown restores them
        monkeypatch.setenv("XERROR_RENDERING", "compact_hex")
        monkeypatch.setenv("XERROR_DEFAULT_STATUS", "500")
        env_file = tmp_path / ".env"
        env_file.write_text("XERROR_RENDERING=compact_decimal\nXERROR_DEFAULT_STATUS=418\n")

        s = DotenvSettingsLoader(str(env_file), override=True).load(ErrorSettings)
        assert s.rendering_mode is Rendering.COMPACT_DECIMAL
        assert s.default_status == 418
