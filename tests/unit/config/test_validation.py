"""Unit tests for config validation errors."""

from orderstream.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from orderstream.kernel.errors import ApplicationError


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(ConfigError, ApplicationError)
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_missing_required(self) -> None:
        err = MissingRequiredSettingError("ORDERSTREAM_SOURCE_SERVICE")
        assert err.code == "missing_required_setting"
        assert "ORDERSTREAM_SOURCE_SERVICE" in err.message
        assert err.detail == {"setting": "ORDERSTREAM_SOURCE_SERVICE"}

    def test_invalid_value(self) -> None:
        err = InvalidSettingValueError("retry_profile", "turbo", "unknown profile")
        assert err.code == "invalid_setting_value"
        assert err.value == "turbo"
        assert err.reason == "unknown profile"
        assert "'turbo'" in err.message
