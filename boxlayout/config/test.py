"""Tests for configuration management."""

import logging

import pytest

from .lib import (
    EnvConfig,
    EnvVar,
    _convert_value,
    get_environment,
    get_environment_info,
    get_log_level,
    get_node_defaults,
    list_environment_variables,
)

# =============================================================================
# Tests for get_environment (main interface)
# =============================================================================


class TestGetEnvironment:
    """Tests for the unified get_environment interface."""

    @pytest.mark.unit
    def test_returns_default_when_not_set(self, monkeypatch):
        """Returns default value when env var is not set."""
        monkeypatch.delenv("BOXLAYOUT_BORDER_WIDTH", raising=False)
        result = get_environment(EnvVar.BOXLAYOUT_BORDER_WIDTH)
        assert result == 1.0

    @pytest.mark.unit
    def test_override_takes_priority(self, monkeypatch):
        """Override parameter takes highest priority."""
        monkeypatch.setenv("BOXLAYOUT_BORDER_COLOR", "blue")
        result = get_environment(EnvVar.BOXLAYOUT_BORDER_COLOR, override="red")
        assert result == "red"

    @pytest.mark.unit
    def test_env_var_overrides_default(self, monkeypatch):
        """Environment variable overrides default value."""
        monkeypatch.setenv("BOXLAYOUT_BORDER_COLOR", "blue")
        result = get_environment(EnvVar.BOXLAYOUT_BORDER_COLOR)
        assert result == "blue"

    @pytest.mark.unit
    def test_float_type_conversion(self, monkeypatch):
        """Float type conversion from string."""
        monkeypatch.setenv("BOXLAYOUT_FONT_SIZE", "9.5")
        result = get_environment(EnvVar.BOXLAYOUT_FONT_SIZE)
        assert result == 9.5
        assert isinstance(result, float)

    @pytest.mark.unit
    def test_invalid_float_returns_default(self, monkeypatch):
        """Invalid numeric value returns default."""
        monkeypatch.setenv("BOXLAYOUT_FONT_SIZE", "large")
        result = get_environment(EnvVar.BOXLAYOUT_FONT_SIZE)
        assert result == 12.0


class TestConvertValue:
    """Tests for raw string conversion."""

    @pytest.mark.unit
    def test_float_values(self):
        """Float conversion accepts integer and decimal spellings."""
        assert _convert_value("2", float, 0.0) == 2.0
        assert _convert_value("0.5", float, 0.0) == 0.5

    @pytest.mark.unit
    def test_unknown_type_returns_raw(self):
        """Types without a converter pass the raw string through."""
        assert _convert_value("raw", bytes, None) == "raw"

    @pytest.mark.unit
    def test_none_returns_default(self):
        """Missing value returns default."""
        assert _convert_value(None, str, "fallback") == "fallback"


class TestGetEnvironmentInfo:
    """Tests for environment variable metadata."""

    @pytest.mark.unit
    def test_returns_env_config(self):
        """Returns EnvConfig dataclass."""
        info = get_environment_info(EnvVar.BOXLAYOUT_FONT_SIZE)
        assert isinstance(info, EnvConfig)
        assert info.name == "BOXLAYOUT_FONT_SIZE"
        assert info.default == 12.0
        assert info.var_type is float
        assert info.category == "defaults"

    @pytest.mark.unit
    def test_description_present(self):
        """Description field is populated."""
        info = get_environment_info(EnvVar.BOXLAYOUT_LOG_LEVEL)
        assert "level" in info.description.lower()


class TestListEnvironmentVariables:
    """Tests for listing environment variables."""

    @pytest.mark.unit
    def test_returns_all_variables(self):
        """Returns all EnvVar members when no category."""
        result = list_environment_variables()
        assert len(result) == len(EnvVar)
        assert all(isinstance(v, EnvVar) for v in result)

    @pytest.mark.unit
    def test_filter_by_category(self):
        """Filters by category correctly."""
        defaults = list_environment_variables("defaults")
        assert EnvVar.BOXLAYOUT_BORDER_WIDTH in defaults
        assert EnvVar.BOXLAYOUT_TEXT_COLOR in defaults
        assert EnvVar.BOXLAYOUT_LOG_LEVEL not in defaults


class TestConvenienceFunctions:
    """Tests for log level and node default helpers."""

    @pytest.mark.unit
    def test_log_level_default(self, monkeypatch):
        """Default log level is WARNING."""
        monkeypatch.delenv("BOXLAYOUT_LOG_LEVEL", raising=False)
        assert get_log_level() == logging.WARNING

    @pytest.mark.unit
    def test_log_level_case_insensitive(self, monkeypatch):
        """Level names are matched case-insensitively."""
        monkeypatch.setenv("BOXLAYOUT_LOG_LEVEL", "debug")
        assert get_log_level() == logging.DEBUG

    @pytest.mark.unit
    def test_log_level_unknown_name(self):
        """Unknown level names fall back to WARNING."""
        assert get_log_level(override="chatty") == logging.WARNING

    @pytest.mark.unit
    def test_node_defaults(self, monkeypatch):
        """Node defaults reflect the environment."""
        monkeypatch.setenv("BOXLAYOUT_BORDER_WIDTH", "0")
        monkeypatch.delenv("BOXLAYOUT_BORDER_COLOR", raising=False)
        monkeypatch.delenv("BOXLAYOUT_FONT_SIZE", raising=False)
        monkeypatch.delenv("BOXLAYOUT_TEXT_COLOR", raising=False)
        assert get_node_defaults() == {
            "border_width": 0.0,
            "border_color": "black",
            "font_size": 12.0,
            "text_color": "black",
        }
