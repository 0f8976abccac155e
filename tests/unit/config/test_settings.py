"""Test configuration loading."""

import pytest
from pydantic import ValidationError

from hijri_mapping.calendar_systems import ConversionOptions, Region
from hijri_mapping.config import Settings, get_settings, reload_settings


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self, monkeypatch):
        """Defaults apply when nothing is set."""
        for name in ("DEFAULT_REGION", "LOG_LEVEL", "STRICT_VALIDATION"):
            monkeypatch.delenv(f"HIJRI_MAPPING_{name}", raising=False)

        settings = Settings(_env_file=None)

        assert settings.default_region == "global"
        assert settings.allow_fallback is True
        assert settings.include_month_names is None
        assert settings.strict_validation is False
        assert settings.log_level == "INFO"
        assert settings.log_format == "console"

    def test_environment_overrides(self, monkeypatch):
        """Prefixed environment variables override defaults."""
        monkeypatch.setenv("HIJRI_MAPPING_DEFAULT_REGION", "Indonesia")
        monkeypatch.setenv("HIJRI_MAPPING_STRICT_VALIDATION", "true")
        monkeypatch.setenv("HIJRI_MAPPING_LOG_LEVEL", "debug")

        settings = Settings(_env_file=None)

        assert settings.default_region == "indonesia"
        assert settings.strict_validation is True
        assert settings.log_level == "DEBUG"

    def test_unknown_log_level(self):
        """Unknown log levels fail validation."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_level="chatty")

    def test_unknown_log_format(self):
        """Only console and json renderers exist."""
        with pytest.raises(ValidationError):
            Settings(_env_file=None, log_format="xml")

    def test_unknown_region_is_kept(self):
        """Unknown regions are not rejected here."""
        assert Settings(_env_file=None, default_region="Mars").default_region == "mars"


class TestSettingsCache:
    """Test the cached settings accessor."""

    def test_cached(self):
        """The same instance is returned until reloaded."""
        assert get_settings() is get_settings()

    def test_reload(self, monkeypatch):
        """Reloading picks up environment changes."""
        first = get_settings()
        monkeypatch.setenv("HIJRI_MAPPING_DEFAULT_REGION", "malaysia")

        reloaded = reload_settings()

        assert reloaded is not first
        assert reloaded.default_region == "malaysia"


class TestConversionOptionsFromSettings:
    """Test mapping settings to conversion options."""

    def test_known_region(self):
        """Known region names become enum members."""
        options = ConversionOptions.from_settings(
            Settings(_env_file=None, default_region="saudi_arabia", allow_fallback=False)
        )

        assert options.region is Region.SAUDI_ARABIA
        assert options.allow_fallback is False

    def test_unknown_region(self):
        """Unknown region names stay strings."""
        options = ConversionOptions.from_settings(
            Settings(_env_file=None, default_region="mars")
        )

        assert options.region == "mars"
