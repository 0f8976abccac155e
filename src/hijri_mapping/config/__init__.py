"""Configuration module for the Hijri regional mapping engine."""

from hijri_mapping.config.base import Settings
from hijri_mapping.config.loader import get_settings, reload_settings

__all__ = ["Settings", "get_settings", "reload_settings"]
