"""Configuration module for the account portal."""

from .settings import Settings, get_settings, settings

__all__ = ["Settings", "settings", "get_settings"]
