"""Configuration helpers."""

from .settings import FrsSettings, get_settings

__all__ = ["FrsSettings", "get_settings"]
