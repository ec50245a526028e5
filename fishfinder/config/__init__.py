"""
Configuration management for FishFinder.

Minimal Pydantic BaseSettings for environment-based configuration.
"""

from .settings import DEFAULT_CATALOG_PATH, Settings, get_settings

__all__ = ["DEFAULT_CATALOG_PATH", "Settings", "get_settings"]
