"""Configuration package."""

from gitiary.config.settings import Settings, settings

__all__ = [
    "Settings",
    "settings",
]
