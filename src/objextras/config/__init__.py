"""Configuration module using Pydantic Settings.

Provides typed configuration with environment variable support.

Usage:
    from objextras.config import EquivalenceSettings, JsonSettings

    policy = EquivalenceSettings(public_only=True).to_policy()
    json_settings = JsonSettings(indent=4)
"""

from objextras.config.settings import EquivalenceSettings, JsonSettings, LoggingSettings

__all__ = [
    "EquivalenceSettings",
    "JsonSettings",
    "LoggingSettings",
]
