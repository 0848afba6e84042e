"""Configuration settings using Pydantic Settings.

Provides typed defaults with environment variable support for the
comparison policy, JSON output and logging.

Usage:
    from objextras.config import EquivalenceSettings, JsonSettings

    # Load from environment variables (OBJEXTRAS_EQUIVALENCE_*, OBJEXTRAS_JSON_*)
    policy = EquivalenceSettings().to_policy()
    json_settings = JsonSettings()

    # Or override with explicit values
    json_settings = JsonSettings(indent=4)
"""

from __future__ import annotations

from typing import Any

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install objextras[config]"
    ) from e

from objextras.core.equivalence.models import ComparisonPolicy
from objextras.serialization import to_json


class EquivalenceSettings(BaseSettings):  # type: ignore[misc]
    """Default comparison policy for structural equivalence.

    Attributes:
        ignore_null_source: Treat None on the source side as "unspecified".
        public_only: Compare only members without a leading underscore.

    Environment Variables:
        OBJEXTRAS_EQUIVALENCE_IGNORE_NULL_SOURCE
        OBJEXTRAS_EQUIVALENCE_PUBLIC_ONLY
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJEXTRAS_EQUIVALENCE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    ignore_null_source: bool = False
    public_only: bool = False

    def to_policy(self) -> ComparisonPolicy:
        """Build the immutable policy the equivalence walker consumes.

        Returns:
            ComparisonPolicy with these settings.
        """
        return ComparisonPolicy(
            ignore_null_source=self.ignore_null_source,
            public_only=self.public_only,
        )


class JsonSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for JSON output.

    Attributes:
        indent: Indentation used when indented output is requested.
        exclude_none: Drop None-valued fields and keys.

    Environment Variables:
        OBJEXTRAS_JSON_INDENT
        OBJEXTRAS_JSON_EXCLUDE_NONE
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJEXTRAS_JSON_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    indent: int = 2
    exclude_none: bool = True

    def dump(self, source: Any, indented: bool = False) -> str:
        """Serialize source with these settings.

        Args:
            source: Object to serialize.
            indented: Pretty-print using the configured indent.

        Returns:
            JSON text ("" for None).
        """
        return to_json(source, indented=indented, indent=self.indent, exclude_none=self.exclude_none)


class LoggingSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for ``setup_logging_from_settings``.

    Attributes:
        level: Logging level name.
        format: Log record format string (None = default format).

    Environment Variables:
        OBJEXTRAS_LOG_LEVEL
        OBJEXTRAS_LOG_FORMAT
    """

    model_config = SettingsConfigDict(
        env_prefix="OBJEXTRAS_LOG_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    level: str = "INFO"
    format: str | None = None
