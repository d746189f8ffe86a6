"""
Configuration management for the ipxedust command line tool.

Loads configuration from environment variables with validation.
"""

from dataclasses import dataclass
from decouple import config

LOG_FORMATS = ("json", "console")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(slots=True)
class Config:
    """ipxedust configuration."""

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"  # json, console

    # Default payload written over the magic string
    patch: str = ""

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""

        log_level = config("IPXEDUST_LOG_LEVEL", default="INFO").upper()
        if log_level not in LOG_LEVELS:
            raise ValueError(
                f"Invalid IPXEDUST_LOG_LEVEL: {log_level}. "
                f"Must be one of {', '.join(LOG_LEVELS)}."
            )

        log_format = config("IPXEDUST_LOG_FORMAT", default="json")
        if log_format not in LOG_FORMATS:
            raise ValueError(
                f"Invalid IPXEDUST_LOG_FORMAT: {log_format}. Must be json or console."
            )

        patch = config("IPXEDUST_PATCH", default="")

        return cls(
            log_level=log_level,
            log_format=log_format,
            patch=patch,
        )

    @property
    def patch_bytes(self) -> bytes:
        """Configured default payload, encoded for patching."""
        return self.patch.encode("utf-8")
