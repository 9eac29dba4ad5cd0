"""Atlas configuration loaded from environment variables.

All configuration values have sensible defaults pointing at the public
USGS nomenclature archives and the English Wikipedia API.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric
    value is out of its valid range or a required URL is empty.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from planetary_atlas.core.constants import (
    DEFAULT_ARCHIVE_BASE_URL,
    DEFAULT_KNOWLEDGE_BASE_PROVIDER,
    DEFAULT_KNOWLEDGE_BASE_URL,
    DEFAULT_USER_AGENT,
)
from planetary_atlas.core.exceptions import AtlasError


class ConfigValidationError(AtlasError):
    """Raised when configuration values are out of valid range.

    Attributes:
        name: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, name: str, value: object, message: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid configuration {name}={value!r}: {message}", key=name)


@dataclass(frozen=True, slots=True)
class AtlasConfig:
    """Immutable atlas configuration.

    Loaded once per session and threaded through the loader and the
    timeline engine.

    Attributes:
        archive_base_url: Base URL the per-body KMZ archives are served from.
        archive_timeout_s: Upper bound in seconds for one archive download.
        knowledge_base_provider: Registered knowledge-base provider name.
        knowledge_base_url: API endpoint of the knowledge-base service.
        knowledge_base_timeout_s: Upper bound in seconds for one knowledge-base request.
        user_agent: ``User-Agent`` header sent with every outbound request.
        notable_diameter_km: Diameter above which a feature counts as notable.
    """

    archive_base_url: str = DEFAULT_ARCHIVE_BASE_URL
    archive_timeout_s: float = 60.0
    knowledge_base_provider: str = DEFAULT_KNOWLEDGE_BASE_PROVIDER
    knowledge_base_url: str = DEFAULT_KNOWLEDGE_BASE_URL
    knowledge_base_timeout_s: float = 10.0
    user_agent: str = DEFAULT_USER_AGENT
    notable_diameter_km: float = 50.0

    @classmethod
    def from_env(cls) -> AtlasConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a numeric value is out of range
                or a required string value is empty.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``ATLAS_ARCHIVE_TIMEOUT_S=abc``).
        """
        config = cls(
            archive_base_url=os.getenv("ATLAS_ARCHIVE_BASE_URL", DEFAULT_ARCHIVE_BASE_URL),
            archive_timeout_s=float(os.getenv("ATLAS_ARCHIVE_TIMEOUT_S", "60")),
            knowledge_base_provider=os.getenv(
                "ATLAS_KNOWLEDGE_BASE_PROVIDER", DEFAULT_KNOWLEDGE_BASE_PROVIDER
            ),
            knowledge_base_url=os.getenv("ATLAS_KNOWLEDGE_BASE_URL", DEFAULT_KNOWLEDGE_BASE_URL),
            knowledge_base_timeout_s=float(os.getenv("ATLAS_KNOWLEDGE_BASE_TIMEOUT_S", "10")),
            user_agent=os.getenv("ATLAS_USER_AGENT", DEFAULT_USER_AGENT),
            notable_diameter_km=float(os.getenv("ATLAS_NOTABLE_DIAMETER_KM", "50")),
        )
        _validate(config)
        return config


def _validate(config: AtlasConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if not config.archive_base_url:
        raise ConfigValidationError(
            "ATLAS_ARCHIVE_BASE_URL",
            config.archive_base_url,
            "must not be empty",
        )

    if config.archive_timeout_s <= 0:
        raise ConfigValidationError(
            "ATLAS_ARCHIVE_TIMEOUT_S",
            config.archive_timeout_s,
            "must be > 0 (seconds)",
        )

    if not config.knowledge_base_provider:
        raise ConfigValidationError(
            "ATLAS_KNOWLEDGE_BASE_PROVIDER",
            config.knowledge_base_provider,
            "must not be empty",
        )

    if not config.knowledge_base_url:
        raise ConfigValidationError(
            "ATLAS_KNOWLEDGE_BASE_URL",
            config.knowledge_base_url,
            "must not be empty",
        )

    if config.knowledge_base_timeout_s <= 0:
        raise ConfigValidationError(
            "ATLAS_KNOWLEDGE_BASE_TIMEOUT_S",
            config.knowledge_base_timeout_s,
            "must be > 0 (seconds)",
        )

    if config.notable_diameter_km < 0:
        raise ConfigValidationError(
            "ATLAS_NOTABLE_DIAMETER_KM",
            config.notable_diameter_km,
            "must be >= 0 (kilometres)",
        )
