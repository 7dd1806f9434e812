"""
Environment-based configuration for API key authentication.

Variables:
- AUTH_ENABLED: Set to false/0/no/off to disable the auth middleware.
- AUTH_EXEMPT_PATHS: Comma-separated paths served without a key.
- LOG_LEVEL: Standard logging level name.
- LOG_FORMAT: "json" or "console".
- ENVIRONMENT: "production"/"prod" hides exception details in responses.
"""

import os
from dataclasses import dataclass, field

DEFAULT_EXEMPT_PATHS = frozenset(
    {
        "/api/v1/health",
        "/health",
        "/docs",
        "/redoc",
        "/openapi.json",
    }
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
VALID_LOG_FORMATS = ("json", "console")

_FALSE_VALUES = ("false", "0", "no", "off")


def is_production_mode() -> bool:
    """Check if running in production mode."""
    env = os.getenv("ENVIRONMENT", "development").lower()
    return env in ("production", "prod")


def _parse_exempt_paths(raw: str | None) -> frozenset[str]:
    if raw is None:
        return DEFAULT_EXEMPT_PATHS
    # Trailing slashes would never match request paths
    return frozenset(p.strip().rstrip("/") or "/" for p in raw.split(",") if p.strip())


@dataclass(frozen=True)
class AuthSettings:
    """
    Settings for the authentication service.

    log_level and log_format are normalized on construction; unknown values
    fall back to INFO and json.
    """

    auth_enabled: bool = True
    exempt_paths: frozenset[str] = field(default_factory=lambda: DEFAULT_EXEMPT_PATHS)
    log_level: str = "INFO"
    log_format: str = "json"

    def __post_init__(self) -> None:
        log_level = str(self.log_level).strip().upper()
        if log_level not in VALID_LOG_LEVELS:
            log_level = "INFO"

        log_format = str(self.log_format).strip().lower()
        if log_format not in VALID_LOG_FORMATS:
            log_format = "json"

        # Frozen dataclass
        object.__setattr__(self, "log_level", log_level)
        object.__setattr__(self, "log_format", log_format)

    @classmethod
    def from_env(cls) -> "AuthSettings":
        """
        Build settings from environment variables.

        configure_logging reports LOG_LEVEL/LOG_FORMAT fallbacks once logging
        is set up.
        """
        enabled = os.getenv("AUTH_ENABLED", "true").strip().lower() not in _FALSE_VALUES

        return cls(
            auth_enabled=enabled,
            exempt_paths=_parse_exempt_paths(os.getenv("AUTH_EXEMPT_PATHS")),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            log_format=os.getenv("LOG_FORMAT", "json"),
        )
