"""Configuration settings for the NovaCloud client."""

from __future__ import annotations

import os
from dataclasses import dataclass

from .errors import ConfigurationError

DEFAULT_TIMEOUT = 30.0


def _blank(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


@dataclass(frozen=True)
class Configuration:
    """Credentials and connection settings for one client instance."""

    app_key: str
    app_secret: str
    service_domain: str
    timeout: float = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        self.validate()

    @property
    def base_url(self) -> str:
        return f"https://{self.service_domain}"

    def validate(self) -> None:
        for name in ("app_key", "app_secret", "service_domain"):
            if _blank(getattr(self, name)):
                raise ConfigurationError(f"{name} is required")
        if self.timeout is not None and self.timeout <= 0:
            raise ConfigurationError("timeout must be positive")

    @classmethod
    def from_env(cls) -> "Configuration":
        """Build a configuration from NOVACLOUD_* environment variables."""
        timeout = os.getenv("NOVACLOUD_TIMEOUT")
        return cls(
            app_key=os.getenv("NOVACLOUD_APP_KEY", ""),
            app_secret=os.getenv("NOVACLOUD_APP_SECRET", ""),
            service_domain=os.getenv("NOVACLOUD_SERVICE_DOMAIN", ""),
            timeout=float(timeout) if timeout else DEFAULT_TIMEOUT,
        )

    def __repr__(self) -> str:
        return (
            f"Configuration(app_key={self.app_key!r}, app_secret='***', "
            f"service_domain={self.service_domain!r}, timeout={self.timeout!r})"
        )
