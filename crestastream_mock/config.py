"""Runtime configuration for the mock backend.

Values come from environment variables (optionally loaded from a ``.env``
file) and are read once into an immutable :class:`Settings` instance.
"""

from __future__ import annotations

import dataclasses
import os
from functools import lru_cache

from dotenv import load_dotenv

DEFAULT_CONTENT_SECURITY_POLICY = (
    "default-src 'self'; script-src 'self' 'unsafe-inline' 'unsafe-eval'; "
    "style-src 'self' 'unsafe-inline'; img-src 'self' data:; font-src 'self' data:;"
)

_TRUTHY = {"1", "true", "yes", "on"}


@dataclasses.dataclass(frozen=True)
class Settings:
    """Settings consumed by the application factory and ``run()``."""

    api_prefix: str = "/api"
    host: str = "127.0.0.1"
    port: int = 3000
    seed_demo_data: bool = True
    cors_origins: tuple[str, ...] = ("*",)
    content_security_policy: str = DEFAULT_CONTENT_SECURITY_POLICY


def _normalise_prefix(value: str) -> str:
    value = value.strip().rstrip("/")
    if value and not value.startswith("/"):
        value = f"/{value}"
    return value


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Load settings from the environment with development defaults."""

    load_dotenv()
    origins = os.getenv("MOCK_CORS_ORIGINS", "*")
    return Settings(
        api_prefix=_normalise_prefix(os.getenv("MOCK_API_PREFIX", "/api")),
        host=os.getenv("MOCK_HOST", "127.0.0.1"),
        port=int(os.getenv("MOCK_PORT", "3000")),
        seed_demo_data=os.getenv("MOCK_SEED_DEMO_DATA", "true").lower() in _TRUTHY,
        cors_origins=tuple(o.strip() for o in origins.split(",") if o.strip()),
        content_security_policy=os.getenv(
            "MOCK_CONTENT_SECURITY_POLICY", DEFAULT_CONTENT_SECURITY_POLICY
        ),
    )


def reset_settings_cache() -> None:
    """Clear cached settings; useful in tests when env vars change."""

    get_settings.cache_clear()


__all__ = [
    "DEFAULT_CONTENT_SECURITY_POLICY",
    "Settings",
    "get_settings",
    "reset_settings_cache",
]
