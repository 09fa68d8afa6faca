"""Runtime configuration for the stats gateway."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping


logger = logging.getLogger("uvicorn.error")

DEFAULT_PROVIDER_BASE_URL = "https://v2.nba.api-sports.io"
DEFAULT_PROVIDER_KEY_HEADER = "x-apisports-key"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_HOST = "0.0.0.0"
DEFAULT_PORT = 5000


def _env_float(
    environ: Mapping[str, str],
    name: str,
    default: float,
    *,
    clamp_min: float | None = None,
) -> float:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        logger.warning("Invalid float for %s: %s; using default %.2f", name, raw, default)
        return default
    if clamp_min is not None:
        value = max(clamp_min, value)
    return value


def _env_int(environ: Mapping[str, str], name: str, default: int, *, min_value: int | None = None) -> int:
    raw = environ.get(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None:
        value = max(min_value, value)
    return value


def _split_origins(raw: str | None) -> tuple[str, ...]:
    if not raw:
        return ("*",)
    origins = tuple(part.strip() for part in raw.split(",") if part.strip())
    return origins or ("*",)


@dataclass(frozen=True)
class GatewaySettings:
    """Everything the gateway needs at startup; passed into ``create_app``."""

    provider_api_key: str = ""
    provider_base_url: str = DEFAULT_PROVIDER_BASE_URL
    provider_key_header: str = DEFAULT_PROVIDER_KEY_HEADER
    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    cors_origins: tuple[str, ...] = ("*",)
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "GatewaySettings":
        env = os.environ if environ is None else environ
        api_key = env.get("NBA_API_KEY", "")
        if not api_key:
            logger.warning("NBA_API_KEY is not set; provider requests will be unauthenticated")
        return cls(
            provider_api_key=api_key,
            provider_base_url=env.get("NBA_API_BASE_URL") or DEFAULT_PROVIDER_BASE_URL,
            provider_key_header=env.get("NBA_API_KEY_HEADER") or DEFAULT_PROVIDER_KEY_HEADER,
            timeout_seconds=_env_float(env, "STATS_ARENA_TIMEOUT", DEFAULT_TIMEOUT_SECONDS, clamp_min=0.1),
            cors_origins=_split_origins(env.get("STATS_ARENA_CORS_ORIGINS")),
            host=env.get("HOST") or DEFAULT_HOST,
            port=_env_int(env, "PORT", DEFAULT_PORT, min_value=1),
        )

    def provider_headers(self) -> dict[str, str]:
        if not self.provider_api_key:
            return {}
        return {self.provider_key_header: self.provider_api_key}
