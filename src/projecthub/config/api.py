"""HTTP API configuration values."""

from __future__ import annotations

from dataclasses import dataclass, field

from .env import env_int, optional_env_var

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


@dataclass(frozen=True, slots=True)
class ApiConfig:
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    cors_origins: tuple[str, ...] = field(default_factory=tuple)


def _split_origins(value: str | None) -> tuple[str, ...]:
    if value is None:
        return ()
    return tuple(origin.strip() for origin in value.split(",") if origin.strip())


def get_api_config() -> ApiConfig:
    return ApiConfig(
        host=optional_env_var("PROJECTHUB_HOST") or DEFAULT_HOST,
        port=env_int("PROJECTHUB_PORT", DEFAULT_PORT),
        cors_origins=_split_origins(optional_env_var("PROJECTHUB_CORS_ORIGINS")),
    )
