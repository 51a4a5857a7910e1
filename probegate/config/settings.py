from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .errors import SchemaInvalid
from .schema import SchemaRegistry, read_json
from .store import ConfigStore, EnvConfigStore, LayeredConfigStore, MappingConfigStore

DEFAULT_IGNORED_HEADERS: tuple[str, ...] = (
    "host",
    "connection",
    "content-length",
    "transfer-encoding",
)


@dataclass(frozen=True)
class GatewaySettings:
    schema_version: str = "1.0"
    http_host: str = "127.0.0.1"
    http_port: int = 3000
    ignored_headers: tuple[str, ...] = DEFAULT_IGNORED_HEADERS
    redis_url: str = "redis://localhost:6379/0"
    redis_channel: str = "probegate"
    variables: dict[str, str] = field(default_factory=dict)
    env_prefix: str = "PROBEGATE_CONFIG_"


def default_settings() -> GatewaySettings:
    return GatewaySettings()


def load_settings(config_path: Path, schemas: SchemaRegistry | None = None) -> GatewaySettings:
    try:
        raw = read_json(config_path)
    except (OSError, ValueError) as e:
        raise SchemaInvalid(code="CONFIG_UNREADABLE", message=f"{config_path}: {e}") from e
    (schemas or SchemaRegistry()).validate(raw, "gateway_config.schema.json")

    defaults = default_settings()
    http = raw.get("http") or {}
    redis = raw.get("redis") or {}
    ignored = http.get("ignored_headers")

    return GatewaySettings(
        schema_version=str(raw["schema_version"]),
        http_host=str(http.get("host", defaults.http_host)),
        http_port=int(http.get("port", defaults.http_port)),
        ignored_headers=tuple(h.lower() for h in ignored) if isinstance(ignored, list) else defaults.ignored_headers,
        redis_url=str(redis.get("url", defaults.redis_url)),
        redis_channel=str(redis.get("channel", defaults.redis_channel)),
        variables=dict(raw.get("variables") or {}),
        env_prefix=str(raw.get("env_prefix", defaults.env_prefix)),
    )


def build_config_store(settings: GatewaySettings) -> ConfigStore:
    return LayeredConfigStore(
        stores=(
            MappingConfigStore(values=dict(settings.variables)),
            EnvConfigStore(prefix=settings.env_prefix),
        )
    )
