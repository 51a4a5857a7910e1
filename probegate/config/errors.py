from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ConfigError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class ProviderError(ConfigError):
    pass


class InvalidKey(ConfigError):
    pass


class InvalidSchema(ConfigError):
    pass


class OtherConfigError(ConfigError):
    pass


class SchemaInvalid(ConfigError):
    pass
