from __future__ import annotations

import os
import re
from dataclasses import dataclass, field
from typing import Mapping, Protocol, Sequence

from .errors import ConfigError, InvalidKey, OtherConfigError, ProviderError

_KEY_RE = re.compile(r"^[a-z][a-z0-9]*(_[a-z0-9]+)*$")


class ConfigStore(Protocol):
    def get(self, key: str) -> str: ...


def validate_key(key: str) -> str:
    if not _KEY_RE.match(key):
        raise InvalidKey(
            code="INVALID_KEY",
            message=f"{key!r}: keys use lowercase letters, digits and single underscores, starting with a letter",
        )
    return key


@dataclass(frozen=True)
class MappingConfigStore:
    values: Mapping[str, str] = field(default_factory=dict)

    def get(self, key: str) -> str:
        validate_key(key)
        if key not in self.values:
            raise ProviderError(code="PROVIDER", message=f"no value for key: {key}")
        return str(self.values[key])


@dataclass(frozen=True)
class EnvConfigStore:
    prefix: str = "PROBEGATE_CONFIG_"
    environ: Mapping[str, str] | None = None

    def env_name(self, key: str) -> str:
        return self.prefix + validate_key(key).upper()

    def get(self, key: str) -> str:
        name = self.env_name(key)
        env = os.environ if self.environ is None else self.environ
        value = env.get(name)
        if value is None:
            raise ProviderError(code="PROVIDER", message=f"environment variable not set: {name}")
        return value


@dataclass(frozen=True)
class LayeredConfigStore:
    """First store that resolves the key wins."""

    stores: Sequence[ConfigStore]

    def get(self, key: str) -> str:
        validate_key(key)
        last: ConfigError = ProviderError(code="PROVIDER", message=f"no provider resolved key: {key}")
        for store in self.stores:
            try:
                return store.get(key)
            except ProviderError as e:
                last = e
            except ConfigError:
                raise
            except Exception as e:
                raise OtherConfigError(code="OTHER", message=str(e)) from e
        raise last
