from __future__ import annotations

from dataclasses import dataclass

from probegate.config.errors import ConfigError
from probegate.config.store import ConfigStore

from .errors import InvalidInvocation
from .registry import CommandRegistry
from .types import CommandResult


@dataclass(frozen=True)
class ConfigCommand:
    """``config <key>``: resolve one key in the configuration store.

    The value is discarded; the lookup only has to happen. Store failures are
    not reported to the caller.
    """

    store: ConfigStore

    def __call__(self, args: tuple[str, ...]) -> CommandResult:
        if len(args) != 1:
            raise InvalidInvocation(
                code="CONFIG_ARITY",
                message=f"config expects exactly one key, got {len(args)} argument(s)",
            )
        try:
            self.store.get(args[0])
        except ConfigError:
            pass
        return CommandResult.success()


def build_registry(store: ConfigStore) -> CommandRegistry:
    return CommandRegistry.from_entries([("config", ConfigCommand(store=store))])
