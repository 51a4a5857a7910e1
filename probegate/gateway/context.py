from __future__ import annotations

from dataclasses import dataclass

from probegate.commands.executor import CommandExecutor
from probegate.commands.handlers import build_registry
from probegate.config.settings import GatewaySettings, build_config_store
from probegate.config.store import ConfigStore

from .dispatcher import Dispatcher
from .messages import MessageHandler


@dataclass(frozen=True)
class GatewayContext:
    settings: GatewaySettings
    dispatcher: Dispatcher
    message_handler: MessageHandler


def build_context(settings: GatewaySettings, *, store: ConfigStore | None = None) -> GatewayContext:
    if store is None:
        store = build_config_store(settings)
    executor = CommandExecutor(registry=build_registry(store))
    return GatewayContext(
        settings=settings,
        dispatcher=Dispatcher(executor=executor),
        message_handler=MessageHandler(),
    )
