from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from probegate.commands.errors import CommandError
from probegate.commands.types import CommandInvocation

PayloadValidator = Callable[[bytes], CommandInvocation]


@dataclass(frozen=True)
class MessageResult:
    ok: bool
    error: CommandError | None = None


@dataclass(frozen=True)
class MessageHandler:
    """Asynchronous entry point.

    Payloads are accepted as-is. ``validator`` takes the same shape as the
    synchronous body decoder so payloads can later be decoded into a
    ``CommandInvocation``; nothing is installed by default.
    """

    validator: PayloadValidator | None = None

    def on_message(self, payload: bytes) -> MessageResult:
        if self.validator is not None:
            try:
                self.validator(payload)
            except CommandError as e:
                return MessageResult(ok=False, error=e)
        return MessageResult(ok=True)
