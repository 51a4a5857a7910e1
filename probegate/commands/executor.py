from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from .errors import CommandError, CommandFailed, InvalidInvocation, UnsupportedCommand
from .registry import CommandRegistry
from .types import CommandInvocation, CommandResult


@dataclass(frozen=True)
class CommandExecutor:
    registry: CommandRegistry

    def execute(self, args: Sequence[str] | CommandInvocation) -> CommandResult:
        invocation = args if isinstance(args, CommandInvocation) else CommandInvocation(args=tuple(args))
        try:
            return self._run(invocation)
        except CommandError as e:
            return CommandResult.failure(e)
        except Exception as e:
            return CommandResult.failure(
                CommandFailed(code="COMMAND_FAILED", message=f"{type(e).__name__}: {e}")
            )

    def _run(self, invocation: CommandInvocation) -> CommandResult:
        if not invocation.args:
            raise InvalidInvocation(code="EMPTY_INVOCATION", message="empty command sequence")
        verb = invocation.verb
        handler = self.registry.lookup(verb)
        if handler is None:
            raise UnsupportedCommand(code="UNSUPPORTED_COMMAND", message=f"command not yet supported: {verb}")
        return handler(invocation.arguments)
