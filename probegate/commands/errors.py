from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CommandError(Exception):
    code: str
    message: str

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


class DecodeError(CommandError):
    pass


class InvalidInvocation(CommandError):
    pass


class UnsupportedCommand(CommandError):
    pass


class CommandFailed(CommandError):
    pass
