from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Callable

from .errors import CommandError, DecodeError, InvalidInvocation


@dataclass(frozen=True)
class CommandInvocation:
    args: tuple[str, ...]

    @property
    def verb(self) -> str:
        if not self.args:
            raise InvalidInvocation(code="EMPTY_INVOCATION", message="empty command sequence")
        return self.args[0]

    @property
    def arguments(self) -> tuple[str, ...]:
        return self.args[1:]


@dataclass(frozen=True)
class CommandResult:
    error: CommandError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def message(self) -> str | None:
        return self.error.message if self.error is not None else None

    @classmethod
    def success(cls) -> CommandResult:
        return cls()

    @classmethod
    def failure(cls, error: CommandError) -> CommandResult:
        return cls(error=error)


CommandHandler = Callable[[tuple[str, ...]], CommandResult]


def decode_invocation(body: bytes | None) -> CommandInvocation:
    """Decode a request body holding a JSON array of strings.

    Anything else (empty body, invalid JSON, ``null``, an object, non-string
    items) is a ``DecodeError``. An empty array decodes fine; rejecting it is
    the executor's job.
    """
    if not body:
        raise DecodeError(code="EMPTY_BODY", message="empty request body")
    try:
        raw = json.loads(body)
    except (UnicodeDecodeError, ValueError) as e:
        raise DecodeError(code="BODY_PARSE_ERROR", message=str(e)) from e
    if not isinstance(raw, list):
        raise DecodeError(code="BODY_NOT_ARRAY", message=f"expected a JSON array, got {type(raw).__name__}")
    if not all(isinstance(item, str) for item in raw):
        raise DecodeError(code="BODY_NOT_STRINGS", message="expected a JSON array of strings")
    return CommandInvocation(args=tuple(raw))
