from __future__ import annotations

from dataclasses import dataclass

from probegate.commands.errors import DecodeError
from probegate.commands.executor import CommandExecutor
from probegate.commands.types import decode_invocation

from .classifier import BadRequest, Dispatch, FixedReply, InboundRequest, MethodNotAllowed, NotFound, classify


@dataclass(frozen=True)
class Reply:
    status: int
    headers: tuple[tuple[str, str], ...] = ()
    body: bytes = b""


@dataclass(frozen=True)
class Dispatcher:
    executor: CommandExecutor

    def dispatch(self, body: bytes | None) -> Reply:
        try:
            invocation = decode_invocation(body)
        except DecodeError:
            # decode failures stay opaque to the caller
            return Reply(status=500)
        result = self.executor.execute(invocation)
        if result.ok:
            return Reply(status=200)
        return Reply(status=500, body=(f"{result.message}\n").encode("utf-8"))

    def handle(self, request: InboundRequest) -> Reply:
        directive = classify(request)
        if isinstance(directive, MethodNotAllowed):
            return Reply(status=405)
        if isinstance(directive, Dispatch):
            return self.dispatch(directive.body)
        if isinstance(directive, NotFound):
            return Reply(status=404)
        if isinstance(directive, BadRequest):
            return Reply(status=400)
        if isinstance(directive, FixedReply):
            return Reply(status=directive.status, headers=directive.headers, body=directive.body)
        raise TypeError(f"unknown directive: {directive!r}")
