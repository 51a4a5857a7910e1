from __future__ import annotations

import logging
from typing import Iterable

from fastapi import FastAPI, Request, Response
from starlette.types import Receive, Scope, Send

from probegate.config.settings import DEFAULT_IGNORED_HEADERS

from .classifier import InboundRequest
from .dispatcher import Dispatcher, Reply

logger = logging.getLogger(__name__)


def canonical_header_name(name: str) -> str:
    """``foo-bar`` -> ``Foo-Bar``; ASGI hands names over lowercased."""
    return "-".join(part[:1].upper() + part[1:].lower() for part in name.split("-"))


def header_pairs(raw: Iterable[tuple[bytes, bytes]], ignored: frozenset[str]) -> list[tuple[str, str]]:
    pairs: list[tuple[str, str]] = []
    for name, value in raw:
        text = name.decode("latin-1")
        if text.lower() in ignored:
            continue
        pairs.append((canonical_header_name(text), value.decode("latin-1")))
    return pairs


def to_response(reply: Reply) -> Response:
    return Response(content=reply.body, status_code=reply.status, headers=dict(reply.headers))


class InboundEndpoint:
    """Raw ASGI endpoint so every method, standard or not, reaches the classifier."""

    def __init__(self, dispatcher: Dispatcher, ignored: frozenset[str]) -> None:
        self.dispatcher = dispatcher
        self.ignored = ignored

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        request = Request(scope, receive)
        inbound_request = InboundRequest.from_pairs(
            method=request.method,
            path=request.url.path,
            pairs=header_pairs(scope.get("headers") or [], self.ignored),
            body=await request.body(),
        )
        reply = self.dispatcher.handle(inbound_request)
        logger.debug(
            "handled inbound request",
            extra={"method": inbound_request.method, "path": inbound_request.path, "status": reply.status},
        )
        await to_response(reply)(scope, receive, send)


def create_app(dispatcher: Dispatcher, *, ignored_headers: Iterable[str] = DEFAULT_IGNORED_HEADERS) -> FastAPI:
    ignored = frozenset(h.lower() for h in ignored_headers)
    app = FastAPI(title="probegate", version="0.1.0", docs_url=None, redoc_url=None, openapi_url=None)
    # no method list: the route accepts any method and the classifier answers 405
    app.add_route("/{path:path}", InboundEndpoint(dispatcher, ignored), include_in_schema=False)
    return app
