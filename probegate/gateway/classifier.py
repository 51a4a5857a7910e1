from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Mapping, Sequence

HeaderValue = str | Sequence[str]

REQUIRED_HEADER = ("Foo", "bar")
FIXED_REPLY_HEADERS: tuple[tuple[str, str], ...] = (("lorem", "ipsum"),)
FIXED_REPLY_BODY = b"dolor sit amet"


@dataclass(frozen=True)
class InboundRequest:
    method: str
    path: str
    headers: Mapping[str, HeaderValue] = field(default_factory=dict)
    body: bytes = b""

    @classmethod
    def from_pairs(cls, *, method: str, path: str, pairs: Iterable[tuple[str, str]], body: bytes = b"") -> InboundRequest:
        grouped: dict[str, list[str]] = {}
        for name, value in pairs:
            grouped.setdefault(name, []).append(value)
        headers = {name: tuple(values) for name, values in grouped.items()}
        return cls(method=method, path=path, headers=headers, body=body)


@dataclass(frozen=True)
class MethodNotAllowed:
    pass


@dataclass(frozen=True)
class Dispatch:
    body: bytes


@dataclass(frozen=True)
class NotFound:
    pass


@dataclass(frozen=True)
class BadRequest:
    pass


@dataclass(frozen=True)
class FixedReply:
    status: int = 200
    headers: tuple[tuple[str, str], ...] = FIXED_REPLY_HEADERS
    body: bytes = FIXED_REPLY_BODY


OutcomeDirective = MethodNotAllowed | Dispatch | NotFound | BadRequest | FixedReply


def _values(value: HeaderValue) -> tuple[str, ...]:
    if isinstance(value, str):
        return (value,)
    return tuple(value)


def has_exact_header_set(headers: Mapping[str, HeaderValue]) -> bool:
    # closed allow-list: exactly one header, exactly one value
    if len(headers) != 1:
        return False
    name, value = REQUIRED_HEADER
    if name not in headers:
        return False
    return _values(headers[name]) == (value,)


def classify(request: InboundRequest) -> OutcomeDirective:
    if request.method != "POST":
        return MethodNotAllowed()
    if request.path == "/":
        return Dispatch(body=request.body)
    if request.path != "/foo":
        return NotFound()
    if not has_exact_header_set(request.headers):
        return BadRequest()
    return FixedReply()
