from __future__ import annotations

import logging
from typing import Any, Callable

import redis
from redis.exceptions import RedisError

from probegate.gateway.messages import MessageHandler, MessageResult

logger = logging.getLogger(__name__)


def _payload_bytes(data: Any) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, str):
        return data.encode("utf-8")
    if data is None:
        return b""
    return str(data).encode("utf-8")


def handle_pubsub_message(handler: MessageHandler, message: dict | None) -> MessageResult | None:
    """Feed one pub/sub event to the handler; returns None for non-message events."""
    if not message or message.get("type") not in ("message", "pmessage"):
        return None
    result = handler.on_message(_payload_bytes(message.get("data")))
    if not result.ok:
        logger.warning(
            "message rejected",
            extra={"channel": message.get("channel"), "error": str(result.error)},
        )
    return result


def run_once(pubsub: Any, handler: MessageHandler, *, timeout: float = 1.0) -> MessageResult | None:
    return handle_pubsub_message(handler, pubsub.get_message(timeout=timeout))


def run_forever(
    *,
    redis_url: str,
    channel: str,
    handler: MessageHandler,
    client_factory: Callable[[str], Any] = redis.Redis.from_url,
    should_stop: Callable[[], bool] = lambda: False,
) -> None:
    client = client_factory(redis_url)
    pubsub = client.pubsub(ignore_subscribe_messages=True)
    pubsub.subscribe(channel)
    logger.info("subscribed", extra={"redis_url": redis_url, "channel": channel})
    try:
        while not should_stop():
            try:
                run_once(pubsub, handler)
            except RedisError as e:
                logger.error("redis error while polling", extra={"channel": channel, "error": str(e)})
                raise
    finally:
        pubsub.close()
        client.close()
