from __future__ import annotations

import argparse
import logging
from pathlib import Path

from probegate.config.settings import default_settings, load_settings
from probegate.gateway.context import build_context
from probegate.messaging.subscriber import run_forever


def main(argv: list[str] | None = None, *, runner=run_forever) -> None:
    p = argparse.ArgumentParser(description="probegate Redis message subscriber")
    p.add_argument("--config", default=None, type=Path, help="Path to gateway_config.json")
    p.add_argument("--redis-url", default=None, help="Redis URL (overrides config)")
    p.add_argument("--channel", default=None, help="Channel to subscribe to (overrides config)")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = load_settings(args.config) if args.config else default_settings()
    ctx = build_context(settings)

    runner(
        redis_url=args.redis_url if args.redis_url is not None else settings.redis_url,
        channel=args.channel if args.channel is not None else settings.redis_channel,
        handler=ctx.message_handler,
    )


if __name__ == "__main__":
    main()
