from __future__ import annotations

import argparse
import logging
from pathlib import Path

import uvicorn

from probegate.config.settings import default_settings, load_settings
from probegate.gateway.app import create_app
from probegate.gateway.context import build_context


def main(argv: list[str] | None = None, *, runner=uvicorn.run) -> None:
    p = argparse.ArgumentParser(description="probegate HTTP entry point")
    p.add_argument("--config", default=None, type=Path, help="Path to gateway_config.json")
    p.add_argument("--host", default=None, help="Bind host (overrides config)")
    p.add_argument("--port", default=None, type=int, help="Bind port (overrides config)")
    p.add_argument("--log-level", default="INFO", choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = p.parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    settings = load_settings(args.config) if args.config else default_settings()
    ctx = build_context(settings)

    app = create_app(ctx.dispatcher, ignored_headers=settings.ignored_headers)
    host = args.host if args.host is not None else settings.http_host
    port = args.port if args.port is not None else settings.http_port
    runner(app, host=host, port=port)


if __name__ == "__main__":
    main()
