from __future__ import annotations

import json
from pathlib import Path

import probegate_http
import probegate_redis
from probegate.gateway.messages import MessageHandler


def test_http_cli_builds_app_and_invokes_runner():
    called = {}

    def runner(app, **kwargs):
        called["app"] = app
        called.update(kwargs)

    probegate_http.main(["--port", "9999"], runner=runner)
    assert called["app"].title == "probegate"
    assert called["host"] == "127.0.0.1"
    assert called["port"] == 9999


def test_http_cli_reads_config_file(tmp_path: Path):
    cfg_path = tmp_path / "gateway_config.json"
    cfg_path.write_text(
        json.dumps({"schema_version": "1.0", "http": {"host": "0.0.0.0", "port": 8081}}), encoding="utf-8"
    )
    called = {}

    def runner(app, **kwargs):
        called.update(kwargs)

    probegate_http.main(["--config", str(cfg_path)], runner=runner)
    assert called == {"host": "0.0.0.0", "port": 8081}


def test_redis_cli_parses_args_and_invokes_runner():
    called = {}

    def runner(**kwargs):
        called.update(kwargs)

    probegate_redis.main(["--redis-url", "redis://r:6379/2", "--channel", "c"], runner=runner)
    assert called["redis_url"] == "redis://r:6379/2"
    assert called["channel"] == "c"
    assert isinstance(called["handler"], MessageHandler)


def test_http_cli_honours_explicit_port_zero(tmp_path: Path):
    cfg_path = tmp_path / "gateway_config.json"
    cfg_path.write_text(json.dumps({"schema_version": "1.0", "http": {"port": 8081}}), encoding="utf-8")
    called = {}

    def runner(app, **kwargs):
        called.update(kwargs)

    probegate_http.main(["--config", str(cfg_path), "--port", "0"], runner=runner)
    assert called["port"] == 0
