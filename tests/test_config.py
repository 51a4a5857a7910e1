from __future__ import annotations

import json
from pathlib import Path

import pytest

from probegate.config.errors import InvalidKey, ProviderError, SchemaInvalid
from probegate.config.settings import DEFAULT_IGNORED_HEADERS, build_config_store, default_settings, load_settings
from probegate.config.store import EnvConfigStore, LayeredConfigStore, MappingConfigStore, validate_key


def write_json(path: Path, obj: dict) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(obj, ensure_ascii=False, indent=2), encoding="utf-8")


@pytest.mark.parametrize("key", ["a", "my_key", "db2_url", "x1"])
def test_valid_keys(key: str):
    assert validate_key(key) == key


@pytest.mark.parametrize("key", ["", "my.key", "My_key", "1abc", "a__b", "trailing_", "_lead", "a-b"])
def test_invalid_keys(key: str):
    with pytest.raises(InvalidKey):
        validate_key(key)


def test_mapping_store():
    store = MappingConfigStore(values={"x": "1"})
    assert store.get("x") == "1"
    with pytest.raises(ProviderError):
        store.get("y")


def test_env_store_uses_prefix():
    store = EnvConfigStore(prefix="APP_", environ={"APP_DB_URL": "postgres://"})
    assert store.env_name("db_url") == "APP_DB_URL"
    assert store.get("db_url") == "postgres://"
    with pytest.raises(ProviderError):
        store.get("other")


def test_env_store_reads_process_environment(monkeypatch: pytest.MonkeyPatch):
    monkeypatch.setenv("PROBEGATE_CONFIG_TOKEN", "t")
    assert EnvConfigStore().get("token") == "t"


def test_layered_store_first_match_wins():
    store = LayeredConfigStore(
        stores=(
            MappingConfigStore(values={"a": "inline"}),
            EnvConfigStore(environ={"PROBEGATE_CONFIG_A": "env", "PROBEGATE_CONFIG_B": "env-b"}),
        )
    )
    assert store.get("a") == "inline"
    assert store.get("b") == "env-b"
    with pytest.raises(ProviderError):
        store.get("c")
    with pytest.raises(InvalidKey):
        store.get("C")


def test_default_settings():
    s = default_settings()
    assert s.http_port == 3000
    assert s.ignored_headers == DEFAULT_IGNORED_HEADERS
    assert s.variables == {}


def test_load_settings_full(tmp_path: Path):
    cfg_path = tmp_path / "gateway_config.json"
    write_json(
        cfg_path,
        {
            "schema_version": "1.0",
            "http": {"host": "0.0.0.0", "port": 8080, "ignored_headers": ["Host", "User-Agent"]},
            "redis": {"url": "redis://cache:6379/1", "channel": "events"},
            "variables": {"my_key": "v"},
            "env_prefix": "GW_",
        },
    )
    s = load_settings(cfg_path)
    assert s.http_host == "0.0.0.0"
    assert s.http_port == 8080
    assert s.ignored_headers == ("host", "user-agent")
    assert s.redis_url == "redis://cache:6379/1"
    assert s.redis_channel == "events"
    assert s.variables == {"my_key": "v"}
    assert build_config_store(s).get("my_key") == "v"


def test_load_settings_minimal_uses_defaults(tmp_path: Path):
    cfg_path = tmp_path / "gateway_config.json"
    write_json(cfg_path, {"schema_version": "1.0"})
    assert load_settings(cfg_path) == default_settings()


@pytest.mark.parametrize(
    "doc",
    [
        {},
        {"schema_version": "2.0"},
        {"schema_version": "1.0", "http": {"port": 0}},
        {"schema_version": "1.0", "variables": {"k": 1}},
        {"schema_version": "1.0", "unexpected": True},
    ],
)
def test_load_settings_rejects_invalid_documents(tmp_path: Path, doc: dict):
    cfg_path = tmp_path / "gateway_config.json"
    write_json(cfg_path, doc)
    with pytest.raises(SchemaInvalid):
        load_settings(cfg_path)


def test_load_settings_unreadable_file(tmp_path: Path):
    cfg_path = tmp_path / "broken.json"
    cfg_path.write_text("{not json", encoding="utf-8")
    with pytest.raises(SchemaInvalid):
        load_settings(cfg_path)
    with pytest.raises(SchemaInvalid):
        load_settings(tmp_path / "missing.json")
