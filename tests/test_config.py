from datetime import timedelta

import pytest

from coreledger.config import (
    CommonConfig,
    Config,
    DatabaseConfig,
    EnvReader,
    JWTConfig,
    RedisConfig,
    VersionConfig,
    get_config,
    load_config,
    reader,
)


def test_from_env_reads_every_section():
    environ = {
        "API_SECRET_KEY": "secret",
        "BASE_URL": "http://localhost",
        "NAME": "ledger",
        "MODE": "dev",
        "PORT": "9000",
        "LOG": "true",
        "LOG_TYPES": "info",
        "VERSION_CODE": "7",
        "VERSION_NAME": "v7",
        "VERSION_PATH": "/v7",
        "POSTGES_HOST": "db",
        "POSTGES_PORT": "5432",
        "POSTGES_USER": "user",
        "POSTGES_DB": "ledger",
        "REDIS_URL": "redis://localhost",
        "REDIS_SKIP_TLS": "1",
        "JWT_SECRET": "secret",
        "JWT_EXPIRES_IN": "3600",
    }
    cfg = Config.from_env(environ)
    assert cfg.common == CommonConfig(
        api_secret_key="secret",
        base_url="http://localhost",
        name="ledger",
        mode="dev",
        port="9000",
        log=True,
        log_types="info",
    )
    assert cfg.version == VersionConfig(code=7, name="v7", path="/v7")
    assert cfg.database == DatabaseConfig(host="db", port=5432, user="user", db_name="ledger")
    assert cfg.redis == RedisConfig(url="redis://localhost", skip_tls=True)
    assert cfg.jwt == JWTConfig(secret="secret", expires_in=3600)


def test_missing_values_keep_zero_values():
    cfg = Config.from_env({})
    assert cfg == Config()
    assert cfg.common.port == ""
    assert cfg.database.port == 0
    assert cfg.redis.skip_tls is False


def test_empty_string_counts_as_unset():
    cfg = Config.from_env({"POSTGES_PORT": "", "LOG": ""})
    assert cfg.database.port == 0
    assert cfg.common.log is False


@pytest.mark.parametrize("raw", ["abc", "1.5", "12x"])
def test_invalid_integer_raises(raw):
    with pytest.raises(ValueError):
        Config.from_env({"VERSION_CODE": raw})


def test_invalid_boolean_raises():
    with pytest.raises(ValueError):
        Config.from_env({"LOG": "yes"})


@pytest.mark.parametrize(
    "raw, expected",
    [("1", True), ("t", True), ("TRUE", True), ("True", True), ("0", False), ("F", False), ("false", False)],
)
def test_boolean_spellings(raw, expected):
    assert Config.from_env({"REDIS_SKIP_TLS": raw}).redis.skip_tls is expected


def test_load_config_with_explicit_environ():
    cfg = load_config({"NAME": "ledger", "PORT": "8080"})
    assert cfg.common.name == "ledger"
    assert cfg.common.port == "8080"


def test_get_config_is_cached():
    first = get_config()
    second = get_config()
    assert second is first
    assert second.common.port == first.common.port


def test_reader_get_upper_cases_key():
    env = EnvReader({"PORT": "9000"})
    assert env.get("port") == "9000"
    assert env.get("missing") == ""


def test_reader_get_bool():
    env = EnvReader({"FLAG": "true", "BAD": "maybe"})
    assert env.get_bool("flag") is True
    assert env.get_bool("bad") is False
    assert env.get_bool("missing") is False


def test_reader_get_int():
    env = EnvReader({"COUNT": "42", "BAD": "abc", "HEX": "0x10"})
    assert env.get_int("count") == 42
    assert env.get_int("bad") == 0
    assert env.get_int("hex") == 16
    assert env.get_int("missing") == 0


def test_reader_get_duration():
    env = EnvReader({"TTL": "1h30m", "NANOS": "2000", "BAD": "bogus", "NEG": "-5s"})
    assert env.get_duration("ttl") == timedelta(hours=1, minutes=30)
    assert env.get_duration("nanos") == timedelta(microseconds=2)
    assert env.get_duration("bad") == timedelta(0)
    assert env.get_duration("neg") == timedelta(seconds=-5)
    assert env.get_duration("missing") == timedelta(0)


def test_reader_is_shared():
    shared = reader()
    assert reader() is shared
    assert shared.get("coreledger_definitely_unset_key") == ""
    assert shared.get_int("coreledger_definitely_unset_key") == 0