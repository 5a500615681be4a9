"""Application configuration read from environment variables."""

from __future__ import annotations

import functools
import os
import re
from dataclasses import dataclass, field, fields
from datetime import timedelta
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Any, Mapping, Optional

from dotenv import load_dotenv

_TRUE_WORDS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_WORDS = frozenset({"0", "f", "F", "FALSE", "false", "False"})
_INT_RE = re.compile(r"[+-]?\d+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def _parse_bool(raw: str) -> bool:
    if raw in _TRUE_WORDS:
        return True
    if raw in _FALSE_WORDS:
        return False
    raise ValueError(f"invalid boolean value: {raw!r}")


def _parse_int(raw: str) -> int:
    if not _INT_RE.fullmatch(raw):
        raise ValueError(f"invalid integer value: {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"integer value out of range: {raw!r}")
    return value


def _convert(raw: str, default: Any, name: str) -> Any:
    try:
        if isinstance(default, bool):
            return _parse_bool(raw)
        if isinstance(default, int):
            return _parse_int(raw)
    except ValueError as exc:
        raise ValueError(f"environment variable {name}: {exc}") from None
    return raw


def _from_environ(cls: type, environ: Mapping[str, str], prefix: str) -> Any:
    """Fill ``cls`` from variables named ``prefix`` + the upper-cased field name.

    A field may name its variable explicitly through the ``env`` metadata key.
    """
    values = {}
    for f in fields(cls):
        name = f.metadata.get("env", prefix + f.name.upper())
        raw = environ.get(name, "")
        if raw == "":
            continue
        values[f.name] = _convert(raw, f.default, name)
    return cls(**values)


@dataclass(frozen=True)
class CommonConfig:
    """General service settings."""

    api_secret_key: str = ""
    base_url: str = ""
    name: str = ""
    mode: str = ""
    port: str = ""
    log: bool = False
    log_types: str = ""


@dataclass(frozen=True)
class VersionConfig:
    """Version information reported in responses."""

    code: int = 0
    name: str = ""
    path: str = ""


@dataclass(frozen=True)
class DatabaseConfig:
    """Database connection settings."""

    host: str = ""
    port: int = 0
    user: str = ""
    password: str = ""
    db_name: str = field(default="", metadata={"env": "POSTGES_DB"})


@dataclass(frozen=True)
class RedisConfig:
    """Redis connection settings."""

    url: str = ""
    skip_tls: bool = False


@dataclass(frozen=True)
class JWTConfig:
    """Token signing settings."""

    secret: str = ""
    expires_in: int = 0


@dataclass(frozen=True)
class Config:
    """The whole application configuration."""

    common: CommonConfig = field(default_factory=CommonConfig)
    version: VersionConfig = field(default_factory=VersionConfig)
    database: DatabaseConfig = field(default_factory=DatabaseConfig)
    redis: RedisConfig = field(default_factory=RedisConfig)
    jwt: JWTConfig = field(default_factory=JWTConfig)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a configuration from ``environ`` (the process environment by default).

        Unset or empty variables keep their zero values; a value that cannot
        be parsed raises ValueError.
        """
        env = os.environ if environ is None else environ
        return cls(
            common=_from_environ(CommonConfig, env, ""),
            version=_from_environ(VersionConfig, env, "VERSION_"),
            database=_from_environ(DatabaseConfig, env, "POSTGES_"),
            redis=_from_environ(RedisConfig, env, "REDIS_"),
            jwt=_from_environ(JWTConfig, env, "JWT_"),
        )


def load_config(environ: Optional[Mapping[str, str]] = None) -> Config:
    """Load the configuration.

    Without ``environ`` a ``.env`` file in the working directory is loaded into
    the process environment first (existing variables win), then the process
    environment is read.
    """
    if environ is None:
        load_dotenv(dotenv_path=Path.cwd() / ".env", override=False)
    return Config.from_env(environ)


@functools.lru_cache(maxsize=None)
def get_config() -> Config:
    """Return the process-wide configuration, loading it on first use."""
    return load_config()


_DURATION_UNITS = {
    "ns": Decimal(1),
    "us": Decimal(1_000),
    "µs": Decimal(1_000),
    "μs": Decimal(1_000),
    "ms": Decimal(1_000_000),
    "s": Decimal(1_000_000_000),
    "m": Decimal(60_000_000_000),
    "h": Decimal(3_600_000_000_000),
}
_DURATION_PART = re.compile(r"(\d+\.?\d*|\.\d+)(ns|us|µs|μs|ms|s|m|h)")
_DURATION_HINT = set("nsuµmh")


def _parse_duration(text: str) -> timedelta:
    sign = 1
    rest = text
    if rest and rest[0] in "+-":
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    if rest == "0":
        return timedelta(0)
    if not rest:
        raise ValueError(f"invalid duration: {text!r}")
    total = Decimal(0)
    pos = 0
    while pos < len(rest):
        match = _DURATION_PART.match(rest, pos)
        if match is None:
            raise ValueError(f"invalid duration: {text!r}")
        try:
            amount = Decimal(match.group(1))
        except InvalidOperation:
            raise ValueError(f"invalid duration: {text!r}") from None
        total += amount * _DURATION_UNITS[match.group(2)]
        pos = match.end()
    nanoseconds = sign * int(total)
    return timedelta(microseconds=nanoseconds / 1000)


def _trim_zero_decimal(text: str) -> str:
    whole, dot, fraction = text.partition(".")
    if dot and whole and fraction and set(fraction) == {"0"}:
        return whole
    return text


class EnvReader:
    """Typed lookups of single environment variables.

    Keys are matched case-insensitively by upper-casing them. Values that
    cannot be converted give the zero value of the requested type.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None) -> None:
        self._environ = environ

    def _raw(self, key: str) -> str:
        env = os.environ if self._environ is None else self._environ
        return env.get(key.upper(), "")

    def get(self, key: str) -> str:
        """Return the variable as a string, or "" when unset."""
        return self._raw(key)

    def get_bool(self, key: str) -> bool:
        """Return the variable as a boolean, False when unset or invalid."""
        try:
            return _parse_bool(self._raw(key).strip())
        except ValueError:
            return False

    def get_int(self, key: str) -> int:
        """Return the variable as an integer, 0 when unset or invalid."""
        text = _trim_zero_decimal(self._raw(key).strip())
        try:
            return int(text, 0)
        except ValueError:
            pass
        if re.fullmatch(r"[+-]?0[0-7]+", text):
            return int(text, 8)
        return 0

    def get_duration(self, key: str) -> timedelta:
        """Return the variable as a duration, zero when unset or invalid.

        Text without a unit is read as nanoseconds.
        """
        text = self._raw(key).strip()
        if not _DURATION_HINT.intersection(text):
            text += "ns"
        try:
            return _parse_duration(text)
        except ValueError:
            return timedelta(0)


@functools.lru_cache(maxsize=None)
def reader() -> EnvReader:
    """Return the shared reader over the process environment."""
    return EnvReader()