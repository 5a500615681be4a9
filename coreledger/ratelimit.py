"""Per-client token-bucket rate limiting for WSGI applications."""

from __future__ import annotations

import logging
import threading
import time
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any, Callable, Iterable, Mapping, Sequence

DEFAULT_RATE = 60.0
DEFAULT_BURST = 5
DEFAULT_TTL = 60.0
DEFAULT_IP_LOOKUPS = ("RemoteAddr", "X-Forwarded-For", "X-Real-IP")
DEFAULT_MESSAGE = '{"error": "Too many requests, please try again later."}'
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_STATUS = 429

_log = logging.getLogger(__name__)


@dataclass
class _Bucket:
    tokens: float
    updated: float


def _split_host_port(address: str) -> str:
    if address.startswith("[") and "]:" in address:
        return address[1:address.index("]:")]
    if address.count(":") == 1:
        host, _, port = address.partition(":")
        if port.isdigit():
            return host
    return address


class RateLimiter:
    """Token buckets keyed by client, refilled at ``rate`` tokens per second.

    Each bucket holds at most ``burst`` tokens; buckets unused for ``ttl``
    seconds are forgotten. An empty key is never limited.
    """

    def __init__(
        self,
        rate: float = DEFAULT_RATE,
        burst: int = DEFAULT_BURST,
        ttl: float = DEFAULT_TTL,
        ip_lookups: Sequence[str] = DEFAULT_IP_LOOKUPS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if rate <= 0:
            raise ValueError(f"rate must be positive: {rate}")
        if burst < 1:
            raise ValueError(f"burst must be at least 1: {burst}")
        self.rate = float(rate)
        self.burst = int(burst)
        self.ttl = float(ttl)
        self.ip_lookups = tuple(ip_lookups)
        self._clock = clock
        self._buckets: dict[str, _Bucket] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            self._purge(self._clock())
            return len(self._buckets)

    def _purge(self, now: float) -> None:
        expired = [key for key, bucket in self._buckets.items() if now - bucket.updated >= self.ttl]
        for key in expired:
            del self._buckets[key]

    def allow(self, key: str) -> bool:
        """Take a token for ``key``; return False when none is left."""
        if not key:
            return True
        now = self._clock()
        with self._lock:
            self._purge(now)
            bucket = self._buckets.get(key)
            if bucket is None:
                bucket = _Bucket(tokens=float(self.burst), updated=now)
                self._buckets[key] = bucket
            else:
                elapsed = max(0.0, now - bucket.updated)
                bucket.tokens = min(float(self.burst), bucket.tokens + elapsed * self.rate)
                bucket.updated = now
            if bucket.tokens >= 1.0:
                bucket.tokens -= 1.0
                return True
            return False

    def client_key(self, environ: Mapping[str, Any]) -> str:
        """Return the client address of a WSGI request, following ``ip_lookups``."""
        forwarded_for = environ.get("HTTP_X_FORWARDED_FOR", "")
        real_ip = environ.get("HTTP_X_REAL_IP", "")
        for lookup in self.ip_lookups:
            if lookup == "RemoteAddr":
                return _split_host_port(environ.get("REMOTE_ADDR", "") or "")
            if lookup == "X-Forwarded-For" and forwarded_for:
                parts = [part.strip() for part in forwarded_for.split(",")]
                return parts[-1]
            if lookup == "X-Real-IP" and real_ip:
                return real_ip.strip()
        return ""


class RateLimitMiddleware:
    """WSGI middleware that answers over-limit requests with an error body."""

    def __init__(
        self,
        app: Callable[..., Iterable[bytes]],
        limiter: RateLimiter | None = None,
        message: str = DEFAULT_MESSAGE,
        content_type: str = DEFAULT_CONTENT_TYPE,
        status: int = DEFAULT_STATUS,
    ) -> None:
        self.app = app
        self.limiter = limiter if limiter is not None else RateLimiter()
        self.message = message
        self.content_type = content_type
        self.status = status
        _log.debug("rate limit middleware initialized")

    def __call__(self, environ: dict, start_response: Callable[..., Any]) -> Iterable[bytes]:
        key = self.limiter.client_key(environ)
        if self.limiter.allow(key):
            return self.app(environ, start_response)
        body = self.message.encode("utf-8")
        try:
            phrase = HTTPStatus(self.status).phrase
        except ValueError:
            phrase = "Error"
        start_response(
            f"{self.status} {phrase}",
            [("Content-Type", self.content_type), ("Content-Length", str(len(body)))],
        )
        return [body]