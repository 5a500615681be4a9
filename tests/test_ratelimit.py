import json

import pytest

from coreledger.ratelimit import (
    DEFAULT_MESSAGE,
    RateLimiter,
    RateLimitMiddleware,
)


class FakeClock:
    def __init__(self):
        self.now = 1000.0

    def __call__(self):
        return self.now


def ok_app(environ, start_response):
    start_response("200 OK", [("Content-Type", "application/json")])
    return [b'{"message": "ok"}']


def call(app, environ):
    captured = {}

    def start_response(status, headers):
        captured["status"] = status
        captured["headers"] = dict(headers)

    body = b"".join(app(environ, start_response))
    return captured["status"], captured["headers"], body


def test_requests_without_client_address_are_not_limited():
    app = RateLimitMiddleware(ok_app)
    environ = {"REQUEST_METHOD": "GET", "PATH_INFO": "/"}
    for i in range(20):
        status, _, body = call(app, dict(environ))
        assert status.startswith("200"), f"request {i}"
        assert json.loads(body) == {"message": "ok"}


def test_burst_then_limited():
    clock = FakeClock()
    limiter = RateLimiter(clock=clock)
    results = [limiter.allow("10.0.0.1") for _ in range(6)]
    assert results == [True] * 5 + [False]


def test_refill_after_time_passes():
    clock = FakeClock()
    limiter = RateLimiter(rate=60, burst=5, clock=clock)
    for _ in range(5):
        assert limiter.allow("a")
    assert not limiter.allow("a")
    clock.now += 1 / 60 + 1e-9
    assert limiter.allow("a")
    assert not limiter.allow("a")


def test_keys_are_independent():
    clock = FakeClock()
    limiter = RateLimiter(burst=1, clock=clock)
    assert limiter.allow("a")
    assert not limiter.allow("a")
    assert limiter.allow("b")


def test_empty_key_always_allowed():
    limiter = RateLimiter(burst=1, clock=FakeClock())
    assert all(limiter.allow("") for _ in range(10))
    assert len(limiter) == 0


def test_buckets_expire_after_ttl():
    clock = FakeClock()
    limiter = RateLimiter(ttl=60, clock=clock)
    limiter.allow("a")
    limiter.allow("b")
    assert len(limiter) == 2
    clock.now += 61
    assert len(limiter) == 0


@pytest.mark.parametrize("rate,burst", [(0, 5), (-1, 5), (60, 0)])
def test_invalid_settings(rate, burst):
    with pytest.raises(ValueError):
        RateLimiter(rate=rate, burst=burst)


def test_client_key_remote_addr_first():
    limiter = RateLimiter()
    environ = {"REMOTE_ADDR": "10.0.0.7", "HTTP_X_REAL_IP": "10.0.0.9"}
    assert limiter.client_key(environ) == "10.0.0.7"


def test_client_key_strips_port():
    limiter = RateLimiter()
    assert limiter.client_key({"REMOTE_ADDR": "10.0.0.7:5555"}) == "10.0.0.7"
    assert limiter.client_key({"REMOTE_ADDR": "[::1]:80"}) == "::1"


def test_client_key_forwarded_for_takes_last():
    limiter = RateLimiter(ip_lookups=("X-Forwarded-For", "X-Real-IP"))
    environ = {"HTTP_X_FORWARDED_FOR": "10.0.0.1, 10.0.0.2"}
    assert limiter.client_key(environ) == "10.0.0.2"


def test_client_key_real_ip_fallback():
    limiter = RateLimiter(ip_lookups=("X-Forwarded-For", "X-Real-IP"))
    assert limiter.client_key({"HTTP_X_REAL_IP": "10.0.0.3"}) == "10.0.0.3"
    assert limiter.client_key({}) == ""


def test_middleware_rejects_with_429():
    clock = FakeClock()
    app = RateLimitMiddleware(ok_app, RateLimiter(burst=2, clock=clock))
    environ = {"REMOTE_ADDR": "10.0.0.1"}
    statuses = [call(app, dict(environ))[0] for _ in range(3)]
    assert statuses[0].startswith("200")
    assert statuses[1].startswith("200")
    status, headers, body = call(app, dict(environ))
    assert status.startswith("429")
    assert headers["Content-Type"] == "application/json"
    assert body.decode() == DEFAULT_MESSAGE
    assert json.loads(body) == {"error": "Too many requests, please try again later."}