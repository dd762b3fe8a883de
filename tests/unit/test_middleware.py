"""Tests for raw ASGI middleware (request id, timeout)."""

import asyncio
import json
import uuid

from orgchart.middleware import RequestIDMiddleware, TimeoutMiddleware
from orgchart.middleware.request_id import sanitize_request_id


class TestSanitizeRequestId:
    def test_keeps_safe_value(self) -> None:
        assert sanitize_request_id("abc-123_X") == "abc-123_X"

    def test_replaces_unsafe_value(self) -> None:
        value = sanitize_request_id("bad\nvalue")
        assert uuid.UUID(value)

    def test_generates_when_missing(self) -> None:
        assert uuid.UUID(sanitize_request_id(None))

    def test_rejects_too_long(self) -> None:
        assert sanitize_request_id("a" * 65) != "a" * 65


def _scope(headers: list[tuple[bytes, bytes]] | None = None) -> dict:
    return {"type": "http", "method": "GET", "path": "/x", "headers": headers or []}


async def _ok_app(scope, receive, send) -> None:
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"ok"})


async def test_request_id_echoed() -> None:
    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    app = RequestIDMiddleware(_ok_app)
    scope = _scope([(b"x-request-id", b"req-1")])
    await app(scope, None, send)
    assert (b"x-request-id", b"req-1") in sent[0]["headers"]
    assert scope["state"]["request_id"] == "req-1"


async def test_timeout_returns_504() -> None:
    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    async def slow_app(scope, receive, send) -> None:
        await asyncio.sleep(5)

    app = TimeoutMiddleware(slow_app, timeout_seconds=0.01)
    await app(_scope(), None, send)
    assert sent[0]["status"] == 504
    assert json.loads(sent[1]["body"])["error"] == "GATEWAY_TIMEOUT"


async def test_fast_request_passes_through() -> None:
    sent: list[dict] = []

    async def send(message: dict) -> None:
        sent.append(message)

    app = TimeoutMiddleware(_ok_app, timeout_seconds=1)
    await app(_scope(), None, send)
    assert sent[0]["status"] == 200
