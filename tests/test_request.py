"""Tests for hxkit.http.request — Request construction and body access."""

from dataclasses import replace

from hxkit.http.headers import Headers
from hxkit.http.request import Request


def _receiver(*messages: dict):
    pending = list(messages)
    calls: list[int] = []

    async def receive() -> dict:
        calls.append(1)
        return pending.pop(0)

    return receive, calls


def _scope(**overrides) -> dict:
    scope = {
        "type": "http",
        "method": "POST",
        "path": "/todos",
        "query_string": b"page=2",
        "headers": [(b"content-type", b"application/json")],
    }
    scope.update(overrides)
    return scope


class TestFromAsgi:
    def test_fields(self) -> None:
        receive, _ = _receiver()
        request = Request.from_asgi(_scope(), receive)
        assert request.method == "POST"
        assert request.path == "/todos"
        assert request.query_string == b"page=2"
        assert request.headers["content-type"] == "application/json"
        assert request.path_params == {}
        assert request.extensions == {}


class TestBody:
    async def test_chunks_joined(self) -> None:
        receive, _ = _receiver(
            {"type": "http.request", "body": b'{"title":', "more_body": True},
            {"type": "http.request", "body": b'"milk"}', "more_body": False},
        )
        request = Request.from_asgi(_scope(), receive)
        assert await request.json() == {"title": "milk"}

    async def test_read_once(self) -> None:
        receive, calls = _receiver({"type": "http.request", "body": b"hi"})
        request = Request.from_asgi(_scope(), receive)
        assert await request.text() == "hi"
        assert await request.body() == b"hi"
        assert len(calls) == 1

    async def test_disconnect_ends_body(self) -> None:
        receive, _ = _receiver(
            {"type": "http.request", "body": b"part", "more_body": True},
            {"type": "http.disconnect"},
        )
        request = Request.from_asgi(_scope(), receive)
        assert await request.body() == b"part"

    async def test_copy_shares_cache_and_extensions(self) -> None:
        receive, calls = _receiver({"type": "http.request", "body": b"x"})
        request = Request.from_asgi(_scope(), receive)
        await request.body()
        routed = replace(request, path_params={"id": "1"})
        routed.extensions["key"] = "value"
        assert await routed.body() == b"x"
        assert request.extensions == {"key": "value"}
        assert len(calls) == 1

    async def test_no_receive(self) -> None:
        request = Request(method="GET", path="/", headers=Headers())
        assert await request.body() == b""
