"""Tests for hxkit.server.handler — middleware chaining and parameter injection."""

from hxkit.htmx import Htmx
from hxkit.http.headers import Headers
from hxkit.http.request import Request
from hxkit.http.response import Response
from hxkit.middleware.protocol import Next
from hxkit.server.handler import build_handler_kwargs, chain


def _request() -> Request:
    return Request(method="GET", path="/", headers=Headers(((b"hx-request", b"true"),)))


class Clock:
    pass


class TestChain:
    async def test_no_middleware(self) -> None:
        async def endpoint(request: Request) -> Response:
            return Response("done")

        assert (await chain((), endpoint)(_request())).text == "done"

    async def test_positional_next(self) -> None:
        order: list[str] = []

        def named(label: str):
            async def mw(request: Request, call_next: Next) -> Response:
                order.append(label)
                return await call_next(request)

            return mw

        async def endpoint(request: Request) -> Response:
            order.append("endpoint")
            return Response()

        await chain([named("a"), named("b")], endpoint)(_request())
        assert order == ["a", "b", "endpoint"]


class TestBuildHandlerKwargs:
    def test_request_and_htmx(self) -> None:
        def handler(request, htmx): ...

        request = _request()
        kwargs = build_handler_kwargs(handler, request, {})
        assert kwargs["request"] is request
        assert kwargs["htmx"] is Htmx.from_request(request)
        assert kwargs["htmx"].is_htmx is True

    def test_by_annotation(self) -> None:
        def handler(req: Request, hx: Htmx): ...

        kwargs = build_handler_kwargs(handler, _request(), {})
        assert set(kwargs) == {"req", "hx"}

    def test_path_params(self) -> None:
        def handler(id: int, slug, page: int): ...

        kwargs = build_handler_kwargs(handler, _request(), {"id": "3", "slug": "a", "page": "x"})
        assert kwargs == {"id": 3, "slug": "a", "page": "x"}

    def test_provider(self) -> None:
        clock = Clock()

        def handler(clock: Clock): ...

        kwargs = build_handler_kwargs(handler, _request(), {}, {Clock: lambda: clock})
        assert kwargs == {"clock": clock}

    def test_unknown_left_to_default(self) -> None:
        def handler(limit: int = 10): ...

        assert build_handler_kwargs(handler, _request(), {}) == {}
