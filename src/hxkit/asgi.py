"""htmx middleware for any ASGI application.

The same contract as ``HtmxMiddleware`` without the hxkit request
pipeline: the ``Htmx`` object is stored in ``scope["state"]`` and the
serialized headers are merged into the ``http.response.start`` message.
Works under Starlette, FastAPI, or any other ASGI framework::

    app = HtmxASGIMiddleware(app)

    async def endpoint(request):
        htmx = Htmx.from_scope(request.scope)
        htmx.trigger_event("refreshList")
        ...
"""

from hxkit._internal.asgi import ASGIApp, Message, Receive, Scope, Send
from hxkit.htmx.context import Htmx
from hxkit.htmx.details import build_snapshot
from hxkit.htmx.serialize import render_headers
from hxkit.middleware.htmx import HtmxConfig


def _merge_raw(
    raw: list[tuple[bytes, bytes]],
    rendered: list[tuple[str, str]],
) -> list[tuple[bytes, bytes]]:
    """Merge rendered headers into raw ASGI pairs, replacing same-named ones."""
    for name, value in rendered:
        name_b = name.lower().encode("latin-1")
        raw = [(n, v) for n, v in raw if n.lower() != name_b]
        raw.append((name_b, value.encode("utf-8")))
    return raw


class HtmxASGIMiddleware:
    """Wrap an ASGI app with htmx request/response handling.

    Non-HTTP scopes pass straight through.
    """

    __slots__ = ("app", "config")

    def __init__(self, app: ASGIApp, config: HtmxConfig | None = None) -> None:
        self.app = app
        self.config = config or HtmxConfig()

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        htmx = Htmx(build_snapshot(scope.get("headers", ())))
        scope.setdefault("state", {})[self.config.extension_key] = htmx

        async def send_with_htmx(message: Message) -> None:
            if message["type"] == "http.response.start":
                raw = list(message.get("headers", []))
                if not htmx.response.is_empty:
                    raw = _merge_raw(raw, render_headers(htmx.response))
                if self.config.vary:
                    raw.append((b"vary", b"HX-Request"))
                message["headers"] = raw
            await send(message)

        await self.app(scope, receive, send_with_htmx)
