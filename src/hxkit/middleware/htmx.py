"""htmx middleware — request snapshot in, response headers out.

Builds the ``Htmx`` object once per request before the handler runs, then
writes the accumulated trigger events and response directives onto the
response after it returns.
"""

from dataclasses import dataclass, replace

from hxkit.htmx.context import EXTENSION_KEY, Htmx
from hxkit.htmx.details import build_snapshot
from hxkit.htmx.serialize import apply_headers, render_headers
from hxkit.http.request import Request
from hxkit.http.response import Response
from hxkit.middleware.protocol import Next


@dataclass(frozen=True, slots=True)
class HtmxConfig:
    """Configuration for the htmx middlewares.

    ``vary`` appends ``Vary: HX-Request`` to every response so shared
    caches keep full pages and fragments for the same URL apart.
    ``extension_key`` is where the ``Htmx`` object is stored on the
    request (or in ``scope["state"]`` for the ASGI middleware). An injected
    ``htmx`` parameter finds the object by type, so any key works.
    """

    vary: bool = False
    extension_key: str = EXTENSION_KEY


class HtmxMiddleware:
    """Make ``Htmx`` available to handlers and serialize what they queue.

    Usage::

        from hxkit.middleware import HtmxMiddleware

        app.add_middleware(HtmxMiddleware())

        @app.route("/save", methods=["POST"])
        def save(htmx: Htmx):
            htmx.trigger_event("saved")
            return "<p>Saved</p>"

    If the handler raises, the exception propagates and no htmx headers
    are written.
    """

    __slots__ = ("config",)

    def __init__(self, config: HtmxConfig | None = None) -> None:
        self.config = config or HtmxConfig()

    async def __call__(self, request: Request, next: Next) -> Response:
        htmx = Htmx(build_snapshot(request.headers))
        request.extensions[self.config.extension_key] = htmx

        response = await next(request)

        headers = response.headers
        if not htmx.response.is_empty:
            headers = apply_headers(headers, render_headers(htmx.response))
        if self.config.vary:
            headers = (*headers, ("Vary", "HX-Request"))
        if headers is response.headers:
            return response
        return replace(response, headers=headers)
