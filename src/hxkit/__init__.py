"""hxkit — htmx request/response header negotiation for ASGI apps.

Reads the ``hx-*`` request headers into typed values, lets handlers queue
trigger events and response directives, and writes them out as htmx
response headers once the handler returns.

Basic usage::

    from hxkit import App, Htmx, HtmxMiddleware, TriggerPayload

    app = App()
    app.add_middleware(HtmxMiddleware())

    @app.route("/todos", methods=["POST"])
    async def create(request, htmx: Htmx):
        todo = await save(await request.json())
        htmx.trigger_event("todoCreated", TriggerPayload.json({"id": todo.id}))
        return "<li>...</li>"

Other ASGI frameworks wrap their app instead::

    from hxkit.asgi import HtmxASGIMiddleware
    app = HtmxASGIMiddleware(app)
"""

__version__ = "0.1.0"
__all__ = [
    "App",
    "AppConfig",
    "ConfigurationError",
    "HTTPError",
    "Htmx",
    "HtmxASGIMiddleware",
    "HtmxConfig",
    "HtmxMiddleware",
    "HxLocation",
    "HxkitError",
    "MethodNotAllowed",
    "Middleware",
    "Next",
    "NotFound",
    "PayloadError",
    "Request",
    "Response",
    "SwapStrategy",
    "TriggerPayload",
    "TriggerPhase",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import hxkit`` fast while providing a clean top-level API.
    """
    if name == "App":
        from hxkit.app import App

        return App

    if name == "AppConfig":
        from hxkit.config import AppConfig

        return AppConfig

    if name == "Request":
        from hxkit.http.request import Request

        return Request

    if name == "Response":
        from hxkit.http.response import Response

        return Response

    if name in ("Htmx", "HxLocation", "SwapStrategy", "TriggerPayload", "TriggerPhase"):
        from hxkit import htmx as _htmx

        return getattr(_htmx, name)

    if name in ("HtmxConfig", "HtmxMiddleware", "Middleware", "Next"):
        from hxkit import middleware as _mw

        return getattr(_mw, name)

    if name == "HtmxASGIMiddleware":
        from hxkit.asgi import HtmxASGIMiddleware

        return HtmxASGIMiddleware

    if name in (
        "ConfigurationError",
        "HTTPError",
        "HxkitError",
        "MethodNotAllowed",
        "NotFound",
        "PayloadError",
    ):
        from hxkit import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
