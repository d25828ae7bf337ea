"""Request pipeline — one ASGI HTTP request from scope to sent response.

Builds the ``Request``, runs it through the middleware chain into the
matched route handler, maps errors to responses, and sends the result.
"""

import inspect
from collections.abc import Callable, Sequence
from dataclasses import replace
from typing import Any, TypeAlias

from hxkit._internal.asgi import Receive, Scope, Send
from hxkit._internal.invoke import invoke
from hxkit.errors import HTTPError
from hxkit.htmx.context import Htmx
from hxkit.http.request import Request
from hxkit.http.response import Response
from hxkit.middleware.protocol import Next
from hxkit.routing.route import RouteMatch
from hxkit.routing.router import Router
from hxkit.server.errors import handle_http_error, handle_internal_error
from hxkit.server.negotiation import negotiate
from hxkit.server.sender import send_response

Providers: TypeAlias = dict[type, Callable[..., Any]]

# Returned by _resolve when a parameter has no source; the handler's
# own default (or a TypeError) applies.
_UNRESOLVED = object()


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    router: Router,
    middleware: Sequence[Callable[..., Any]],
    debug: bool,
    providers: Providers | None = None,
) -> None:
    """Serve one HTTP request."""
    request = Request.from_asgi(scope, receive)

    async def endpoint(req: Request) -> Response:
        return await _call_route(router.match(req.method, req.path), req, providers or {})

    try:
        response = await chain(middleware, endpoint)(request)
    except HTTPError as exc:
        response = handle_http_error(exc, request, debug)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug)

    await send_response(response, send)


def chain(middleware: Sequence[Callable[..., Any]], endpoint: Next) -> Next:
    """Wrap *endpoint* so the first middleware in the sequence runs first."""
    for mw in reversed(middleware):
        endpoint = _link(mw, endpoint)
    return endpoint


def _link(mw: Callable[..., Any], downstream: Next) -> Next:
    async def call(request: Request) -> Response:
        return await mw(request, downstream)

    return call


async def _call_route(match: RouteMatch, request: Request, providers: Providers) -> Response:
    # replace() keeps the same extensions dict, so the handler sees the
    # Htmx object the middleware stored.
    request = replace(request, path_params=match.path_params)
    kwargs = build_handler_kwargs(match.handler, request, match.path_params, providers)
    return negotiate(await invoke(match.handler, **kwargs))


def build_handler_kwargs(
    handler: Callable[..., Any],
    request: Request,
    path_params: dict[str, str],
    providers: Providers | None = None,
) -> dict[str, Any]:
    """Map each handler parameter to a value.

    Parameters are matched, in order of precedence, as the request
    (``request`` or annotated ``Request``), the htmx object (``htmx`` or
    annotated ``Htmx``), a path parameter converted with its annotation,
    or a provider registered for the annotation. Anything else is left to
    the handler's default.
    """
    kwargs: dict[str, Any] = {}
    for name, param in inspect.signature(handler, eval_str=True).parameters.items():
        value = _resolve(name, param.annotation, request, path_params, providers or {})
        if value is not _UNRESOLVED:
            kwargs[name] = value
    return kwargs


def _resolve(
    name: str,
    annotation: Any,
    request: Request,
    path_params: dict[str, str],
    providers: Providers,
) -> Any:
    if name == "request" or annotation is Request:
        return request
    if name == "htmx" or annotation is Htmx:
        return Htmx.from_request(request)
    if name in path_params:
        return _convert(path_params[name], annotation)
    if annotation in providers:
        return providers[annotation]()
    return _UNRESOLVED


def _convert(raw: str, annotation: Any) -> Any:
    if annotation is inspect.Parameter.empty:
        return raw
    try:
        return annotation(raw)
    except (TypeError, ValueError):
        return raw
