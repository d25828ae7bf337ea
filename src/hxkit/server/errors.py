"""Error handling pipeline for hxkit requests.

Maps HTTPError exceptions and unexpected failures to Response objects.
For htmx requests the error response also tells htmx where to put it,
using the same serializer the htmx middleware uses.
"""

import logging
from dataclasses import replace

from hxkit.errors import HTTPError
from hxkit.htmx.response import HtmxResponse
from hxkit.htmx.serialize import apply_headers, render_headers
from hxkit.htmx.swap import SwapStrategy
from hxkit.http.request import Request
from hxkit.http.response import Response

logger = logging.getLogger("hxkit.server")

ERROR_TARGET = "#hxkit-error"
ERROR_EVENT = "hxkitError"


def _with_htmx_error_headers(response: Response, request: Request) -> Response:
    """Point htmx at the error container when the request came from htmx.

    Headers added:
    - ``HX-Retarget: #hxkit-error`` — swap the error into a dedicated container
    - ``HX-Reswap: innerHTML`` — replace (not append) the error content
    - ``HX-Trigger: hxkitError`` — fire a client-side event for custom handling
    """
    if not request.is_fragment:
        return response
    directives = HtmxResponse()
    directives.retarget(ERROR_TARGET)
    directives.reswap(SwapStrategy.INNER_HTML)
    directives.trigger_event(ERROR_EVENT)
    headers = apply_headers(response.headers, render_headers(directives))
    return replace(response, headers=headers)


def handle_http_error(exc: HTTPError, request: Request, debug: bool) -> Response:
    """Map an HTTPError to a plain-text Response."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    detail = exc.detail or f"Error {exc.status}"
    if debug and exc.detail:
        detail = f"{exc.status}: {exc.detail}"

    resp = Response(body=detail, status=exc.status, content_type="text/plain; charset=utf-8")
    for name, value in exc.headers:
        resp = resp.with_header(name, value)
    return _with_htmx_error_headers(resp, request)


def handle_internal_error(exc: Exception, request: Request, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    body = f"Internal Server Error: {type(exc).__name__}: {exc}" if debug else "Internal Server Error"
    resp = Response(body=body, status=500, content_type="text/plain; charset=utf-8")
    return _with_htmx_error_headers(resp, request)
