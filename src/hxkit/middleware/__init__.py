"""Middleware — Protocol-based, no inheritance required.

A middleware is any callable matching:
    async def mw(request: Request, next: Next) -> Response

Built-in middleware:
    HtmxMiddleware -- htmx request details in, htmx response headers out
"""

from hxkit.middleware.htmx import HtmxConfig, HtmxMiddleware
from hxkit.middleware.protocol import Middleware, Next

__all__ = [
    "HtmxConfig",
    "HtmxMiddleware",
    "Middleware",
    "Next",
]
