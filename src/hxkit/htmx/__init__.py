"""htmx request details, response directives, and header serialization.

Most code only needs ``Htmx`` (injected into handlers by
``HtmxMiddleware``) plus the value types it accepts::

    from hxkit.htmx import Htmx, HxLocation, SwapStrategy, TriggerPayload, TriggerPhase
"""

from hxkit.htmx.context import Htmx
from hxkit.htmx.details import HtmxDetails, build_snapshot
from hxkit.htmx.headers import RequestHeader, ResponseHeader
from hxkit.htmx.location import HxLocation
from hxkit.htmx.payload import PayloadKind, TriggerPayload
from hxkit.htmx.response import HtmxResponse, TriggerPhase
from hxkit.htmx.serialize import render_headers
from hxkit.htmx.swap import SwapStrategy

__all__ = [
    "Htmx",
    "HtmxDetails",
    "HtmxResponse",
    "HxLocation",
    "PayloadKind",
    "RequestHeader",
    "ResponseHeader",
    "SwapStrategy",
    "TriggerPayload",
    "TriggerPhase",
    "build_snapshot",
    "render_headers",
]
