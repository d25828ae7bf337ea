"""Content negotiation — maps handler return values to Response objects.

isinstance-based dispatch, no magic, fully predictable.
"""

import json as json_module
from typing import Any

from hxkit.errors import ConfigurationError
from hxkit.http.response import Response


def negotiate(value: Any) -> Response:
    """Convert a route handler's return value to a Response.

    Dispatch order:

    1. ``Response``          -> pass through
    2. ``None``              -> empty 200, text/html
    3. ``str``               -> 200, text/html
    4. ``bytes``             -> 200, application/octet-stream
    5. ``dict`` / ``list``   -> 200, application/json
    6. ``(value, int)``      -> negotiate value, override status
    """
    match value:
        case Response():
            return value
        case None:
            return Response()
        case str():
            return Response(body=value)
        case bytes():
            return Response(body=value, content_type="application/octet-stream")
        case dict() | list():
            return Response(
                body=json_module.dumps(value),
                content_type="application/json",
            )
        case (inner, int() as status):
            return negotiate(inner).with_status(status)
        case _:
            msg = (
                f"Cannot convert {type(value).__name__} to a response. "
                "Return a Response, str, bytes, dict, list, or (value, status)."
            )
            raise ConfigurationError(msg)
