"""Serializer — turns an ``HtmxResponse`` into response headers.

Runs once, after the handler returns. Each trigger phase is rendered
independently: nothing for an empty phase, a comma-joined name list while
no event carries a payload, a JSON object once one does. The flat header
map is copied as-is.

Any header that cannot be put on the wire is dropped with a warning on the
``hxkit.htmx`` logger. Serialization never fails the request.
"""

import json as json_module
import logging
from collections.abc import Iterable

from hxkit.htmx.payload import TriggerPayload
from hxkit.htmx.response import HtmxResponse, TriggerPhase

logger = logging.getLogger("hxkit.htmx")

# RFC 9110 token characters
_TCHAR = frozenset(
    "!#$%&'*+-.^_`|~0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"
)


def is_valid_header_name(name: str) -> bool:
    """True if *name* is a non-empty RFC 9110 token."""
    return bool(name) and all(c in _TCHAR for c in name)


def is_valid_header_value(value: str) -> bool:
    """True if *value* can be sent as a header value.

    Only strings qualify. Control characters other than TAB are rejected
    (a raw newline would split the header), and the value must encode to
    UTF-8.
    """
    if not isinstance(value, str):
        return False
    if any(c != "\t" and (c < " " or c == "\x7f") for c in value):
        return False
    try:
        value.encode("utf-8")
    except UnicodeEncodeError:
        return False
    return True


def serialize_triggers(
    triggers: dict[str, TriggerPayload | None],
    needs_json: bool,
    *,
    header: str = "hx-trigger",
) -> str | None:
    """Render one phase's events as a header value.

    Returns ``None`` when there is nothing to send or the payloads cannot be
    encoded as JSON.
    """
    if not triggers:
        return None
    if not needs_json:
        return ",".join(triggers)
    obj = {
        name: None if payload is None else payload.as_json_value()
        for name, payload in triggers.items()
    }
    try:
        return json_module.dumps(obj, separators=(",", ":"), ensure_ascii=False, allow_nan=False)
    except (TypeError, ValueError):
        logger.warning("Failed to serialize %s header", header, exc_info=True)
        return None


def render_headers(response: HtmxResponse) -> list[tuple[str, str]]:
    """All headers to set, in the order they should be applied.

    Trigger headers come first (standard, after-settle, after-swap), then
    the flat headers in insertion order. Names are lowercased.
    """
    rendered: list[tuple[str, str]] = []

    for phase in TriggerPhase:
        header = str(phase.header)
        value = serialize_triggers(
            response.triggers(phase), response.needs_json(phase), header=header
        )
        if value is None:
            continue
        if not is_valid_header_value(value):
            logger.warning("Failed to parse %s header value: %r", header, value)
            continue
        rendered.append((header, value))

    for name, value in response.headers().items():
        if not is_valid_header_name(name):
            logger.warning("Failed to parse header name: %r", name)
            continue
        if not is_valid_header_value(value):
            logger.warning("Failed to parse %s header value: %r", name, value)
            continue
        rendered.append((name.lower(), value))

    return rendered


def apply_headers(
    headers: Iterable[tuple[str, str]],
    rendered: Iterable[tuple[str, str]],
) -> tuple[tuple[str, str], ...]:
    """Merge *rendered* into *headers*, each one replacing same-named headers."""
    result = list(headers)
    for name, value in rendered:
        lowered = name.lower()
        result = [(n, v) for n, v in result if n.lower() != lowered]
        result.append((name, value))
    return tuple(result)
