"""Request snapshot — typed read access to inbound htmx headers.

Built once per request from the raw header bytes. Decoding problems are
never surfaced: a flag that cannot be read is ``False`` and a string that
is not valid UTF-8 is ``None``.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from hxkit.htmx.headers import RequestHeader
from hxkit.http.headers import Headers

if TYPE_CHECKING:
    from hxkit.http.request import Request


@dataclass(frozen=True, slots=True)
class HtmxDetails:
    """What htmx told us about the request.

    ``trigger`` is the id of the element that fired the request; it shares
    its name with the outbound ``HX-Trigger`` header but is unrelated to it.
    """

    is_htmx: bool = False
    boosted: bool = False
    history_restore_request: bool = False
    current_url: str | None = None
    prompt: str | None = None
    target: str | None = None
    trigger: str | None = None
    trigger_name: str | None = None

    @classmethod
    def from_request(cls, request: Request) -> HtmxDetails:
        return build_snapshot(request.headers)


def _flag(headers: Headers, name: RequestHeader) -> bool:
    # Only the exact literal counts: "True", "1" and "" are all false.
    return headers.get_text(name) == "true"


def build_snapshot(headers: Headers | Iterable[tuple[bytes, bytes]]) -> HtmxDetails:
    """Parse the htmx request headers into an ``HtmxDetails``.

    Accepts a ``Headers`` object or raw ASGI header pairs. The first
    occurrence of a repeated header wins. Never raises.
    """
    if not isinstance(headers, Headers):
        headers = Headers(headers)
    return HtmxDetails(
        is_htmx=_flag(headers, RequestHeader.REQUEST),
        boosted=_flag(headers, RequestHeader.BOOSTED),
        history_restore_request=_flag(headers, RequestHeader.HISTORY_RESTORE_REQUEST),
        current_url=headers.get_text(RequestHeader.CURRENT_URL),
        prompt=headers.get_text(RequestHeader.PROMPT),
        target=headers.get_text(RequestHeader.TARGET),
        trigger=headers.get_text(RequestHeader.TRIGGER),
        trigger_name=headers.get_text(RequestHeader.TRIGGER_NAME),
    )
