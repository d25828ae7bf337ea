"""Response accumulator — trigger events and htmx response headers.

Handlers queue response-shaping directives here while the request is
processed; the middleware serializes the final state once the handler
returns. One accumulator per request, mutated only by the code handling
that request.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TypeAlias

from hxkit.htmx.headers import ResponseHeader
from hxkit.htmx.location import HxLocation
from hxkit.htmx.payload import TriggerPayload
from hxkit.htmx.swap import SwapStrategy


class TriggerPhase(IntEnum):
    """When htmx fires a triggered event on the client.

    The value doubles as the slot index in the accumulator.
    """

    STANDARD = 0
    AFTER_SETTLE = 1
    AFTER_SWAP = 2

    @property
    def header(self) -> ResponseHeader:
        """The response header that carries events for this phase."""
        return _PHASE_HEADERS[self]


_PHASE_HEADERS = (
    ResponseHeader.TRIGGER,
    ResponseHeader.TRIGGER_AFTER_SETTLE,
    ResponseHeader.TRIGGER_AFTER_SWAP,
)

Triggers: TypeAlias = dict[str, TriggerPayload | None]


class HtmxResponse:
    """Accumulates htmx response state for one request.

    Trigger events are kept in one ordered map per phase. Recording an
    event under an existing name replaces its payload but keeps its
    position. Once a phase has seen a payload it is serialized as a JSON
    object for the rest of the request, even if the payload is later
    overwritten with ``None``.

    Nothing here validates names or values; the serializer decides what
    can go on the wire.
    """

    __slots__ = ("_headers", "_needs_json", "_triggers")

    def __init__(self) -> None:
        self._triggers: list[Triggers] = [{}, {}, {}]
        self._needs_json: list[bool] = [False, False, False]
        self._headers: dict[str, str] = {}

    def __repr__(self) -> str:
        counts = ", ".join(f"{p.name.lower()}={len(self._triggers[p])}" for p in TriggerPhase)
        return f"<HtmxResponse triggers({counts}) headers={list(self._headers)!r}>"

    # -- Trigger events --

    def trigger_event(
        self,
        name: str,
        payload: TriggerPayload | str | None = None,
        phase: TriggerPhase = TriggerPhase.STANDARD,
    ) -> None:
        """Record a client-side event to fire.

        A ``str`` payload is sent as text; use ``TriggerPayload.json`` for
        structured data.
        """
        if isinstance(payload, str):
            payload = TriggerPayload.text(payload)
        phase = TriggerPhase(phase)
        if payload is not None:
            self._needs_json[phase] = True
        self._triggers[phase][name] = payload

    # -- Flat response headers --

    def set_header(self, name: str, value: str) -> None:
        """Set an arbitrary response header, replacing any earlier value."""
        self._headers[str(name)] = value

    def redirect(self, path: str) -> None:
        """Full page redirect (``HX-Redirect``)."""
        self.set_header(ResponseHeader.REDIRECT, path)

    def redirect_with_swap(self, path: str) -> None:
        """Client-side redirect without a full reload (``HX-Location``)."""
        self.set_header(ResponseHeader.LOCATION, path)

    def redirect_with_location(self, location: HxLocation) -> None:
        """Client-side redirect with navigation options (``HX-Location`` JSON)."""
        self.set_header(ResponseHeader.LOCATION, location.to_header_value())

    def refresh(self) -> None:
        """Full page refresh (``HX-Refresh: true``)."""
        self.set_header(ResponseHeader.REFRESH, "true")

    def push_url(self, path: str) -> None:
        self.set_header(ResponseHeader.PUSH_URL, path)

    def replace_url(self, path: str) -> None:
        self.set_header(ResponseHeader.REPLACE_URL, path)

    def reswap(self, strategy: SwapStrategy) -> None:
        """Override how the response is swapped in (``HX-Reswap``)."""
        self.set_header(ResponseHeader.RESWAP, str(SwapStrategy(strategy)))

    def retarget(self, selector: str) -> None:
        """Swap into a different element (``HX-Retarget``)."""
        self.set_header(ResponseHeader.RETARGET, selector)

    def reselect(self, selector: str) -> None:
        """Swap in a different part of the response (``HX-Reselect``)."""
        self.set_header(ResponseHeader.RESELECT, selector)

    # -- Read access for the serializer --

    def triggers(self, phase: TriggerPhase) -> Triggers:
        """A copy of the events recorded for *phase*, in insertion order."""
        return dict(self._triggers[TriggerPhase(phase)])

    def needs_json(self, phase: TriggerPhase) -> bool:
        """Whether any event recorded for *phase* carried a payload."""
        return self._needs_json[TriggerPhase(phase)]

    def headers(self) -> dict[str, str]:
        """A copy of the flat response headers, in insertion order."""
        return dict(self._headers)

    @property
    def is_empty(self) -> bool:
        """True when nothing has been recorded."""
        return not self._headers and not any(self._triggers)
