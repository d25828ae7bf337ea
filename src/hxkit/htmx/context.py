"""The per-request ``Htmx`` object handed to handlers.

Pairs the read-only request snapshot with the response accumulator.
``HtmxMiddleware`` creates one per request and stores it on the request;
handlers receive it by declaring an ``htmx`` parameter (or one annotated
``Htmx``). There is no ambient global: the object travels with the request.
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

from hxkit.htmx.details import HtmxDetails, build_snapshot
from hxkit.htmx.location import HxLocation
from hxkit.htmx.payload import TriggerPayload
from hxkit.htmx.response import HtmxResponse, TriggerPhase
from hxkit.htmx.swap import SwapStrategy

if TYPE_CHECKING:
    from hxkit._internal.asgi import Scope
    from hxkit.http.request import Request

EXTENSION_KEY = "htmx"


class Htmx:
    """htmx request details plus the response directives for one request.

    Usage::

        @app.route("/items/{id}", methods=["DELETE"])
        async def delete_item(id: int, htmx: Htmx):
            await store.delete(id)
            htmx.trigger_event("itemDeleted", TriggerPayload.json({"id": id}))
            if htmx.target is None:
                htmx.redirect("/items")
            return ""
    """

    __slots__ = ("details", "response")

    def __init__(self, details: HtmxDetails, response: HtmxResponse | None = None) -> None:
        self.details = details
        self.response = response if response is not None else HtmxResponse()

    def __repr__(self) -> str:
        return f"<Htmx is_htmx={self.is_htmx} target={self.target!r} {self.response!r}>"

    # -- Lookup --

    @classmethod
    def from_request(cls, request: Request, *, key: str | None = None) -> Htmx:
        """The ``Htmx`` for *request*, built and stored on first access.

        With no *key*, the stored object is found by type, so handlers see
        the middleware's object whatever ``extension_key`` it was given.
        Without the middleware the object still works for reading request
        details, but nothing serializes the response directives.
        """
        htmx = _lookup(request.extensions, key)
        if htmx is None:
            htmx = cls(build_snapshot(request.headers))
            request.extensions[key or EXTENSION_KEY] = htmx
        return htmx

    @classmethod
    def from_scope(cls, scope: Scope, *, key: str | None = None) -> Htmx:
        """The ``Htmx`` for a raw ASGI scope (see ``HtmxASGIMiddleware``)."""
        state = scope.setdefault("state", {})
        htmx = _lookup(state, key)
        if htmx is None:
            htmx = cls(build_snapshot(scope.get("headers", ())))
            state[key or EXTENSION_KEY] = htmx
        return htmx

    # -- Request details --

    @property
    def is_htmx(self) -> bool:
        return self.details.is_htmx

    @property
    def boosted(self) -> bool:
        return self.details.boosted

    @property
    def history_restore_request(self) -> bool:
        return self.details.history_restore_request

    @property
    def current_url(self) -> str | None:
        return self.details.current_url

    @property
    def prompt(self) -> str | None:
        return self.details.prompt

    @property
    def target(self) -> str | None:
        return self.details.target

    @property
    def trigger(self) -> str | None:
        """Id of the element that fired the request (``HX-Trigger``)."""
        return self.details.trigger

    @property
    def trigger_name(self) -> str | None:
        return self.details.trigger_name

    # -- Response directives --

    def trigger_event(
        self,
        name: str,
        payload: TriggerPayload | str | None = None,
        phase: TriggerPhase = TriggerPhase.STANDARD,
    ) -> None:
        """Fire event *name* on the client. See ``HtmxResponse.trigger_event``."""
        self.response.trigger_event(name, payload, phase)

    def set_header(self, name: str, value: str) -> None:
        self.response.set_header(name, value)

    def redirect(self, path: str) -> None:
        self.response.redirect(path)

    def redirect_with_swap(self, path: str) -> None:
        self.response.redirect_with_swap(path)

    def redirect_with_location(self, location: HxLocation) -> None:
        self.response.redirect_with_location(location)

    def refresh(self) -> None:
        self.response.refresh()

    def push_url(self, path: str) -> None:
        self.response.push_url(path)

    def replace_url(self, path: str) -> None:
        self.response.replace_url(path)

    def reswap(self, strategy: SwapStrategy) -> None:
        self.response.reswap(strategy)

    def retarget(self, selector: str) -> None:
        self.response.retarget(selector)

    def reselect(self, selector: str) -> None:
        self.response.reselect(selector)


def _lookup(storage: MutableMapping[str, Any], key: str | None) -> Htmx | None:
    if key is not None:
        found = storage.get(key)
        return found if isinstance(found, Htmx) else None
    found = storage.get(EXTENSION_KEY)
    if isinstance(found, Htmx):
        return found
    return next((value for value in storage.values() if isinstance(value, Htmx)), None)
