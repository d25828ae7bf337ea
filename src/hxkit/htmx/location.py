"""``HX-Location`` navigation objects.

``HX-Location`` accepts either a bare path or a JSON object that controls
how htmx performs the client-side navigation. ``HxLocation`` builds the
object form through chainable ``.with_*()`` calls, each returning a new
instance, the same way ``Response`` is built.
"""

from __future__ import annotations

import json as json_module
from collections.abc import Mapping
from dataclasses import dataclass, replace
from typing import Any

from hxkit.htmx.payload import ensure_json
from hxkit.htmx.swap import SwapStrategy


@dataclass(frozen=True, slots=True)
class HxLocation:
    """A client-side redirect with navigation options.

    Usage::

        location = (
            HxLocation("/items")
            .with_target("#content")
            .with_swap(SwapStrategy.OUTER_HTML)
            .with_values({"id": 42})
        )
        htmx.redirect_with_location(location)

    Unset options are left out of the JSON entirely.
    """

    path: str
    target: str | None = None
    source: str | None = None
    event: str | None = None
    swap: SwapStrategy | None = None
    headers: tuple[tuple[str, str], ...] = ()
    values: Any = None
    handler: str | None = None
    select: str | None = None
    push: str | bool | None = None
    replace: str | None = None

    def with_target(self, selector: str) -> HxLocation:
        """CSS selector of the element to swap into."""
        return replace(self, target=selector)

    def with_source(self, selector: str) -> HxLocation:
        """CSS selector of the element the request originates from."""
        return replace(self, source=selector)

    def with_event(self, event: str) -> HxLocation:
        """Name of the event that triggered the navigation."""
        return replace(self, event=event)

    def with_swap(self, swap: SwapStrategy) -> HxLocation:
        return replace(self, swap=SwapStrategy(swap))

    def with_handler(self, handler: str) -> HxLocation:
        """Name of a client-side callback that handles the response."""
        return replace(self, handler=handler)

    def with_select(self, selector: str) -> HxLocation:
        """Select a fragment of the response to swap in."""
        return replace(self, select=selector)

    def with_header(self, name: str, value: str) -> HxLocation:
        """Add one header to the navigation request."""
        return self.with_headers({name: value})

    def with_headers(self, headers: Mapping[str, str]) -> HxLocation:
        """Add headers to the navigation request."""
        merged = dict(self.headers)
        merged.update((str(k), str(v)) for k, v in headers.items())
        return replace(self, headers=tuple(merged.items()))

    def with_values(self, values: Any) -> HxLocation:
        """Values submitted with the navigation request.

        Raises:
            PayloadError: If *values* cannot be serialized to JSON.
        """
        return replace(self, values=ensure_json(values))

    def with_push(self, path: str) -> HxLocation:
        """Push *path* into history instead of the request path."""
        return replace(self, push=path)

    def without_push(self) -> HxLocation:
        """Do not push a history entry for this navigation."""
        return replace(self, push=False)

    def with_replace(self, path: str) -> HxLocation:
        """Replace the current history entry with *path*."""
        return replace(self, replace=path)

    def to_dict(self) -> dict[str, Any]:
        """The JSON object form, with unset options left out."""
        obj: dict[str, Any] = {"path": self.path}
        for key in ("target", "source", "event"):
            value = getattr(self, key)
            if value is not None:
                obj[key] = value
        if self.swap is not None:
            obj["swap"] = str(self.swap)
        if self.headers:
            # Sorted so the header is stable regardless of insertion order
            obj["headers"] = dict(sorted(self.headers))
        for key in ("values", "handler", "select", "push", "replace"):
            value = getattr(self, key)
            if value is not None:
                obj[key] = value
        return obj

    def to_header_value(self) -> str:
        """Compact JSON for the ``HX-Location`` header."""
        return json_module.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)
