"""Immutable HTTP request.

Frozen metadata with async body access. Per-request objects that
middleware hands to handlers (such as the ``Htmx`` helper) live in
``extensions``: the field is frozen, the dict it holds is not.
"""

from __future__ import annotations

import json as json_module
from collections.abc import AsyncGenerator
from dataclasses import dataclass, field
from typing import Any

from hxkit._internal.asgi import Receive, Scope
from hxkit.htmx.headers import RequestHeader
from hxkit.http.headers import Headers


@dataclass(frozen=True, slots=True)
class Request:
    """One HTTP request as the handler sees it.

    ``path_params`` is empty until routing has matched; the pipeline then
    hands the handler a copy with the captured values. Copies share
    ``extensions`` and the body cache with the original.
    """

    method: str
    path: str
    headers: Headers
    query_string: bytes = b""
    path_params: dict[str, str] = field(default_factory=dict)
    _receive: Receive | None = field(default=None, repr=False, compare=False)
    extensions: dict[str, Any] = field(default_factory=dict, repr=False, compare=False)
    _cache: dict[str, bytes] = field(default_factory=dict, repr=False, compare=False)

    @classmethod
    def from_asgi(cls, scope: Scope, receive: Receive) -> Request:
        """Build a Request from an ASGI HTTP scope."""
        return cls(
            method=scope["method"],
            path=scope["path"],
            headers=Headers(scope.get("headers", ())),
            query_string=scope.get("query_string", b""),
            _receive=receive,
        )

    @property
    def is_fragment(self) -> bool:
        """True for requests sent by htmx (``HX-Request: true``)."""
        return self.headers.get_text(RequestHeader.REQUEST) == "true"

    # -- Body --

    async def stream(self) -> AsyncGenerator[bytes]:
        """Yield body chunks until the last one or a client disconnect."""
        if self._receive is None:
            return
        more_body = True
        while more_body:
            message = await self._receive()
            if message["type"] == "http.disconnect":
                return
            more_body = message.get("more_body", False)
            chunk = message.get("body", b"")
            if chunk:
                yield chunk

    async def body(self) -> bytes:
        """The whole body. ASGI ``receive`` is only drained on the first call."""
        if "body" not in self._cache:
            self._cache["body"] = b"".join([chunk async for chunk in self.stream()])
        return self._cache["body"]

    async def text(self, encoding: str = "utf-8") -> str:
        return (await self.body()).decode(encoding)

    async def json(self) -> Any:
        return json_module.loads(await self.body())
