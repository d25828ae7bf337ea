"""hxkit exception hierarchy.

Shared across the router, the app, handlers, and the htmx helpers so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class HxkitError(Exception):
    """Base for all hxkit-specific errors."""


class ConfigurationError(HxkitError):
    """Raised when app configuration is invalid.

    Typically caught during ``App._freeze()`` at startup.
    """


class PayloadError(HxkitError, ValueError):
    """Raised when a trigger payload or location value cannot become JSON.

    Raised eagerly by the payload constructors so a bad value fails inside
    the handler that built it, not while the response is being serialized.
    """


@dataclass(frozen=True, slots=True)
class HTTPError(HxkitError):
    """An error that maps directly to an HTTP status code.

    Raised by the router or by handlers. The ASGI handler catches these
    and turns them into a plain-text response with the given status.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class NotFound(HTTPError):  # noqa: N818
    """404 — no route matched the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818
    """405 — route exists but not for this HTTP method.

    Includes an ``Allow`` header listing the valid methods.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
