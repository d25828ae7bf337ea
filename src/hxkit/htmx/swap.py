"""Swap strategies accepted by ``HX-Reswap`` and ``HX-Location``."""

from enum import StrEnum


class SwapStrategy(StrEnum):
    """How htmx inserts the response into the target element.

    Values are the DOM strings htmx expects in ``hx-swap``.
    """

    INNER_HTML = "innerHTML"
    OUTER_HTML = "outerHTML"
    BEFORE_BEGIN = "beforebegin"
    AFTER_BEGIN = "afterbegin"
    BEFORE_END = "beforeend"
    AFTER_END = "afterend"
    DELETE = "delete"
    NONE = "none"
