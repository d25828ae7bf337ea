"""htmx header catalog.

Literal header names for both directions of the htmx protocol. The client
on the other end of the wire matches these exactly, so they never change.
Names are lowercase: HTTP treats them case-insensitively and ASGI requires
lowercase on the wire.
"""

from enum import StrEnum


class RequestHeader(StrEnum):
    """Headers htmx sends with every request it issues."""

    REQUEST = "hx-request"
    BOOSTED = "hx-boosted"
    CURRENT_URL = "hx-current-url"
    HISTORY_RESTORE_REQUEST = "hx-history-restore-request"
    PROMPT = "hx-prompt"
    TARGET = "hx-target"
    TRIGGER = "hx-trigger"
    TRIGGER_NAME = "hx-trigger-name"


class ResponseHeader(StrEnum):
    """Headers htmx reads from responses."""

    PUSH_URL = "hx-push-url"
    LOCATION = "hx-location"
    REDIRECT = "hx-redirect"
    REFRESH = "hx-refresh"
    TRIGGER = "hx-trigger"
    TRIGGER_AFTER_SETTLE = "hx-trigger-after-settle"
    TRIGGER_AFTER_SWAP = "hx-trigger-after-swap"
    RESWAP = "hx-reswap"
    RETARGET = "hx-retarget"
    RESELECT = "hx-reselect"
    REPLACE_URL = "hx-replace-url"
