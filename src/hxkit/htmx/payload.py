"""Trigger payloads.

A trigger event carries either no payload (``None`` at call sites), a plain
text payload, or a structured JSON value. The kind is always explicit: a text
payload whose content happens to look like JSON is still sent as a JSON
string, never re-parsed.
"""

from __future__ import annotations

import json as json_module
import math
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hxkit.errors import PayloadError


class PayloadKind(Enum):
    """Tag recorded with every payload."""

    TEXT = "text"
    JSON = "json"


def ensure_json(value: Any) -> Any:
    """Return *value* unchanged if it serializes to strict JSON.

    Raises:
        PayloadError: If *value* contains objects ``json`` cannot encode,
            or non-finite floats.
    """
    try:
        json_module.dumps(value, allow_nan=False)
    except (TypeError, ValueError) as exc:
        msg = f"Value is not JSON-serializable: {exc}"
        raise PayloadError(msg) from exc
    return value


@dataclass(frozen=True, slots=True)
class TriggerPayload:
    """Data attached to a trigger event.

    Build one with the constructors rather than directly::

        TriggerPayload.text("Saved!")
        TriggerPayload.json({"id": 42, "complete": False})
        TriggerPayload.boolean(True)
        TriggerPayload.number(3)
    """

    kind: PayloadKind
    value: Any

    @classmethod
    def text(cls, value: str) -> TriggerPayload:
        """A plain string payload, sent as a JSON string."""
        return cls(PayloadKind.TEXT, str(value))

    @classmethod
    def json(cls, value: Any) -> TriggerPayload:
        """A structured payload. Validated now so failures surface early."""
        return cls(PayloadKind.JSON, ensure_json(value))

    @classmethod
    def boolean(cls, value: bool) -> TriggerPayload:
        return cls(PayloadKind.JSON, bool(value))

    @classmethod
    def number(cls, value: int | float) -> TriggerPayload:
        if isinstance(value, bool) or not isinstance(value, int | float):
            msg = f"Expected an int or float, got {type(value).__name__}"
            raise PayloadError(msg)
        if isinstance(value, float) and not math.isfinite(value):
            msg = f"Number payload must be finite, got {value!r}"
            raise PayloadError(msg)
        return cls(PayloadKind.JSON, value)

    def as_json_value(self) -> Any:
        """The value embedded in the trigger header's JSON object."""
        return self.value
