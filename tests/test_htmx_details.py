"""Tests for hxkit.htmx.details — parsing inbound htmx headers."""

import pytest

from hxkit.htmx.details import HtmxDetails, build_snapshot
from hxkit.http.headers import Headers


def _raw(**headers: str | bytes) -> list[tuple[bytes, bytes]]:
    """Build raw ASGI header pairs; keyword underscores become hyphens."""
    return [
        (name.replace("_", "-").encode("latin-1"), v if isinstance(v, bytes) else v.encode())
        for name, v in headers.items()
    ]


class TestFlags:
    @pytest.mark.parametrize(
        "header,field",
        [
            ("hx_request", "is_htmx"),
            ("hx_boosted", "boosted"),
            ("hx_history_restore_request", "history_restore_request"),
        ],
    )
    def test_true_literal(self, header: str, field: str) -> None:
        details = build_snapshot(_raw(**{header: "true"}))
        assert getattr(details, field) is True

    @pytest.mark.parametrize("value", ["false", "1", "True", "TRUE", "", " true", "yes"])
    def test_anything_else_is_false(self, value: str) -> None:
        assert build_snapshot(_raw(hx_request=value)).is_htmx is False

    def test_absent_is_false(self) -> None:
        details = build_snapshot([])
        assert details.is_htmx is False
        assert details.boosted is False
        assert details.history_restore_request is False

    def test_non_utf8_is_false(self) -> None:
        assert build_snapshot(_raw(hx_request=b"\xff\xff")).is_htmx is False

    def test_header_name_is_case_insensitive(self) -> None:
        assert build_snapshot([(b"HX-Request", b"true")]).is_htmx is True


class TestStrings:
    def test_values_round_trip(self) -> None:
        details = build_snapshot(
            _raw(
                hx_current_url="http://example.com",
                hx_prompt="test prompt",
                hx_target="#target",
                hx_trigger="click",
                hx_trigger_name="button1",
            )
        )
        assert details.current_url == "http://example.com"
        assert details.prompt == "test prompt"
        assert details.target == "#target"
        assert details.trigger == "click"
        assert details.trigger_name == "button1"

    def test_no_trimming(self) -> None:
        assert build_snapshot(_raw(hx_prompt="  spaced  ")).prompt == "  spaced  "

    def test_utf8_text(self) -> None:
        assert build_snapshot(_raw(hx_prompt="café ✓".encode())).prompt == "café ✓"

    def test_non_utf8_is_none(self) -> None:
        details = build_snapshot(
            _raw(hx_current_url=b"\xff\xff", hx_prompt=b"\xff\xff", hx_target=b"\xff\xff")
        )
        assert details.current_url is None
        assert details.prompt is None
        assert details.target is None

    def test_absent_is_none(self) -> None:
        assert build_snapshot([]) == HtmxDetails()

    def test_first_occurrence_wins(self) -> None:
        raw = [(b"hx-target", b"#first"), (b"hx-target", b"#second")]
        assert build_snapshot(raw).target == "#first"


class TestInputs:
    def test_accepts_headers_object(self) -> None:
        headers = Headers([(b"hx-request", b"true"), (b"hx-target", b"#list")])
        details = build_snapshot(headers)
        assert details.is_htmx is True
        assert details.target == "#list"

    def test_rebuilding_gives_equal_snapshot(self) -> None:
        raw = _raw(hx_request="true", hx_boosted="true", hx_target="#main")
        assert build_snapshot(raw) == build_snapshot(raw)

    def test_snapshot_is_frozen(self) -> None:
        details = build_snapshot([])
        with pytest.raises(AttributeError):
            details.is_htmx = True  # type: ignore[misc]
