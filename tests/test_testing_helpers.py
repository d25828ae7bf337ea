"""Tests for hxkit.testing — htmx response assertions."""

import pytest

from hxkit.htmx import ResponseHeader, SwapStrategy
from hxkit.http.response import Response
from hxkit.testing import (
    assert_hx_location,
    assert_hx_push_url,
    assert_hx_redirect,
    assert_hx_refresh,
    assert_hx_replace_url,
    assert_hx_reselect,
    assert_hx_reswap,
    assert_hx_retarget,
    assert_hx_trigger,
    assert_no_hx_header,
    hx_headers,
)


def _response(*headers: tuple[str, str]) -> Response:
    return Response("ok", headers=headers)


class TestHxHeaders:
    def test_canonical_keys(self) -> None:
        response = _response(("hx-push-url", "/a"), ("HX-TRIGGER-AFTER-SWAP", "done"))
        assert hx_headers(response) == {"HX-Push-Url": "/a", "HX-Trigger-After-Swap": "done"}

    def test_ignores_other_headers(self) -> None:
        response = _response(("Content-Language", "en"), ("X-Hx", "1"))
        assert hx_headers(response) == {}


class TestAssertTrigger:
    def test_simple_list(self) -> None:
        response = _response(("hx-trigger", "one,two"))
        assert_hx_trigger(response, "one")
        assert_hx_trigger(response, "two")

    def test_json_by_name(self) -> None:
        response = _response(("hx-trigger", '{"saved":{"id":1}}'))
        assert_hx_trigger(response, "saved")

    def test_json_by_dict(self) -> None:
        response = _response(("hx-trigger", '{"saved":{"id":1}}'))
        assert_hx_trigger(response, {"saved": {"id": 1}})

    def test_after_phases(self) -> None:
        response = _response(
            ("hx-trigger-after-settle", "settled"),
            ("hx-trigger-after-swap", "swapped"),
        )
        assert_hx_trigger(response, "settled", after="settle")
        assert_hx_trigger(response, "swapped", after="swap")

    def test_missing_event_fails(self) -> None:
        response = _response(("hx-trigger", "one"))
        with pytest.raises(AssertionError, match="'two' not found"):
            assert_hx_trigger(response, "two")

    def test_missing_header_fails(self) -> None:
        with pytest.raises(AssertionError, match="no HX-Trigger header"):
            assert_hx_trigger(_response(), "one")


class TestAssertDirectives:
    def test_redirect(self) -> None:
        assert_hx_redirect(_response(("hx-redirect", "/home")), "/home")

    def test_redirect_mismatch(self) -> None:
        with pytest.raises(AssertionError, match="Expected HX-Redirect"):
            assert_hx_redirect(_response(("hx-redirect", "/home")), "/away")

    def test_location_path(self) -> None:
        assert_hx_location(_response(("hx-location", "/next")), "/next")

    def test_location_object(self) -> None:
        response = _response(("hx-location", '{"path":"/next","target":"#main"}'))
        assert_hx_location(response, {"path": "/next", "target": "#main"})

    def test_refresh(self) -> None:
        assert_hx_refresh(_response(("hx-refresh", "true")))

    def test_urls(self) -> None:
        response = _response(("hx-push-url", "/pushed"), ("hx-replace-url", "/replaced"))
        assert_hx_push_url(response, "/pushed")
        assert_hx_replace_url(response, "/replaced")

    def test_swap_and_targets(self) -> None:
        response = _response(
            ("hx-reswap", "outerHTML"),
            ("hx-retarget", "#row"),
            ("hx-reselect", ".item"),
        )
        assert_hx_reswap(response, SwapStrategy.OUTER_HTML)
        assert_hx_retarget(response, "#row")
        assert_hx_reselect(response, ".item")

    def test_no_header(self) -> None:
        response = _response(("hx-redirect", "/home"))
        assert_no_hx_header(response, ResponseHeader.REFRESH)
        with pytest.raises(AssertionError, match="unexpectedly"):
            assert_no_hx_header(response, "hx-redirect")
