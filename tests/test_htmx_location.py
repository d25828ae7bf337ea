"""Tests for hxkit.htmx.location — HX-Location navigation objects."""

import json

import pytest

from hxkit.errors import PayloadError
from hxkit.htmx.location import HxLocation
from hxkit.htmx.swap import SwapStrategy


class TestSerialization:
    def test_path_only(self) -> None:
        assert HxLocation("/items").to_header_value() == '{"path":"/items"}'

    def test_all_fields_in_fixed_order(self) -> None:
        location = (
            HxLocation("/builder")
            .with_replace("/replace-path")
            .with_push("/history-path")
            .with_values({"id": 42})
            .with_header("X-Test", "1")
            .with_select(".fragment")
            .with_handler("handleResponse")
            .with_swap(SwapStrategy.OUTER_HTML)
            .with_event("custom")
            .with_source("#button")
            .with_target("#content")
        )
        assert list(json.loads(location.to_header_value())) == [
            "path",
            "target",
            "source",
            "event",
            "swap",
            "headers",
            "values",
            "handler",
            "select",
            "push",
            "replace",
        ]
        parsed = json.loads(location.to_header_value())
        assert parsed["swap"] == "outerHTML"
        assert parsed["headers"] == {"X-Test": "1"}
        assert parsed["values"] == {"id": 42}
        assert parsed["push"] == "/history-path"

    def test_unset_fields_are_omitted_not_null(self) -> None:
        value = HxLocation("/a").with_target("#t").to_header_value()
        assert value == '{"path":"/a","target":"#t"}'
        assert "null" not in value

    def test_without_push_emits_false(self) -> None:
        parsed = json.loads(HxLocation("/a").without_push().to_header_value())
        assert parsed["push"] is False

    def test_headers_are_sorted(self) -> None:
        location = HxLocation("/a").with_headers({"X-B": "2", "X-A": "1"})
        assert location.to_header_value() == '{"path":"/a","headers":{"X-A":"1","X-B":"2"}}'

    def test_later_header_overrides(self) -> None:
        location = HxLocation("/a").with_header("X-A", "1").with_header("X-A", "2")
        assert json.loads(location.to_header_value())["headers"] == {"X-A": "2"}


class TestImmutability:
    def test_with_returns_new_instance(self) -> None:
        base = HxLocation("/a")
        targeted = base.with_target("#t")
        assert base.target is None
        assert targeted.target == "#t"

    def test_values_validated_eagerly(self) -> None:
        with pytest.raises(PayloadError):
            HxLocation("/a").with_values({"bad": object()})
