"""Test utilities for hxkit applications.

Provides an ASGI test client and htmx response header assertions::

    from hxkit.testing import TestClient, assert_hx_trigger
"""

from hxkit.testing.assertions import (
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
from hxkit.testing.client import TestClient

__all__ = [
    "TestClient",
    "assert_hx_location",
    "assert_hx_push_url",
    "assert_hx_redirect",
    "assert_hx_refresh",
    "assert_hx_replace_url",
    "assert_hx_reselect",
    "assert_hx_reswap",
    "assert_hx_retarget",
    "assert_hx_trigger",
    "assert_no_hx_header",
    "hx_headers",
]
