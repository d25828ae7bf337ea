"""Routing — path matching and route definitions."""

from hxkit.routing.route import Route, RouteMatch
from hxkit.routing.router import Router

__all__ = ["Route", "RouteMatch", "Router"]
