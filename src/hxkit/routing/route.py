"""Route definitions and match results."""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Route:
    """One registered handler: its path pattern, callable, and methods.

    ``methods`` holds upper-case method names. A route that serves GET
    also answers HEAD.
    """

    path: str
    handler: Callable[..., Any]
    methods: frozenset[str]
    name: str | None = None

    def allows(self, method: str) -> bool:
        """Whether this route serves *method*."""
        if method in self.methods:
            return True
        return method == "HEAD" and "GET" in self.methods


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """The route chosen for a request path and the parameters it captured."""

    route: Route
    path_params: dict[str, str]

    @property
    def handler(self) -> Callable[..., Any]:
        return self.route.handler
