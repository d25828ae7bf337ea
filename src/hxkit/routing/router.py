"""Router with ``{param}`` path matching.

Routes are registered during setup and compiled into regular expressions
when the app freezes. Matching walks routes in registration order.
"""

import re

from hxkit.errors import ConfigurationError, MethodNotAllowed, NotFound
from hxkit.routing.route import Route, RouteMatch

# Converter name -> regex for the segment
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"-?\d+",
    "path": r".+",
}

_PARAM = re.compile(r"\{(?P<name>[A-Za-z_][A-Za-z0-9_]*)(?::(?P<type>[a-z]+))?\}")


def compile_path(path: str) -> re.Pattern[str]:
    """Compile a route path into a full-match regex.

    Examples::

        "/users"             -> ^/users$
        "/users/{id:int}"    -> ^/users/(?P<id>-?\\d+)$
        "/files/{rest:path}" -> ^/files/(?P<rest>.+)$
    """
    pattern = ""
    pos = 0
    for match in _PARAM.finditer(path):
        pattern += re.escape(path[pos : match.start()])
        param_type = match.group("type") or "str"
        if param_type not in CONVERTERS:
            msg = f"Unknown path converter {param_type!r} in route {path!r}"
            raise ConfigurationError(msg)
        pattern += f"(?P<{match.group('name')}>{CONVERTERS[param_type]})"
        pos = match.end()
    pattern += re.escape(path[pos:])
    return re.compile(f"^{pattern}$")


class Router:
    """Compiled router.

    Usage::

        router = Router()
        router.add(Route("/users/{id:int}", handler, frozenset({"GET"})))
        router.compile()
        match = router.match("GET", "/users/42")
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[tuple[re.Pattern[str], Route]] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        self._routes.append((compile_path(route.path), route))

    def compile(self) -> None:
        self._compiled = True

    def match(self, method: str, path: str) -> RouteMatch:
        """Find the route for *method* and *path*.

        Raises:
            NotFound: No route matches the path.
            MethodNotAllowed: A route matches the path but not the method.
        """
        allowed: set[str] = set()
        for pattern, route in self._routes:
            m = pattern.match(path)
            if m is None:
                continue
            if route.allows(method):
                return RouteMatch(route=route, path_params=m.groupdict())
            allowed.update(route.methods)
        if allowed:
            raise MethodNotAllowed(frozenset(allowed))
        raise NotFound()
