"""hxkit application class.

Mutable during setup (route registration, middleware, providers).
Frozen at runtime when ``__call__()`` is first invoked.
"""

import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeAlias

from hxkit._internal.asgi import Receive, Scope, Send
from hxkit.config import AppConfig
from hxkit.middleware.protocol import Middleware
from hxkit.routing.route import Route
from hxkit.routing.router import Router
from hxkit.server.handler import handle_request

Handler: TypeAlias = Callable[..., Any]


@dataclass(slots=True)
class _PendingRoute:
    """A route waiting to be compiled."""

    path: str
    handler: Handler
    methods: list[str] | None
    name: str | None


class App:
    """An ASGI application.

    Usage::

        from hxkit import App
        from hxkit.htmx import Htmx
        from hxkit.middleware import HtmxMiddleware

        app = App()
        app.add_middleware(HtmxMiddleware())

        @app.route("/todos/{id:int}", methods=["DELETE"])
        def delete(id: int, htmx: Htmx):
            htmx.trigger_event("todoDeleted")
            return ""

    Thread safety:
        Setup is single-threaded (decorators at import time). The freeze
        transition uses a Lock + double-check so exactly one thread compiles
        the app, even if several workers call ``__call__()`` concurrently on
        the first request.
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_middleware",
        "_middleware_list",
        "_pending_routes",
        "_providers",
        "_router",
        "config",
    )

    def __init__(self, config: AppConfig | None = None) -> None:
        self.config: AppConfig = config or AppConfig()
        self._pending_routes: list[_PendingRoute] = []
        self._middleware_list: list[Middleware] = []
        self._providers: dict[type, Callable[..., Any]] = {}
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

        # Compiled state, set by _freeze()
        self._router: Router | None = None
        self._middleware: tuple[Callable[..., Any], ...] = ()

    # -- Route registration --

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        name: str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler via decorator.

        Args:
            path: URL path pattern. Use ``{param}`` or ``{param:int}`` for
                path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.
            name: Optional route name.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_frozen()
            self._pending_routes.append(_PendingRoute(path, func, methods, name))
            return func

        return decorator

    # -- Service injection --

    def provide(self, annotation: type, factory: Callable[..., Any]) -> None:
        """Register a provider factory for dependency injection.

        When a handler parameter's type annotation matches *annotation*,
        hxkit calls *factory* (with no arguments) and injects the result::

            app.provide(TodoStore, get_store)

            @app.route("/todos")
            def todos(store: TodoStore): ...
        """
        self._check_not_frozen()
        self._providers[annotation] = factory

    # -- Middleware --

    def add_middleware(self, middleware: Middleware) -> None:
        """Add a middleware. The first one added is the outermost."""
        self._check_not_frozen()
        self._middleware_list.append(middleware)

    # -- ASGI --

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        """ASGI entry point."""
        self._ensure_frozen()

        if scope["type"] == "lifespan":
            await self._handle_lifespan(receive, send)
            return
        if scope["type"] != "http":
            return

        assert self._router is not None
        await handle_request(
            scope,
            receive,
            send,
            router=self._router,
            middleware=self._middleware,
            debug=self.config.debug,
            providers=self._providers,
        )

    async def _handle_lifespan(self, receive: Receive, send: Send) -> None:
        while True:
            message = await receive()
            if message["type"] == "lifespan.startup":
                await send({"type": "lifespan.startup.complete"})
            elif message["type"] == "lifespan.shutdown":
                await send({"type": "lifespan.shutdown.complete"})
                return

    # -- Freeze --

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if not self._frozen:
                self._freeze()

    def _freeze(self) -> None:
        """Compile the app into its frozen runtime state.

        MUST only be called while holding _freeze_lock.
        """
        router = Router()
        for pending in self._pending_routes:
            methods = frozenset(m.upper() for m in (pending.methods or ["GET"]))
            router.add(Route(pending.path, pending.handler, methods, pending.name))
        router.compile()
        self._router = router
        self._middleware = tuple(self._middleware_list)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started serving requests. "
                "Register routes, middleware, and providers first."
            )
            raise RuntimeError(msg)
