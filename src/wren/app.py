"""Wren application class.

Mutable during setup (route registration, not-found override).
Frozen into an immutable Router when the first session starts.
"""

import logging
import threading
from collections.abc import Callable
from typing import Self

import anyio
import httpx
from kida import Environment

from wren.config import RouterConfig
from wren.dispatch import Dispatcher
from wren.dom import Document
from wren.history import MemoryHistory
from wren.navigation import HistoryAdapter
from wren.routing.route import Route
from wren.routing.router import Router
from wren.templating import create_environment
from wren.views.base import ViewContext, ViewFactory
from wren.views.pages import NotFound

logger = logging.getLogger("wren.app")


class App:
    """The wren application.

    Usage::

        app = App()

        @app.route("/user/:id", name="user")
        class UserPage(TemplateView):
            ...

        async with await app.start(document, history) as session:
            await session.navigate("/user/42")

    Thread safety:
        Routes are registered single-threaded at import time. The freeze
        uses a Lock + double-check so exactly one caller compiles the
        route table.
    """

    __slots__ = ("_freeze_lock", "_frozen", "_not_found", "_pending_routes", "_router", "config")

    def __init__(self, config: RouterConfig | None = None) -> None:
        self.config: RouterConfig = config or RouterConfig()
        self._pending_routes: list[Route] = []
        self._not_found: ViewFactory = NotFound
        self._frozen: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()
        self._router: Router | None = None

    # -- Route registration --

    def route(self, pattern: str, *, name: str | None = None) -> Callable[[ViewFactory], ViewFactory]:
        """Register a view for *pattern* via decorator.

        Args:
            pattern: Path pattern. Use ``:param`` for path parameters.
            name: Optional route name for ``url_for``.
        """

        def decorator(view: ViewFactory) -> ViewFactory:
            self.add_route(pattern, view, name=name)
            return view

        return decorator

    def add_route(self, pattern: str, view: ViewFactory, *, name: str | None = None) -> None:
        """Register a view for *pattern*. Earlier registrations win ties."""
        self._check_not_frozen()
        self._pending_routes.append(Route(pattern=pattern, view=view, name=name))

    def not_found(self, view: ViewFactory) -> ViewFactory:
        """Replace the fallback view rendered when no route matches."""
        self._check_not_frozen()
        self._not_found = view
        return view

    @property
    def router(self) -> Router:
        """The compiled route table. Freezes the app on first access."""
        self._ensure_frozen()
        assert self._router is not None
        return self._router

    # -- Sessions --

    async def start(
        self,
        document: Document,
        history: MemoryHistory,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> "Session":
        """Wire a dispatcher and history adapter into *document*.

        The initial dispatch runs once the document is ready (immediately
        if it already is). *transport* overrides the HTTP transport views
        fetch through, mainly for tests.
        """
        router = self.router
        env = create_environment(self.config)
        http = httpx.AsyncClient(
            base_url=self.config.api_base_url,
            timeout=self.config.fetch_timeout,
            transport=transport,
        )
        config = self.config

        def context_factory(path: str) -> ViewContext:
            return ViewContext(path=path, env=env, http=http, config=config)

        try:
            dispatcher = Dispatcher(router, document, context_factory, config)
        except BaseException:
            with anyio.CancelScope(shield=True):
                await http.aclose()
            raise
        adapter = HistoryAdapter(dispatcher, document, history, config)
        session = Session(router, dispatcher, adapter, http, env)
        try:
            await adapter.attach()
        except BaseException:
            with anyio.CancelScope(shield=True):
                await session.aclose()
            raise
        logger.debug("Session started with %d routes", len(router.routes))
        return session

    # -- Internal --

    def _ensure_frozen(self) -> None:
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            self._freeze()

    def _freeze(self) -> None:
        """Compile the route table. MUST only be called while holding _freeze_lock."""
        self._router = Router(self._pending_routes, not_found=self._not_found)
        self._frozen = True

    def _check_not_frozen(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the app after it has started. "
                "Register routes before calling app.start()."
            )
            raise RuntimeError(msg)


class Session:
    """A running router bound to one document and history.

    Closing the session detaches the history adapter and closes the
    HTTP client views fetch through.
    """

    __slots__ = ("adapter", "dispatcher", "env", "http", "router")

    def __init__(
        self,
        router: Router,
        dispatcher: Dispatcher,
        adapter: HistoryAdapter,
        http: httpx.AsyncClient,
        env: Environment,
    ) -> None:
        self.router = router
        self.dispatcher = dispatcher
        self.adapter = adapter
        self.http = http
        self.env = env

    async def navigate(self, path: str) -> None:
        await self.adapter.navigate(path)

    async def aclose(self) -> None:
        self.adapter.detach()
        await self.http.aclose()

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
