"""Dispatcher — resolves a path to a view and renders it into the mount point.

Pipeline::

    dispatch("/user/42")

    1. Resolve the path against the route table (NotFound on a miss)
    2. Build a fresh view from the extracted parameters
    3. Set the document title from the view
    4. Await the view's content
    5. Replace the mount point's contents, if this dispatch is still the latest

Overlapping dispatches resolve as "latest wins": every dispatch takes a
token, starting a new one cancels the content production of the ones
still in flight, and a render only commits while its token is current.
"""

import logging
from collections.abc import Callable
from enum import Enum

import anyio

from wren.config import RouterConfig
from wren.dom import Document, Element
from wren.errors import ConfigurationError
from wren.routing.route import RouteMatch
from wren.routing.router import Router
from wren.views.base import ViewContext, render_error

logger = logging.getLogger("wren.dispatch")

type ContextFactory = Callable[[str], ViewContext]


class DispatchState(Enum):
    IDLE = "idle"
    DISPATCHING = "dispatching"


class Dispatcher:
    """Renders the view for a path into the document's mount point.

    ``dispatch()`` never raises. Views report their own failures as
    error fragments; anything that still escapes a view is logged and
    rendered as a generic error fragment.
    """

    __slots__ = ("_context_factory", "_document", "_inflight", "_mount", "_router", "_token", "last_match")

    def __init__(
        self,
        router: Router,
        document: Document,
        context_factory: ContextFactory,
        config: RouterConfig,
    ) -> None:
        mount = document.get_element_by_id(config.mount_id)
        if mount is None:
            msg = f"Mount point #{config.mount_id} not found in the document."
            raise ConfigurationError(msg)

        self._router = router
        self._document = document
        self._mount: Element = mount
        self._context_factory = context_factory
        self._token = 0
        self._inflight: dict[int, anyio.CancelScope] = {}
        self.last_match: RouteMatch | None = None

    @property
    def state(self) -> DispatchState:
        return DispatchState.DISPATCHING if self._inflight else DispatchState.IDLE

    async def dispatch(self, path: str) -> None:
        """Render the view matching *path*."""
        self._token += 1
        token = self._token
        for superseded in self._inflight.values():
            superseded.cancel()

        match = self._router.resolve(path)
        context = self._context_factory(match.path)
        if match.is_fallback:
            logger.info("No route matches %r, rendering fallback", match.path)
        else:
            logger.debug("Dispatching %r to %r", match.path, match.route.pattern)

        html: str | None = None
        scope = anyio.CancelScope()
        self._inflight[token] = scope
        try:
            with scope:
                html = await self._produce(match, context)
        finally:
            del self._inflight[token]

        if html is None or token != self._token:
            logger.debug("Dropping stale render for %r", match.path)
            return

        self._mount.replace_children(html)
        self.last_match = match

    async def _produce(self, match: RouteMatch, context: ViewContext) -> str:
        try:
            view = match.route.view(match.params, context)
            # Title goes first so it is visible while content is pending
            self._document.title = view.title
            return await view.content()
        except Exception:
            logger.exception("View for %r failed", match.path)
            return render_error(context, "Something went wrong while loading this page.")
