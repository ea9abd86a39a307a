"""History adapter — turns link clicks and back/forward moves into dispatches.

- Tagged link clicks: default action suppressed, path pushed, dispatched.
- Back/forward: the history already moved, so only dispatch.
- Initial load: one dispatch of the current location once the document is ready.
"""

import logging

from wren.config import RouterConfig
from wren.dispatch import Dispatcher
from wren.dom import ClickEvent, Document
from wren.history import MemoryHistory

logger = logging.getLogger("wren.navigation")


class HistoryAdapter:
    """Connects a Dispatcher to the document and its history."""

    __slots__ = ("_attached", "_config", "_dispatcher", "_document", "_history")

    def __init__(
        self,
        dispatcher: Dispatcher,
        document: Document,
        history: MemoryHistory,
        config: RouterConfig,
    ) -> None:
        self._dispatcher = dispatcher
        self._document = document
        self._history = history
        self._config = config
        self._attached = False

    @property
    def attached(self) -> bool:
        return self._attached

    async def attach(self) -> None:
        """Subscribe to clicks and popstate, then schedule the initial render.

        If the document is already ready, the initial dispatch runs now.
        """
        if self._attached:
            return
        self._attached = True
        self._document.add_click_listener(self._on_click)
        self._history.add_listener(self._on_popstate)
        if self._document.ready:
            await self._on_ready()
        else:
            self._document.on_ready(self._on_ready)

    def detach(self) -> None:
        self._document.remove_click_listener(self._on_click)
        self._document.remove_ready_callback(self._on_ready)
        self._history.remove_listener(self._on_popstate)
        self._attached = False

    async def navigate(self, path: str) -> None:
        """Push *path* onto history and dispatch it.

        Navigating to exactly the current location re-renders without
        adding a duplicate history entry. A different query or fragment
        counts as a new location.
        """
        if path != self._history.location:
            self._history.push_state(path)
        else:
            logger.debug("Already at %r, re-rendering in place", path)
        await self._dispatcher.dispatch(self._history.location)

    async def _on_click(self, event: ClickEvent) -> None:
        anchor = event.target
        if not anchor.has_attribute(self._config.link_attribute):
            return
        event.prevent_default()
        await self.navigate(anchor.href)

    async def _on_popstate(self, location: str) -> None:
        logger.debug("History moved to %r", location)
        await self._dispatcher.dispatch(location)

    async def _on_ready(self) -> None:
        if not self._attached:
            return
        await self._dispatcher.dispatch(self._history.location)
