"""Test utilities for wren applications.

``Browser`` drives an app headlessly: it owns a Document and a
MemoryHistory, starts a session, and exposes the page the way a user
would see it::

    async with Browser(app, "/") as browser:
        await browser.click("/about")
        assert browser.title == "About"
        await browser.back()
        assert_mount_contains(browser, "Welcome")
"""

from types import TracebackType
from typing import Self

import httpx

from wren.app import App, Session
from wren.dom import Anchor, ClickEvent, Document
from wren.history import MemoryHistory


class Browser:
    """A headless page running one wren session."""

    def __init__(
        self,
        app: App,
        path: str = "/",
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.app = app
        self.document = Document((app.config.mount_id,))
        self.history = MemoryHistory(path)
        self._transport = transport
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            msg = "Browser is not open. Use 'async with Browser(app)'."
            raise RuntimeError(msg)
        return self._session

    async def __aenter__(self) -> Self:
        self._session = await self.app.start(self.document, self.history, transport=self._transport)
        await self.document.mark_ready()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if self._session is not None:
            await self._session.aclose()
            self._session = None

    # -- User actions --

    async def click(self, href: str, *, spa: bool = True) -> ClickEvent:
        """Click a link to *href*, tagged for SPA handling unless ``spa=False``."""
        attributes = {self.app.config.link_attribute: ""} if spa else {}
        return await self.document.click(Anchor(href, attributes))

    async def navigate(self, path: str) -> None:
        await self.session.navigate(path)

    async def back(self) -> None:
        await self.history.back()

    async def forward(self) -> None:
        await self.history.forward()

    # -- Observations --

    @property
    def title(self) -> str:
        return self.document.title

    @property
    def html(self) -> str:
        mount = self.document.get_element_by_id(self.app.config.mount_id)
        assert mount is not None
        return mount.inner_html

    @property
    def location(self) -> str:
        return self.history.location


def assert_mount_contains(browser: Browser, text: str) -> None:
    """Assert the mount point's HTML contains *text*."""
    assert text in browser.html, (
        f"Mount point does not contain {text!r}.\n"
        f"Mount point HTML: {browser.html[:500]}"
    )


def assert_title(browser: Browser, title: str) -> None:
    """Assert the document title equals *title* exactly."""
    assert browser.title == title, f"Expected title {title!r}, got {browser.title!r}"
