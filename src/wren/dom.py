"""In-process document model.

Just enough of a page for the router to drive: a title, elements
addressable by id, anchors that can be clicked, and a ready state.
The router only ever replaces an element's contents wholesale.
"""

import logging
from collections.abc import Awaitable, Callable, Mapping
from dataclasses import dataclass, field

logger = logging.getLogger("wren.dom")


@dataclass(slots=True)
class Element:
    """A container element with replaceable inner HTML."""

    id: str
    inner_html: str = ""
    writes: int = 0

    def replace_children(self, html: str) -> None:
        """Replace the element's contents in one step."""
        self.inner_html = html
        self.writes += 1


@dataclass(frozen=True, slots=True)
class Anchor:
    """A link element. ``attributes`` holds markup attributes such as ``data-link``."""

    href: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    text: str = ""

    def has_attribute(self, name: str) -> bool:
        return name in self.attributes


@dataclass(slots=True)
class ClickEvent:
    """A click delivered to document listeners."""

    target: Anchor
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


type ClickListener = Callable[[ClickEvent], Awaitable[None]]
type ReadyCallback = Callable[[], Awaitable[None]]


class Document:
    """The page hosting the router.

    Usage::

        doc = Document(element_ids=("app",))
        doc.on_ready(start)
        await doc.mark_ready()
        event = await doc.click(Anchor("/about", {"data-link": ""}))
    """

    __slots__ = (
        "_click_listeners",
        "_elements",
        "_ready",
        "_ready_callbacks",
        "navigations",
        "title",
    )

    def __init__(self, element_ids: tuple[str, ...] = ("app",), *, title: str = "") -> None:
        self.title = title
        self._elements = {element_id: Element(element_id) for element_id in element_ids}
        self._click_listeners: list[ClickListener] = []
        self._ready = False
        self._ready_callbacks: list[ReadyCallback] = []
        # Full-page loads that were not intercepted
        self.navigations: list[str] = []

    def get_element_by_id(self, element_id: str) -> Element | None:
        return self._elements.get(element_id)

    # -- Events -----------------------------------------------------------

    def add_click_listener(self, listener: ClickListener) -> None:
        self._click_listeners.append(listener)

    def remove_click_listener(self, listener: ClickListener) -> None:
        if listener in self._click_listeners:
            self._click_listeners.remove(listener)

    async def click(self, anchor: Anchor) -> ClickEvent:
        """Deliver a click on *anchor* to every listener.

        When no listener prevents the default action, the click is
        recorded as a full-page navigation.
        """
        event = ClickEvent(target=anchor)
        for listener in list(self._click_listeners):
            await listener(event)
        if not event.default_prevented:
            logger.debug("Full navigation to %s", anchor.href)
            self.navigations.append(anchor.href)
        return event

    # -- Ready state ------------------------------------------------------

    @property
    def ready(self) -> bool:
        return self._ready

    def on_ready(self, callback: ReadyCallback) -> None:
        """Register *callback* to run once the document is ready."""
        self._ready_callbacks.append(callback)

    def remove_ready_callback(self, callback: ReadyCallback) -> None:
        if callback in self._ready_callbacks:
            self._ready_callbacks.remove(callback)

    async def mark_ready(self) -> None:
        """Flip to ready and run pending callbacks in registration order."""
        if self._ready:
            return
        self._ready = True
        callbacks, self._ready_callbacks = self._ready_callbacks, []
        for callback in callbacks:
            await callback()
