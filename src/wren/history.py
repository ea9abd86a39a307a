"""In-memory navigation history.

Mirrors the browser history primitive the router depends on:
``push_state`` records a new entry without notifying anyone, while
``back``/``forward``/``go`` move the pointer and then notify popstate
listeners with the new location.
"""

from collections.abc import Awaitable, Callable

type PopStateListener = Callable[[str], Awaitable[None]]


class MemoryHistory:
    """A history stack with a movable pointer.

    Usage::

        history = MemoryHistory("/")
        history.push_state("/about")
        await history.back()
        history.location  # "/"
    """

    __slots__ = ("_entries", "_index", "_listeners", "pushes")

    def __init__(self, initial: str = "/") -> None:
        self._entries: list[str] = [initial]
        self._index = 0
        self._listeners: list[PopStateListener] = []
        self.pushes = 0

    @property
    def location(self) -> str:
        """The current entry."""
        return self._entries[self._index]

    @property
    def entries(self) -> tuple[str, ...]:
        return tuple(self._entries)

    @property
    def index(self) -> int:
        return self._index

    def push_state(self, path: str) -> None:
        """Add *path* after the current entry, dropping any forward entries."""
        del self._entries[self._index + 1 :]
        self._entries.append(path)
        self._index += 1
        self.pushes += 1

    def add_listener(self, listener: PopStateListener) -> None:
        self._listeners.append(listener)

    def remove_listener(self, listener: PopStateListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    async def go(self, delta: int) -> None:
        """Move the pointer by *delta*. Out-of-range moves are ignored."""
        target = self._index + delta
        if delta == 0 or not 0 <= target < len(self._entries):
            return
        self._index = target
        location = self.location
        for listener in list(self._listeners):
            await listener(location)

    async def back(self) -> None:
        await self.go(-1)

    async def forward(self) -> None:
        await self.go(1)
