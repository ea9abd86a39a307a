"""Tests for wren.history and wren.dom — the in-process host environment."""

import pytest

from wren.dom import Anchor, ClickEvent, Document
from wren.history import MemoryHistory


class TestMemoryHistory:
    def test_initial(self) -> None:
        history = MemoryHistory("/start")
        assert history.location == "/start"
        assert history.entries == ("/start",)
        assert history.pushes == 0

    def test_push_state(self) -> None:
        history = MemoryHistory("/")
        history.push_state("/a")
        history.push_state("/b")
        assert history.entries == ("/", "/a", "/b")
        assert history.index == 2
        assert history.location == "/b"

    @pytest.mark.anyio
    async def test_back_notifies_with_new_location(self) -> None:
        history = MemoryHistory("/")
        history.push_state("/a")
        seen: list[str] = []

        async def listener(location: str) -> None:
            seen.append(location)

        history.add_listener(listener)
        await history.back()
        assert seen == ["/"]
        assert history.location == "/"

    @pytest.mark.anyio
    async def test_push_does_not_notify(self) -> None:
        history = MemoryHistory("/")
        seen: list[str] = []

        async def listener(location: str) -> None:
            seen.append(location)

        history.add_listener(listener)
        history.push_state("/a")
        assert seen == []

    @pytest.mark.anyio
    async def test_boundaries_are_no_ops(self) -> None:
        history = MemoryHistory("/")
        seen: list[str] = []

        async def listener(location: str) -> None:
            seen.append(location)

        history.add_listener(listener)
        await history.back()
        await history.forward()
        assert seen == []

    @pytest.mark.anyio
    async def test_push_after_back_drops_forward_entries(self) -> None:
        history = MemoryHistory("/")
        history.push_state("/a")
        history.push_state("/b")
        await history.back()
        history.push_state("/c")
        assert history.entries == ("/", "/a", "/c")

    @pytest.mark.anyio
    async def test_removed_listener_not_called(self) -> None:
        history = MemoryHistory("/")
        history.push_state("/a")
        seen: list[str] = []

        async def listener(location: str) -> None:
            seen.append(location)

        history.add_listener(listener)
        history.remove_listener(listener)
        await history.back()
        assert seen == []


class TestDocument:
    def test_elements(self) -> None:
        doc = Document(("app", "sidebar"))
        assert doc.get_element_by_id("app") is not None
        assert doc.get_element_by_id("missing") is None

    def test_replace_children(self) -> None:
        element = Document(("app",)).get_element_by_id("app")
        element.replace_children("<p>one</p>")
        element.replace_children("<p>two</p>")
        assert element.inner_html == "<p>two</p>"
        assert element.writes == 2

    @pytest.mark.anyio
    async def test_unhandled_click_is_full_navigation(self) -> None:
        doc = Document()
        event = await doc.click(Anchor("/elsewhere"))
        assert event.default_prevented is False
        assert doc.navigations == ["/elsewhere"]

    @pytest.mark.anyio
    async def test_prevented_click(self) -> None:
        doc = Document()

        async def listener(event: ClickEvent) -> None:
            event.prevent_default()

        doc.add_click_listener(listener)
        event = await doc.click(Anchor("/elsewhere"))
        assert event.default_prevented is True
        assert doc.navigations == []

    @pytest.mark.anyio
    async def test_ready_callbacks_run_once(self) -> None:
        doc = Document()
        calls: list[str] = []

        async def callback() -> None:
            calls.append("ready")

        doc.on_ready(callback)
        assert doc.ready is False
        await doc.mark_ready()
        await doc.mark_ready()
        assert doc.ready is True
        assert calls == ["ready"]
