"""Tests for wren.views — built-in views and their failure fragments."""

import httpx
import pytest

from wren.config import RouterConfig
from wren.templating import create_environment
from wren.testing import Browser
from wren.views.base import ViewContext
from wren.views.pages import About, Contact, Home, NotFound, User, UserProfile, Users


def _context(transport: httpx.AsyncBaseTransport, path: str = "/") -> ViewContext:
    config = RouterConfig(api_base_url="http://api.test")
    http = httpx.AsyncClient(base_url=config.api_base_url, transport=transport)
    return ViewContext(path=path, env=create_environment(config), http=http, config=config)


def _failing(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


class TestStaticViews:
    @pytest.mark.anyio
    async def test_home(self, users_transport) -> None:
        view = Home({}, _context(users_transport))
        assert view.title == "Home"
        html = await view.content()
        assert "Welcome" in html
        assert 'href="/about" data-link' in html

    @pytest.mark.anyio
    async def test_about(self, users_transport) -> None:
        view = About({}, _context(users_transport))
        assert view.title == "About"
        assert "<h1>About</h1>" in await view.content()

    @pytest.mark.anyio
    async def test_contact(self, users_transport) -> None:
        view = Contact({}, _context(users_transport))
        assert view.title == "Contact"
        assert "hello@example.com" in await view.content()

    @pytest.mark.anyio
    async def test_not_found_shows_path(self, users_transport) -> None:
        view = NotFound({}, _context(users_transport, path="/nonexistent"))
        assert view.title == "Not Found"
        assert "/nonexistent" in await view.content()

    @pytest.mark.anyio
    async def test_not_found_escapes_path(self, users_transport) -> None:
        view = NotFound({}, _context(users_transport, path="/<script>"))
        html = await view.content()
        assert "<script>" not in html
        assert "&lt;script&gt;" in html


class TestUsers:
    @pytest.mark.anyio
    async def test_lists_users(self, users_transport) -> None:
        html = await Users({}, _context(users_transport)).content()
        assert "Leanne Graham" in html
        assert 'href="/user/2" data-link' in html

    @pytest.mark.anyio
    async def test_empty_list(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json=[]))
        html = await Users({}, _context(transport)).content()
        assert "No users yet." in html

    @pytest.mark.anyio
    async def test_network_failure_is_a_fragment(self) -> None:
        html = await Users({}, _context(httpx.MockTransport(_failing))).content()
        assert 'class="wren-error"' in html
        assert "Could not load users" in html

    @pytest.mark.anyio
    async def test_server_error_is_a_fragment(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(500))
        html = await Users({}, _context(transport)).content()
        assert "Could not load users" in html

    @pytest.mark.anyio
    async def test_invalid_json_is_a_fragment(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, content=b"not json"))
        html = await Users({}, _context(transport)).content()
        assert "Could not load users" in html

    @pytest.mark.anyio
    async def test_wrong_shape_is_a_fragment(self) -> None:
        transport = httpx.MockTransport(lambda request: httpx.Response(200, json={"users": []}))
        html = await Users({}, _context(transport)).content()
        assert "Could not load users" in html


class TestUserProfile:
    @pytest.mark.anyio
    async def test_profile(self, users_transport) -> None:
        view = UserProfile({"id": "1"}, _context(users_transport))
        assert view.title == "User 1"
        html = await view.content()
        assert "<h1>Leanne Graham</h1>" in html
        assert "leanne@example.com" in html

    @pytest.mark.anyio
    async def test_missing_user(self, users_transport) -> None:
        html = await UserProfile({"id": "99"}, _context(users_transport)).content()
        assert "User 99 not found." in html

    @pytest.mark.anyio
    async def test_network_failure_is_a_fragment(self) -> None:
        html = await UserProfile({"id": "1"}, _context(httpx.MockTransport(_failing))).content()
        assert "Could not load this user" in html

    @pytest.mark.anyio
    async def test_id_is_quoted_in_request(self) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.raw_path.decode())
            return httpx.Response(404)

        await UserProfile({"id": "a b"}, _context(httpx.MockTransport(handler))).content()
        assert seen == ["/users/a%20b"]

    @pytest.mark.anyio
    async def test_encoded_path_is_not_double_encoded(self, site_app) -> None:
        seen: list[str] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request.url.raw_path.decode())
            return httpx.Response(404)

        async with Browser(site_app, "/user/J%C3%B6rg", transport=httpx.MockTransport(handler)) as browser:
            assert browser.title == "User J\u00f6rg"
        assert seen == ["/users/J%C3%B6rg"]


class TestUser:
    def test_from_json(self) -> None:
        user = User.from_json({"id": "3", "name": "Clementine", "email": "c@example.com"})
        assert user == User(id=3, name="Clementine", username="", email="c@example.com")

    def test_from_json_rejects_non_records(self) -> None:
        with pytest.raises(ValueError, match="Unexpected user payload"):
            User.from_json(["not", "a", "user"])


class TestTemplateOverrides:
    @pytest.mark.anyio
    async def test_user_template_dir_wins(self, tmp_path, users_transport) -> None:
        (tmp_path / "home.html").write_text("<p>custom home</p>")
        config = RouterConfig(template_dir=tmp_path)
        http = httpx.AsyncClient(transport=users_transport)
        context = ViewContext(path="/", env=create_environment(config), http=http, config=config)
        assert await Home({}, context).content() == "<p>custom home</p>"
