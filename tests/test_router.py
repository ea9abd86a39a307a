"""Tests for wren.routing.router — ordered first-match-wins route table."""

import pytest

from wren.errors import ConfigurationError
from wren.routing.route import Route
from wren.routing.router import Router
from wren.views.pages import About, Home, NotFound, UserProfile


class _Special:
    title = "Special"

    def __init__(self, params, context) -> None:
        pass

    async def content(self) -> str:
        return "special"


def _router(*routes: Route) -> Router:
    return Router(routes, not_found=NotFound)


class TestResolve:
    def test_static(self) -> None:
        router = _router(Route("/", Home), Route("/about", About))
        match = router.resolve("/about")
        assert match.route.view is About
        assert match.params == {}
        assert match.is_fallback is False

    def test_params_are_strings(self) -> None:
        router = _router(Route("/user/:id", UserProfile))
        match = router.resolve("/user/42")
        assert match.params == {"id": "42"}
        assert isinstance(match.params["id"], str)

    def test_first_match_wins(self) -> None:
        router = _router(Route("/user/me", _Special), Route("/user/:id", UserProfile))
        assert router.resolve("/user/me").route.view is _Special
        assert router.resolve("/user/7").route.view is UserProfile

    def test_declaration_order_beats_specificity(self) -> None:
        router = _router(Route("/user/:id", UserProfile), Route("/user/me", _Special))
        match = router.resolve("/user/me")
        assert match.route.view is UserProfile
        assert match.params == {"id": "me"}

    def test_fallback(self) -> None:
        router = _router(Route("/", Home))
        match = router.resolve("/nonexistent")
        assert match.is_fallback is True
        assert match.route.view is NotFound
        assert match.params == {}
        assert match.path == "/nonexistent"

    def test_empty_table_falls_back(self) -> None:
        assert _router().resolve("/").is_fallback is True

    def test_path_normalized(self) -> None:
        router = _router(Route("/about", About))
        match = router.resolve("/about/?ref=nav")
        assert match.route.view is About
        assert match.path == "/about"


class TestConstruction:
    def test_routes_in_order(self) -> None:
        routes = (Route("/", Home), Route("/about", About))
        assert _router(*routes).routes == routes

    def test_invalid_pattern_fails_at_construction(self) -> None:
        with pytest.raises(ConfigurationError):
            _router(Route("/user/:id/:id", UserProfile))

    def test_duplicate_name(self) -> None:
        with pytest.raises(ConfigurationError, match="Duplicate route name"):
            _router(Route("/", Home, name="home"), Route("/home", Home, name="home"))


class TestUrlFor:
    def test_static(self) -> None:
        router = _router(Route("/about", About, name="about"))
        assert router.url_for("about") == "/about"

    def test_with_params(self) -> None:
        router = _router(Route("/user/:id", UserProfile, name="user"))
        assert router.url_for("user", id="42") == "/user/42"

    def test_unknown_name(self) -> None:
        with pytest.raises(ConfigurationError, match="No route named"):
            _router().url_for("missing")
