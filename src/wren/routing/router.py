"""Ordered route table with first-match-wins resolution.

Routes are declared during setup and compiled when the Router is
constructed. The table never changes afterwards.
"""

from collections.abc import Iterable

from wren.errors import ConfigurationError
from wren.routing.pattern import CompiledPattern, compile_pattern, normalize_path
from wren.routing.route import Route, RouteMatch
from wren.views.base import ViewFactory


class Router:
    """Immutable route table.

    Usage::

        router = Router(
            [Route("/", Home), Route("/user/:id", UserProfile)],
            not_found=NotFound,
        )
        match = router.resolve("/user/42")
        match.params  # {"id": "42"}
    """

    __slots__ = ("_by_name", "_compiled", "_not_found")

    def __init__(self, routes: Iterable[Route], not_found: ViewFactory) -> None:
        compiled: list[tuple[Route, CompiledPattern]] = []
        by_name: dict[str, tuple[Route, CompiledPattern]] = {}
        for route in routes:
            entry = (route, compile_pattern(route.pattern))
            if route.name is not None:
                if route.name in by_name:
                    msg = f"Duplicate route name {route.name!r}."
                    raise ConfigurationError(msg)
                by_name[route.name] = entry
            compiled.append(entry)

        self._compiled = tuple(compiled)
        self._by_name = by_name
        self._not_found = Route(pattern="", view=not_found, name="not_found")

    @property
    def routes(self) -> tuple[Route, ...]:
        """Declared routes in resolution order."""
        return tuple(route for route, _ in self._compiled)

    @property
    def not_found(self) -> Route:
        """The synthetic fallback route."""
        return self._not_found

    def resolve(self, path: str) -> RouteMatch:
        """Resolve *path* to the first matching route.

        Never raises: when nothing matches, returns a fallback match on
        the NotFound view with no parameters.
        """
        normalized = normalize_path(path)
        for route, pattern in self._compiled:
            captures = pattern.match(normalized)
            if captures is not None:
                return RouteMatch(route=route, params=pattern.bind(captures), path=normalized)

        return RouteMatch(route=self._not_found, params={}, path=normalized, is_fallback=True)

    def url_for(self, name: str, **params: str) -> str:
        """Build a concrete path for the named route."""
        try:
            _, pattern = self._by_name[name]
        except KeyError:
            msg = f"No route named {name!r}."
            raise ConfigurationError(msg) from None
        return pattern.build(params)
