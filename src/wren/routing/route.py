"""Route and RouteMatch frozen dataclasses."""

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from wren.views.base import ViewFactory


@dataclass(frozen=True, slots=True)
class PathSegment:
    """A parsed segment of a route pattern.

    Static:  ``/users``  (is_param=False)
    Param:   ``/:id``    (is_param=True, param_name="id")
    """

    value: str
    is_param: bool = False
    param_name: str | None = None


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition.

    Declared during app setup, compiled into the router at freeze time.
    """

    pattern: str
    view: "ViewFactory"
    name: str | None = None


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of resolving a path against the route table.

    ``is_fallback`` is set when no declared route matched and the
    NotFound view was substituted. ``path`` is the normalized path
    that was resolved.
    """

    route: Route
    params: dict[str, str]
    path: str
    is_fallback: bool = False
