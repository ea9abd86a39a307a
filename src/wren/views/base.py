"""View protocol and the template-backed helper base.

A view is anything with a ``title`` and an async ``content()``::

    class Hello:
        title = "Hello"

        def __init__(self, params, context):
            self.name = params.get("name", "world")

        async def content(self) -> str:
            return f"<p>Hello, {self.name}</p>"

No base class required. The dispatcher checks the shape, not the lineage.
A fresh view is built for every dispatch and dropped after rendering.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Protocol

import httpx
from kida import Environment

from wren.config import RouterConfig
from wren.templating import render_template


class View(Protocol):
    """Protocol for routed views."""

    @property
    def title(self) -> str: ...

    async def content(self) -> str: ...


@dataclass(frozen=True, slots=True)
class ViewContext:
    """Collaborators handed to every view at construction.

    ``path`` is the normalized path being dispatched. It is display
    context only; route parameters arrive separately.
    """

    path: str
    env: Environment
    http: httpx.AsyncClient
    config: RouterConfig


# Builds a view from the extracted parameters — view classes qualify
type ViewFactory = Callable[[dict[str, str], ViewContext], View]


def render_error(context: ViewContext, message: str) -> str:
    """User-facing error fragment returned by views that fail."""
    return render_template(context.env, "error.html", {"message": message})


class TemplateView:
    """Renders a single kida template.

    Subclasses set ``title`` and ``template_name`` and may override
    ``template_context()``. Nothing is shared between instances.
    """

    title: ClassVar[str] = ""
    template_name: ClassVar[str] = ""

    def __init__(self, params: dict[str, str], context: ViewContext) -> None:
        self.params = params
        self.context = context

    def template_context(self) -> dict[str, Any]:
        return {"params": self.params}

    async def content(self) -> str:
        return render_template(self.context.env, self.template_name, self.template_context())
