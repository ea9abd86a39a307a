"""Wren — declarative client-side path routing for single-page apps.

Routes map ``/user/:id`` style patterns to views; the router renders the
first match into a single mount point and keeps history in step.

Basic usage::

    from wren import App, Document, MemoryHistory
    from wren.views import TemplateView

    app = App()

    @app.route("/")
    class Home(TemplateView):
        title = "Home"
        template_name = "home.html"

    session = await app.start(Document(), MemoryHistory("/"))
"""

__version__ = "0.1.0-dev"
__all__ = [
    "App",
    "ConfigurationError",
    "Dispatcher",
    "Document",
    "HistoryAdapter",
    "MemoryHistory",
    "Route",
    "RouteMatch",
    "Router",
    "RouterConfig",
    "Session",
    "WrenError",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import wren`` fast while providing a clean top-level API.
    """
    if name in ("App", "Session"):
        from wren import app as _app

        return getattr(_app, name)

    if name == "RouterConfig":
        from wren.config import RouterConfig

        return RouterConfig

    if name == "Dispatcher":
        from wren.dispatch import Dispatcher

        return Dispatcher

    if name == "HistoryAdapter":
        from wren.navigation import HistoryAdapter

        return HistoryAdapter

    if name == "Document":
        from wren.dom import Document

        return Document

    if name == "MemoryHistory":
        from wren.history import MemoryHistory

        return MemoryHistory

    if name in ("Route", "RouteMatch", "Router"):
        from wren import routing as _routing

        return getattr(_routing, name)

    if name in ("ConfigurationError", "WrenError"):
        from wren import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
