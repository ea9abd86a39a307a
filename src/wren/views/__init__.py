"""Views — the units of page content the router renders."""

from wren.views.base import TemplateView, View, ViewContext, ViewFactory, render_error
from wren.views.pages import About, Contact, Home, NotFound, User, UserProfile, Users

__all__ = [
    "About",
    "Contact",
    "Home",
    "NotFound",
    "TemplateView",
    "User",
    "UserProfile",
    "Users",
    "View",
    "ViewContext",
    "ViewFactory",
    "render_error",
]
