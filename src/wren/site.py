"""The demo site: a handful of static pages plus a user directory.

Run headless from the command line::

    wren routes wren.site
    wren render wren.site /user/1
"""

from wren.app import App
from wren.config import RouterConfig
from wren.views.pages import About, Contact, Home, UserProfile, Users


def create_app(config: RouterConfig | None = None) -> App:
    """Build the demo app with its route table."""
    app = App(config)
    app.add_route("/", Home, name="home")
    app.add_route("/about", About, name="about")
    app.add_route("/contact", Contact, name="contact")
    app.add_route("/users", Users, name="users")
    app.add_route("/user/:id", UserProfile, name="user")
    return app


app = create_app()
