"""Built-in views: static pages, user directory, and the not-found page."""

import logging
from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

import httpx

from wren.templating import render_template
from wren.views.base import TemplateView, ViewContext, render_error

logger = logging.getLogger("wren.views")


@dataclass(frozen=True, slots=True)
class User:
    """A record from the users endpoint."""

    id: int
    name: str
    username: str = ""
    email: str = ""

    @classmethod
    def from_json(cls, data: Any) -> "User":
        """Build a User from a decoded JSON object.

        Raises ``ValueError`` when the payload is not a user record.
        """
        if not isinstance(data, dict) or "id" not in data or "name" not in data:
            msg = f"Unexpected user payload: {data!r:.80}"
            raise ValueError(msg)
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            username=str(data.get("username", "")),
            email=str(data.get("email", "")),
        )


class Home(TemplateView):
    title = "Home"
    template_name = "home.html"


class About(TemplateView):
    title = "About"
    template_name = "about.html"


class Contact(TemplateView):
    title = "Contact"
    template_name = "contact.html"

    def template_context(self) -> dict[str, Any]:
        return {"email": "hello@example.com"}


class Users:
    """Lists every user from ``GET /users``."""

    title = "Users"

    def __init__(self, params: dict[str, str], context: ViewContext) -> None:
        self.context = context

    async def content(self) -> str:
        try:
            response = await self.context.http.get("/users")
            response.raise_for_status()
            users = [User.from_json(item) for item in response.json()]
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            logger.warning("Could not load users: %s", exc)
            return render_error(self.context, "Could not load users. Please try again later.")

        return render_template(self.context.env, "users.html", {"users": users})


class UserProfile:
    """Shows one user from ``GET /users/{id}``."""

    def __init__(self, params: dict[str, str], context: ViewContext) -> None:
        self.user_id = params["id"]
        self.context = context

    @property
    def title(self) -> str:
        return f"User {self.user_id}"

    async def content(self) -> str:
        try:
            response = await self.context.http.get(f"/users/{quote(self.user_id, safe='')}")
            if response.status_code == 404:
                return render_error(self.context, f"User {self.user_id} not found.")
            response.raise_for_status()
            user = User.from_json(response.json())
        except (httpx.HTTPError, ValueError, TypeError) as exc:
            logger.warning("Could not load user %s: %s", self.user_id, exc)
            return render_error(self.context, "Could not load this user. Please try again later.")

        return render_template(self.context.env, "user_profile.html", {"user": user})


class NotFound(TemplateView):
    """Fallback for paths no route matches."""

    title = "Not Found"
    template_name = "not_found.html"

    def template_context(self) -> dict[str, Any]:
        return {"path": self.context.path}
