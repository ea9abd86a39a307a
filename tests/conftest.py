"""Shared fixtures: a fake users API and the demo site."""

import json

import httpx
import pytest

from wren.app import App
from wren.site import create_app

USERS = [
    {"id": 1, "name": "Leanne Graham", "username": "Bret", "email": "leanne@example.com"},
    {"id": 2, "name": "Ervin Howell", "username": "Antonette", "email": "ervin@example.com"},
]


def _users_api(request: httpx.Request) -> httpx.Response:
    path = request.url.path
    if path == "/users":
        return httpx.Response(200, json=USERS)
    if path.startswith("/users/"):
        user_id = path.rsplit("/", 1)[1]
        for user in USERS:
            if str(user["id"]) == user_id:
                return httpx.Response(200, content=json.dumps(user))
        return httpx.Response(404, json={})
    return httpx.Response(404)


@pytest.fixture
def users_transport() -> httpx.MockTransport:
    """Transport serving ``/users`` and ``/users/{id}`` from USERS."""
    return httpx.MockTransport(_users_api)


@pytest.fixture
def site_app() -> App:
    """A fresh demo app (apps freeze on start, so one per test)."""
    return create_app()
