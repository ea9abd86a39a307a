"""Wren exception hierarchy.

Shared across the router, dispatcher, and app wiring so every module
raises and catches the same types.
"""


class WrenError(Exception):
    """Base for all wren-specific errors."""


class ConfigurationError(WrenError):
    """Raised when the route table or app wiring is invalid.

    Surfaces at startup (pattern compilation, app freeze, mount point
    lookup), never during a normal dispatch.
    """
