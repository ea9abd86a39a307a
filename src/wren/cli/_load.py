"""Locating the app a CLI command operates on.

A target is ``module`` or ``module:name``. The name may be an ``App``
or a factory such as ``wren.site.create_app``; factories receive the
RouterConfig built from the command line, ready-made apps keep their own.
With no name, ``create_app`` is preferred over ``app`` so that CLI
options take effect.
"""

import argparse
import dataclasses
import importlib
import logging

from wren.app import App
from wren.config import RouterConfig
from wren.errors import ConfigurationError

logger = logging.getLogger("wren.cli")

_DEFAULT_NAMES = ("create_app", "app")


def config_from_args(args: argparse.Namespace) -> RouterConfig | None:
    """RouterConfig carrying the overrides given on the command line, if any."""
    overrides = {
        field: value
        for field in ("api_base_url", "mount_id")
        if (value := getattr(args, field, None)) is not None
    }
    if not overrides:
        return None
    return dataclasses.replace(RouterConfig(), **overrides)


def load_app(target: str, config: RouterConfig | None = None) -> App:
    """Import *target* and return the App it names.

    Raises ``ConfigurationError`` when the module cannot be imported, the
    name is missing, or it yields something other than an App.
    """
    module_path, _, name = target.partition(":")
    try:
        module = importlib.import_module(module_path)
    except ImportError as exc:
        msg = f"Cannot import {module_path!r}: {exc}"
        raise ConfigurationError(msg) from exc

    names = (name,) if name else _DEFAULT_NAMES
    for candidate in names:
        if hasattr(module, candidate):
            obj = getattr(module, candidate)
            break
    else:
        msg = f"{module_path!r} has no {' or '.join(repr(n) for n in names)}"
        raise ConfigurationError(msg)

    if isinstance(obj, App):
        if config is not None:
            logger.warning("%s is a ready-made App; command line config is ignored", target)
        return obj

    if not callable(obj):
        msg = f"{target!r} is a {type(obj).__name__}, expected a wren App or app factory"
        raise ConfigurationError(msg)

    app = obj(config) if config is not None else obj()
    if not isinstance(app, App):
        msg = f"Factory {target!r} returned {type(app).__name__}, not a wren App"
        raise ConfigurationError(msg)
    return app
