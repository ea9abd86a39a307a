"""Kida environment setup.

Creates a kida Environment from the RouterConfig. The environment is
created once per session and shared by every view instance.
"""

from typing import Any

from kida import ChoiceLoader, Environment, FileSystemLoader, PackageLoader

from wren.config import RouterConfig


def create_environment(config: RouterConfig) -> Environment:
    """Create a kida Environment from router configuration.

    User templates in ``config.template_dir`` take precedence over the
    built-in view templates shipped with wren.
    """
    loaders = []
    if config.template_dir is not None:
        loaders.append(FileSystemLoader(str(config.template_dir)))
    loaders.append(PackageLoader("wren", "templates"))

    return Environment(
        loader=ChoiceLoader(loaders),
        autoescape=config.autoescape,
        auto_reload=config.debug,
    )


def render_template(env: Environment, name: str, context: dict[str, Any]) -> str:
    """Render a named template to string."""
    template = env.get_template(name)
    return template.render(context)
