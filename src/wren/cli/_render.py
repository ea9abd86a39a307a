"""``wren render`` — dispatch one path headlessly and print the result."""

import argparse
import sys

import anyio

from wren.app import App
from wren.cli._load import config_from_args, load_app
from wren.dom import Document
from wren.errors import ConfigurationError
from wren.history import MemoryHistory


async def render_path(app: App, path: str) -> tuple[str, str]:
    """Render *path* with a fresh document; return ``(title, html)``."""
    document = Document((app.config.mount_id,))
    history = MemoryHistory(path)
    session = await app.start(document, history)
    async with session:
        await document.mark_ready()
        mount = document.get_element_by_id(app.config.mount_id)
        assert mount is not None
        return document.title, mount.inner_html


def run_render(args: argparse.Namespace) -> None:
    """Print the title line followed by the mount point HTML."""
    try:
        app = load_app(args.app, config_from_args(args))
        title, html = anyio.run(render_path, app, args.path)
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    print(f"# {title}")
    print(html)
