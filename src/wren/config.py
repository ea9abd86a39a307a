"""Router configuration.

The document-facing fields (mount point id, intercepted link attribute)
must agree with the page markup. The remaining fields reach views
through ViewContext.
"""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class RouterConfig:
    """Settings for one wren app and every session it starts.

    Defaults target the demo site against the public JSONPlaceholder API::

        config = RouterConfig(mount_id="root", api_base_url="http://localhost:3000")
    """

    # Document
    mount_id: str = "app"
    link_attribute: str = "data-link"

    # Data endpoints consumed by views
    api_base_url: str = "https://jsonplaceholder.typicode.com"
    fetch_timeout: float = 10.0

    # Templates
    template_dir: str | Path | None = None  # Extra user templates, searched before built-ins
    autoescape: bool = True

    debug: bool = False
