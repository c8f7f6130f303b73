"""
figwind CLI package.

- create.py: project scaffolding command
- figma_sync.py: Figma variables to Tailwind sync command
- utils.py: version callback and logging setup
"""

import typer

from figwind._version import get_version

from .create import create_command
from .figma_sync import figma_sync_command
from .utils import configure_logging, version_callback

__version__ = get_version()

app = typer.Typer(
    help="""figwind – project scaffolding and Figma design token sync

Commands:
  • create       Scaffold a new project from a template
  • figma-sync   Convert Figma variables to Tailwind CSS (v3 or v4)
""",
    no_args_is_help=True,
)


@app.callback()
def main_callback(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and environment information",
    ),
) -> None:
    """figwind CLI main callback for global options."""
    pass


app.command(name="create")(create_command)
app.command(name="figma-sync")(figma_sync_command)


def main() -> None:
    configure_logging()
    app(standalone_mode=True)


__all__ = [
    "__version__",
    "app",
    "main",
    "create_command",
    "figma_sync_command",
    "get_version",
    "version_callback",
]
