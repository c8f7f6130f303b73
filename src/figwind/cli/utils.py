"""
figwind CLI utilities.

Shared utility functions used across CLI modules.
"""

import logging
import os
import platform
import shutil
from pathlib import Path

import typer

from figwind._version import get_version


def configure_logging() -> None:
    """Configure stderr logging; level from FIGWIND_LOG_LEVEL (default WARNING)."""
    log_level = os.getenv("FIGWIND_LOG_LEVEL", "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, log_level, logging.WARNING),
        format="%(levelname)s %(name)s: %(message)s",
    )


def enable_debug_logging() -> None:
    logging.getLogger("figwind").setLevel(logging.DEBUG)


def version_callback(value: bool) -> None:
    """Display version and environment information."""
    if value:
        python_version = platform.python_version()
        python_impl = platform.python_implementation()

        import figwind

        install_location = Path(figwind.__file__).parent

        git_path = shutil.which("git")
        git_status = f"✓ {git_path}" if git_path else "✗ Not found (templates fall back to bundled)"

        typer.echo(f"figwind version {get_version()}")
        typer.echo("")
        typer.echo("Environment:")
        typer.echo(f"  Python:        {python_impl} {python_version}")
        typer.echo(f"  Platform:      {platform.system()} {platform.release()}")
        typer.echo(f"  Location:      {install_location}")
        typer.echo("")
        typer.echo("Features:")
        typer.echo(f"  git:           {git_status}")

        raise typer.Exit()
