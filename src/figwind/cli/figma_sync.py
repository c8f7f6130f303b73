"""
Figma variables to Tailwind CSS sync command.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import typer

from figwind.cli_ui import (
    SelectOption,
    print_error,
    print_info,
    print_muted,
    print_success,
    print_warning,
    prompt_text,
    select_interactive,
)
from figwind.errors import FigwindError
from figwind.figma.api import fetch_figma_variables, load_dataset
from figwind.figma.config import (
    CONFIG_FILENAME,
    SyncConfig,
    config_exists,
    load_config,
    save_config,
)
from figwind.figma.converters import OutputFormat, create_converter

from .utils import enable_debug_logging

logger = logging.getLogger(__name__)

SNAPSHOT_FILENAME = "figmavariables.json"


class SyncCancelled(Exception):
    """Raised when the user cancels an interactive prompt."""


def prompt_for_config() -> SyncConfig:
    """
    Ask for the sync configuration interactively.

    Raises:
        SyncCancelled: If the URL or token prompt is cancelled or left empty
    """
    print_info("Please provide the following configuration details:")

    figma_file_url = prompt_text("Enter your Figma file URL (containing variables):")
    if not figma_file_url:
        raise SyncCancelled()

    figma_token = prompt_text("Enter your Figma Personal Access Token:", password=True)
    if not figma_token:
        raise SyncCancelled()

    output_path = prompt_text("Enter output directory for Tailwind CSS variables:", default="./")
    if output_path is None:
        raise SyncCancelled()

    output_format = select_interactive(
        [
            SelectOption(value=OutputFormat.TAILWIND4, label="Tailwind v4", badge="DEFAULT"),
            SelectOption(value=OutputFormat.TAILWIND3, label="Tailwind v3"),
        ],
        title="Select output format",
    )
    if output_format is None:
        raise SyncCancelled()

    return SyncConfig(
        figma_file_url=figma_file_url,
        figma_token=figma_token,
        output_path=output_path,
        output_format=output_format,
    )


def resolve_config(
    figma_file_url: str | None,
    figma_token: str | None,
    output_path: str,
    output_format: OutputFormat,
) -> SyncConfig:
    """
    Decide which configuration to use.

    An existing rc file wins unless a file URL is passed; a URL plus token
    from the command line are saved as the new configuration; otherwise the
    user is prompted (and the answers saved).
    """
    if config_exists() and not figma_file_url:
        config = load_config()
        print_success(f"Using existing configuration from {CONFIG_FILENAME}")
        return config

    if figma_file_url and figma_token:
        config = SyncConfig(
            figma_file_url=figma_file_url,
            figma_token=figma_token,
            output_path=output_path,
            output_format=output_format,
        )
    else:
        config = prompt_for_config()

    save_config(config)
    print_success("Configuration saved successfully")
    return config


def load_variables(file_key: str, token: str, debug: bool, cwd: Path | None = None) -> dict[str, Any]:
    """
    Load the raw variables payload.

    A ``figmavariables.json`` snapshot in the working directory is used
    instead of the API when present and valid. With ``debug``, a fresh
    API response is written as that snapshot if none existed.
    """
    snapshot = (cwd or Path.cwd()) / SNAPSHOT_FILENAME
    snapshot_exists = snapshot.is_file()
    payload: dict[str, Any] | None = None

    if snapshot_exists:
        print_info(f"Using existing {SNAPSHOT_FILENAME} from {snapshot.parent}...")
        try:
            data = json.loads(snapshot.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.warning("Failed to parse %s, falling back to API call: %s", snapshot, e)
            print_warning(f"Failed to parse {SNAPSHOT_FILENAME}, falling back to API call")
        else:
            if isinstance(data, dict):
                payload = data
                print_success(f"Successfully loaded {SNAPSHOT_FILENAME}")
            else:
                logger.warning("%s is not a JSON object, falling back to API call", snapshot)
                print_warning(f"Failed to parse {SNAPSHOT_FILENAME}, falling back to API call")

    if payload is None:
        print_info("Fetching variables from Figma API...")
        payload = fetch_figma_variables(file_key, token)

    if debug and not snapshot_exists:
        snapshot.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print_info(f"Debug: Figma response saved to {snapshot}")

    return payload


def write_output_files(files: dict[str, str], output_dir: Path) -> list[Path]:
    """Write generated files into ``output_dir`` (created if missing)."""
    output_dir.mkdir(parents=True, exist_ok=True)
    written = []
    for filename, content in files.items():
        path = output_dir / filename
        path.write_text(content, encoding="utf-8")
        written.append(path)
    return written


def figma_sync_command(
    debug: bool = typer.Option(
        False, "--debug", "-d", help=f"Enable debug mode (saves the API response to {SNAPSHOT_FILENAME})"
    ),
    figma_file_url: str | None = typer.Option(
        None, "--figma-file-url", help="Figma file URL containing variables"
    ),
    figma_token: str | None = typer.Option(
        None, "--figma-token", help="Figma Personal Access Token"
    ),
    output_path: str = typer.Option(
        "./", "--output-path", help="Output directory for Tailwind CSS variables"
    ),
    output_format: OutputFormat = typer.Option(
        OutputFormat.TAILWIND4, "--output-format", help="Output format"
    ),
) -> None:
    """
    Sync Figma variables to Tailwind CSS.

    Fetches the local variables of a Figma file and converts them to
    Tailwind CSS v4 (tailwind4.css) or v3 (tailwind3.css + tailwind3.config.js).

    Examples:
        figwind figma-sync                                   # Use .figwindrc or prompt
        figwind figma-sync --figma-file-url URL --figma-token TOKEN
        figwind figma-sync --output-format Tailwind3 --output-path ./styles
    """
    print_info("Figma variables to Tailwind sync tool")
    print_muted(
        "This tool fetches variables from a Figma file and converts them to "
        "Tailwind CSS (v4) and config.js (v3)"
    )

    if debug:
        enable_debug_logging()
        print_warning(f"Debug mode enabled - Figma response will be saved to {SNAPSHOT_FILENAME}")

    try:
        config = resolve_config(figma_file_url, figma_token, output_path, output_format)

        file_key = config.file_key
        if not file_key:
            raise FigwindError("Invalid Figma file URL", config.figma_file_url)

        payload = load_variables(file_key, config.figma_token, debug)
        dataset = load_dataset(payload)

        converter = create_converter(config.output_format)
        files = converter.convert(dataset, config)

        for path in write_output_files(files, Path(config.output_path)):
            print_success(f"Generated {path.name}")
        print_success("Generated successfully")

    except SyncCancelled:
        print_warning("Operation cancelled")
        raise typer.Exit(code=0)
    except FigwindError as e:
        print_error(f"Failed to sync Figma variables: {e}")
        raise typer.Exit(code=1)
    except OSError as e:
        print_error(f"Failed to write output files: {e}")
        raise typer.Exit(code=1)
