"""
Sync configuration stored in ``.figwindrc``.

The rc file is JSON with camelCase keys. It is looked up in the working
directory first, then in the home directory; saving always writes the
working-directory file.
"""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from figwind.errors import ConfigError
from figwind.figma.converters.base import OutputFormat

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".figwindrc"

_FILE_KEY_RE = re.compile(r"figma\.com/(file|design)/([^/]+)")


class SyncConfig(BaseModel):
    """Settings for ``figwind figma-sync``."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    figma_file_url: str = Field(alias="figmaFileUrl")
    figma_token: str = Field(alias="figmaToken")
    output_path: str = Field(default="./", alias="outputPath")
    output_format: OutputFormat = Field(default=OutputFormat.TAILWIND4, alias="outputFormat")

    @property
    def file_key(self) -> str:
        return extract_file_key(self.figma_file_url)


def extract_file_key(url: str) -> str:
    """
    Extract the file key from a Figma file URL.

    Examples:
        extract_file_key("https://www.figma.com/design/abc123/My-File")  # -> "abc123"
        extract_file_key("https://example.com")  # -> ""
    """
    match = _FILE_KEY_RE.search(url)
    return match.group(2) if match else ""


def local_config_path(cwd: Path | None = None) -> Path:
    return (cwd or Path.cwd()) / CONFIG_FILENAME


def global_config_path(home: Path | None = None) -> Path:
    return (home or Path.home()) / CONFIG_FILENAME


def find_config(cwd: Path | None = None, home: Path | None = None) -> Path | None:
    """Return the first existing rc file (local, then global)."""
    for path in (local_config_path(cwd), global_config_path(home)):
        if path.is_file():
            return path
    return None


def config_exists(cwd: Path | None = None, home: Path | None = None) -> bool:
    return find_config(cwd, home) is not None


def load_config(cwd: Path | None = None, home: Path | None = None) -> SyncConfig:
    """
    Load the sync configuration.

    Raises:
        ConfigError: If no rc file exists or it is not a valid configuration
    """
    path = find_config(cwd, home)
    if path is None:
        raise ConfigError("Failed to load configuration", f"no {CONFIG_FILENAME} found")

    logger.debug("Loading configuration from %s", path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError("Failed to load configuration", f"{path}: {e}") from e

    try:
        return SyncConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError("Invalid configuration", f"{path}: {e}") from e


def save_config(config: SyncConfig, cwd: Path | None = None) -> Path:
    """
    Save the configuration to the working-directory rc file.

    Returns:
        Path of the written file
    """
    path = local_config_path(cwd)
    try:
        path.write_text(
            json.dumps(config.model_dump(mode="json", by_alias=True), indent=2),
            encoding="utf-8",
        )
    except OSError as e:
        raise ConfigError("Failed to save configuration", str(e)) from e
    logger.debug("Configuration saved to %s", path)
    return path
