"""
Template sources.

Templates normally come from a shallow clone of the templates repository;
in development mode, or when cloning fails, the templates bundled with the
package are used instead.
"""

from __future__ import annotations

import logging
import os
import shutil
import subprocess
import tempfile
from dataclasses import dataclass
from pathlib import Path

from figwind.errors import ScaffoldError

logger = logging.getLogger(__name__)

DEFAULT_TEMPLATES_REPO = "https://github.com/figwind/figwind.git"
DEFAULT_TEMPLATES_BRANCH = "main"

# Templates live in this directory of the repository
REPO_TEMPLATES_SUBDIR = "templates"


def is_dev_mode() -> bool:
    return os.environ.get("FIGWIND_DEV_MODE", "").lower() == "true"


def bundled_templates_dir() -> Path:
    """Templates shipped inside the package."""
    return Path(__file__).parent.parent / "templates"


@dataclass
class TemplateSource:
    """
    Where templates are read from.

    Attributes:
        templates_dir: Directory containing one subdirectory per template
        temp_dir: Temporary clone to remove after use (None for bundled templates)
    """

    templates_dir: Path
    temp_dir: Path | None = None

    @property
    def is_remote(self) -> bool:
        return self.temp_dir is not None

    def cleanup(self) -> None:
        if self.temp_dir is not None:
            shutil.rmtree(self.temp_dir, ignore_errors=True)
            self.temp_dir = None

    def __enter__(self) -> TemplateSource:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.cleanup()


def download_templates(
    target_dir: Path,
    repo_url: str | None = None,
    branch: str | None = None,
) -> None:
    """
    Shallow-clone the templates repository into ``target_dir`` and drop its .git.

    Raises:
        ScaffoldError: If git is missing or the clone fails
    """
    repo_url = repo_url or os.environ.get("FIGWIND_TEMPLATES_REPO", DEFAULT_TEMPLATES_REPO)
    branch = branch or os.environ.get("FIGWIND_TEMPLATES_BRANCH", DEFAULT_TEMPLATES_BRANCH)

    logger.debug("Cloning %s (%s) into %s", repo_url, branch, target_dir)
    try:
        subprocess.run(
            ["git", "clone", "--depth=1", "-b", branch, repo_url, str(target_dir)],
            check=True,
            capture_output=True,
            text=True,
        )
    except FileNotFoundError as e:
        raise ScaffoldError("git is not installed") from e
    except subprocess.CalledProcessError as e:
        raise ScaffoldError(
            "Failed to download templates", (e.stderr or "").strip() or None
        ) from e

    shutil.rmtree(target_dir / ".git", ignore_errors=True)


def resolve_template_source() -> TemplateSource:
    """
    Pick the template source for this run.

    Development mode uses bundled templates. Otherwise the repository is
    cloned into a temporary directory, falling back to bundled templates if
    that fails.
    """
    from figwind.cli_ui import console, print_info, print_success, print_warning

    if is_dev_mode():
        print_info("Development mode detected, using local templates")
        return TemplateSource(bundled_templates_dir())

    temp_dir = Path(tempfile.mkdtemp(prefix="figwind-template-"))
    try:
        with console.status("Downloading templates..."):
            download_templates(temp_dir)
    except ScaffoldError as e:
        logger.debug("Template download failed: %s", e)
        shutil.rmtree(temp_dir, ignore_errors=True)
        print_warning("Failed to download templates, falling back to local templates")
        return TemplateSource(bundled_templates_dir())

    print_success("Templates downloaded successfully")
    return TemplateSource(temp_dir / REPO_TEMPLATES_SUBDIR, temp_dir=temp_dir)
