"""
Project creation from a template.
"""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from figwind.errors import ScaffoldError

from .templates import copy_template, list_templates, set_package_name

logger = logging.getLogger(__name__)


def validate_project_name(name: str) -> tuple[bool, str | None]:
    """
    Validate a project name (used as directory and package.json name).

    Returns:
        (is_valid, error_message)

    Examples:
        validate_project_name("my-app")  # -> (True, None)
        validate_project_name("../app")  # -> (False, "...")
    """
    if not name.strip():
        return (False, "Project name cannot be empty")

    if "/" in name or "\\" in name:
        return (False, f"Project name '{name}' cannot contain path separators")

    if name.startswith((".", "_")):
        return (False, f"Project name '{name}' cannot start with '.' or '_'")

    return (True, None)


def find_template(templates_dir: Path, template_name: str) -> Path:
    """
    Locate a template by name.

    Raises:
        ScaffoldError: If the template does not exist (message lists available ones)
    """
    available = list_templates(templates_dir)
    if template_name not in available:
        listing = ", ".join(available) if available else "none"
        raise ScaffoldError(
            f"Template '{template_name}' not found", f"available templates: {listing}"
        )
    return templates_dir / template_name


def create_project(
    project_name: str,
    template_dir: Path,
    target_dir: Path,
    overwrite: bool = False,
) -> Path:
    """
    Create a project from a template directory.

    Args:
        project_name: Name written to package.json and substituted for {{project_name}}
        template_dir: Template to copy
        target_dir: Project directory to create
        overwrite: Remove an existing ``target_dir`` first

    Returns:
        The created project directory

    Raises:
        ScaffoldError: If the name is invalid, the target exists or copying fails
    """
    is_valid, error_msg = validate_project_name(project_name)
    if not is_valid:
        raise ScaffoldError(error_msg or "Invalid project name")

    if target_dir.exists():
        if not overwrite:
            raise ScaffoldError(f"Directory already exists: {target_dir}")
        logger.debug("Removing existing directory %s", target_dir)
        shutil.rmtree(target_dir)

    copied = copy_template(template_dir, target_dir, {"project_name": project_name})
    logger.debug("Copied %d files from %s", len(copied), template_dir)

    set_package_name(target_dir, project_name)
    return target_dir
