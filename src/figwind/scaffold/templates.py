"""
Template copying and variable substitution.

Handles copying template directories and substituting {{variable}} patterns.
"""

from __future__ import annotations

import json
import shutil
from pathlib import Path

from figwind.errors import ScaffoldError

# Never copied from a template, at any depth
SKIPPED_NAMES = {"node_modules", ".git"}


def substitute_template_vars(content: str, variables: dict[str, str]) -> str:
    """
    Substitute {{variable}} patterns in template content.

    Examples:
        substitute_template_vars("Hello {{project_name}}", {"project_name": "shop"})
        # -> "Hello shop"
    """
    for key, value in variables.items():
        pattern = f"{{{{{key}}}}}"
        content = content.replace(pattern, value)

    return content


def list_templates(templates_dir: Path) -> list[str]:
    """
    List template names: non-hidden directories except node_modules.

    Returns:
        Sorted template names (empty if the directory does not exist)
    """
    if not templates_dir.is_dir():
        return []

    return sorted(
        item.name
        for item in templates_dir.iterdir()
        if item.is_dir() and not item.name.startswith(".") and item.name not in SKIPPED_NAMES
    )


def _is_skipped(rel_path: Path) -> bool:
    return rel_path.as_posix().startswith(".") or any(
        part in SKIPPED_NAMES for part in rel_path.parts
    )


def copy_template(
    template_dir: Path,
    target_dir: Path,
    variables: dict[str, str] | None = None,
) -> list[Path]:
    """
    Copy a template directory to target, substituting variables.

    Skips node_modules/ and .git/ at any depth, and every top-level path
    starting with "." (dotfiles are generated by the project tooling).

    Args:
        template_dir: Source template directory
        target_dir: Destination directory (must not exist)
        variables: Optional dict for template variable substitution

    Returns:
        Paths of the copied files, relative to ``target_dir``

    Raises:
        ScaffoldError: If target exists, the template is missing or copy fails
    """
    if target_dir.exists():
        raise ScaffoldError(f"Directory already exists: {target_dir}")

    if not template_dir.is_dir():
        raise ScaffoldError(f"Template not found: {template_dir}")

    variables = variables or {}
    copied: list[Path] = []

    try:
        target_dir.mkdir(parents=True)

        for src_path in sorted(template_dir.rglob("*")):
            if not src_path.is_file():
                continue

            rel_path = src_path.relative_to(template_dir)
            if _is_skipped(rel_path):
                continue

            dst_path = target_dir / rel_path
            dst_path.parent.mkdir(parents=True, exist_ok=True)

            try:
                content = src_path.read_text(encoding="utf-8")
                dst_path.write_text(substitute_template_vars(content, variables), encoding="utf-8")
            except UnicodeDecodeError:
                # Binary file, just copy
                shutil.copy2(src_path, dst_path)

            copied.append(rel_path)

    except OSError as e:
        shutil.rmtree(target_dir, ignore_errors=True)
        raise ScaffoldError(f"Failed to copy template: {e}") from e

    return copied


def set_package_name(project_dir: Path, name: str) -> bool:
    """
    Set the ``name`` field of the project's package.json.

    Returns:
        True if a package.json was updated
    """
    package_json = project_dir / "package.json"
    if not package_json.exists():
        return False

    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ScaffoldError(f"Invalid package.json in template: {e}") from e

    data["name"] = name
    package_json.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    return True
