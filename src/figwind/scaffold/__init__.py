"""
Project scaffolding.

- sources.py: remote (git) and bundled template sources
- templates.py: template listing, copying and variable substitution
- project.py: create_project and project name validation
"""

from __future__ import annotations

from .project import create_project, find_template, validate_project_name
from .sources import (
    TemplateSource,
    bundled_templates_dir,
    download_templates,
    is_dev_mode,
    resolve_template_source,
)
from .templates import copy_template, list_templates, set_package_name, substitute_template_vars

__all__ = [
    # Sources
    "TemplateSource",
    "bundled_templates_dir",
    "download_templates",
    "is_dev_mode",
    "resolve_template_source",
    # Templates
    "copy_template",
    "list_templates",
    "set_package_name",
    "substitute_template_vars",
    # Project
    "create_project",
    "find_template",
    "validate_project_name",
]
