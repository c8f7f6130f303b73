"""
Project scaffolding command.
"""

from __future__ import annotations

from pathlib import Path

import typer

from figwind.cli_ui import (
    SelectOption,
    confirm,
    console,
    print_error,
    print_info,
    print_success,
    print_warning,
    select_interactive,
)
from figwind.errors import ScaffoldError
from figwind.scaffold import (
    create_project,
    find_template,
    list_templates,
    resolve_template_source,
    validate_project_name,
)


def create_command(
    project_name: str = typer.Argument(..., help="Name of the project to create"),
    template: str | None = typer.Option(None, "--template", "-t", help="Template to use"),
) -> None:
    """
    Create a new project from a template.

    Templates are downloaded from the templates repository (bundled
    templates are used in development mode or when the download fails).

    Examples:
        figwind create my-app                 # Pick a template interactively
        figwind create my-app -t starter      # Use a specific template
    """
    is_valid, error_msg = validate_project_name(project_name)
    if not is_valid:
        print_error(error_msg or "Invalid project name")
        raise typer.Exit(code=1)

    with resolve_template_source() as source:
        available = list_templates(source.templates_dir)
        if not available:
            print_error("No templates available")
            raise typer.Exit(code=1)

        if not template:
            template = select_interactive(
                [SelectOption(value=name, label=name) for name in available],
                title="Select a template to use",
            )
            if not template:
                print_warning("Operation cancelled")
                raise typer.Exit(code=0)

        try:
            template_dir = find_template(source.templates_dir, template)
        except ScaffoldError:
            print_error(f"Template '{template}' not found")
            typer.echo(f"Available templates: {', '.join(available)}")
            raise typer.Exit(code=1)

        target_dir = Path.cwd() / project_name
        overwrite = False
        if target_dir.exists():
            overwrite = confirm(
                f"Directory {project_name} already exists. Do you want to overwrite it?",
                default=False,
            )
            if not overwrite:
                print_warning("Operation cancelled")
                raise typer.Exit(code=0)

        try:
            with console.status(f"Creating new project from {template} template..."):
                create_project(project_name, template_dir, target_dir, overwrite=overwrite)
        except ScaffoldError as e:
            print_error(f"Failed to create project: {e}")
            raise typer.Exit(code=1)

    print_success(f"Project created successfully at {target_dir}")
    typer.echo("")
    print_info("Next steps:")
    typer.echo(f"  cd {project_name}")
    typer.echo("  npm install (or yarn or pnpm install)")
    typer.echo("  npm run dev (or yarn dev or pnpm dev)")
