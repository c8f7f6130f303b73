"""Tests for CLI commands."""

from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest
from conftest import DatasetBuilder
from typer.testing import CliRunner

from figwind.cli import app
from figwind.errors import FigmaApiError
from figwind.figma.converters import OutputFormat

runner = CliRunner()

FILE_URL = "https://www.figma.com/design/abc123/Design-System"


@pytest.fixture
def workdir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolated working and home directories."""
    cwd = tmp_path / "work"
    home = tmp_path / "home"
    cwd.mkdir()
    home.mkdir()
    monkeypatch.chdir(cwd)
    monkeypatch.setenv("HOME", str(home))
    return cwd


@pytest.fixture
def mock_fetch(design_system: DatasetBuilder):
    with patch("figwind.cli.figma_sync.fetch_figma_variables") as mock:
        mock.return_value = design_system.payload()
        yield mock


def write_rc(directory: Path, **overrides: str) -> None:
    data = {
        "figmaFileUrl": FILE_URL,
        "figmaToken": "rc-token",
        "outputPath": "./",
        "outputFormat": "Tailwind4",
        **overrides,
    }
    (directory / ".figwindrc").write_text(json.dumps(data))


class TestMainApp:
    def test_version(self) -> None:
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "figwind version" in result.output
        assert "Python:" in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(app, ["--help"])
        assert result.exit_code == 0
        assert "create" in result.output
        assert "figma-sync" in result.output


# ---------------------------------------------------------------------------
# figwind figma-sync
# ---------------------------------------------------------------------------


class TestFigmaSync:
    def test_flags_generate_v4_and_save_config(
        self, workdir: Path, mock_fetch: MagicMock
    ) -> None:
        result = runner.invoke(
            app,
            [
                "figma-sync",
                "--figma-file-url",
                FILE_URL,
                "--figma-token",
                "flag-token",
                "--output-path",
                "styles",
            ],
        )

        assert result.exit_code == 0, result.output
        mock_fetch.assert_called_once_with("abc123", "flag-token")

        css = (workdir / "styles" / "tailwind4.css").read_text()
        assert css.startswith('@import "tailwindcss";')
        assert "--spacing-xl: 1.000rem;" in css
        assert ".dark-mode {" in css

        saved = json.loads((workdir / ".figwindrc").read_text())
        assert saved == {
            "figmaFileUrl": FILE_URL,
            "figmaToken": "flag-token",
            "outputPath": "styles",
            "outputFormat": "Tailwind4",
        }
        assert "Generated tailwind4.css" in result.output

    def test_tailwind3_output(self, workdir: Path, mock_fetch: MagicMock) -> None:
        result = runner.invoke(
            app,
            [
                "figma-sync",
                "--figma-file-url",
                FILE_URL,
                "--figma-token",
                "t",
                "--output-format",
                "Tailwind3",
            ],
        )

        assert result.exit_code == 0, result.output
        assert (workdir / "tailwind3.css").exists()
        config_js = (workdir / "tailwind3.config.js").read_text()
        assert config_js.startswith("module.exports = {")

    def test_existing_config_is_used(self, workdir: Path, mock_fetch: MagicMock) -> None:
        write_rc(workdir, outputFormat="Tailwind3")

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 0, result.output
        assert "Using existing configuration" in result.output
        mock_fetch.assert_called_once_with("abc123", "rc-token")
        assert (workdir / "tailwind3.config.js").exists()

    def test_file_url_flag_overrides_existing_config(
        self, workdir: Path, mock_fetch: MagicMock
    ) -> None:
        write_rc(workdir)
        other_url = "https://www.figma.com/file/other99/Other"

        result = runner.invoke(
            app, ["figma-sync", "--figma-file-url", other_url, "--figma-token", "new"]
        )

        assert result.exit_code == 0, result.output
        mock_fetch.assert_called_once_with("other99", "new")
        assert json.loads((workdir / ".figwindrc").read_text())["figmaFileUrl"] == other_url

    def test_snapshot_is_used_instead_of_api(
        self, workdir: Path, mock_fetch: MagicMock, design_system: DatasetBuilder
    ) -> None:
        write_rc(workdir)
        (workdir / "figmavariables.json").write_text(json.dumps(design_system.payload()))

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 0, result.output
        mock_fetch.assert_not_called()
        assert (workdir / "tailwind4.css").exists()

    def test_invalid_snapshot_falls_back_to_api(
        self, workdir: Path, mock_fetch: MagicMock
    ) -> None:
        write_rc(workdir)
        (workdir / "figmavariables.json").write_text("{broken")

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 0, result.output
        assert "falling back to API call" in result.output
        mock_fetch.assert_called_once()

    def test_non_object_snapshot_falls_back_to_api(
        self, workdir: Path, mock_fetch: MagicMock
    ) -> None:
        write_rc(workdir)
        (workdir / "figmavariables.json").write_text("[]")

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 0, result.output
        assert "falling back to API call" in result.output
        mock_fetch.assert_called_once_with("abc123", "rc-token")
        assert (workdir / "tailwind4.css").exists()

    def test_debug_saves_snapshot(
        self, workdir: Path, mock_fetch: MagicMock, design_system: DatasetBuilder
    ) -> None:
        write_rc(workdir)

        result = runner.invoke(app, ["figma-sync", "--debug"])

        assert result.exit_code == 0, result.output
        snapshot = json.loads((workdir / "figmavariables.json").read_text())
        assert snapshot == design_system.payload()

    def test_invalid_file_url(self, workdir: Path, mock_fetch: MagicMock) -> None:
        result = runner.invoke(
            app,
            ["figma-sync", "--figma-file-url", "https://example.com/x", "--figma-token", "t"],
        )

        assert result.exit_code == 1
        assert "Invalid Figma file URL" in result.output
        mock_fetch.assert_not_called()

    def test_api_error(self, workdir: Path, mock_fetch: MagicMock) -> None:
        write_rc(workdir)
        mock_fetch.side_effect = FigmaApiError("Failed to fetch Figma variables", "API error: 403")

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 1
        assert "Failed to sync Figma variables" in result.output
        assert not (workdir / "tailwind4.css").exists()

    def test_invalid_config_file(self, workdir: Path, mock_fetch: MagicMock) -> None:
        (workdir / ".figwindrc").write_text("{not json")

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 1
        assert "Failed to load configuration" in result.output

    @patch("figwind.cli.figma_sync.select_interactive")
    @patch("figwind.cli.figma_sync.prompt_text")
    def test_prompts_when_unconfigured(
        self,
        mock_prompt: MagicMock,
        mock_select: MagicMock,
        workdir: Path,
        mock_fetch: MagicMock,
    ) -> None:
        mock_prompt.side_effect = [FILE_URL, "prompt-token", "./out"]
        mock_select.return_value = OutputFormat.TAILWIND3

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 0, result.output
        assert mock_prompt.call_count == 3
        assert mock_prompt.call_args_list[1].kwargs == {"password": True}
        mock_fetch.assert_called_once_with("abc123", "prompt-token")
        assert (workdir / "out" / "tailwind3.css").exists()
        assert json.loads((workdir / ".figwindrc").read_text())["outputFormat"] == "Tailwind3"

    @patch("figwind.cli.figma_sync.prompt_text")
    def test_prompt_cancelled(
        self, mock_prompt: MagicMock, workdir: Path, mock_fetch: MagicMock
    ) -> None:
        mock_prompt.return_value = None

        result = runner.invoke(app, ["figma-sync"])

        assert result.exit_code == 0
        assert "Operation cancelled" in result.output
        assert not (workdir / ".figwindrc").exists()
        mock_fetch.assert_not_called()


# ---------------------------------------------------------------------------
# figwind create
# ---------------------------------------------------------------------------


@pytest.fixture
def dev_mode(monkeypatch: pytest.MonkeyPatch) -> None:
    """Use bundled templates instead of cloning."""
    monkeypatch.setenv("FIGWIND_DEV_MODE", "true")


class TestCreate:
    def test_create_with_template(self, workdir: Path, dev_mode: None) -> None:
        result = runner.invoke(app, ["create", "my-shop", "--template", "starter"])

        assert result.exit_code == 0, result.output
        project = workdir / "my-shop"
        assert json.loads((project / "package.json").read_text())["name"] == "my-shop"
        assert "{{project_name}}" not in (project / "README.md").read_text()
        assert "Project created successfully" in result.output
        assert "cd my-shop" in result.output

    @patch("figwind.cli.create.select_interactive")
    def test_create_selects_template_interactively(
        self, mock_select: MagicMock, workdir: Path, dev_mode: None
    ) -> None:
        mock_select.return_value = "starter"

        result = runner.invoke(app, ["create", "my-shop"])

        assert result.exit_code == 0, result.output
        options = mock_select.call_args[0][0]
        assert "starter" in [option.value for option in options]
        assert (workdir / "my-shop" / "package.json").exists()

    @patch("figwind.cli.create.select_interactive")
    def test_create_selection_cancelled(
        self, mock_select: MagicMock, workdir: Path, dev_mode: None
    ) -> None:
        mock_select.return_value = None

        result = runner.invoke(app, ["create", "my-shop"])

        assert result.exit_code == 0
        assert "Operation cancelled" in result.output
        assert not (workdir / "my-shop").exists()

    def test_create_unknown_template(self, workdir: Path, dev_mode: None) -> None:
        result = runner.invoke(app, ["create", "my-shop", "-t", "missing"])

        assert result.exit_code == 1
        assert "Template 'missing' not found" in result.output
        assert "Available templates: starter" in result.output

    def test_create_invalid_name(self, workdir: Path, dev_mode: None) -> None:
        result = runner.invoke(app, ["create", ".hidden"])

        assert result.exit_code == 1
        assert "cannot start with" in result.output

    @patch("figwind.cli.create.confirm")
    def test_create_existing_directory_declined(
        self, mock_confirm: MagicMock, workdir: Path, dev_mode: None
    ) -> None:
        mock_confirm.return_value = False
        (workdir / "my-shop").mkdir()
        (workdir / "my-shop" / "keep.txt").write_text("keep")

        result = runner.invoke(app, ["create", "my-shop", "-t", "starter"])

        assert result.exit_code == 0
        assert "Operation cancelled" in result.output
        assert (workdir / "my-shop" / "keep.txt").exists()

    @patch("figwind.cli.create.confirm")
    def test_create_existing_directory_overwritten(
        self, mock_confirm: MagicMock, workdir: Path, dev_mode: None
    ) -> None:
        mock_confirm.return_value = True
        (workdir / "my-shop").mkdir()
        (workdir / "my-shop" / "stale.txt").write_text("old")

        result = runner.invoke(app, ["create", "my-shop", "-t", "starter"])

        assert result.exit_code == 0, result.output
        assert not (workdir / "my-shop" / "stale.txt").exists()
        assert (workdir / "my-shop" / "package.json").exists()

    @patch("figwind.scaffold.sources.download_templates")
    def test_create_falls_back_when_download_fails(
        self, mock_download: MagicMock, workdir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        from figwind.errors import ScaffoldError

        monkeypatch.delenv("FIGWIND_DEV_MODE", raising=False)
        mock_download.side_effect = ScaffoldError("git is not installed")

        result = runner.invoke(app, ["create", "my-shop", "-t", "starter"])

        assert result.exit_code == 0, result.output
        assert "falling back to local templates" in result.output
        assert (workdir / "my-shop" / "package.json").exists()
