"""
Rich interactive UI components for the figwind CLI.

Provides cursor-navigable selection menus, confirmations and styled status
messages.
"""

import sys
from dataclasses import dataclass
from typing import Generic, TypeVar

from rich import box
from rich.console import Console
from rich.style import Style
from rich.table import Table
from rich.text import Text

console = Console()

T = TypeVar("T")


def is_interactive() -> bool:
    """Whether both stdin and stdout are terminals."""
    return sys.stdin.isatty() and sys.stdout.isatty()


@dataclass
class SelectOption(Generic[T]):
    """An option in a selection menu."""

    value: T
    label: str
    description: str = ""
    badge: str = ""  # e.g., "DEFAULT"


STYLES = {
    "title": Style(color="bright_cyan", bold=True),
    "subtitle": Style(color="bright_black"),
    "selected": Style(color="bright_white", bgcolor="blue", bold=True),
    "unselected": Style(color="white"),
    "description": Style(color="bright_black"),
    "badge": Style(color="green", bold=True),
    "success": Style(color="green", bold=True),
    "error": Style(color="red", bold=True),
    "warning": Style(color="yellow"),
    "info": Style(color="cyan"),
    "muted": Style(color="bright_black"),
    "highlight": Style(color="bright_cyan"),
}


def print_header(title: str, subtitle: str = "") -> None:
    """Print a styled header."""
    console.print()
    console.print(Text(title, style=STYLES["title"]))
    if subtitle:
        console.print(Text(subtitle, style=STYLES["subtitle"]))
    console.print()


def print_success(message: str) -> None:
    console.print(Text(f"✓ {message}", style=STYLES["success"]))


def print_error(message: str) -> None:
    console.print(Text(f"✗ {message}", style=STYLES["error"]))


def print_warning(message: str) -> None:
    console.print(Text(f"⚠ {message}", style=STYLES["warning"]))


def print_info(message: str) -> None:
    console.print(Text(f"ℹ {message}", style=STYLES["info"]))


def print_muted(message: str) -> None:
    console.print(Text(message, style=STYLES["muted"]))


def select_interactive(
    options: list[SelectOption[T]],
    title: str = "Select an option",
    subtitle: str = "",
) -> T | None:
    """
    Interactive selection with keyboard navigation.

    Uses arrow keys for navigation and Enter to select.
    Falls back to numbered input if not in a TTY.

    Args:
        options: List of SelectOption items
        title: Title shown above the menu
        subtitle: Optional subtitle

    Returns:
        Selected value or None if cancelled
    """
    if not options:
        return None

    if not is_interactive():
        return _select_simple(options, title, subtitle)

    try:
        return _select_with_keyboard(options, title, subtitle)
    except (ImportError, OSError):
        # termios is unavailable (e.g. Windows) or the terminal rejected raw mode
        return _select_simple(options, title, subtitle)


def _select_with_keyboard(
    options: list[SelectOption[T]],
    title: str,
    subtitle: str,
) -> T | None:
    """Keyboard-navigable selection menu."""
    import termios
    import tty

    selected_idx = 0

    def render_menu() -> None:
        # Clear screen and move cursor to top
        console.print("\033[2J\033[H", end="")
        print_header(title, subtitle)

        for i, opt in enumerate(options):
            is_selected = i == selected_idx

            line = Text()
            line.append(
                "› " if is_selected else "  ",
                style=STYLES["highlight"] if is_selected else STYLES["muted"],
            )
            line.append(opt.label, style=STYLES["selected"] if is_selected else STYLES["unselected"])
            if opt.badge:
                line.append(f" [{opt.badge}]", style=STYLES["badge"])
            console.print(line)

            if is_selected and opt.description:
                console.print(Text(f"    {opt.description}", style=STYLES["description"]))

        console.print()
        console.print(Text("↑/↓ Navigate  Enter Select  q Cancel", style=STYLES["muted"]))

    def get_key() -> str:
        fd = sys.stdin.fileno()
        old_settings = termios.tcgetattr(fd)
        try:
            tty.setraw(fd)
            ch = sys.stdin.read(1)
            # Arrow keys arrive as escape sequences
            if ch == "\x1b":
                ch += sys.stdin.read(2)
            return ch
        finally:
            termios.tcsetattr(fd, termios.TCSADRAIN, old_settings)

    try:
        while True:
            render_menu()
            key = get_key()

            if key == "\x1b[A":
                selected_idx = (selected_idx - 1) % len(options)
            elif key == "\x1b[B":
                selected_idx = (selected_idx + 1) % len(options)
            elif key in ("\r", "\n"):
                console.print("\033[2J\033[H", end="")
                return options[selected_idx].value
            elif key in ("q", "Q", "\x03"):  # q or Ctrl+C
                console.print("\033[2J\033[H", end="")
                return None
            elif key.isdigit():
                idx = int(key) - 1
                if 0 <= idx < len(options):
                    console.print("\033[2J\033[H", end="")
                    return options[idx].value

    except KeyboardInterrupt:
        console.print("\033[2J\033[H", end="")
        return None


def _select_simple(
    options: list[SelectOption[T]],
    title: str,
    subtitle: str,
) -> T | None:
    """Simple numbered selection (fallback for non-TTY)."""
    print_header(title, subtitle)

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    table.add_column("Num", style="cyan", width=4)
    table.add_column("Name", style="white")
    table.add_column("Badge", style="green")
    table.add_column("Description", style="bright_black")

    for i, opt in enumerate(options, 1):
        table.add_row(
            f"{i}.",
            opt.label,
            f"[{opt.badge}]" if opt.badge else "",
            opt.description[:50] + "..." if len(opt.description) > 50 else opt.description,
        )

    console.print(table)
    console.print()

    while True:
        try:
            choice = console.input(Text("Enter number or name: ", style=STYLES["info"])).strip()

            if not choice or choice.lower() in ("q", "quit", "cancel"):
                return None

            if choice.isdigit():
                idx = int(choice) - 1
                if 0 <= idx < len(options):
                    return options[idx].value

            # Case-insensitive name or prefix match
            choice_lower = choice.lower()
            for opt in options:
                if opt.label.lower() == choice_lower or opt.label.lower().startswith(choice_lower):
                    return opt.value

            console.print(
                Text(f"Invalid choice. Enter 1-{len(options)} or option name.", style=STYLES["error"])
            )

        except (KeyboardInterrupt, EOFError):
            console.print()
            return None


def confirm(message: str, default: bool = True) -> bool:
    """Ask for confirmation with a Y/n prompt."""
    suffix = " [Y/n]" if default else " [y/N]"
    prompt = Text(message + suffix + " ", style=STYLES["info"])

    try:
        response = console.input(prompt).strip().lower()

        if not response:
            return default

        return response in ("y", "yes")

    except (KeyboardInterrupt, EOFError):
        console.print()
        return False


def prompt_text(message: str, default: str = "", password: bool = False) -> str | None:
    """
    Ask for a line of text.

    Returns:
        The entered text (or ``default`` when empty), None if cancelled
    """
    suffix = f" ({default})" if default else ""
    prompt = Text(f"{message}{suffix} ", style=STYLES["info"])

    try:
        response = console.input(prompt, password=password).strip()
    except (KeyboardInterrupt, EOFError):
        console.print()
        return None

    return response or default
