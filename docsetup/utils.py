"""Shared console and file-system helpers for docsetup.

Provides Rich-based status printing (success / info / warning / error lines,
section headers, summary tables) and a couple of small path helpers used by
the scaffolder and the CLI.
"""

from __future__ import annotations

import re
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.rule import Rule
from rich.table import Table

console = Console()


# ---------------------------------------------------------------------------
# String / name helpers
# ---------------------------------------------------------------------------


def default_project_name(directory: str | Path) -> str:
    """Return the base name of *directory* after resolving it.

    ``Path(".").name`` is empty, so the path is resolved first.  The
    filesystem root has no name; ``"project"`` is used there.

    Examples::

        default_project_name("/home/me/my-app") -> "my-app"
    """
    return Path(directory).resolve().name or "project"


def sanitize_name(name: str) -> str:
    """Collapse whitespace runs in a user-supplied project name and trim it.

    Examples::

        sanitize_name("  My   App ") -> "My App"
    """
    return re.sub(r"\s+", " ", name).strip()


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object that was created or already existed.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width section header."""
    console.print()
    console.print(Rule(f"[bold blue] {title} [/bold blue]", style="blue"))
    console.print()


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(key, str(value))

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success line."""
    console.print(f"[green]✓[/green] {escape(message)}")


def print_info(message: str) -> None:
    """Print a blue informational line."""
    console.print(f"[blue]ℹ[/blue] {escape(message)}")


def print_warning(message: str) -> None:
    """Print a yellow warning line."""
    console.print(f"[bold yellow]⚠[/bold yellow] {escape(message)}")


def print_error(message: str) -> None:
    """Print a red error line."""
    console.print(f"[bold red]✗[/bold red] {escape(message)}")
