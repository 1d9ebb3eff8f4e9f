"""Shared utility functions for fragmentkit.

Provides package-name validation, target-directory helpers and Rich-based
console reporting.  The scaffolding engine never prints; everything the user
sees goes through the ``console`` defined here.
"""

from __future__ import annotations

import re
import shutil
from pathlib import Path

from rich.console import Console
from rich.table import Table

console = Console()

DEFAULT_PACKAGE_NAME = "tauri-app"


# ---------------------------------------------------------------------------
# Package-name helpers
# ---------------------------------------------------------------------------


def is_valid_package_name(name: str) -> bool:
    """Return ``True`` if *name* can be used verbatim as a package name.

    Valid names are non-empty, do not start with a digit and contain only
    lowercase letters, digits, ``-`` and ``_``.
    """
    if not name or name[0].isdigit():
        return False
    return all(
        (ch.isalnum() or ch in "-_") and not ch.isupper()
        for ch in name
    )


def to_valid_package_name(name: str) -> str:
    """Convert an arbitrary project name to a valid package name.

    Examples::

        to_valid_package_name("My App")     -> "my-app"
        to_valid_package_name("123-app")    -> "app"
        to_valid_package_name("a.b/c")      -> "abc"
        to_valid_package_name("!!!")        -> "tauri-app"
    """
    result = name.strip().lower()
    result = re.sub(r"[:; ~]", "-", result)
    result = re.sub(r"[.\\/]", "", result)
    result = result.lstrip("0123456789-")
    if not result or not is_valid_package_name(result):
        return DEFAULT_PACKAGE_NAME
    return result


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def is_dir_empty(path: str | Path) -> bool:
    """Return ``True`` if *path* is missing or contains no entries."""
    dir_path = Path(path)
    if not dir_path.exists():
        return True
    return not any(dir_path.iterdir())


def clear_directory(path: str | Path, keep: tuple[str, ...] = (".git",)) -> None:
    """Remove every entry of *path* except the names listed in *keep*."""
    for entry in Path(path).iterdir():
        if entry.name in keep:
            continue
        if entry.is_dir() and not entry.is_symlink():
            shutil.rmtree(entry)
        else:
            entry.unlink()


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------


def format_duration(seconds: float) -> str:
    """Format a duration in seconds to a human-readable string.

    Examples::

        format_duration(0.25)  -> "0.2s"
        format_duration(65.2)  -> "1m 5s"
    """
    if seconds < 0:
        return "0.0s"

    minutes = int(seconds // 60)
    secs = seconds % 60
    if minutes > 0:
        return f"{minutes}m {int(secs)}s"
    return f"{secs:.1f}s"


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


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
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
