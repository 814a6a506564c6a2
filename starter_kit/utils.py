"""Shared utility functions for Starter Kit.

Provides the Rich console used for all user-facing output, a handful of
print helpers, and the file-system helpers the initializer builds on.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def copy_tree(source: str | Path, destination: str | Path) -> Path:
    """Recursively copy *source* to *destination*.

    File contents are copied byte-for-byte and the directory structure is
    preserved.  Intermediate directories of *destination* are created; the
    destination itself may already exist (its contents are merged).

    Raises:
        FileNotFoundError: If *source* is not a directory.
        OSError: On any I/O or permission failure while copying.
    """
    src = Path(source)
    if not src.is_dir():
        raise FileNotFoundError(f"Template directory not found: {src}")
    dst = Path(destination)
    shutil.copytree(src, dst, dirs_exist_ok=True)
    return dst


def write_text_file(path: str | Path, content: str) -> Path:
    """Write *content* to *path* as UTF-8, creating parent directories."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    return out


def count_files(path: str | Path) -> int:
    """Return the number of regular files below *path* (0 if missing)."""
    root = Path(path)
    if not root.is_dir():
        return 0
    return sum(1 for p in root.rglob("*") if p.is_file())


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str, subtitle: str = "") -> None:
    """Print the welcome panel shown at the start of an interactive run."""
    console.print()
    console.print(
        Panel(
            f"[bold bright_cyan]{title}[/bold bright_cyan]"
            + (f"\n[dim]{subtitle}[/dim]" if subtitle else ""),
            border_style="bright_cyan",
            expand=False,
        )
    )


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


def create_progress() -> Progress:
    """Create a Rich spinner for the copy step.

    Returns:
        A ``Progress`` instance suitable for use as a context manager.
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )
