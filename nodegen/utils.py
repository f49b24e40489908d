"""Shared utility functions for nodegen.

Provides Rich-based console reporting and a couple of small file-system
helpers used by the scaffolder and the CLI.
"""

from __future__ import annotations

from pathlib import Path

from rich.console import Console
from rich.markup import escape

console = Console()
err_console = Console(stderr=True)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def path_exists(path: str | Path) -> bool:
    """Return ``True`` if anything occupies *path*, dangling symlinks included."""
    p = Path(path)
    return p.exists() or p.is_symlink()


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Args:
        path: Directory path.

    Returns:
        The ``Path`` object.
    """
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: Path, content: str) -> None:
    """Synchronous helper: create parent dirs and write UTF-8 content."""
    ensure_dir(path.parent)
    path.write_text(content, encoding="utf-8", newline="")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]", soft_wrap=True)


def print_info(message: str) -> None:
    """Print a dim informational message."""
    console.print(f"[dim]{escape(message)}[/dim]", soft_wrap=True)


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]", soft_wrap=True)
