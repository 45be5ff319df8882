"""Shared utility functions for CrudPack.

Provides Rich-based console reporting, JSON I/O and small file-system
helpers.  File helpers translate ``OSError`` into ``FileSystemError`` so a
failed read or write aborts only the artifact being produced.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.rule import Rule
from rich.table import Table

from crudpack.errors import FileSystemError

console = Console()


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_header(title: str) -> None:
    """Print a full-width rule announcing a command."""
    console.print()
    console.print(Rule(f"[bold bright_cyan] {title} [/bold bright_cyan]", style="bright_cyan"))
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
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")


def print_info(message: str) -> None:
    """Print a plain informational line."""
    console.print(message)


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Raises:
        FileSystemError: If the directory cannot be created.
    """
    dir_path = Path(path)
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise FileSystemError(f"Cannot create directory {dir_path}: {exc}", dir_path) from exc
    return dir_path


def read_text(path: str | Path) -> str:
    """Read a UTF-8 text file, wrapping I/O and decoding failures in ``FileSystemError``."""
    file_path = Path(path)
    try:
        return file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise FileSystemError(f"Cannot read {file_path}: {exc}", file_path) from exc


def write_text(path: str | Path, content: str) -> Path:
    """Write *content* to *path* in full, creating parent directories.

    Raises:
        FileSystemError: If the file or its parent directory cannot be written.
    """
    file_path = Path(path)
    ensure_dir(file_path.parent)
    try:
        file_path.write_text(content, encoding="utf-8")
    except OSError as exc:
        raise FileSystemError(f"Cannot write {file_path}: {exc}", file_path) from exc
    return file_path


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path) -> Any:
    """Load and parse a JSON file.

    Raises:
        FileSystemError: If the file cannot be read.
        json.JSONDecodeError: If the file is not valid JSON.
    """
    return json.loads(read_text(path))


def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> Path:
    """Save data as pretty-printed JSON (slashes and unicode left unescaped)."""
    content = json.dumps(data, indent=4, ensure_ascii=False)
    return write_text(path, content + "\n")
