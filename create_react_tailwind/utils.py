"""Shared utility functions for create-react-tailwind-app.

Provides async command execution, the command-runner seam used by the
generator, JSON I/O and Rich-based console output.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any, Protocol

from rich.console import Console
from rich.table import Table

console = Console()

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(cmd: list[str], cwd: str | Path | None = None) -> int:
    """Run a command asynchronously and wait for it to exit.

    The child inherits the parent's stdin/stdout/stderr, so prompts and
    progress output of the package manager are shown to the user.  There is
    no timeout: a hung child hangs the caller.

    Returns:
        The child's exit status.
    """
    process = await asyncio.create_subprocess_exec(
        *cmd,
        cwd=str(cwd) if cwd else None,
    )
    return await process.wait()


class CommandRunner(Protocol):
    """Anything that can run an external command and report its exit status."""

    async def run(self, cmd: list[str], cwd: Path) -> int:
        ...


class SubprocessRunner:
    """Runs commands as real child processes with full stdio passthrough."""

    async def run(self, cmd: list[str], cwd: Path) -> int:
        return await run_command(cmd, cwd=cwd)


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def dump_json(data: dict[str, Any] | list[Any]) -> str:
    """Serialise *data* with two-space indentation, preserving key order."""
    return json.dumps(data, indent=2, ensure_ascii=False)


def load_json(path: str | Path) -> dict[str, Any]:
    """Load and parse a JSON file that contains a top-level object.

    Raises:
        FileNotFoundError: If the file does not exist.
        json.JSONDecodeError: If the file is not valid JSON.
        ValueError: If the top-level value is not an object.
    """
    raw = Path(path).read_text(encoding="utf-8")
    data = json.loads(raw)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object in {path}")
    return data


async def save_json(data: dict[str, Any] | list[Any], path: str | Path) -> None:
    """Save data as pretty-printed JSON.

    The write is performed in a worker thread to avoid blocking the event loop.
    """
    file_path = Path(path)
    content = dump_json(data)
    await asyncio.to_thread(file_path.write_text, content, "utf-8")


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(message: str) -> None:
    """Print the bold blue banner shown when the tool starts."""
    console.print()
    console.print(f"[bold blue]{message}[/bold blue]")
    console.print()


def print_step(message: str) -> None:
    """Print a cyan progress line for a generation step."""
    console.print()
    console.print(f"[cyan]{message}[/cyan]")


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
