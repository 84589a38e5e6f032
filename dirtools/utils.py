"""
Console output helpers for dirtools.

Includes:
- Styled status messages
- Listing tables for the CLI
"""

from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import settings
from .models import Entry

# Global console instance
console = Console()


def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))


def print_entries_table(entries: list[Entry], title: str = "Entries"):
    """Print a table of classified entries with their sizes."""
    table = Table(title=title)
    table.add_column("Kind", style="cyan")
    table.add_column("Size", style="magenta", justify="right")
    table.add_column("Path", style="green")

    for entry in entries:
        kind = "dir" if entry.is_dir else "file"
        size = "-" if entry.is_dir else str(entry.size)
        table.add_row(kind, size, entry.path)

    console.print(table)
    console.print(f"[italic]{len(entries)} entries[/italic]")


def print_info(msg: str):
    """Print an [INFO] line when verbose output is enabled."""
    if settings.verbose:
        console.print(f"[dim][INFO][/dim] {msg}", highlight=False)


def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}")


def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")


def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")
