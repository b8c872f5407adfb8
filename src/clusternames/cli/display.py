"""Consolidated display utilities for CLI commands."""
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from typing import Any, Dict, List, Sequence

console = Console()


def warning(message: str) -> None:
    """Print warning message."""
    console.print(f"[yellow]⚠️  {escape(message)}[/yellow]")


def error(message: str) -> None:
    """Print error message."""
    console.print(f"[red]❌ {escape(message)}[/red]", highlight=False)


def info(message: str) -> None:
    """Print info message."""
    console.print(escape(message), highlight=False)


def section(title: str) -> None:
    """Print section header."""
    console.print(f"\n[bold]{escape(title)}[/bold]")


def info_dict(data: Dict[str, Any], indent: str = "  ") -> None:
    """Print a dictionary as indented key-value pairs."""
    for key, value in data.items():
        console.print(f"{indent}{escape(str(key))}: {escape(str(value))}", highlight=False)


def table(title: str, columns: Sequence[str], rows: List[Sequence[Any]]) -> None:
    """Print rows as a table with one column per header."""
    t = Table(title=escape(title))
    for column in columns:
        t.add_column(escape(column), no_wrap=True)
    for row in rows:
        t.add_row(*(escape(str(cell)) for cell in row))
    console.print(t)
