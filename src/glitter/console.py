"""Rich console singleton and helpers for terminal output."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

# Global console instance
console = Console()


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[green]{message}[/green]")


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]Error: {escape(message)}[/red]", highlight=False)


def print_command(args: list[str]) -> None:
    """Echo a shell command before it runs, e.g. ``$ git add .``."""
    console.print(f"[dim]$[/dim] [cyan]{escape(_quote(args))}[/cyan]", highlight=False)


def create_actions_table(title: str) -> Table:
    """Create a table for listing available actions."""
    table = Table(title=title, show_header=True, header_style="bold magenta")
    table.add_column("Action", style="cyan")
    table.add_column("Description")
    return table


def _quote(args: list[str]) -> str:
    return " ".join(f'"{arg}"' if " " in arg or not arg else arg for arg in args)
