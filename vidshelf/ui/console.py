"""Console output wrapper using the Rich library."""

from typing import Optional

from rich.console import Console
from rich.table import Table


class ConsoleUI:
    """
    Wrapper for Rich Console providing styled status messages.

    Attributes:
        console: Underlying Rich Console.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        self.console = console if console is not None else Console()

    def print(self, *args, **kwargs) -> None:
        """Print to console (delegates to Rich Console)."""
        self.console.print(*args, **kwargs)

    def print_info(self, message: str) -> None:
        self.console.print(f"[blue]{message}[/blue]")

    def print_warning(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]{message}[/red]")

    def print_success(self, message: str) -> None:
        self.console.print(f"[green]{message}[/green]")

    def print_simulation(self, message: str) -> None:
        self.console.print(f"[dim]SIMULATION - {message}[/dim]")

    def print_table(self, table: Table) -> None:
        """Print a Rich Table."""
        self.console.print(table)
