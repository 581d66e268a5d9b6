"""Console output helpers for consistent styling."""

from rich.console import Console

# Shared console for all status output. Goes to stderr so generated
# templates on stdout can be piped.
console = Console(stderr=True)


def info(message: str) -> None:
    """Print a plain progress message."""
    console.print(message)


def success(message: str) -> None:
    """Print a success message in green."""
    console.print(f"[green]{message}[/green]")


def error(message: str) -> None:
    """Print an error message in red."""
    console.print(f"[red]{message}[/red]")


def warning(message: str) -> None:
    """Print a warning message in yellow."""
    console.print(f"[yellow]{message}[/yellow]")


def dim(message: str) -> None:
    """Print a dimmed/secondary message."""
    console.print(f"[dim]{message}[/dim]")
