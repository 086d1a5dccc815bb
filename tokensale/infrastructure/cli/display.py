import logging
from datetime import datetime
from typing import Any, List, Optional

from rich.box import HEAVY, ROUNDED, SIMPLE
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tokensale.domain.interfaces.user_interface import UserInterface
from tokensale.domain.models.application import Application, PublicApplication

logger = logging.getLogger(__name__)

# Column order of the admin listing.
LIST_COLUMNS = ("publicId", "email", "firstName", "lastName", "country", "isLocked", "creation")


def _format_value(value: Any) -> str:
    """Renders a record value for the console."""
    if value is None:
        return "[dim]-[/dim]"
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d %H:%M:%S")
    if isinstance(value, bool):
        return "[bold green]yes[/bold green]" if value else "no"
    if isinstance(value, (list, tuple)):
        return ", ".join(str(v) for v in value) if value else "[dim]-[/dim]"
    return str(value)


class ConsoleDisplay(UserInterface):
    """Concrete implementation of UserInterface using the rich library for console output."""

    def __init__(self, console: Optional[Console] = None):
        """Initializes the rich Console."""
        self._console = console or Console()

    @property
    def console(self):
        """Get the Rich console instance for direct operations."""
        return self._console

    @console.setter
    def console(self, value):
        self._console = value

    def display_error(self, error_message: str, **kwargs: Any) -> None:
        """Displays an error message in a distinct style.

        Args:
            error_message: The error message to display.
        """
        panel = Panel(
            Text(error_message, style="white"),
            title="[bold red]Error[/bold red]",
            border_style="red",
            box=HEAVY,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_info(self, info_message: str, **kwargs: Any) -> None:
        """Displays an informational message.

        Args:
            info_message: The informational message to display.
        """
        panel = Panel(
            Text(info_message, style="white"),
            title="[bold blue]Info[/bold blue]",
            border_style="blue",
            box=SIMPLE,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_warning(self, warning_message: str, **kwargs: Any) -> None:
        """Displays a warning message.

        Args:
            warning_message: The warning message to display.
        """
        logger.warning(f"Display warning: {warning_message}")
        panel = Panel(
            Text(warning_message, style="white"),
            title="[bold yellow]Warning[/bold yellow]",
            border_style="yellow",
            box=HEAVY,
            padding=(0, 1)
        )
        self.console.print(panel)

    def display_application(self, application: Application | PublicApplication, **kwargs: Any) -> None:
        """Displays one application as a two-column field/value table.

        Args:
            application: The application (full record or public projection).
            **kwargs: Additional arguments including:
                - title: Panel title (default: "Application")
        """
        title = kwargs.get("title", "Application")
        record = application.to_record()
        logger.debug(f"Displaying application with {len(record)} fields")

        table = Table(show_header=False, box=ROUNDED, border_style="cyan", padding=(0, 1))
        table.add_column("Field", style="bold cyan")
        table.add_column("Value", style="white")
        for key, value in record.items():
            table.add_row(key, _format_value(value))

        self.console.print(Panel(table, title=f"[bold]{title}[/bold]", border_style="cyan", box=SIMPLE))

    def display_applications(self, applications: List[Application], **kwargs: Any) -> None:
        """Displays a list of applications as a table, one row per application."""
        logger.debug(f"Displaying {len(applications)} applications")
        if not applications:
            self.display_info("No applications found.")
            return

        table = Table(show_header=True, box=ROUNDED, border_style="cyan", padding=(0, 1))
        table.add_column("#", style="cyan", justify="right")
        for column in LIST_COLUMNS:
            table.add_column(column)

        for i, application in enumerate(applications, 1):
            table.add_row(str(i), *(_format_value(application.value_of(column)) for column in LIST_COLUMNS))

        self.console.print(table)
        self.console.print(f"[dim]{len(applications)} application(s)[/dim]")
