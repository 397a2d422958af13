"""
Rich-based output for ide_jump.
"""
from typing import Any, List, Optional

from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from ..command_system.base import CommandResult, CommandStatus
from ..models import IdeTarget

ICONS = {
    "check": "✓",
    "error": "✗",
    "warning": "!",
    "info": "●",
}


def _plain(message: str) -> str:
    """Drop inline markdown emphasis from a one-line message."""
    return message.replace("**", "").replace("`", "")


class RichRenderer:
    """
    Renders command results and messages to the terminal.

    Messages are printed without bordered panels: an icon and title line,
    then the message body.
    """

    def __init__(self, console: Optional[Console] = None) -> None:
        """
        Initialize the renderer.

        Args:
            console: Console to print to; errors go to stderr by default
        """
        self._console = console or Console()
        self._err_console = console or Console(stderr=True)

    @property
    def console(self) -> Console:
        """Get the Rich console."""
        return self._console

    def print(self, *args: Any, **kwargs: Any) -> None:
        """Print to the console."""
        self._console.print(*args, **kwargs)

    def print_markdown(self, content: str) -> None:
        """Print markdown content."""
        self._console.print(Markdown(content))

    def print_error(self, message: str, title: str = "Error") -> None:
        """
        Print an error message.

        Args:
            message: Error message
            title: Error title
        """
        self._err_console.print(f"[bold red]{ICONS['error']} {title}[/bold red]")
        self._err_console.print(Text(message, style="red"))

    def print_warning(self, message: str, title: str = "Warning") -> None:
        """Print a warning message."""
        self._err_console.print(f"[bold yellow]{ICONS['warning']} {title}[/bold yellow]")
        self._err_console.print(Text(message, style="yellow"))

    def print_success(self, message: str) -> None:
        """Print a one-line success message."""
        self._console.print(Text.assemble((f"{ICONS['check']} ", "bold green"), _plain(message)))

    def print_info(self, message: str) -> None:
        """Print a one-line info message."""
        self._console.print(Text.assemble((f"{ICONS['info']} ", "bold blue"), _plain(message)))

    def print_ide_table(self, targets: List[IdeTarget], default: str = "") -> None:
        """
        Print configured IDEs as a table.

        Args:
            targets: IDEs in listing order
            default: Default IDE name or command identifier
        """
        table = Table(title="Configured IDEs", show_header=True, header_style="bold cyan")
        table.add_column("", width=1)
        table.add_column("IDE")
        table.add_column("Command", style="green")

        for target in targets:
            marker = "*" if default in (target.display_name, target.command_id) else ""
            table.add_row(marker, target.display_name, target.command_id)

        self._console.print(table)

    def render_result(self, result: CommandResult, default_ide: str = "") -> None:
        """
        Render a command result.

        Args:
            result: Result to render
            default_ide: Default IDE, used to mark rows in IDE listings
        """
        if result.is_error:
            self.print_error(result.message)
            return

        if result.status == CommandStatus.CANCELLED:
            self.print_warning(result.message, title="Cancelled")
            return

        if isinstance(result.data, list) and result.data and isinstance(result.data[0], IdeTarget):
            self.print_ide_table(result.data, default=default_ide)
            return

        if not result.message:
            return

        if result.status == CommandStatus.INFO:
            self.print_info(result.message)
        elif "\n" in result.message:
            self.print_markdown(result.message)
        else:
            self.print_success(result.message)


_renderer: Optional[RichRenderer] = None


def get_renderer() -> RichRenderer:
    """Get the global renderer instance."""
    global _renderer
    if _renderer is None:
        _renderer = RichRenderer()
    return _renderer
