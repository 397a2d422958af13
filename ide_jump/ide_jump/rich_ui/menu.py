"""Interactive menu utilities for ide_jump."""
import asyncio
import logging
from typing import Any, Dict, List, Optional, Tuple

from prompt_toolkit.shortcuts import radiolist_dialog
from prompt_toolkit.styles import Style
from rich.console import Console
from rich.prompt import IntPrompt

logger = logging.getLogger(__name__)

console = Console()

DIALOG_STYLE = Style.from_dict({
    'dialog': 'bg:#1e1e1e',
    'dialog frame.label': 'bg:#00aaaa #ffffff bold',
    'dialog.body': 'bg:#1e1e1e #cccccc',
    'dialog shadow': 'bg:#000000',
    'button': 'bg:#004488',
    'button.focused': 'bg:#00aaaa',
    'radio-list': 'bg:#1e1e1e',
    'radio': 'bg:#1e1e1e',
    'radio-checked': '#00aaaa bold',
    'radio-selected': 'bg:#004488',
})


def _run_dialog(dialog):
    """Run a prompt_toolkit dialog safely, handling existing event loops."""
    try:
        asyncio.get_running_loop()
        raise RuntimeError("Running in async context")
    except RuntimeError as e:
        if "no running event loop" in str(e).lower():
            return dialog.run()
        raise


def select_from_list(
    title: str,
    items: List[Tuple[Any, str]],
    description: str = "",
    default: Any = None,
) -> Optional[Any]:
    """
    Show an interactive selection menu.

    Args:
        title: Title of the menu
        items: List of (value, label) tuples
        description: Optional description text
        default: Value selected initially

    Returns:
        Selected value or None if cancelled
    """
    if not items:
        console.print("[yellow]No items available to select[/yellow]")
        return None

    dialog = radiolist_dialog(
        title=title,
        text=description,
        values=items,
        default=default,
        style=DIALOG_STYLE,
    )
    return _run_dialog(dialog)


def select_from_console(title: str, items: List[Tuple[Any, str]]) -> Optional[Any]:
    """
    Numbered console selection, used when no dialog can be shown.

    Args:
        title: Heading printed above the list
        items: List of (value, label) tuples

    Returns:
        Selected value or None if cancelled
    """
    if not items:
        return None

    console.print(f"[bold cyan]{title}:[/bold cyan]")
    for idx, (_, label) in enumerate(items, 1):
        console.print(f"  {idx}. {label}")

    try:
        choice = IntPrompt.ask(
            "Select number",
            choices=[str(i) for i in range(1, len(items) + 1)]
        )
    except (EOFError, KeyboardInterrupt):
        return None
    return items[choice - 1][0]


def ide_menu_items(ides: Dict[str, str]) -> List[Tuple[str, str]]:
    """Build (display name, label) menu items from the IDE table."""
    return [(name, f"{name} ({command_id})") for name, command_id in ides.items()]


def select_ide_interactive(ides: Dict[str, str], current: Optional[str] = None) -> Optional[str]:
    """
    Let the user pick an IDE from the configured table.

    Args:
        ides: Display name -> command identifier table
        current: Currently selected display name, pre-selected in the dialog

    Returns:
        Selected display name or None if cancelled
    """
    items = ide_menu_items(ides)
    default = current if current in ides else None

    try:
        return select_from_list(
            title="Select IDE",
            items=items,
            description="Choose the IDE to jump to",
            default=default,
        )
    except Exception as e:
        # Dialogs need a real terminal; fall back to a numbered prompt
        logger.debug("IDE dialog unavailable: %s", e)
        console.print("[yellow]Falling back to console selection...[/yellow]\n")
        return select_from_console("Available IDEs", items)
