"""Default IDE command for ide_jump."""
from typing import Any

from ..base import SlashCommand, CommandResult
from ...jump import resolve_command_id


class DefaultCommand(SlashCommand):
    """Show or set the default IDE."""

    name = "default"
    description = "Show or set the default IDE (use -i for interactive menu)"
    aliases = ["use"]
    usage = "[name] | -i"
    examples = [
        "/default              # Show the default IDE",
        "/default PyCharm",
        "/default goland",
        "/default -i           # Pick from a menu",
    ]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute default command."""
        from ...config import get_config

        config = kwargs.get("config") or get_config()
        name = args.strip()

        if not name:
            current = config.default_ide
            command_id = resolve_command_id(current, config.ide.ides)
            if command_id != current:
                return CommandResult.success(f"Default IDE: **{current}** (`{command_id}`)")
            return CommandResult.success(f"Default IDE: `{current}`")

        if name in ("-i", "--interactive"):
            from ...rich_ui.menu import select_ide_interactive

            selected = select_ide_interactive(config.ide.ides, current=config.default_ide)
            if selected is None:
                return CommandResult.cancelled("Default IDE unchanged")
            name = selected

        config.set_default_ide(name)
        command_id = resolve_command_id(name, config.ide.ides)
        if command_id == name and name not in config.ide.ides.values():
            return CommandResult.success(
                f"Set default IDE to `{name}` (not in the IDE table; used as a raw command)"
            )
        return CommandResult.success(f"Set default IDE to **{name}**")
