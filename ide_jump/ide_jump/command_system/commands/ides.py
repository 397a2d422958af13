"""IDEs command for ide_jump."""
from typing import Any

from ..base import SlashCommand, CommandResult
from ...jump import list_targets


class IdesCommand(SlashCommand):
    """List configured IDEs."""

    name = "ides"
    description = "List configured IDEs and their command identifiers"
    aliases = ["list"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute ides command."""
        from ...config import get_config

        config = kwargs.get("config") or get_config()
        targets = list_targets(config.ide.ides)
        default = config.default_ide

        if not targets:
            return CommandResult.info("No IDEs configured. Use /default <command> to pick one directly.")

        return CommandResult.success(f"{len(targets)} IDEs configured, default: {default}", data=targets)
