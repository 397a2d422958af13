"""Which command for ide_jump."""
from typing import Any

from ..base import SlashCommand, CommandResult
from ...jump import resolve_command_id
from ...resolver import STRATEGY_FALLBACK, describe_resolution


class WhichCommand(SlashCommand):
    """Show which executable an IDE resolves to."""

    name = "which"
    description = "Show the executable an IDE resolves to and how it was found"
    aliases = ["resolve"]
    usage = "[name]"
    examples = ["/which", "/which PyCharm", "/which idea"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute which command."""
        from ...config import get_config

        config = kwargs.get("config") or get_config()
        name = args.strip() or config.default_ide
        command_id = resolve_command_id(name, config.ide.ides)

        path, strategy = describe_resolution(
            command_id,
            overrides=config.ide.executable_overrides,
            search_dirs=config.ide.search_dirs,
        )

        if strategy == STRATEGY_FALLBACK:
            return CommandResult.info(
                f"`{command_id}` was not found; it will be looked up on PATH at launch time"
            )
        return CommandResult.success(f"`{command_id}` -> {path} ({strategy})", data=path)
