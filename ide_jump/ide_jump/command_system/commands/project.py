"""Project command for ide_jump."""
from typing import Any

from ..base import SlashCommand, CommandResult
from ..parser import option_value, parse_args
from ...jump import open_project


class ProjectCommand(SlashCommand):
    """Open the project root in the IDE."""

    name = "project"
    description = "Open the current project in the IDE without a file"
    aliases = ["proj"]
    usage = "[dir] [--ide NAME]"
    examples = ["/project", "/project ~/code/app", "/project --ide GoLand"]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute project command."""
        from ...config import get_config

        config = kwargs.get("config") or get_config()
        positional, options = parse_args(args)

        result = open_project(
            project_root=positional[0] if positional else None,
            ide=option_value(options, "ide") or config.default_ide,
            ide_config=config.ide,
        )
        return CommandResult.from_launch(result)
