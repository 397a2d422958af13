"""Open command for ide_jump."""
from typing import Any

from ..base import SlashCommand, CommandResult
from ..parser import option_value, parse_args
from ...constants import DEFAULT_COLUMN, DEFAULT_LINE
from ...jump import jump_to_file


def _to_int(value: Any, label: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"--{label} requires a value")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"{label} must be an integer, got {value!r}")


class OpenCommand(SlashCommand):
    """Open a file in the IDE at a line and column."""

    name = "open"
    description = "Open a file in the IDE at a line and column, in its project window"
    aliases = ["ide", "jump"]
    usage = "<file> [line] [column] [--ide NAME] [--root DIR]"
    examples = [
        "/open src/main.py",
        "/open src/main.py 42 8",
        "/open src/main.py 42 --ide PyCharm",
        "/open app.go --line 10 --column 2 --root ~/code/app",
    ]

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Execute open command."""
        from ...config import get_config

        config = kwargs.get("config") or get_config()
        positional, options = parse_args(args)

        file_path = positional[0] if positional else None
        line = options.get("line", positional[1] if len(positional) > 1 else DEFAULT_LINE)
        column = options.get("column", positional[2] if len(positional) > 2 else DEFAULT_COLUMN)

        result = jump_to_file(
            file_path,
            line=_to_int(line, "line"),
            column=_to_int(column, "column"),
            ide=option_value(options, "ide") or config.default_ide,
            project_root=option_value(options, "root"),
            ide_config=config.ide,
        )
        return CommandResult.from_launch(result)
