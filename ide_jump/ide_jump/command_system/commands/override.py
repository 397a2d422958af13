"""Override command for ide_jump."""
import os
from typing import Any, Optional

from ..base import CommandGroup, CommandResult
from ..parser import parse_args


def _expand(path: str) -> str:
    return os.path.expanduser(os.path.expandvars(path))


class OverrideCommand(CommandGroup):
    """Manage executable overrides."""

    name = "override"
    description = "Pin IDE command identifiers to executable paths"
    aliases = ["pin"]
    usage = "list | set <command> <path> | remove <command>"
    examples = [
        "/override list",
        "/override set idea /opt/idea/bin/idea.sh",
        "/override remove idea",
    ]

    def __init__(self) -> None:
        super().__init__()
        self.register_subcommand("list", self._list)
        self.register_subcommand("set", self._set)
        self.register_subcommand("remove", self._remove)

    def _config(self, kwargs: dict):
        from ...config import get_config
        return kwargs.get("config") or get_config()

    def _list(self, args: str = "", **kwargs: Any) -> CommandResult:
        """List executable overrides."""
        overrides = self._config(kwargs).ide.executable_overrides
        if not overrides:
            return CommandResult.info("No executable overrides configured")
        lines = ["# Executable overrides", ""]
        for command_id, path in overrides.items():
            lines.append(f"- `{command_id}` -> {path}")
        return CommandResult.success("\n".join(lines), data=dict(overrides))

    def validate_args(self, args: str) -> Optional[str]:
        """Check 'set' arguments before anything is persisted."""
        positional, _ = parse_args(args)
        if not positional or positional[0] != "set":
            return None
        if len(positional) != 3:
            return "Usage: /override set <command> <path>"
        if not os.path.isabs(_expand(positional[2])):
            return f"Override path must be absolute: {positional[2]}"
        return None

    def _set(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Pin a command identifier to an absolute path."""
        command_id, path = parse_args(args)[0]
        expanded = _expand(path)

        self._config(kwargs).set_override(command_id, path)
        message = f"Pinned `{command_id}` to {path}"
        if not os.path.isfile(expanded):
            message += " (file does not exist yet)"
        return CommandResult.success(message)

    def _remove(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Remove an executable override."""
        command_id = args.strip()
        if not command_id:
            return CommandResult.error("Usage: /override remove <command>")
        if self._config(kwargs).remove_override(command_id):
            return CommandResult.success(f"Removed override for `{command_id}`")
        return CommandResult.error(f"No override for `{command_id}`")
