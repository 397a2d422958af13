"""
Slash command registry for ide_jump.

Commands live one per module in the ``commands`` package and are picked up
automatically; every SlashCommand subclass defined there is instantiated once.
"""
import importlib
import inspect
import logging
import pkgutil
from typing import Dict, List, Optional

from . import commands as commands_package
from .base import CommandGroup, CommandResult, SlashCommand
from ..constants import SLASH_PREFIX
from ..errors import JumpError

logger = logging.getLogger(__name__)


def _is_command_class(obj: object) -> bool:
    return (
        inspect.isclass(obj)
        and issubclass(obj, SlashCommand)
        and obj not in (SlashCommand, CommandGroup)
        and not inspect.isabstract(obj)
    )


class CommandRegistry:
    """Maps command names and aliases to command instances and runs them."""

    _instance: Optional['CommandRegistry'] = None

    def __new__(cls) -> 'CommandRegistry':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self) -> None:
        if self._initialized:
            return
        self._initialized = True
        self._commands: Dict[str, SlashCommand] = {}
        self._aliases: Dict[str, str] = {}
        self._discover_commands()

    def _discover_commands(self) -> None:
        prefix = commands_package.__name__ + "."
        for module_info in pkgutil.iter_modules(commands_package.__path__, prefix):
            try:
                module = importlib.import_module(module_info.name)
            except ImportError as e:
                logger.warning("Failed to load command module %s: %s", module_info.name, e)
                continue

            for _, command_class in inspect.getmembers(module, _is_command_class):
                # Skip classes merely imported into this module
                if command_class.__module__ == module.__name__:
                    self.register(command_class())

    def register(self, command: SlashCommand) -> None:
        """
        Register a command under its name and aliases.

        Args:
            command: Command instance to register
        """
        self._commands[command.name] = command
        for alias in command.aliases:
            if alias in self._commands or self._aliases.get(alias, command.name) != command.name:
                logger.warning("Alias %r of /%s is already taken", alias, command.name)
                continue
            self._aliases[alias] = command.name

    def get(self, name: str) -> Optional[SlashCommand]:
        """
        Look up a command by name or alias, with or without the slash.

        Args:
            name: Command name or alias

        Returns:
            Command instance or None
        """
        key = name.strip().lower()
        if key.startswith(SLASH_PREFIX):
            key = key[len(SLASH_PREFIX):]
        key = self._aliases.get(key, key)
        return self._commands.get(key)

    def execute(self, name: str, args: str = "", **kwargs) -> CommandResult:
        """
        Run a command and turn every failure into an error result.

        Args:
            name: Command name or alias
            args: Raw argument string
            **kwargs: Context passed to the command (config, ...)

        Returns:
            CommandResult from the command
        """
        command = self.get(name)
        if command is None:
            return CommandResult.error(
                f"Unknown command: /{name}. Type /help for available commands."
            )

        problem = command.validate_args(args)
        if problem:
            return CommandResult.error(problem)

        try:
            return command.run(args, **kwargs)
        except JumpError as e:
            return CommandResult.from_jump_error(e)
        except ValueError as e:
            return CommandResult.error(f"Invalid arguments: {e}")
        except Exception as e:
            logger.exception("Command /%s failed", command.name)
            return CommandResult.error(f"Command error: {e}")

    def visible_commands(self) -> List[SlashCommand]:
        """Non-hidden commands sorted by name."""
        return [
            self._commands[name]
            for name in sorted(self._commands)
            if not self._commands[name].hidden
        ]

    def get_help(self, name: str) -> Optional[str]:
        """Detailed help for a command, or None if it does not exist."""
        command = self.get(name)
        return command.get_help() if command else None


_registry: Optional[CommandRegistry] = None


def get_command_registry() -> CommandRegistry:
    """Get the global command registry instance."""
    global _registry
    if _registry is None:
        _registry = CommandRegistry()
    return _registry
