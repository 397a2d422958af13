"""
Base classes for the command system in ide_jump.
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..errors import JumpError
    from ..launcher import LaunchResult


class CommandStatus(Enum):
    """Status of command execution."""
    SUCCESS = "success"
    ERROR = "error"
    CANCELLED = "cancelled"
    INFO = "info"


@dataclass
class CommandResult:
    """Result of a command execution."""
    status: CommandStatus = CommandStatus.SUCCESS
    message: str = ""
    data: Any = None
    errors: List[str] = field(default_factory=list)

    @property
    def is_success(self) -> bool:
        """Check if command succeeded."""
        return self.status in (CommandStatus.SUCCESS, CommandStatus.INFO)

    @property
    def is_error(self) -> bool:
        """Check if command failed."""
        return self.status == CommandStatus.ERROR

    @classmethod
    def success(cls, message: str = "", data: Any = None) -> 'CommandResult':
        """Create a success result."""
        return cls(status=CommandStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(cls, message: str, errors: Optional[List[str]] = None) -> 'CommandResult':
        """Create an error result."""
        return cls(
            status=CommandStatus.ERROR,
            message=message,
            errors=errors or [message]
        )

    @classmethod
    def info(cls, message: str) -> 'CommandResult':
        """Create an informational result."""
        return cls(status=CommandStatus.INFO, message=message)

    @classmethod
    def cancelled(cls, message: str = "Cancelled") -> 'CommandResult':
        """Create a cancelled result."""
        return cls(status=CommandStatus.CANCELLED, message=message)

    @classmethod
    def from_launch(cls, result: 'LaunchResult') -> 'CommandResult':
        """Create a result from an IDE launch attempt."""
        if result.success:
            return cls.success(f"Opened in `{result.argv[0]}`", data=result)
        error = result.error
        return cls(
            status=CommandStatus.ERROR,
            message=error.format(),
            data=result,
            errors=[error.message],
        )

    @classmethod
    def from_jump_error(cls, exc: 'JumpError') -> 'CommandResult':
        """Create an error result from a failure detected before launch."""
        return cls.error(exc.to_result().format(), errors=[exc.message])


class SlashCommand(ABC):
    """
    Base class for all slash commands.

    All commands must inherit from this class and implement the run method.
    Commands are auto-discovered and registered based on their class attributes.
    """

    name: str = ""
    description: str = ""
    aliases: List[str] = []
    usage: str = ""
    examples: List[str] = []
    hidden: bool = False

    def __init__(self) -> None:
        """Initialize the command."""
        if not self.name:
            self.name = self.__class__.__name__.lower().replace("command", "")

    @abstractmethod
    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """
        Execute the command.

        Args:
            args: Command arguments as a string
            **kwargs: Additional context (config, etc.)

        Returns:
            CommandResult with execution status
        """
        pass

    def get_help(self) -> str:
        """Get detailed help text for the command."""
        parts = [
            f"**/{self.name}** - {self.description}",
        ]

        if self.usage:
            parts.append(f"\n**Usage:** `/{self.name} {self.usage}`")

        if self.aliases:
            parts.append(f"\n**Aliases:** {', '.join(self.aliases)}")

        if self.examples:
            parts.append("\n**Examples:**\n")
            for example in self.examples:
                parts.append(f"- `{example}`")

        return "\n".join(parts)

    def validate_args(self, args: str) -> Optional[str]:
        """
        Validate command arguments.

        Args:
            args: Arguments string

        Returns:
            Error message if invalid, None if valid
        """
        return None

    def __repr__(self) -> str:
        return f"<SlashCommand /{self.name}>"


class CommandGroup(SlashCommand):
    """
    A command that groups subcommands.

    Used for commands like /override that have subcommands (list, set, remove).
    """

    subcommands: Dict[str, Callable[..., CommandResult]] = {}

    def __init__(self) -> None:
        super().__init__()
        self.subcommands = dict(self.subcommands)

    def run(self, args: str = "", **kwargs: Any) -> CommandResult:
        """Route to subcommand or show help."""
        parts = args.split(maxsplit=1)
        subcommand = parts[0] if parts else ""
        subargs = parts[1] if len(parts) > 1 else ""

        if not subcommand or subcommand == "help":
            return self._show_help()

        if subcommand in self.subcommands:
            handler = self.subcommands[subcommand]
            if callable(handler):
                return handler(subargs, **kwargs)

        return CommandResult.error(
            f"Unknown subcommand: {subcommand}. "
            f"Available: {', '.join(self.subcommands.keys())}"
        )

    def _show_help(self) -> CommandResult:
        """Show help for this command group."""
        lines = [f"**/{self.name}** - {self.description}", "", "**Subcommands:**"]
        for name, handler in self.subcommands.items():
            doc = handler.__doc__ or "No description"
            lines.append(f"  **{name}** - {doc.split(chr(10))[0]}")
        return CommandResult.success("\n".join(lines))

    def register_subcommand(self, name: str, handler: Callable[..., CommandResult]) -> None:
        """Register a subcommand handler."""
        self.subcommands[name] = handler
