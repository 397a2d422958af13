"""Command system for ide_jump."""
from .base import SlashCommand, CommandGroup, CommandResult, CommandStatus
from .parser import CommandParser, option_value, parse_args
from .registry import CommandRegistry, get_command_registry

__all__ = [
    'SlashCommand', 'CommandGroup', 'CommandResult', 'CommandStatus',
    'CommandParser', 'option_value', 'parse_args',
    'CommandRegistry', 'get_command_registry'
]
