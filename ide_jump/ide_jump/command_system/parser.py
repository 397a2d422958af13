"""
Command parser for ide_jump.
Parses command input into slash commands and their arguments.
"""
import shlex
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..constants import SLASH_PREFIX


@dataclass
class ParsedInput:
    """Result of parsing command input."""
    type: str  # 'command', 'empty'
    command: str = ""
    args: str = ""
    raw: str = ""


def _is_value(token: str) -> bool:
    """Option values may be negative numbers but not other options."""
    return not token.startswith("-") or token[1:].isdigit()


class CommandParser:
    """
    Parser for command input.

    Accepts both '/open file.py' and 'open file.py'.
    """

    def parse(self, input_text: str) -> ParsedInput:
        """
        Parse command input into a structured result.

        Args:
            input_text: Raw input

        Returns:
            ParsedInput with parsed components
        """
        text = input_text.strip()

        if not text:
            return ParsedInput(type="empty", raw=input_text)

        without_prefix = text[len(SLASH_PREFIX):] if text.startswith(SLASH_PREFIX) else text

        parts = without_prefix.split(maxsplit=1)
        command = parts[0].lower() if parts else ""
        args = parts[1] if len(parts) > 1 else ""

        return ParsedInput(
            type="command",
            command=command,
            args=args,
            raw=text
        )

    def parse_args(self, args: str) -> Tuple[List[str], dict]:
        """
        Parse command arguments into positional and keyword args.

        Args:
            args: Arguments string

        Returns:
            Tuple of (positional_args, keyword_args)
        """
        if not args:
            return [], {}

        try:
            tokens = shlex.split(args)
        except ValueError:
            tokens = args.split()

        positional = []
        keyword = {}

        i = 0
        while i < len(tokens):
            token = tokens[i]

            if token.startswith("--"):
                key = token[2:]
                if "=" in key:
                    k, v = key.split("=", 1)
                    keyword[k] = v
                elif i + 1 < len(tokens) and _is_value(tokens[i + 1]):
                    keyword[key] = tokens[i + 1]
                    i += 1
                else:
                    keyword[key] = True
            elif token.startswith("-") and len(token) == 2 and not token[1].isdigit():
                key = token[1]
                if i + 1 < len(tokens) and _is_value(tokens[i + 1]):
                    keyword[key] = tokens[i + 1]
                    i += 1
                else:
                    keyword[key] = True
            else:
                positional.append(token)

            i += 1

        return positional, keyword


_parser = CommandParser()


def parse_args(args: str) -> Tuple[List[str], dict]:
    """Convenience function to split command arguments."""
    return _parser.parse_args(args)


def option_value(options: dict, key: str) -> Optional[str]:
    """
    Get a string option, rejecting a flag given without its value.

    Raises:
        ValueError: If the option appeared with no value
    """
    value = options.get(key)
    if value is True:
        raise ValueError(f"--{key} requires a value")
    return value
