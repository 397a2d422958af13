"""
Utility functions for ide_jump.
"""
import os
import shlex
import subprocess
import sys
from pathlib import Path
from typing import Iterator, List, Union


def is_windows() -> bool:
    """Check if running on Windows."""
    return sys.platform == 'win32'


def is_posix() -> bool:
    """Check if running on a POSIX-like OS."""
    return not is_windows()


def expand_path(path: Union[str, Path]) -> Path:
    """
    Expand a path string, resolving ~ and environment variables.

    Unlike Path.resolve() this does not touch the filesystem, so it is safe
    to use on paths that may not exist.

    Args:
        path: Path string to expand

    Returns:
        Expanded Path object
    """
    return Path(os.path.expanduser(os.path.expandvars(str(path))))


def walk_up(start: Path) -> Iterator[Path]:
    """
    Yield start and each of its parents up to the filesystem root.

    Args:
        start: Directory to begin at
    """
    current = start
    yield current
    for parent in current.parents:
        yield parent


def format_command_line(argv: List[str]) -> str:
    """
    Format an argument vector as a copy-pasteable shell command.

    Args:
        argv: Argument vector

    Returns:
        Quoted command line for the current platform
    """
    if is_windows():
        return subprocess.list2cmdline(argv)
    return shlex.join(argv)
