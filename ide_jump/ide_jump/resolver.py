"""
Executable resolution for ide_jump.

IDE launchers live in many places (Toolbox scripts, package managers, manual
installs), so there is no single source of truth. Resolution degrades through
decreasing specificity and never fails:

1. User override table (identifier -> absolute path)
2. The identifier itself, when it is an existing absolute path
3. PATH lookup on POSIX-like systems
4. Common installation directories
5. The bare identifier, left for the OS to look up at spawn time
"""
import logging
import os
import shutil
from typing import Dict, Iterable, Optional, Tuple

from .constants import DEFAULT_SEARCH_DIRS
from .utils import expand_path, is_posix

logger = logging.getLogger(__name__)

STRATEGY_OVERRIDE = "override"
STRATEGY_ABSOLUTE = "absolute"
STRATEGY_WHICH = "which"
STRATEGY_SEARCH_DIR = "search_dir"
STRATEGY_FALLBACK = "fallback"


def _from_override(command_id: str, overrides: Optional[Dict[str, str]]) -> Optional[str]:
    if not overrides or command_id not in overrides:
        return None
    value = overrides[command_id]
    if not value:
        return None
    return str(expand_path(value))


def _from_absolute(command_id: str) -> Optional[str]:
    if os.path.isabs(command_id) and os.path.isfile(command_id):
        return command_id
    return None


def _from_which(command_id: str) -> Optional[str]:
    if not is_posix():
        return None
    found = shutil.which(command_id)
    if found and os.path.exists(found):
        return found
    return None


def _from_search_dirs(command_id: str, search_dirs: Iterable[str]) -> Optional[str]:
    for directory in search_dirs:
        if not directory:
            continue
        base = expand_path(directory)
        if not base.is_absolute():
            # An unset $VAR leaves the entry relative to the cwd
            logger.debug("Skipping unexpanded search dir %s", directory)
            continue
        candidate = base / command_id
        if candidate.exists():
            return str(candidate)
    return None


def describe_resolution(
    command_id: str,
    overrides: Optional[Dict[str, str]] = None,
    search_dirs: Optional[Iterable[str]] = None,
) -> Tuple[str, str]:
    """
    Resolve a command identifier and report which strategy matched.

    Args:
        command_id: IDE command identifier (e.g. 'idea') or an absolute path
        overrides: Mapping of command identifier to executable path
        search_dirs: Directories to try after PATH; defaults to the shipped list

    Returns:
        Tuple of (executable, strategy name)
    """
    if search_dirs is None:
        search_dirs = DEFAULT_SEARCH_DIRS

    path = _from_override(command_id, overrides)
    if path:
        return path, STRATEGY_OVERRIDE

    path = _from_absolute(command_id)
    if path:
        return path, STRATEGY_ABSOLUTE

    path = _from_which(command_id)
    if path:
        return path, STRATEGY_WHICH

    path = _from_search_dirs(command_id, search_dirs)
    if path:
        return path, STRATEGY_SEARCH_DIR

    return command_id, STRATEGY_FALLBACK


def resolve_executable(
    command_id: str,
    overrides: Optional[Dict[str, str]] = None,
    search_dirs: Optional[Iterable[str]] = None,
) -> str:
    """
    Resolve a command identifier to an executable path.

    Never raises: when nothing matches, command_id is returned unchanged and a
    missing executable surfaces later as a launch failure.

    Args:
        command_id: IDE command identifier (e.g. 'idea') or an absolute path
        overrides: Mapping of command identifier to executable path
        search_dirs: Directories to try after PATH; defaults to the shipped list

    Returns:
        Executable path, or command_id itself
    """
    path, strategy = describe_resolution(command_id, overrides, search_dirs)
    logger.debug("Resolved %r to %r via %s", command_id, path, strategy)
    return path
