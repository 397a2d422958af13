"""
Jump orchestration for ide_jump.

Ties together IDE name lookup, project root discovery, executable resolution
and launching. Failures detected before launch raise JumpError subclasses;
launch failures come back as a failed LaunchResult.
"""
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

from .config import IdeConfig
from .constants import DEFAULT_COLUMN, DEFAULT_LINE
from .errors import NoFileContextError, NoProjectRootError
from .launcher import LaunchResult, launch_request
from .models import IdeTarget, JumpRequest
from .project import ProjectProbe, discover_project_root
from .resolver import resolve_executable

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


def resolve_command_id(name: str, ides: Dict[str, str]) -> str:
    """
    Map an IDE name to its command identifier.

    Display names match exactly first, then case-insensitively. A name that
    is already a command identifier, or matches nothing at all, is returned
    unchanged and used as a raw command identifier.

    Args:
        name: Display name, command identifier or arbitrary command
        ides: Display name -> command identifier table

    Returns:
        Command identifier
    """
    name = name.strip()
    if name in ides:
        return ides[name]

    lowered = name.lower()
    for display_name, command_id in ides.items():
        if display_name.lower() == lowered:
            return command_id

    return name


def list_targets(ides: Dict[str, str]) -> List[IdeTarget]:
    """List configured IDEs in table order."""
    return IdeTarget.from_table(ides)


def build_request(
    ide_config: IdeConfig,
    ide: Optional[str] = None,
    file_path: Optional[PathLike] = None,
    line: int = DEFAULT_LINE,
    column: int = DEFAULT_COLUMN,
    project_root: Optional[PathLike] = None,
    probes: Optional[Iterable[ProjectProbe]] = None,
    require_file: bool = True,
) -> JumpRequest:
    """
    Build a JumpRequest from editor state.

    Args:
        ide_config: IDE configuration
        ide: IDE display name or command identifier; defaults to the configured one
        file_path: File being edited
        line: 1-based line
        column: 0-based column
        project_root: Explicit project root; discovered when omitted
        probes: Project probes to use instead of the defaults
        require_file: Whether a missing file is an error

    Returns:
        JumpRequest

    Raises:
        NoProjectRootError: If no project root could be found
        NoFileContextError: If a file is required and none exists
    """
    command_id = resolve_command_id(ide or ide_config.default_ide, ide_config.ides)

    file = Path(file_path).expanduser() if file_path else None

    root = discover_project_root(
        file_path=file if file is not None and file.exists() else None,
        explicit_root=Path(project_root) if project_root else None,
        probes=probes,
        fallback_to_cwd=ide_config.fallback_to_cwd,
    )
    if root is None:
        if project_root:
            raise NoProjectRootError(f"Project root is not a directory: {project_root}")
        raise NoProjectRootError("No project root found")

    if require_file:
        if file is None:
            raise NoFileContextError("No file associated with the current context")
        if not file.is_file():
            raise NoFileContextError(f"File does not exist: {file}")

    return JumpRequest(
        command_id=command_id,
        project_root=root,
        file_path=file.absolute() if require_file and file is not None else None,
        line=line,
        column=column,
    )


def execute(request: JumpRequest, ide_config: IdeConfig) -> LaunchResult:
    """
    Resolve the executable for a request and launch it.

    Args:
        request: The jump to perform
        ide_config: IDE configuration (overrides and search directories)

    Returns:
        LaunchResult
    """
    executable = resolve_executable(
        request.command_id,
        overrides=ide_config.executable_overrides,
        search_dirs=ide_config.search_dirs,
    )
    return launch_request(request, executable)


def jump_to_file(
    file_path: Optional[PathLike],
    line: int = DEFAULT_LINE,
    column: int = DEFAULT_COLUMN,
    ide: Optional[str] = None,
    project_root: Optional[PathLike] = None,
    ide_config: Optional[IdeConfig] = None,
    probes: Optional[Iterable[ProjectProbe]] = None,
) -> LaunchResult:
    """
    Open a file in the IDE at a line and column, in its project's window.

    Raises:
        NoProjectRootError: If no project root could be found
        NoFileContextError: If there is no file to open
    """
    ide_config = ide_config or IdeConfig()
    request = build_request(
        ide_config,
        ide=ide,
        file_path=file_path,
        line=line,
        column=column,
        project_root=project_root,
        probes=probes,
        require_file=True,
    )
    return execute(request, ide_config)


def open_project(
    project_root: Optional[PathLike] = None,
    ide: Optional[str] = None,
    file_path: Optional[PathLike] = None,
    ide_config: Optional[IdeConfig] = None,
    probes: Optional[Iterable[ProjectProbe]] = None,
) -> LaunchResult:
    """
    Open the project root in the IDE without a file.

    file_path only seeds project root discovery; it is not opened.

    Raises:
        NoProjectRootError: If no project root could be found
    """
    ide_config = ide_config or IdeConfig()
    request = build_request(
        ide_config,
        ide=ide,
        file_path=file_path,
        project_root=project_root,
        probes=probes,
        require_file=False,
    )
    return execute(request, ide_config)
