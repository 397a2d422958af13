"""
IDE process launcher for ide_jump.

Builds the command line an IDE's remote-open protocol understands and starts
the IDE as a detached process. Many IDE launchers pick the window to reuse
from the first positional argument, so the project root always comes before
the file arguments.
"""
import logging
import os
import subprocess
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

from .constants import DEFAULT_COLUMN, DEFAULT_LINE
from .errors import ErrorResult, ErrorType, make_error
from .models import JumpRequest
from .utils import format_command_line, is_windows

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


@dataclass
class LaunchResult:
    """Result of an IDE launch attempt."""
    argv: List[str] = field(default_factory=list)
    pid: Optional[int] = None
    error: Optional[ErrorResult] = None

    @property
    def success(self) -> bool:
        """Check if the process was created."""
        return self.error is None

    @property
    def command_line(self) -> str:
        """Get the assembled command line as a shell string."""
        return format_command_line(self.argv) if self.argv else ""


def build_command(
    executable: str,
    project_root: Optional[PathLike] = None,
    file_path: Optional[PathLike] = None,
    line: int = DEFAULT_LINE,
    column: int = DEFAULT_COLUMN,
) -> List[str]:
    """
    Build the argument vector for opening a project and/or file.

    The project group is only added when project_root is an existing
    directory, the file group only when file_path exists.

    Args:
        executable: Resolved IDE executable
        project_root: Project directory to open first
        file_path: File to open
        line: 1-based line number
        column: 0-based column number

    Returns:
        [executable, <root>, --line, N, --column, M, <file>] with either
        group omitted
    """
    argv = [executable]

    if project_root is not None:
        root = Path(project_root)
        if root.is_dir():
            argv.append(str(root.absolute()))

    if file_path is not None:
        path = Path(file_path)
        if path.exists():
            argv.extend([
                "--line", str(line),
                "--column", str(column),
                str(path.absolute()),
            ])

    return argv


def _detach_kwargs() -> dict:
    """Platform keyword arguments for a process that outlives the caller."""
    if is_windows():
        flags = (
            getattr(subprocess, "DETACHED_PROCESS", 0)
            | getattr(subprocess, "CREATE_NEW_PROCESS_GROUP", 0)
        )
        return {"creationflags": flags}
    return {"start_new_session": True}


def spawn_detached(argv: List[str], cwd: Optional[str] = None) -> subprocess.Popen:
    """
    Start a process without waiting for it.

    Args:
        argv: Argument vector
        cwd: Working directory for the child

    Returns:
        The Popen handle (callers are free to drop it)
    """
    process = subprocess.Popen(
        argv,
        stdin=subprocess.DEVNULL,
        stdout=subprocess.DEVNULL,
        stderr=subprocess.DEVNULL,
        cwd=cwd,
        close_fds=True,
        **_detach_kwargs()
    )
    # Never waited on; mark as reaped so GC does not warn about it
    process.returncode = 0
    return process


def launch_ide(
    executable: str,
    project_root: Optional[PathLike] = None,
    file_path: Optional[PathLike] = None,
    line: int = DEFAULT_LINE,
    column: int = DEFAULT_COLUMN,
) -> LaunchResult:
    """
    Launch the IDE in the background.

    Process creation errors are caught and returned as a failed result;
    nothing is raised to the caller.

    Args:
        executable: Resolved IDE executable
        project_root: Project directory to open first
        file_path: File to open
        line: 1-based line number
        column: 0-based column number

    Returns:
        LaunchResult with the argument vector and pid, or an error
    """
    argv = build_command(executable, project_root, file_path, line, column)
    logger.info("Launching IDE: %s", format_command_line(argv))

    cwd = None
    if project_root is not None and Path(project_root).is_dir():
        cwd = os.fspath(project_root)

    try:
        process = spawn_detached(argv, cwd=cwd)
    except (OSError, ValueError) as e:
        logger.warning("Failed to launch %s: %s", executable, e)
        return LaunchResult(
            argv=argv,
            error=make_error(
                ErrorType.LAUNCH_FAILURE,
                f"Failed to launch '{executable}': {e}",
                raw_error=str(e),
            ),
        )

    logger.debug("Started IDE process pid=%s", process.pid)
    return LaunchResult(argv=argv, pid=process.pid)


def launch_request(request: JumpRequest, executable: str) -> LaunchResult:
    """Launch the IDE for a JumpRequest with an already resolved executable."""
    return launch_ide(
        executable,
        project_root=request.project_root,
        file_path=request.file_path,
        line=request.line,
        column=request.column,
    )
