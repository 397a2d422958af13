"""
Project root discovery for ide_jump.

Discovery tries a prioritized list of probes. Each probe checks whether it can
run at all, then attempts discovery from a start directory; the first probe
that returns a directory wins.
"""
import logging
import os
import shutil
import subprocess
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Iterable, List, Optional, Sequence

from .constants import GIT_TIMEOUT_SECONDS, PROJECT_MARKERS, VCS_MARKERS
from .utils import walk_up

logger = logging.getLogger(__name__)


class ProjectProbe(ABC):
    """
    Base class for project root probes.

    Subclasses implement discover(); is_available() lets a probe opt out when
    the tool it relies on is missing.
    """

    name: str = ""

    def __init__(self) -> None:
        if not self.name:
            self.name = self.__class__.__name__.lower().replace("probe", "")

    def is_available(self) -> bool:
        """Check whether this probe can run on this machine."""
        return True

    @abstractmethod
    def discover(self, start: Path) -> Optional[Path]:
        """
        Attempt discovery.

        Args:
            start: Absolute directory to search from

        Returns:
            Project root directory, or None
        """
        pass

    def __repr__(self) -> str:
        return f"<ProjectProbe {self.name}>"


class GitProbe(ProjectProbe):
    """Asks git for the top of the work tree."""

    name = "git"

    def __init__(self, timeout: int = GIT_TIMEOUT_SECONDS) -> None:
        super().__init__()
        self._timeout = timeout

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    def discover(self, start: Path) -> Optional[Path]:
        try:
            result = subprocess.run(
                ["git", "rev-parse", "--show-toplevel"],
                cwd=str(start),
                capture_output=True,
                text=True,
                timeout=self._timeout,
            )
        except (OSError, subprocess.TimeoutExpired) as e:
            logger.debug("git probe failed in %s: %s", start, e)
            return None

        if result.returncode != 0:
            return None

        top = result.stdout.strip()
        if top and os.path.isdir(top):
            return Path(top)
        return None


class MarkerProbe(ProjectProbe):
    """Walks up from the start directory looking for marker files or directories."""

    markers: Sequence[str] = ()

    def __init__(self, markers: Optional[Sequence[str]] = None) -> None:
        super().__init__()
        if markers is not None:
            self.markers = tuple(markers)

    def discover(self, start: Path) -> Optional[Path]:
        for directory in walk_up(start):
            for marker in self.markers:
                if (directory / marker).exists():
                    logger.debug("%s probe matched %s in %s", self.name, marker, directory)
                    return directory
        return None


class VcsMarkerProbe(MarkerProbe):
    """Version-control checkouts, detected without running any VCS tool."""

    name = "vcs"
    markers = VCS_MARKERS


class ProjectMarkerProbe(MarkerProbe):
    """IDE and build-tool project markers (.idea, .projectile, pyproject.toml, ...)."""

    name = "markers"
    markers = PROJECT_MARKERS


class CwdProbe(ProjectProbe):
    """Falls back to the current working directory."""

    name = "cwd"

    def discover(self, start: Path) -> Optional[Path]:
        try:
            cwd = Path.cwd()
        except OSError:
            return None
        return cwd if cwd.is_dir() else None


def default_probes(fallback_to_cwd: bool = True) -> List[ProjectProbe]:
    """Get the default probes in priority order."""
    probes: List[ProjectProbe] = [GitProbe(), VcsMarkerProbe(), ProjectMarkerProbe()]
    if fallback_to_cwd:
        probes.append(CwdProbe())
    return probes


def start_directory(file_path: Optional[Path] = None) -> Path:
    """
    Get the directory discovery starts from.

    Args:
        file_path: File being edited, if any

    Returns:
        The file's parent directory, or the current working directory
    """
    if file_path is not None:
        parent = Path(file_path).absolute().parent
        if parent.is_dir():
            return parent
    return Path.cwd()


def discover_project_root(
    file_path: Optional[Path] = None,
    explicit_root: Optional[Path] = None,
    probes: Optional[Iterable[ProjectProbe]] = None,
    fallback_to_cwd: bool = True,
) -> Optional[Path]:
    """
    Discover the project root for a file or the current directory.

    Args:
        file_path: File being edited, if any
        explicit_root: Root given by the user; skips the probes entirely
        probes: Probes to try in order; defaults to default_probes()
        fallback_to_cwd: Whether the default probes end with the cwd

    Returns:
        Absolute project root directory, or None if nothing resolved
    """
    if explicit_root is not None:
        root = Path(explicit_root).expanduser()
        if root.is_dir():
            return root.absolute()
        logger.debug("Explicit project root %s is not a directory", root)
        return None

    if probes is None:
        probes = default_probes(fallback_to_cwd)

    try:
        start = start_directory(file_path)
    except OSError as e:
        logger.debug("No start directory for discovery: %s", e)
        return None

    for probe in probes:
        if not probe.is_available():
            logger.debug("Skipping unavailable probe %s", probe.name)
            continue
        root = probe.discover(start)
        if root is not None and root.is_dir():
            logger.debug("Project root %s found by %s probe", root, probe.name)
            return root.absolute()

    return None
