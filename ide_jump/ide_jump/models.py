"""
Request-scoped values for ide_jump.
"""
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List, Optional, Union

from .constants import DEFAULT_COLUMN, DEFAULT_LINE

PathLike = Union[str, Path]


@dataclass(frozen=True)
class IdeTarget:
    """An IDE as shown to the user and as invoked from a shell."""
    display_name: str
    command_id: str

    @classmethod
    def from_table(cls, ides: Dict[str, str]) -> List['IdeTarget']:
        """Build targets from a display-name -> command-id table, keeping its order."""
        return [cls(display_name=name, command_id=cmd) for name, cmd in ides.items()]


@dataclass(frozen=True)
class JumpRequest:
    """
    A single jump, built from editor state and consumed immediately.

    Attributes:
        command_id: Canonical invocation name of the IDE
        project_root: Directory the IDE treats as the workspace top
        file_path: File to open
        line: 1-based line number
        column: 0-based column number
    """
    command_id: str
    project_root: Optional[Path] = None
    file_path: Optional[Path] = None
    line: int = DEFAULT_LINE
    column: int = DEFAULT_COLUMN

    def __post_init__(self) -> None:
        if not self.command_id:
            raise ValueError("command_id must not be empty")
        if self.line < 1:
            raise ValueError(f"line must be >= 1, got {self.line}")
        if self.column < 0:
            raise ValueError(f"column must be >= 0, got {self.column}")
        # Frozen dataclass: normalize through object.__setattr__
        if self.project_root is not None and not isinstance(self.project_root, Path):
            object.__setattr__(self, "project_root", Path(self.project_root))
        if self.file_path is not None and not isinstance(self.file_path, Path):
            object.__setattr__(self, "file_path", Path(self.file_path))
