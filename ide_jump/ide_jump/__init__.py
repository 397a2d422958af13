"""
ide_jump - Jump from your editor to the same file, line and column in an IDE.
"""
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from .jump import jump_to_file, open_project, resolve_command_id
from .launcher import LaunchResult, build_command, launch_ide
from .models import IdeTarget, JumpRequest
from .project import discover_project_root
from .resolver import resolve_executable

__version__ = APP_VERSION
__all__ = [
    'APP_NAME', 'APP_VERSION', 'APP_DESCRIPTION',
    'IdeTarget', 'JumpRequest',
    'resolve_executable',
    'build_command', 'launch_ide', 'LaunchResult',
    'discover_project_root',
    'jump_to_file', 'open_project', 'resolve_command_id',
]
