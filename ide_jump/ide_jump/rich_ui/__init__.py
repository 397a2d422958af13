"""Rich UI components for ide_jump."""
from .renderer import RichRenderer, get_renderer
from .menu import select_from_list, select_ide_interactive

__all__ = [
    'RichRenderer', 'get_renderer',
    'select_from_list', 'select_ide_interactive',
]
