"""tui-palette — semantic colour roles and mergeable custom palettes for terminal UIs."""

from tui_palette.core.color import BaseColor, Color
from tui_palette.core.errors import NoSuchRoleError, PaletteError, UnrecognizedConfigNodeError
from tui_palette.core.palette import DEFAULT_BASIC, Palette
from tui_palette.core.theme_loader import build_node, iterate_table, load_table, load_theme_file, load_theme_string
from tui_palette.core.types import ColorValue, Namespace, PaletteNode, Role

__version__ = '0.1.0'

__all__ = [
    'BaseColor',
    'Color',
    'ColorValue',
    'DEFAULT_BASIC',
    'Namespace',
    'NoSuchRoleError',
    'Palette',
    'PaletteError',
    'PaletteNode',
    'Role',
    'UnrecognizedConfigNodeError',
    'build_node',
    'iterate_table',
    'load_table',
    'load_theme_file',
    'load_theme_string',
]
