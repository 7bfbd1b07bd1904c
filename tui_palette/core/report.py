"""Report builder: text and JSON output for a palette."""

import json
from collections.abc import Iterator, Mapping
from typing import Any

from tui_palette.core.color import Color, ColorKind, nearest_base, to_hex
from tui_palette.core.palette import Palette
from tui_palette.core.types import ColorValue, PaletteNode


def _rgb_column(color: Color) -> str:
    rgb = color.to_rgb()
    if rgb is None:
        return '-'
    if color.kind in (ColorKind.RGB, ColorKind.RGB_LOW_RES):
        # closest 16-colour fallback, for terminals without true colour
        nearest, _dist = nearest_base(rgb)
        return f'{to_hex(rgb)}  ~{nearest}'
    return to_hex(rgb)


def flatten_custom(palette: Palette) -> list[tuple[str, Color]]:
    """All custom colours as (dotted.path, colour), depth-first."""
    return list(_walk(palette.custom, ''))


def _walk(entries: Mapping[str, PaletteNode], prefix: str) -> Iterator[tuple[str, Color]]:
    for name, node in entries.items():
        path = f'{prefix}{name}'
        if isinstance(node, ColorValue):
            yield path, node.color
        else:
            yield from _walk(node.entries, f'{path}.')


def _node_to_obj(node: PaletteNode) -> Any:
    if isinstance(node, ColorValue):
        return str(node.color)
    return {name: _node_to_obj(child) for name, child in node.items()}


def palette_to_dict(palette: Palette) -> dict[str, Any]:
    return {
        'basic': {role.alias: str(color) for role, color in palette.roles()},
        'custom': {name: _node_to_obj(node) for name, node in palette.custom.items()},
    }


def format_text(palette: Palette, theme_path: str | None = None) -> str:
    """Format palette as human-readable text."""
    lines = []
    header = 'tui-palette'
    header += f': {theme_path}' if theme_path else ': default palette'
    lines.append(header)
    lines.append('')

    lines.append('── roles')
    for role, color in palette.roles():
        lines.append(f'  {role.alias:<20} {str(color):<16} {_rgb_column(color)}')
    lines.append('')

    lines.append('── custom')
    if not palette.custom:
        lines.append('  (none)')
    else:
        _append_tree(lines, palette.custom, depth=1)
    return '\n'.join(lines)


def _append_tree(lines: list[str], entries: Mapping[str, PaletteNode], depth: int) -> None:
    indent = '  ' * depth
    for name, node in entries.items():
        if isinstance(node, ColorValue):
            label = f'{indent}{name}'
            lines.append(f'{label:<22} {str(node.color):<16} {_rgb_column(node.color)}')
        else:
            lines.append(f'{indent}[{name}]')
            _append_tree(lines, node.entries, depth + 1)


def format_json(palette: Palette) -> str:
    """Format palette as JSON."""
    return json.dumps(palette_to_dict(palette), indent=2)
