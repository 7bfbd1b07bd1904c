"""Build palette trees from TOML theme data.

Theme files keep their palette in a `[colors]` table:

    [colors]
    background = "black"
    view = ["#1e1e2e", "black"]      # first value that parses wins
    accent = "#ff8800"               # unknown name -> custom colour

    [colors.dark]                    # table -> namespace
    background = "#000000"

Strings that are not colours are dropped silently. Values of any other
type (numbers, booleans, dates) are dropped with a warning. A bad value
never aborts the load.
"""

import logging
import tomllib
from collections.abc import Iterator, Mapping
from pathlib import Path
from typing import Any

from tui_palette.core.color import Color
from tui_palette.core.errors import UnrecognizedConfigNodeError
from tui_palette.core.palette import Palette
from tui_palette.core.types import ColorValue, Namespace, PaletteNode

logger = logging.getLogger(__name__)

COLORS_TABLE = 'colors'


def build_node(
    value: Any, key: str = '', errors: list[UnrecognizedConfigNodeError] | None = None
) -> PaletteNode | None:
    """Turn one config value into a PaletteNode, or None if it yields nothing."""
    if isinstance(value, str):
        color = Color.parse(value)
        if color is None:
            logger.debug('Dropping unparseable colour %s = %r', key, value)
            return None
        return ColorValue(color)

    if isinstance(value, (list, tuple)):
        for item in value:
            if not isinstance(item, str):
                continue
            color = Color.parse(item)
            if color is not None:
                return ColorValue(color)
        logger.debug('No parseable colour in %s = %r', key, value)
        return None

    if isinstance(value, Mapping):
        # Empty namespaces are kept
        return Namespace(dict(iterate_table(value, errors=errors, prefix=key)))

    err = UnrecognizedConfigNodeError(key, value)
    logger.warning('%s', err)
    if errors is not None:
        errors.append(err)
    return None


def iterate_table(
    table: Mapping[str, Any],
    errors: list[UnrecognizedConfigNodeError] | None = None,
    prefix: str = '',
) -> Iterator[tuple[str, PaletteNode]]:
    """Yield (key, node) for every entry of table that builds to something."""
    for key, value in table.items():
        path = f'{prefix}.{key}' if prefix else key
        node = build_node(value, key=path, errors=errors)
        if node is not None:
            yield key, node


def load_table(
    palette: Palette, table: Mapping[str, Any], errors: list[UnrecognizedConfigNodeError] | None = None
) -> None:
    """Fill palette from table. Top-level role names update the built-in roles."""
    for key, node in iterate_table(table, errors=errors):
        if isinstance(node, ColorValue):
            palette.set_color(key, node.color)
        else:
            palette.add_namespace(key, node)


def palette_from_table(
    table: Mapping[str, Any], errors: list[UnrecognizedConfigNodeError] | None = None
) -> Palette:
    palette = Palette()
    load_table(palette, table, errors=errors)
    return palette


def load_theme_string(text: str, errors: list[UnrecognizedConfigNodeError] | None = None) -> Palette:
    """Parse a TOML theme document and return its palette.

    Raises tomllib.TOMLDecodeError on invalid TOML.
    """
    doc = tomllib.loads(text)
    colors = doc.get(COLORS_TABLE)
    if colors is None:
        return Palette()
    if not isinstance(colors, Mapping):
        logger.warning('Ignoring non-table %r entry in theme: %r', COLORS_TABLE, colors)
        return Palette()
    return palette_from_table(colors, errors=errors)


def load_theme_file(path: str | Path, errors: list[UnrecognizedConfigNodeError] | None = None) -> Palette:
    """Load a theme file from disk."""
    with open(path, encoding='utf-8') as f:
        text = f.read()
    palette = load_theme_string(text, errors=errors)
    logger.debug('Loaded theme %s (%d custom entries)', path, len(palette.custom))
    return palette
