"""Swatch image of a palette: one labelled colour block per role and custom colour.

Rows are the 11 roles in declaration order, then every custom colour
(namespaces flattened to dotted paths). The terminal default colour has no
RGB value and is drawn mid-grey.
"""

from pathlib import Path

import numpy as np
from PIL import Image, ImageDraw

from tui_palette.core.color import Color
from tui_palette.core.palette import Palette
from tui_palette.core.report import flatten_custom

DEFAULT_FILL = (128, 128, 128)
LABEL_BG = (255, 255, 255)
LABEL_FG = (0, 0, 0)


def swatch_rows(palette: Palette) -> list[tuple[str, Color]]:
    rows = [(role.alias, color) for role, color in palette.roles()]
    rows.extend(flatten_custom(palette))
    return rows


def render_swatch(
    palette: Palette, row_height: int = 24, label_width: int = 200, swatch_width: int = 120
) -> Image.Image:
    rows = swatch_rows(palette)
    height = row_height * len(rows)
    arr = np.empty((height, label_width + swatch_width, 3), dtype=np.uint8)

    # Labels are drawn on their own strip so long names are clipped to the label column
    labels = Image.new('RGB', (label_width, height), LABEL_BG)
    draw = ImageDraw.Draw(labels)
    for i, (name, color) in enumerate(rows):
        draw.text((4, i * row_height + 4), f'{name}  {color}', fill=LABEL_FG)
    arr[:, :label_width] = np.asarray(labels)

    for i, (_name, color) in enumerate(rows):
        rgb = color.to_rgb() or DEFAULT_FILL
        arr[i * row_height : (i + 1) * row_height, label_width:] = rgb

    return Image.fromarray(arr)


def save_swatch(palette: Palette, path: str | Path, **kwargs) -> Path:
    path = Path(path)
    render_swatch(palette, **kwargs).save(path, format='PNG')
    return path
