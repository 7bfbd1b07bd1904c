"""Terminal colour values and their text grammar.

A Color is one of:
  - the terminal's default colour
  - a dark or light variant of one of the 8 base colours
  - a 24-bit RGB colour
  - a low-resolution RGB colour (0-5 per channel, the 216-colour cube)

Color.parse accepts the spellings used in theme files:

    default | terminal default
    red | dark red | light red | light_red
    #ff8800 | #f80 | 0xff8800 | 0xf80
    035            (low-res: three digits 0-5)

It never raises; unknown text yields None.
"""

from __future__ import annotations

import math
import string
from dataclasses import dataclass
from enum import Enum


class BaseColor(Enum):
    BLACK = 'black'
    RED = 'red'
    GREEN = 'green'
    YELLOW = 'yellow'
    BLUE = 'blue'
    MAGENTA = 'magenta'
    CYAN = 'cyan'
    WHITE = 'white'


class ColorKind(Enum):
    TERMINAL_DEFAULT = 'default'
    DARK = 'dark'
    LIGHT = 'light'
    RGB = 'rgb'
    RGB_LOW_RES = 'rgb_low_res'


# xterm's 16-colour table
DARK_RGB: dict[BaseColor, tuple[int, int, int]] = {
    BaseColor.BLACK: (0, 0, 0),
    BaseColor.RED: (128, 0, 0),
    BaseColor.GREEN: (0, 128, 0),
    BaseColor.YELLOW: (128, 128, 0),
    BaseColor.BLUE: (0, 0, 128),
    BaseColor.MAGENTA: (128, 0, 128),
    BaseColor.CYAN: (0, 128, 128),
    BaseColor.WHITE: (192, 192, 192),
}

LIGHT_RGB: dict[BaseColor, tuple[int, int, int]] = {
    BaseColor.BLACK: (128, 128, 128),
    BaseColor.RED: (255, 0, 0),
    BaseColor.GREEN: (0, 255, 0),
    BaseColor.YELLOW: (255, 255, 0),
    BaseColor.BLUE: (0, 0, 255),
    BaseColor.MAGENTA: (255, 0, 255),
    BaseColor.CYAN: (0, 255, 255),
    BaseColor.WHITE: (255, 255, 255),
}

_DEFAULT_NAMES = {'default', 'terminal default', 'terminal_default'}


@dataclass(frozen=True)
class Color:
    """An immutable terminal colour. Build with the classmethods or Color.parse."""

    kind: ColorKind
    base: BaseColor | None = None
    channels: tuple[int, int, int] | None = None

    @classmethod
    def terminal_default(cls) -> Color:
        return cls(ColorKind.TERMINAL_DEFAULT)

    @classmethod
    def dark(cls, base: BaseColor) -> Color:
        return cls(ColorKind.DARK, base=base)

    @classmethod
    def light(cls, base: BaseColor) -> Color:
        return cls(ColorKind.LIGHT, base=base)

    @classmethod
    def rgb(cls, r: int, g: int, b: int) -> Color:
        for v in (r, g, b):
            if not 0 <= v <= 255:
                raise ValueError(f'RGB channel out of range: {v}')
        return cls(ColorKind.RGB, channels=(r, g, b))

    @classmethod
    def low_res(cls, r: int, g: int, b: int) -> Color:
        for v in (r, g, b):
            if not 0 <= v <= 5:
                raise ValueError(f'Low-res channel out of range: {v}')
        return cls(ColorKind.RGB_LOW_RES, channels=(r, g, b))

    @classmethod
    def parse(cls, text: str) -> Color | None:
        """Parse a colour spelling. Returns None if text is not a colour."""
        value = text.strip().lower()
        if not value:
            return None
        if value in _DEFAULT_NAMES:
            return cls.terminal_default()

        variant, base = _split_variant(value)
        if base is not None:
            return cls.light(base) if variant == 'light' else cls.dark(base)

        if value.startswith('#'):
            return _parse_hex(value[1:])
        if value.startswith('0x'):
            return _parse_hex(value[2:])
        if len(value) == 3 and all(c in '012345' for c in value):
            return cls.low_res(int(value[0]), int(value[1]), int(value[2]))
        return None

    def to_rgb(self) -> tuple[int, int, int] | None:
        """Approximate RGB for display. None for the terminal default."""
        if self.kind == ColorKind.DARK:
            return DARK_RGB[self.base]
        if self.kind == ColorKind.LIGHT:
            return LIGHT_RGB[self.base]
        if self.kind == ColorKind.RGB:
            return self.channels
        if self.kind == ColorKind.RGB_LOW_RES:
            r, g, b = self.channels
            return (r * 51, g * 51, b * 51)
        return None

    def __str__(self) -> str:
        if self.kind == ColorKind.DARK:
            return self.base.value
        if self.kind == ColorKind.LIGHT:
            return f'light {self.base.value}'
        if self.kind == ColorKind.RGB:
            return to_hex(self.channels)
        if self.kind == ColorKind.RGB_LOW_RES:
            return ''.join(str(v) for v in self.channels)
        return 'default'


def _split_variant(value: str) -> tuple[str, BaseColor | None]:
    """Split 'light red' / 'light_red' / 'dark red' / 'red' into (variant, base)."""
    variant = 'dark'
    name = value
    for prefix in ('light', 'dark'):
        for sep in (' ', '_'):
            if value.startswith(prefix + sep):
                variant = prefix
                name = value[len(prefix) + 1 :].strip()
    try:
        return variant, BaseColor(name)
    except ValueError:
        return variant, None


def _parse_hex(digits: str) -> Color | None:
    # int(..., 16) also takes signs, '_' and whitespace
    if not all(c in string.hexdigits for c in digits):
        return None
    if len(digits) == 6:
        width, multiplier = 2, 1
    elif len(digits) == 3:
        width, multiplier = 1, 17
    else:
        return None
    values = [int(digits[i : i + width], 16) * multiplier for i in range(0, len(digits), width)]
    return Color.rgb(values[0], values[1], values[2])


def to_hex(rgb: tuple[int, int, int]) -> str:
    r, g, b = rgb
    return f'#{r:02x}{g:02x}{b:02x}'


def rgb_distance(a: tuple[int, int, int], b: tuple[int, int, int]) -> float:
    """Euclidean distance in RGB space. Plain ints, no overflow."""
    return math.sqrt(sum((int(x) - int(y)) ** 2 for x, y in zip(a, b)))


def nearest_base(rgb: tuple[int, int, int]) -> tuple[Color, float]:
    """Closest dark/light base colour to rgb, with its distance."""
    best: Color | None = None
    best_dist = float('inf')
    for table, make in ((DARK_RGB, Color.dark), (LIGHT_RGB, Color.light)):
        for base, value in table.items():
            d = rgb_distance(rgb, value)
            if d < best_dist:
                best, best_dist = make(base), d
    return best, best_dist
