"""Shared types for tui-palette: Role, ColorValue, Namespace, PaletteNode."""

from __future__ import annotations

import re
from collections.abc import Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Union

from tui_palette.core.color import Color
from tui_palette.core.errors import NoSuchRoleError

if TYPE_CHECKING:
    from tui_palette.core.palette import Palette


class Role(Enum):
    """Built-in colour roles every palette defines."""

    BACKGROUND = 'Background'  # application background
    SHADOW = 'Shadow'  # view shadows
    VIEW = 'View'  # view backgrounds
    PRIMARY = 'Primary'  # primary text
    SECONDARY = 'Secondary'  # secondary text
    TERTIARY = 'Tertiary'  # tertiary text
    TITLE_PRIMARY = 'TitlePrimary'  # primary title text
    TITLE_SECONDARY = 'TitleSecondary'  # secondary title text
    HIGHLIGHT = 'Highlight'  # highlighted text background
    HIGHLIGHT_INACTIVE = 'HighlightInactive'  # highlight in an unfocused view
    HIGHLIGHT_TEXT = 'HighlightText'  # highlighted text

    @property
    def alias(self) -> str:
        """snake_case spelling, e.g. 'title_primary'."""
        return re.sub(r'(?<!^)(?=[A-Z])', '_', self.value).lower()

    @classmethod
    def classify(cls, name: str) -> Role | None:
        """Match name (case-insensitive) against role names and aliases."""
        return _ROLE_NAMES.get(name.lower())

    @classmethod
    def from_name(cls, name: str) -> Role:
        role = cls.classify(name)
        if role is None:
            raise NoSuchRoleError(name)
        return role

    def resolve(self, palette: Palette) -> Color:
        return palette[self]


_ROLE_NAMES: dict[str, Role] = {}
for _role in Role:
    _ROLE_NAMES[_role.value.lower()] = _role
    _ROLE_NAMES[_role.alias] = _role


@dataclass(frozen=True)
class ColorValue:
    """A single custom colour."""

    color: Color


@dataclass
class Namespace:
    """A named group of custom entries: colours and further namespaces.

    Namespaces are merged into a palette with Palette.merge.
    """

    entries: dict[str, PaletteNode] = field(default_factory=dict)

    def __getitem__(self, key: str) -> PaletteNode:
        return self.entries[key]

    def __contains__(self, key: object) -> bool:
        return key in self.entries

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def items(self):
        return self.entries.items()

    def get(self, key: str) -> PaletteNode | None:
        return self.entries.get(key)


PaletteNode = Union[ColorValue, Namespace]
