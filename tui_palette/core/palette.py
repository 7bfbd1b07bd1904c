"""The Palette: built-in role colours plus a tree of custom named values.

Every Role always has a colour. Custom values live under arbitrary names and
are either a single colour or a Namespace of further entries.

    palette = Palette()
    palette[Role.SHADOW] = Color.light(BaseColor.RED)
    palette.set_color('title_primary', Color.dark(BaseColor.GREEN))  # built-in
    palette.set_color('accent', Color.rgb(255, 136, 0))  # custom
    dark = palette.merge('dark')  # overlay the 'dark' namespace on a copy
"""

from __future__ import annotations

import copy
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field

from tui_palette.core.color import BaseColor, Color
from tui_palette.core.errors import NoSuchRoleError
from tui_palette.core.types import ColorValue, Namespace, PaletteNode, Role

DEFAULT_BASIC: dict[Role, Color] = {
    Role.BACKGROUND: Color.dark(BaseColor.BLUE),
    Role.SHADOW: Color.dark(BaseColor.BLACK),
    Role.VIEW: Color.dark(BaseColor.WHITE),
    Role.PRIMARY: Color.dark(BaseColor.BLACK),
    Role.SECONDARY: Color.dark(BaseColor.BLUE),
    Role.TERTIARY: Color.light(BaseColor.WHITE),
    Role.TITLE_PRIMARY: Color.dark(BaseColor.RED),
    Role.TITLE_SECONDARY: Color.light(BaseColor.BLUE),
    Role.HIGHLIGHT: Color.dark(BaseColor.RED),
    Role.HIGHLIGHT_INACTIVE: Color.dark(BaseColor.BLUE),
    Role.HIGHLIGHT_TEXT: Color.dark(BaseColor.WHITE),
}


def default_basic() -> dict[Role, Color]:
    return dict(DEFAULT_BASIC)


@dataclass
class Palette:
    """Colour configuration for an application.

    `basic` maps every Role to a Color; `custom` maps names to PaletteNodes.
    """

    basic: dict[Role, Color] = field(default_factory=default_basic)
    custom: dict[str, PaletteNode] = field(default_factory=dict)

    def __post_init__(self) -> None:
        unknown = [key for key in self.basic if not isinstance(key, Role)]
        if unknown:
            raise ValueError(f'Palette basic keys must be roles, got: {unknown!r}')
        missing = [role.value for role in Role if role not in self.basic]
        if missing:
            raise ValueError(f'Palette is missing roles: {", ".join(missing)}')
        self.basic = dict(self.basic)
        self.custom = dict(self.custom)

    def __getitem__(self, role: Role) -> Color:
        return self.basic[role]

    def __setitem__(self, role: Role, color: Color) -> None:
        self.basic[role] = color

    def lookup_role(self, role: Role) -> Color:
        return self.basic[role]

    def set_role(self, role: Role, color: Color) -> None:
        self.basic[role] = color

    def roles(self) -> Iterator[tuple[Role, Color]]:
        """Yield (role, colour) in role declaration order."""
        for role in Role:
            yield role, self.basic[role]

    def custom_color(self, name: str) -> Color | None:
        """Return the custom colour under name, or None if absent or a namespace."""
        node = self.custom.get(name)
        if isinstance(node, ColorValue):
            return node.color
        return None

    def custom_node(self, name: str) -> PaletteNode | None:
        return self.custom.get(name)

    def namespace(self, name: str) -> Namespace | None:
        node = self.custom.get(name)
        return node if isinstance(node, Namespace) else None

    def set_color(self, name: str, color: Color) -> None:
        """Set a colour by name: a role name or alias updates `basic`, anything else `custom`."""
        role = Role.classify(name)
        if role is not None:
            self.basic[role] = color
        else:
            self.custom[name] = ColorValue(color)

    def set_basic_color(self, name: str, color: Color) -> None:
        """Set a built-in role from its name. Raises NoSuchRoleError for unknown names."""
        role = Role.classify(name)
        if role is None:
            raise NoSuchRoleError(name)
        self.basic[role] = color

    def add_namespace(self, name: str, namespace: Mapping[str, PaletteNode] | Namespace) -> None:
        """Install a namespace under name, replacing whatever was there."""
        entries = namespace.entries if isinstance(namespace, Namespace) else dict(namespace)
        self.custom[name] = Namespace(copy.deepcopy(entries))

    def merge(self, namespace: str) -> Palette:
        """Return a copy of this palette with the given namespace overlaid.

        Colours in the namespace go through set_color, so role names override
        built-in roles. Nested namespaces replace any existing entry of the
        same name as a whole; their contents are not combined.
        """
        result = self.copy()
        selected = self.namespace(namespace)
        if selected is None:
            return result
        for key, value in selected.items():
            if isinstance(value, ColorValue):
                result.set_color(key, value.color)
            else:
                result.add_namespace(key, value)
        return result

    def extend(self, pairs: Iterable[tuple[Role, Color]]) -> None:
        for role, color in pairs:
            self.basic[role] = color

    def copy(self) -> Palette:
        return copy.deepcopy(self)
