"""Error types raised or reported by the palette core."""

from typing import Any


class PaletteError(Exception):
    """Base class for palette errors."""


class NoSuchRoleError(PaletteError):
    """A name did not resolve to a built-in role."""

    def __init__(self, name: str):
        super().__init__(f'No such palette role: {name!r}')
        self.name = name


class UnrecognizedConfigNodeError(PaletteError):
    """A theme value was neither a string, a list nor a table.

    Reported (logged, optionally collected) by the theme loader, never raised out of it.
    """

    def __init__(self, key: str, value: Any):
        super().__init__(f'Found unexpected value in theme: {key} = {value!r}')
        self.key = key
        self.value = value
