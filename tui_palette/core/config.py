"""Theme file discovery for tui-palette.

Resolution order (first wins):
  1. Explicit path (--theme).
  2. $TUI_PALETTE_THEME.
  3. palette.toml walking up from cwd, stopping at .git (file or dir).

A theme sitting above the repository root is never picked up.
"""

import os
from pathlib import Path

THEME_ENV_VAR = 'TUI_PALETTE_THEME'
THEME_FILENAME = 'palette.toml'


def find_theme_file(start: Path) -> Path | None:
    """Return the nearest palette.toml at or above start, searching no higher than the repo root."""
    start = start.resolve()
    for directory in (start, *start.parents):
        theme = directory / THEME_FILENAME
        if theme.is_file():
            return theme
        # a worktree checkout has a .git file instead of a directory
        if (directory / '.git').exists():
            break
    return None


def resolve_theme_path(explicit: str | None = None) -> Path | None:
    """Return the theme file to load, or None to use the default palette."""
    if explicit:
        path = Path(explicit)
        return path if path.is_file() else None

    from_env = os.environ.get(THEME_ENV_VAR)
    if from_env:
        path = Path(from_env)
        return path if path.is_file() else None

    return find_theme_file(Path.cwd())
