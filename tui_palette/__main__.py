"""tui-palette — inspect terminal UI colour palettes defined in TOML themes.

Usage: uv run tui-palette [--theme PATH] <command> [options]

Theme resolution:
  --theme PATH wins. Otherwise $TUI_PALETTE_THEME, otherwise palette.toml
  found walking up from the current directory, stopping at the nearest .git
  boundary. With no theme at all, the default palette is shown.
"""

import argparse
import logging
import os
import sys
import tomllib

from tui_palette.core.config import THEME_ENV_VAR, resolve_theme_path
from tui_palette.core.palette import DEFAULT_BASIC, Palette
from tui_palette.core.report import format_json, format_text
from tui_palette.core.swatch import save_swatch
from tui_palette.core.theme_loader import load_theme_file
from tui_palette.core.types import Role

logger = logging.getLogger('tui_palette')


def _build_parser() -> argparse.ArgumentParser:
    epilog = (
        'Examples:\n'
        '  tui-palette show --theme theme.toml\n'
        '  tui-palette show --theme theme.toml --merge dark --json\n'
        '  tui-palette get title_primary --theme theme.toml\n'
        '  tui-palette get syntax --merge dark\n'
        '  tui-palette swatch ./palette.png --merge dark\n'
        '  tui-palette roles\n'
        '\n'
        f'Env vars:\n  {THEME_ENV_VAR}  theme file used when --theme is not given\n'
    )
    parser = argparse.ArgumentParser(
        prog='tui-palette',
        description='Inspect terminal UI colour palettes defined in TOML themes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument('-t', '--theme', metavar='PATH', default=None, help='Theme TOML file')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging on stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    show = sub.add_parser('show', help='Print the resolved palette')
    show.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')

    get = sub.add_parser('get', help='Print one colour by role or custom name')
    get.add_argument('name', help='Role name/alias or custom colour name')

    swatch = sub.add_parser('swatch', help='Write a PNG swatch of the palette')
    swatch.add_argument('output', help='Output PNG path')

    for p in (show, get, swatch):
        p.add_argument(
            '-m',
            '--merge',
            action='append',
            default=[],
            metavar='NS',
            help='Merge a custom namespace before output (repeatable, applied in order)',
        )

    sub.add_parser('roles', help='List built-in roles, aliases and default colours')
    return parser


def _load_palette(args: argparse.Namespace) -> tuple[Palette, str | None]:
    """Load the theme palette and apply --merge namespaces."""
    path = resolve_theme_path(args.theme)
    if args.theme and path is None:
        print(f'Error: theme not found: {args.theme}', file=sys.stderr)
        sys.exit(1)
    from_env = os.environ.get(THEME_ENV_VAR)
    if not args.theme and from_env and path is None:
        logger.warning('%s=%s is not a file; using the default palette', THEME_ENV_VAR, from_env)

    if path is None:
        palette = Palette()
    else:
        try:
            palette = load_theme_file(path)
        except tomllib.TOMLDecodeError as e:
            print(f'Error: invalid TOML in {path}: {e}', file=sys.stderr)
            sys.exit(1)
        except UnicodeDecodeError as e:
            print(f'Error: theme {path} is not UTF-8 text: {e}', file=sys.stderr)
            sys.exit(1)

    for ns in args.merge:
        if palette.namespace(ns) is None:
            logger.warning('No namespace %r in theme; merge skipped', ns)
        palette = palette.merge(ns)
    return palette, str(path) if path else None


def _print_roles() -> None:
    for role in Role:
        print(f'  {role.value:<18} {role.alias:<20} {DEFAULT_BASIC[role]}')


def main(argv: list[str] | None = None) -> None:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
        stream=sys.stderr,
    )

    if not args.command:
        parser.print_help()
        sys.exit(1)

    if args.command == 'roles':
        _print_roles()
        return

    palette, theme_path = _load_palette(args)

    if args.command == 'show':
        print(format_json(palette) if args.json else format_text(palette, theme_path=theme_path))
    elif args.command == 'get':
        role = Role.classify(args.name)
        color = palette[role] if role is not None else palette.custom_color(args.name)
        if color is None:
            print(f'Error: no colour named {args.name!r}', file=sys.stderr)
            sys.exit(1)
        print(color)
    elif args.command == 'swatch':
        out = save_swatch(palette, args.output)
        print(f'tui-palette: wrote {out}', file=sys.stderr)


if __name__ == '__main__':
    main()
