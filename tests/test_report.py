"""Tests for tui_palette.core.report — text and JSON output."""

import json

from tui_palette.core.color import BaseColor, Color
from tui_palette.core.palette import Palette
from tui_palette.core.report import flatten_custom, format_json, format_text, palette_to_dict
from tui_palette.core.types import ColorValue, Namespace, Role


def _sample() -> Palette:
    p = Palette()
    p[Role.VIEW] = Color.terminal_default()
    p.set_color('accent', Color.rgb(255, 136, 0))
    p.add_namespace(
        'syntax',
        {
            'keyword': ColorValue(Color.dark(BaseColor.BLUE)),
            'nested': Namespace({'x': ColorValue(Color.low_res(0, 1, 2))}),
        },
    )
    return p


class TestFlattenCustom:
    def test_dotted_paths_in_order(self):
        assert flatten_custom(_sample()) == [
            ('accent', Color.rgb(255, 136, 0)),
            ('syntax.keyword', Color.dark(BaseColor.BLUE)),
            ('syntax.nested.x', Color.low_res(0, 1, 2)),
        ]

    def test_empty(self):
        assert flatten_custom(Palette()) == []


class TestFormatJson:
    def test_structure(self):
        obj = json.loads(format_json(_sample()))
        assert obj['basic']['background'] == 'blue'
        assert obj['basic']['tertiary'] == 'light white'
        assert obj['basic']['view'] == 'default'
        assert obj['custom'] == {'accent': '#ff8800', 'syntax': {'keyword': 'blue', 'nested': {'x': '012'}}}

    def test_all_role_aliases_present(self):
        assert list(palette_to_dict(Palette())['basic']) == [r.alias for r in Role]


class TestFormatText:
    def test_default_header(self):
        text = format_text(Palette())
        assert text.splitlines()[0] == 'tui-palette: default palette'
        assert '(none)' in text

    def test_theme_header(self):
        assert format_text(Palette(), theme_path='theme.toml').startswith('tui-palette: theme.toml')

    def test_rows(self):
        text = format_text(_sample())
        assert 'title_secondary' in text
        assert '#0000ff' in text  # light blue
        assert '[syntax]' in text
        assert '[nested]' in text
        assert '#ff8800' in text

    def test_default_colour_has_no_hex(self):
        line = next(ln for ln in format_text(_sample()).splitlines() if ln.strip().startswith('view '))
        assert line.rstrip().endswith('-')

    def test_rgb_entries_show_nearest_base(self):
        lines = format_text(_sample()).splitlines()
        accent = next(ln for ln in lines if ln.strip().startswith('accent '))
        assert accent.rstrip().endswith('#ff8800  ~light yellow')
        low_res = next(ln for ln in lines if ln.strip().startswith('x '))
        assert low_res.rstrip().endswith('#003366  ~blue')

    def test_named_colours_have_no_nearest_hint(self):
        line = next(ln for ln in format_text(Palette()).splitlines() if ln.strip().startswith('tertiary '))
        assert line.rstrip().endswith('#ffffff')
