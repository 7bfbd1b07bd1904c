"""Tests for tui_palette.core.types — Role names, aliases and nodes."""

import pytest
from tui_palette.core.color import BaseColor, Color
from tui_palette.core.errors import NoSuchRoleError
from tui_palette.core.palette import Palette
from tui_palette.core.types import ColorValue, Namespace, Role

ALIASES = {
    'Background': 'background',
    'Shadow': 'shadow',
    'View': 'view',
    'Primary': 'primary',
    'Secondary': 'secondary',
    'Tertiary': 'tertiary',
    'TitlePrimary': 'title_primary',
    'TitleSecondary': 'title_secondary',
    'Highlight': 'highlight',
    'HighlightInactive': 'highlight_inactive',
    'HighlightText': 'highlight_text',
}


class TestRole:
    def test_exactly_eleven_roles_in_order(self):
        assert [r.value for r in Role] == list(ALIASES)

    def test_alias_table(self):
        assert {r.value: r.alias for r in Role} == ALIASES

    @pytest.mark.parametrize('pascal,snake', list(ALIASES.items()))
    def test_both_spellings_classify_identically(self, pascal, snake):
        assert Role.classify(pascal) is Role.classify(snake)
        assert Role.classify(pascal) is not None

    def test_case_insensitive(self):
        assert Role.classify('HIGHLIGHT_TEXT') is Role.HIGHLIGHT_TEXT
        assert Role.classify('titleprimary') is Role.TITLE_PRIMARY

    def test_unknown_name(self):
        assert Role.classify('accent') is None
        assert Role.classify('title-primary') is None

    def test_from_name_raises(self):
        with pytest.raises(NoSuchRoleError) as exc:
            Role.from_name('accent')
        assert exc.value.name == 'accent'

    def test_resolve(self):
        palette = Palette()
        palette[Role.VIEW] = Color.light(BaseColor.GREEN)
        assert Role.VIEW.resolve(palette) == Color.light(BaseColor.GREEN)


class TestNodes:
    def test_color_value_equality(self):
        assert ColorValue(Color.dark(BaseColor.RED)) == ColorValue(Color.parse('red'))

    def test_namespace_mapping_access(self):
        ns = Namespace({'a': ColorValue(Color.dark(BaseColor.RED)), 'b': Namespace()})
        assert 'a' in ns
        assert len(ns) == 2
        assert list(ns) == ['a', 'b']
        assert ns['b'] == Namespace()
        assert ns.get('missing') is None
