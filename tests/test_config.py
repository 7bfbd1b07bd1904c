"""Tests for tui_palette.core.config — theme file discovery and walk-up logic."""

from pathlib import Path

import pytest
from tui_palette.core.config import THEME_ENV_VAR, THEME_FILENAME, find_theme_file, resolve_theme_path


class TestFindThemeFile:
    def test_finds_in_start_dir(self, tmp_path: Path) -> None:
        theme = tmp_path / THEME_FILENAME
        theme.write_text('[colors]\n')
        assert find_theme_file(tmp_path) == theme

    def test_finds_in_parent(self, tmp_path: Path) -> None:
        subdir = tmp_path / 'sub'
        subdir.mkdir()
        theme = tmp_path / THEME_FILENAME
        theme.write_text('[colors]\n')
        assert find_theme_file(subdir) == theme

    def test_stops_at_git_dir(self, tmp_path: Path) -> None:
        # theme is above .git — should not be found
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / THEME_FILENAME).write_text('[colors]\n')
        (repo / '.git').mkdir()
        subdir = repo / 'src'
        subdir.mkdir()
        assert find_theme_file(subdir) is None

    def test_stops_at_git_file(self, tmp_path: Path) -> None:
        repo = tmp_path / 'repo'
        repo.mkdir()
        (tmp_path / THEME_FILENAME).write_text('[colors]\n')
        (repo / '.git').write_text('gitdir: ../somewhere\n')
        assert find_theme_file(repo) is None

    def test_theme_at_git_root_found(self, tmp_path: Path) -> None:
        (tmp_path / '.git').mkdir()
        theme = tmp_path / THEME_FILENAME
        theme.write_text('[colors]\n')
        assert find_theme_file(tmp_path) == theme


class TestResolveThemePath:
    def test_explicit_wins(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        explicit = tmp_path / 'mine.toml'
        explicit.write_text('')
        other = tmp_path / 'env.toml'
        other.write_text('')
        monkeypatch.setenv(THEME_ENV_VAR, str(other))
        assert resolve_theme_path(str(explicit)) == explicit

    def test_explicit_missing(self, tmp_path: Path) -> None:
        assert resolve_theme_path(str(tmp_path / 'nope.toml')) is None

    def test_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        theme = tmp_path / 'env.toml'
        theme.write_text('')
        monkeypatch.setenv(THEME_ENV_VAR, str(theme))
        assert resolve_theme_path() == theme

    def test_env_var_missing_file(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(THEME_ENV_VAR, str(tmp_path / 'nope.toml'))
        assert resolve_theme_path() is None

    def test_walk_up_from_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(THEME_ENV_VAR, raising=False)
        (tmp_path / '.git').mkdir()
        theme = tmp_path / THEME_FILENAME
        theme.write_text('')
        monkeypatch.chdir(tmp_path)
        assert resolve_theme_path() == theme

    def test_nothing_found(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv(THEME_ENV_VAR, raising=False)
        (tmp_path / '.git').mkdir()
        monkeypatch.chdir(tmp_path)
        assert resolve_theme_path() is None
