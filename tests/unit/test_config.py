"""
Unit tests for ThemeConfig
"""
from pathlib import Path

import pytest

from themeengine import ThemeConfig, ThemeEngineError
from themeengine.config import CACHE_DIR_NAME


class TestThemeConfig:
    """Test ThemeConfig"""

    def test_trailing_separators_stripped(self, tmp_path):
        config = ThemeConfig(themes_root=f"{tmp_path}/themes//", active_theme="t")
        assert config.themes_root == tmp_path / "themes"
        assert config.theme_dir == tmp_path / "themes" / "t"

    def test_default_cache_path(self):
        config = ThemeConfig(themes_root="themes", active_theme="t")
        assert config.cache_path.name == CACHE_DIR_NAME

    def test_extension_gets_dot(self):
        assert ThemeConfig(active_theme="t", extension="tpl").extension == ".tpl"

    def test_empty_theme_rejected(self):
        with pytest.raises(ThemeEngineError):
            ThemeConfig(active_theme="")

    def test_environment_defaults(self, monkeypatch, tmp_path):
        monkeypatch.setenv("THEMEENGINE_THEMES_ROOT", str(tmp_path))
        monkeypatch.setenv("THEMEENGINE_THEME", "dark")
        monkeypatch.setenv("THEMEENGINE_CACHE", "true")
        monkeypatch.setenv("THEMEENGINE_CACHE_PATH", str(tmp_path / "c"))
        monkeypatch.setenv("THEMEENGINE_BASE_URL", "https://cdn.example")

        config = ThemeConfig()
        assert config.themes_root == tmp_path
        assert config.active_theme == "dark"
        assert config.cache_enabled is True
        assert config.cache_path == tmp_path / "c"
        assert config.base_url == "https://cdn.example"

    def test_from_options(self, tmp_path):
        config = ThemeConfig.from_options(tmp_path, "t", {"cache": True, "cache_path": tmp_path / "c"})
        assert config.cache_enabled is True
        assert config.cache_path == tmp_path / "c"
        assert config.extension == ".py"

    def test_with_options_copies(self):
        config = ThemeConfig(themes_root="themes", active_theme="a")
        other = config.with_options(active_theme="b")
        assert config.active_theme == "a"
        assert other.active_theme == "b"
        assert other.themes_root == Path("themes")

    def test_to_dict(self):
        data = ThemeConfig(themes_root="themes", active_theme="a").to_dict()
        assert data["active_theme"] == "a"
        assert data["themes_root"] == "themes"
