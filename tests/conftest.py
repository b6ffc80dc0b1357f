"""
themeengine test configuration and fixtures
"""
import textwrap
from pathlib import Path

import pytest
from faker import Faker

from themeengine import ThemeEngine


@pytest.fixture
def faker():
    """Faker instance for generating test data."""
    return Faker()


@pytest.fixture
def themes_root(tmp_path) -> Path:
    """Empty themes directory."""
    root = tmp_path / "themes"
    (root / "default").mkdir(parents=True)
    return root


@pytest.fixture
def write_template(themes_root):
    """Write a template body into a theme, returning its path.

    ``write_template("pages.home", "echo('hi')")`` creates
    ``themes/default/pages/home.py``.
    """
    def _write(name: str, body: str, theme: str = "default") -> Path:
        path = themes_root / theme / (name.replace(".", "/") + ".py")
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(body).lstrip("\n"), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def engine(themes_root) -> ThemeEngine:
    """Engine on the default theme without caching."""
    return ThemeEngine(themes_root, "default")


@pytest.fixture
def cache_dir(tmp_path) -> Path:
    return tmp_path / "cache"


@pytest.fixture
def cached_engine(themes_root, cache_dir) -> ThemeEngine:
    """Engine on the default theme with the file cache enabled."""
    return ThemeEngine(themes_root, "default", cache=True, cache_path=cache_dir)


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests")
    config.addinivalue_line("markers", "integration: Integration tests")
    config.addinivalue_line("markers", "slow: Slow running tests")
