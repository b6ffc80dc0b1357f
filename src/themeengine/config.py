"""
Theme engine configuration.

Defaults come from environment variables so an application can configure the
engine without code changes:

    THEMEENGINE_THEMES_ROOT   directory holding one sub-directory per theme
    THEMEENGINE_THEME         active theme name
    THEMEENGINE_CACHE         "true" to mirror templates into the cache dir
    THEMEENGINE_CACHE_PATH    cache directory
    THEMEENGINE_EXTENSION     template file extension
    THEMEENGINE_BASE_URL      base URL for asset links (guessed per request if unset)
"""

import os
import tempfile
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Union

from themeengine.exceptions import ThemeEngineError


DEFAULT_EXTENSION = '.py'
CACHE_DIR_NAME = 'themeengine_cache'


def default_cache_path() -> Path:
    """Default cache directory under the platform temp dir"""
    return Path(tempfile.gettempdir()) / CACHE_DIR_NAME


def _env_bool(name: str, default: str = 'False') -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes', 'on')


@dataclass
class ThemeConfig:
    """Theme engine configuration"""
    themes_root: Union[str, Path] = field(default_factory=lambda: os.getenv('THEMEENGINE_THEMES_ROOT', 'themes'))
    active_theme: str = field(default_factory=lambda: os.getenv('THEMEENGINE_THEME', 'default'))
    cache_enabled: bool = field(default_factory=lambda: _env_bool('THEMEENGINE_CACHE'))
    cache_path: Optional[Union[str, Path]] = field(default_factory=lambda: os.getenv('THEMEENGINE_CACHE_PATH') or None)
    extension: str = field(default_factory=lambda: os.getenv('THEMEENGINE_EXTENSION', DEFAULT_EXTENSION))
    base_url: Optional[str] = field(default_factory=lambda: os.getenv('THEMEENGINE_BASE_URL') or None)

    def __post_init__(self):
        """Normalise paths and validate settings"""
        if not self.active_theme:
            raise ThemeEngineError("active_theme must be a non-empty theme name")

        root = str(self.themes_root)
        stripped = root.rstrip('/\\')
        # keep filesystem root intact ("/" would otherwise become "")
        self.themes_root = Path(stripped or root)

        self.cache_path = Path(self.cache_path) if self.cache_path else default_cache_path()

        if self.extension and not self.extension.startswith('.'):
            self.extension = f'.{self.extension}'

    @property
    def theme_dir(self) -> Path:
        """Directory of the active theme"""
        return self.themes_root / self.active_theme

    def with_options(self, **changes: Any) -> 'ThemeConfig':
        """Return a copy with the given fields replaced"""
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'themes_root': str(self.themes_root),
            'active_theme': self.active_theme,
            'cache_enabled': self.cache_enabled,
            'cache_path': str(self.cache_path),
            'extension': self.extension,
            'base_url': self.base_url,
        }

    @classmethod
    def from_options(cls, themes_root: Union[str, Path], active_theme: str,
                     options: Optional[Dict[str, Any]] = None) -> 'ThemeConfig':
        """Build a config from init()-style arguments.

        ``options`` accepts ``cache``, ``cache_path``, ``extension`` and
        ``base_url``.
        """
        options = options or {}
        return cls(
            themes_root=themes_root,
            active_theme=active_theme,
            cache_enabled=bool(options.get('cache', False)),
            cache_path=options.get('cache_path'),
            extension=options.get('extension', DEFAULT_EXTENSION),
            base_url=options.get('base_url'),
        )
