"""
themeengine - theme-aware template rendering helper

Resolves templates inside an active theme directory and renders them with
single-level layouts, accumulative named blocks, partials, themed asset URLs
and HTML escaping. Rendered files can optionally be mirrored into a
file-based cache.

Example:
    >>> import themeengine
    >>>
    >>> themeengine.init('themes', 'my-theme', {'cache': False})
    >>> html = themeengine.render('pages.home', {'title': 'Home'})

The functions in this module drive a process-wide default engine. Create
``ThemeEngine`` instances directly to render with several configurations.
"""

from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

__version__ = "0.1.0"

from themeengine.assets import asset_url, detect_base_url
from themeengine.blocks import BlockStack, OutputBuffer
from themeengine.cache import TemplateCache
from themeengine.config import ThemeConfig
from themeengine.engine import RenderContext, ThemeEngine
from themeengine.escaping import escape
from themeengine.exceptions import EmptyBlockStack, TemplateNotFound, ThemeEngineError
from themeengine.resolver import TemplateResolver

__all__ = [
    # Engine
    "ThemeEngine", "RenderContext", "ThemeConfig",
    "TemplateResolver", "TemplateCache", "BlockStack", "OutputBuffer",

    # Errors
    "ThemeEngineError", "TemplateNotFound", "EmptyBlockStack",

    # Helpers
    "escape", "asset_url", "detect_base_url",

    # Default engine
    "init", "get_engine", "render", "partial", "extend",
    "start", "end", "yield_", "asset",
]

_engine: Optional[ThemeEngine] = None


def init(themes_root: Union[str, Path], active_theme: str,
         options: Optional[Dict[str, Any]] = None) -> bool:
    """(Re)initialise the default engine.

    ``options`` accepts ``cache``, ``cache_path`` and ``extension``. Returns
    whether the template cache is available.
    """
    global _engine
    config = ThemeConfig.from_options(themes_root, active_theme, options)
    if _engine is None:
        _engine = ThemeEngine.from_config(config)
        return _engine.cache_available
    return _engine.configure(config)


def get_engine() -> ThemeEngine:
    if _engine is None:
        raise ThemeEngineError("themeengine.init() has not been called")
    return _engine


def render(template: str, params: Optional[Dict[str, Any]] = None,
           request: Optional[Mapping[str, Any]] = None) -> str:
    return get_engine().render(template, params, request)


def partial(name: str, params: Optional[Dict[str, Any]] = None) -> str:
    return get_engine().partial(name, params)


def extend(layout: str):
    get_engine().extend(layout)


def start(name: str):
    get_engine().start(name)


def end() -> str:
    return get_engine().end()


def yield_(name: str, default: str = '') -> str:
    return get_engine().yield_(name, default)


def asset(path: str, base_url: Optional[str] = None,
          request: Optional[Mapping[str, Any]] = None) -> str:
    return get_engine().asset(path, base_url, request)
