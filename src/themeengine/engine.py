"""
Theme engine: resolves templates in the active theme and renders them with
single-level layout inheritance, accumulative blocks and partials.

Templates are plain Python files. A page template might read::

    extend('layouts.main')
    start('title')
    echo(e(title))
    end()
    echo('<p>', e(params.get('intro', '')), '</p>')

and ``layouts/main.py``::

    echo('<title>', yield_('title', 'Untitled'), '</title>')
    echo(content)

Render state lives in a ``RenderContext`` created per ``render`` call and held
in a context variable, so one engine can serve concurrent requests.
"""

import logging
from contextvars import ContextVar
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

from themeengine.assets import asset_url
from themeengine.blocks import BlockStack
from themeengine.cache import TemplateCache
from themeengine.config import ThemeConfig
from themeengine.exceptions import EmptyBlockStack, ThemeEngineError
from themeengine.resolver import TemplateResolver
from themeengine.scope import TemplateScope

logger = logging.getLogger(__name__)


class RenderContext:
    """State of one top-level render call"""

    def __init__(self, params: Optional[Dict[str, Any]] = None,
                 request: Optional[Mapping[str, Any]] = None):
        self.params: Dict[str, Any] = dict(params or {})
        self.request = request
        self.blocks = BlockStack()
        self.layout: Optional[str] = None
        self.in_layout = False


class ThemeEngine:
    """Template renderer bound to a themes directory and an active theme"""

    def __init__(self, themes_root: Optional[Union[str, Path]] = None,
                 active_theme: Optional[str] = None, cache: Optional[bool] = None,
                 cache_path: Optional[Union[str, Path]] = None,
                 extension: Optional[str] = None,
                 config: Optional[ThemeConfig] = None):
        if config is None:
            overrides: Dict[str, Any] = {}
            if themes_root is not None:
                overrides['themes_root'] = themes_root
            if active_theme is not None:
                overrides['active_theme'] = active_theme
            if cache_path is not None:
                overrides['cache_path'] = cache_path
            if cache is not None:
                overrides['cache_enabled'] = cache
            if extension is not None:
                overrides['extension'] = extension
            config = ThemeConfig(**overrides)

        self._context: ContextVar[Optional[RenderContext]] = ContextVar(
            f"themeengine_render_{id(self)}", default=None)
        self.resolver = TemplateResolver(lambda: self.config)
        self.configure(config)

    @classmethod
    def from_config(cls, config: ThemeConfig) -> 'ThemeEngine':
        return cls(config=config)

    def configure(self, config: ThemeConfig) -> bool:
        """Apply a (new) configuration, returning whether the cache is usable"""
        self.config = config
        self.cache = TemplateCache(config.cache_path, config.extension)
        self.cache_available = self.cache.setup() if config.cache_enabled else False
        logger.debug("Theme engine configured: %s", config.to_dict())
        return self.cache_available

    @property
    def active_theme(self) -> str:
        return self.config.active_theme

    @property
    def context(self) -> Optional[RenderContext]:
        """Context of the render in progress, if any"""
        return self._context.get()

    def _require_context(self, operation: str) -> RenderContext:
        context = self._context.get()
        if context is None:
            raise ThemeEngineError(f"{operation}() can only be used while a template is rendering")
        return context

    def render(self, template: str, params: Optional[Dict[str, Any]] = None,
               request: Optional[Mapping[str, Any]] = None) -> str:
        """Render ``template`` and, if it called ``extend``, its layout.

        The layout receives the same params plus ``content``, the output of
        ``template``. Only one level of layout is applied.
        """
        context = RenderContext(params, request)
        token = self._context.set(context)
        try:
            content = self._render_file(context, template, context.params)

            if context.layout is not None:
                logger.debug("Wrapping %r in layout %r", template, context.layout)
                context.in_layout = True
                content = self._render_file(
                    context, context.layout, {**context.params, 'content': content})

            return content
        finally:
            self._context.reset(token)

    def partial(self, name: str, params: Optional[Dict[str, Any]] = None) -> str:
        """Render ``name`` inline with the current params plus ``params``.

        Blocks written by the partial land in the enclosing render; its layout
        and block stack are left alone.
        """
        context = self._context.get()
        if context is None:
            return self.render(name, params)
        return self._render_file(context, name, {**context.params, **(params or {})})

    def extend(self, layout: str):
        """Ask for the current template to be wrapped in ``layout``"""
        context = self._require_context('extend')
        if context.in_layout:
            logger.warning("Ignoring extend(%r) from a layout; layouts cannot be nested", layout)
            return
        context.layout = layout

    def start(self, name: str):
        self._require_context('start').blocks.start(name)

    def end(self) -> str:
        context = self._context.get()
        if context is None:
            raise EmptyBlockStack("end() called outside of a render")
        return context.blocks.end()

    def yield_(self, name: str, default: str = '') -> str:
        context = self._context.get()
        if context is None:
            return default
        return context.blocks.yield_(name, default)

    def asset(self, path: str, base_url: Optional[str] = None,
              request: Optional[Mapping[str, Any]] = None) -> str:
        """URL of ``path`` inside the active theme"""
        if request is None and self.context is not None:
            request = self.context.request
        if base_url is None:
            base_url = self.config.base_url
        return asset_url(path, self.config.active_theme, base_url, request)

    def _source_for(self, path: Path) -> Path:
        if not self.config.cache_enabled:
            return path
        if not self.cache_available:
            logger.debug("Template cache unavailable, reading %s directly", path)
            return path
        return self.cache.materialize(path)

    def _render_file(self, context: RenderContext, name: str, params: Dict[str, Any]) -> str:
        path = self.resolver.resolve(name)
        source = self._source_for(path).read_text(encoding='utf-8')
        code = compile(source, str(path), 'exec')

        namespace = TemplateScope(self, context, params, str(path)).namespace()
        buffer = context.blocks.push_writer()
        try:
            exec(code, namespace)
        except BaseException:
            context.blocks.pop_writer(buffer)
            raise

        dropped = context.blocks.pop_writer(buffer)
        if dropped:
            logger.warning("Template %r left blocks open, discarded: %s", name, ', '.join(dropped))
        return buffer.getvalue()
