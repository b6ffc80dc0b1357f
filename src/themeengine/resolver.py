"""
Template name resolution.
"""

import logging
import os
from pathlib import Path
from typing import Callable, List

from themeengine.config import ThemeConfig
from themeengine.exceptions import TemplateNotFound

logger = logging.getLogger(__name__)


class TemplateResolver:
    """Maps dotted or slashed template names to files in the active theme.

    ``pages.home`` and ``pages/home`` both resolve to
    ``<themes_root>/<active_theme>/pages/home<extension>``. When that file is
    missing, the name is tried verbatim as a path so callers can include a
    one-off file explicitly.

    The config is read through a callable on every lookup, so switching the
    active theme affects all later resolutions.
    """

    def __init__(self, config_getter: Callable[[], ThemeConfig]):
        self._config = config_getter

    def theme_path(self, name: str) -> Path:
        """Candidate path inside the active theme"""
        config = self._config()
        # leading separators would make pathlib drop the theme directory
        relative = name.replace('.', '/').lstrip('/\\')
        return config.theme_dir / f"{relative}{config.extension}"

    def candidates(self, name: str) -> List[Path]:
        return [self.theme_path(name), Path(name)]

    def resolve(self, name: str) -> Path:
        """Resolve a template name to an existing file"""
        themed = self.theme_path(name)
        if themed.is_file():
            logger.debug("Resolved template %r to %s", name, themed)
            return themed

        if os.path.isfile(name):
            logger.debug("Resolved template %r as literal path", name)
            return Path(name)

        raise TemplateNotFound(name, self.candidates(name))

    def exists(self, name: str) -> bool:
        try:
            self.resolve(name)
        except TemplateNotFound:
            return False
        return True
