"""
File-based template cache.

Resolved template files are mirrored into a cache directory under a name
derived from the md5 of the source *path*. A mirror is refreshed when it is
missing or its modification time is older than the source's. Nothing is ever
evicted.
"""

import hashlib
import logging
import os
import shutil
import tempfile
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)


class TemplateCache:
    """Mirror of template sources keyed by source path"""

    def __init__(self, cache_dir: Union[str, Path], extension: str = '.py'):
        self.cache_dir = Path(cache_dir)
        self.extension = extension

    def setup(self) -> bool:
        """Create the cache directory, returning whether it is usable"""
        try:
            self.cache_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Template cache disabled, cannot create %s: %s", self.cache_dir, exc)
            return False
        return self.available

    @property
    def available(self) -> bool:
        return self.cache_dir.is_dir()

    def cache_file(self, source: Union[str, Path]) -> Path:
        """Cache path for a source file"""
        key = hashlib.md5(str(source).encode('utf-8')).hexdigest()
        return self.cache_dir / f"{key}{self.extension}"

    def is_stale(self, source: Union[str, Path]) -> bool:
        cache_file = self.cache_file(source)
        if not cache_file.exists():
            return True
        return cache_file.stat().st_mtime < Path(source).stat().st_mtime

    def materialize(self, source: Union[str, Path]) -> Path:
        """Return the cached copy of ``source``, refreshing it if stale.

        The copy is written to a temporary file and renamed into place so a
        concurrent reader never sees a partially written mirror.
        """
        cache_file = self.cache_file(source)
        if not self.is_stale(source):
            logger.debug("Template cache hit for %s", source)
            return cache_file

        fd, tmp_name = tempfile.mkstemp(prefix='.tmp-', suffix=self.extension, dir=str(self.cache_dir))
        try:
            with os.fdopen(fd, 'wb') as dst, open(source, 'rb') as src:
                shutil.copyfileobj(src, dst)
            os.replace(tmp_name, cache_file)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise

        logger.debug("Refreshed template cache %s from %s", cache_file, source)
        return cache_file

    def clear(self) -> int:
        """Remove every cached file and return how many were removed"""
        if not self.cache_dir.is_dir():
            return 0

        removed = 0
        for path in self.cache_dir.glob(f"*{self.extension}"):
            if path.is_file():
                path.unlink()
                removed += 1
        logger.debug("Cleared %d cached templates from %s", removed, self.cache_dir)
        return removed
