"""
Unit tests for the file-based template cache
"""
import hashlib
import os

import pytest

from themeengine import TemplateCache


@pytest.fixture
def cache(cache_dir):
    cache = TemplateCache(cache_dir)
    assert cache.setup()
    return cache


@pytest.fixture
def source(tmp_path):
    path = tmp_path / "page.py"
    path.write_text("echo('v1')")
    old = path.stat().st_mtime - 100
    os.utime(path, (old, old))
    return path


class TestTemplateCache:
    """Test TemplateCache"""

    def test_cache_file_named_by_path_hash(self, cache, source):
        expected = hashlib.md5(str(source).encode("utf-8")).hexdigest() + ".py"
        assert cache.cache_file(source).name == expected

    def test_name_ignores_content(self, cache, source):
        before = cache.cache_file(source)
        source.write_text("echo('something else')")
        assert cache.cache_file(source) == before

    def test_first_materialize_copies(self, cache, source):
        cached = cache.materialize(source)
        assert cached == cache.cache_file(source)
        assert cached.read_text() == "echo('v1')"

    def test_unchanged_source_not_copied_again(self, cache, source):
        cached = cache.materialize(source)
        stamp = cached.stat().st_mtime_ns - 50_000_000_000
        os.utime(cached, ns=(stamp, stamp))

        cache.materialize(source)
        assert cached.stat().st_mtime_ns == stamp

    def test_newer_source_forces_recopy(self, cache, source):
        cached = cache.materialize(source)
        source.write_text("echo('v2')")
        newer = cached.stat().st_mtime + 10
        os.utime(source, (newer, newer))

        assert cache.materialize(source).read_text() == "echo('v2')"

    def test_no_temporary_files_left(self, cache, source, cache_dir):
        cache.materialize(source)
        assert [p.name for p in cache_dir.iterdir()] == [cache.cache_file(source).name]

    def test_missing_directory_fails_loudly(self, tmp_path, source):
        cache = TemplateCache(tmp_path / "never-created")
        with pytest.raises(FileNotFoundError):
            cache.materialize(source)

    def test_setup_reports_failure(self, tmp_path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        cache = TemplateCache(blocker / "cache")
        assert cache.setup() is False
        assert cache.available is False

    def test_clear(self, cache, source, tmp_path):
        other = tmp_path / "other.py"
        other.write_text("echo('other')")
        cache.materialize(source)
        cache.materialize(other)

        assert cache.clear() == 2
        assert list(cache.cache_dir.iterdir()) == []

    def test_clear_missing_directory(self, tmp_path):
        assert TemplateCache(tmp_path / "absent").clear() == 0
