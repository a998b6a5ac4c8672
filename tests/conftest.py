# File: tests/conftest.py
import io
from typing import Callable, List, Optional, Tuple

import pytest

from sitemap_stream.logger import init_logging

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"


def urlset(*urls: str, prefix: str = "") -> bytes:
    """Build a urlset document from pre-rendered <url> bodies."""
    body = "".join(f"<url>{u}</url>" for u in urls)
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<urlset xmlns="{SITEMAP_NS}">{body}</urlset>'
    ).encode("utf-8")


def sitemapindex(*sitemaps: str) -> bytes:
    """Build a sitemap index document from pre-rendered <sitemap> bodies."""
    body = "".join(f"<sitemap>{s}</sitemap>" for s in sitemaps)
    return (
        f'<?xml version="1.0" encoding="UTF-8"?>\n'
        f'<sitemapindex xmlns="{SITEMAP_NS}">{body}</sitemapindex>'
    ).encode("utf-8")


def drain(iterator, steps: int) -> List[Tuple[bool, object, Optional[tuple]]]:
    """Call advance() *steps* times, recording (result, item, error signature)."""
    trace = []
    for _ in range(steps):
        ok = iterator.advance()
        error = iterator.last_error
        signature = None if error is None else (type(error), getattr(error, "kind", None), str(error))
        trace.append((ok, iterator.current_item, signature))
    return trace


class SeekControlledStream(io.BytesIO):
    """BytesIO whose seek() can be switched to fail."""

    def __init__(self, data: bytes, fail_seek: bool = False) -> None:
        super().__init__(data)
        self.fail_seek = fail_seek

    def seek(self, pos, whence=io.SEEK_SET):
        if self.fail_seek:
            raise io.UnsupportedOperation("seek")
        return super().seek(pos, whence)


class FailingReadStream(io.BytesIO):
    """BytesIO that raises OSError once *fail_after* bytes were read."""

    def __init__(self, data: bytes, fail_after: int) -> None:
        super().__init__(data)
        self.fail_after = fail_after

    def _check(self):
        if self.tell() >= self.fail_after:
            raise OSError("device went away")

    def read(self, size=-1):
        self._check()
        return super().read(size)

    def readline(self, size=-1):
        self._check()
        return super().readline(size)


@pytest.fixture(autouse=True)
def reset_logging():
    """CLI tests bind the log handler to CliRunner's stderr; restore a live handler."""
    yield
    init_logging(level="WARNING")


@pytest.fixture()
def make_stream() -> Callable[..., io.BytesIO]:
    """Return a factory producing seekable byte streams from str or bytes."""

    def _make(data, fail_seek: bool = False) -> io.BytesIO:
        if isinstance(data, str):
            data = data.encode("utf-8")
        return SeekControlledStream(data, fail_seek=fail_seek)

    return _make


@pytest.fixture()
def sitemap_files(tmp_path):
    """
    Create sample sitemap files of every supported format.
    Returns dict with format names to file paths.
    """
    urlset_file = tmp_path / "sitemap.xml"
    urlset_file.write_bytes(
        urlset(
            "<loc>https://example.com/</loc><lastmod>2024-01-15</lastmod><priority>0.8</priority>",
            "<loc>https://example.com/about</loc><changefreq>monthly</changefreq>",
        )
    )
    index_file = tmp_path / "sitemap_index.xml"
    index_file.write_bytes(
        sitemapindex(
            "<loc>https://example.com/sitemap1.xml</loc>",
            "<loc>https://example.com/sitemap2.xml</loc><lastmod>2024-02-01</lastmod>",
        )
    )
    text_file = tmp_path / "sitemap.txt"
    text_file.write_text("https://example.com/a\nhttps://example.com/b\n", encoding="utf-8")
    return {"urlset": urlset_file, "index": index_file, "text": text_file}
