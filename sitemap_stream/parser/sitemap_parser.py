# File: sitemap_stream/parser/sitemap_parser.py
"""sitemap_stream.parser.sitemap_parser: Потоковый разбор XML sitemap index и urlset.

Документ не загружается целиком: байты подаются в ``lxml.etree.XMLPullParser``
порциями, а уже обработанные элементы удаляются из дерева.

Пример:
```python
from sitemap_stream.parser.sitemap_parser import XmlSitemapPageIterator

with open("sitemap.xml", "rb") as f:
    it = XmlSitemapPageIterator(f)
    while it.advance():
        if it.last_error is not None:
            print("warning:", it.last_error)
        print(it.current_item.location)
    if it.last_error is not None:
        raise it.last_error
```
"""

from __future__ import annotations

from typing import BinaryIO, Final, Iterator, Optional, Tuple, TypeVar

from lxml import etree

from sitemap_stream.errors import (
    DecodeError,
    EmptyDocumentError,
    SitemapError,
    UrlParseError,
)
from sitemap_stream.models import IndexEntry, PageEntry, RawIndexEntry, RawPageEntry
from sitemap_stream.parser.base import BaseSitemapIterator, validate_new_iterator
from sitemap_stream.utils import parse_index_entry, parse_page_entry

__all__ = ["XmlSitemapIndexIterator", "XmlSitemapPageIterator"]

READ_CHUNK_SIZE: Final[int] = 64 * 1024

T = TypeVar("T")
_Event = Tuple[str, etree._Element]


def local_name(element: etree._Element) -> str:
    """Имя тега без пространства имён: ``{ns}url`` -> ``url``."""
    tag = element.tag
    if not isinstance(tag, str):
        return ""
    _, _, name = tag.rpartition("}")
    return name


def _child_texts(element: etree._Element) -> dict[str, str]:
    """Текст прямых потомков по локальному имени; при повторах берётся первый."""
    texts: dict[str, str] = {}
    for child in element:
        name = local_name(child)
        # duplicates: the first child wins, later ones are ignored
        if name and name not in texts:
            texts[name] = child.text or ""
    return texts


class _XmlElementIterator(BaseSitemapIterator[T]):
    """Yields one entry per ``element_name`` element, matched by local name."""

    element_name: str = ""

    def __init__(self, stream: Optional[BinaryIO]) -> None:
        super().__init__(stream)
        validate_new_iterator(self)

    def _restart(self) -> None:
        self._events: Iterator[_Event] = self._pull_events()
        self._started = False
        self._check_empty = True
        self._open_match: Optional[etree._Element] = None

    def _pull_events(self) -> Iterator[_Event]:
        parser = etree.XMLPullParser(
            events=("start", "end"),
            remove_comments=True,
            remove_pis=True,
            resolve_entities=False,
            no_network=True,
        )
        while True:
            chunk = self._stream.read(READ_CHUNK_SIZE)
            try:
                if chunk:
                    parser.feed(chunk)
                else:
                    parser.close()
            except etree.XMLSyntaxError:
                # deliver what was parsed before the error, then raise it
                yield from parser.read_events()
                raise
            yield from parser.read_events()
            if not chunk:
                return

    def _convert(self, element: etree._Element) -> Tuple[T, Optional[UrlParseError]]:
        raise NotImplementedError

    def advance(self) -> bool:
        if self._finished:
            return self._exhausted()

        while True:
            try:
                event, element = next(self._events)
            except StopIteration:
                if self._check_empty:
                    return self._fail(
                        EmptyDocumentError(f"xml document contains no <{self.element_name}> elements")
                    )
                return self._fail(None)
            except etree.XMLSyntaxError as exc:
                return self._fail(self._syntax_error(exc))
            except (OSError, ValueError) as exc:
                # ValueError: the stream was closed
                error = DecodeError(f"cannot read sitemap stream: {exc}")
                error.__cause__ = exc
                return self._fail(error)

            if event == "start":
                self._started = True
                if self._open_match is None and local_name(element) == self.element_name:
                    self._open_match = element
                continue

            if element is not self._open_match:
                if self._open_match is None:
                    _release(element)
                continue

            self._open_match = None
            try:
                item, soft = self._convert(element)
            except UrlParseError as exc:
                self._check_empty = False
                return self._fail(exc)
            finally:
                _release(element)

            self._check_empty = False
            return self._succeed(item, soft)

    def _syntax_error(self, exc: etree.XMLSyntaxError) -> SitemapError:
        if not self._started and self._check_empty:
            error: SitemapError = EmptyDocumentError(f"xml document has no elements: {exc}")
        else:
            error = DecodeError(f"malformed xml: {exc}")
        error.__cause__ = exc
        return error


def _release(element: etree._Element) -> None:
    """Drop a processed element and its already-parsed preceding siblings."""
    element.clear()
    parent = element.getparent()
    if parent is None:
        return
    while element.getprevious() is not None:
        del parent[0]


class XmlSitemapIndexIterator(_XmlElementIterator[IndexEntry]):
    """Iterator over the <sitemap> entries of a sitemap index document."""

    element_name = "sitemap"

    def _convert(self, element: etree._Element) -> Tuple[IndexEntry, Optional[UrlParseError]]:
        texts = _child_texts(element)
        raw = RawIndexEntry(loc=texts.get("loc"), lastmod=texts.get("lastmod"))
        return parse_index_entry(raw)


class XmlSitemapPageIterator(_XmlElementIterator[PageEntry]):
    """Iterator over the <url> entries of a urlset document."""

    element_name = "url"

    def _convert(self, element: etree._Element) -> Tuple[PageEntry, Optional[UrlParseError]]:
        texts = _child_texts(element)
        raw = RawPageEntry(
            loc=texts.get("loc"),
            lastmod=texts.get("lastmod"),
            changefreq=texts.get("changefreq"),
            priority=texts.get("priority"),
        )
        return parse_page_entry(raw)

