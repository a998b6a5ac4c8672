# File: sitemap_stream/engine.py
"""sitemap_stream.engine: Определение формата sitemap, выбор итератора и обход записей."""

from __future__ import annotations

import enum
import os
from typing import BinaryIO, Iterator, Optional, TypeVar, Union

from lxml import etree

from sitemap_stream.errors import ParseErrorKind, RewindError, UrlParseError
from sitemap_stream.logger import logger
from sitemap_stream.models import IndexEntry, PageEntry
from sitemap_stream.parser.base import SitemapIterator
from sitemap_stream.parser.sitemap_parser import (
    READ_CHUNK_SIZE,
    XmlSitemapIndexIterator,
    XmlSitemapPageIterator,
    local_name,
)
from sitemap_stream.parser.text_parser import MAX_LINE_LENGTH, PlainSitemapPageIterator

__all__ = ["SitemapFormat", "detect_format", "open_iterator", "iter_entries"]

T = TypeVar("T")


class SitemapFormat(str, enum.Enum):
    """Формат входного sitemap."""

    AUTO = "auto"
    INDEX = "index"
    URLSET = "urlset"
    TEXT = "text"


def detect_format(stream: BinaryIO) -> SitemapFormat:
    """Определяет формат по началу потока и перематывает поток в начало.

    Всё, что не начинается с ``<``, считается текстовым sitemap. XML с корнем
    ``sitemapindex`` считается индексом, любой другой XML считается urlset.
    Корень ищется потоковым парсером; длина пролога и комментариев перед ним
    не ограничена.
    """
    chunk = _read_chunk(stream)
    body = chunk.lstrip(b"\xef\xbb\xbf").lstrip()
    while chunk and not body:
        chunk = _read_chunk(stream)
        body = chunk.lstrip()

    if not body.startswith(b"<"):
        fmt = SitemapFormat.TEXT
    elif _root_name(body, stream) == "sitemapindex":
        fmt = SitemapFormat.INDEX
    else:
        fmt = SitemapFormat.URLSET

    try:
        stream.seek(0, os.SEEK_SET)
    except (OSError, ValueError) as exc:
        raise RewindError(f"cannot rewind sitemap stream: {exc}") from exc
    logger.debug("Detected sitemap format: %s", fmt.value)
    return fmt


def _read_chunk(stream: BinaryIO) -> bytes:
    chunk = stream.read(READ_CHUNK_SIZE)
    if isinstance(chunk, str):
        chunk = chunk.encode("utf-8")
    return chunk


def _root_name(head: bytes, stream: BinaryIO) -> Optional[str]:
    """Local name of the root element, or None if the XML breaks before it."""
    parser = etree.XMLPullParser(events=("start",), resolve_entities=False, no_network=True)
    chunk = head
    while chunk:
        try:
            parser.feed(chunk)
        except etree.XMLSyntaxError:
            return None
        for _, element in parser.read_events():
            return local_name(element)
        chunk = _read_chunk(stream)
    return None


def open_iterator(
    stream: Optional[BinaryIO],
    fmt: Union[SitemapFormat, str] = SitemapFormat.AUTO,
    *,
    encoding: str = "utf-8",
    max_line_length: int = MAX_LINE_LENGTH,
) -> SitemapIterator[Union[PageEntry, IndexEntry]]:
    """Создаёт итератор нужного формата; при AUTO формат определяется по содержимому."""
    fmt = SitemapFormat(fmt)
    if fmt is SitemapFormat.AUTO and hasattr(stream, "read"):
        fmt = detect_format(stream)

    if fmt is SitemapFormat.INDEX:
        return XmlSitemapIndexIterator(stream)
    if fmt is SitemapFormat.TEXT:
        return PlainSitemapPageIterator(stream, encoding=encoding, max_line_length=max_line_length)
    return XmlSitemapPageIterator(stream)


def iter_entries(
    iterator: SitemapIterator[T],
    *,
    strict: bool = False,
    limit: Optional[int] = None,
) -> Iterator[T]:
    """Генератор записей итератора.

    Мягкие ошибки логируются как предупреждения (или бросаются при ``strict``),
    терминальные ошибки бросаются после последней полученной записи.
    """
    produced = 0
    while limit is None or produced < limit:
        if not iterator.advance():
            if iterator.last_error is not None:
                raise iterator.last_error
            return

        error = iterator.last_error
        if isinstance(error, UrlParseError) and error.kind is ParseErrorKind.SOFT:
            if strict:
                raise error
            logger.warning("Entry %s: %s", iterator.current_item, error)

        produced += 1
        yield iterator.current_item
