# File: sitemap_stream/parser/text_parser.py
"""sitemap_stream.parser.text_parser: Итератор по текстовому sitemap (один URL на строку)."""

from __future__ import annotations

from typing import BinaryIO, Final, Optional

from sitemap_stream.errors import LineReadError, UrlParseError
from sitemap_stream.models import DEFAULT_PRIORITY, PageEntry
from sitemap_stream.parser.base import BaseSitemapIterator, validate_new_iterator
from sitemap_stream.utils import parse_url

__all__ = ["PlainSitemapPageIterator", "MAX_LINE_LENGTH"]

MAX_LINE_LENGTH: Final[int] = 64 * 1024


class PlainSitemapPageIterator(BaseSitemapIterator[PageEntry]):
    """Iterator over a newline-delimited list of absolute URLs.

    Every line must hold a URL: a blank or malformed line ends the iteration
    with a hard :class:`UrlParseError`. There are no soft anomalies here.
    """

    def __init__(
        self,
        stream: Optional[BinaryIO],
        *,
        encoding: str = "utf-8",
        max_line_length: int = MAX_LINE_LENGTH,
    ) -> None:
        self.encoding = encoding
        self.max_line_length = max_line_length
        super().__init__(stream)
        validate_new_iterator(self)

    def _restart(self) -> None:
        self.line_number = 0

    def _read_line(self) -> Optional[str]:
        """Return the next line without its terminator, or None at end of input."""
        try:
            raw = self._stream.readline(self.max_line_length + 1)
        except (OSError, ValueError) as exc:
            # ValueError: the stream was closed
            raise LineReadError(f"cannot read sitemap stream: {exc}") from exc
        if not raw:
            return None

        self.line_number += 1
        newline = b"\n" if isinstance(raw, bytes) else "\n"
        if len(raw) > self.max_line_length and not raw.endswith(newline):
            raise LineReadError(f"line {self.line_number} longer than {self.max_line_length} characters")
        if isinstance(raw, bytes):
            try:
                text = raw.decode(self.encoding)
            except UnicodeDecodeError as exc:
                raise LineReadError(f"line {self.line_number} is not valid {self.encoding}") from exc
        else:
            text = raw
        if self.line_number == 1:
            text = text.lstrip("\ufeff")
        return text.rstrip("\r\n")

    def advance(self) -> bool:
        if self._finished:
            return self._exhausted()

        try:
            line = self._read_line()
        except LineReadError as exc:
            return self._fail(exc)
        if line is None:
            return self._fail(None)

        try:
            location = parse_url(line)
        except UrlParseError as exc:
            return self._fail(exc)

        entry = PageEntry(
            location=location,
            last_modified=None,
            change_frequency="",
            priority=DEFAULT_PRIORITY,
        )
        return self._succeed(entry)
