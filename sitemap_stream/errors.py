# File: sitemap_stream/errors.py
"""sitemap_stream.errors: Иерархия исключений, которые возвращают итераторы sitemap."""

from __future__ import annotations

import enum
from typing import Optional, Sequence, Tuple

__all__: Sequence[str] = (
    "SitemapError",
    "ConfigurationError",
    "EmptyDocumentError",
    "DecodeError",
    "ParseErrorKind",
    "UrlParseError",
    "RewindError",
    "LineReadError",
)


class SitemapError(Exception):
    """Base class for every error an iterator reports through ``last_error``."""


class ConfigurationError(SitemapError):
    """Iterator constructed without a usable stream."""


class EmptyDocumentError(SitemapError):
    """XML input ended without a single matched element."""


class DecodeError(SitemapError):
    """XML syntax error or read failure while tokenizing the stream."""


class ParseErrorKind(enum.Enum):
    """HARD invalidates the entry and stops iteration, SOFT accompanies a usable entry."""

    HARD = "hard"
    SOFT = "soft"


class UrlParseError(SitemapError):
    """Entry could not be mapped cleanly onto a domain entity.

    Attributes
    ----------
    kind
        :attr:`ParseErrorKind.HARD` when the location itself is unusable,
        :attr:`ParseErrorKind.SOFT` when only optional fields were defaulted.
    fields
        Names of the offending fields (``"loc"``, ``"lastmod"``, ``"priority"``).
    value
        Raw text of the first offending field, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        kind: ParseErrorKind,
        fields: Tuple[str, ...] = (),
        value: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.fields = fields
        self.value = value

    def __repr__(self) -> str:
        return f"UrlParseError({str(self)!r}, kind={self.kind.value}, fields={self.fields!r})"


class RewindError(SitemapError):
    """Underlying stream could not be repositioned to its start."""


class LineReadError(SitemapError):
    """Line scanner failed: read error, undecodable bytes or an overlong line."""
