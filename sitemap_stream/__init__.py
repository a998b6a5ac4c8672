# sitemap_stream/__init__.py
"""
sitemap_stream package initializer.
Defines package version and exposes the iterators, models, errors and CLI.
"""
__version__ = "0.1.0"

from .access import AccessRule, UnrestrictedAccess
from .engine import SitemapFormat, detect_format, iter_entries, open_iterator
from .errors import (
    ConfigurationError,
    DecodeError,
    EmptyDocumentError,
    LineReadError,
    ParseErrorKind,
    RewindError,
    SitemapError,
    UrlParseError,
)
from .models import IndexEntry, PageEntry
from .parser import (
    PlainSitemapPageIterator,
    SitemapIterator,
    XmlSitemapIndexIterator,
    XmlSitemapPageIterator,
    validate_new_iterator,
)

# Expose CLI entry point
from .cli import cli  # noqa: E402

__all__ = [
    "__version__",
    "AccessRule",
    "UnrestrictedAccess",
    "SitemapFormat",
    "detect_format",
    "iter_entries",
    "open_iterator",
    "SitemapError",
    "ConfigurationError",
    "EmptyDocumentError",
    "DecodeError",
    "ParseErrorKind",
    "UrlParseError",
    "RewindError",
    "LineReadError",
    "PageEntry",
    "IndexEntry",
    "SitemapIterator",
    "XmlSitemapIndexIterator",
    "XmlSitemapPageIterator",
    "PlainSitemapPageIterator",
    "validate_new_iterator",
    "cli",
]
