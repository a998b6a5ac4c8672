"""sitemap_stream.parser: Итераторы по XML и текстовым sitemap."""

from .base import BaseSitemapIterator, SitemapIterator, validate_new_iterator
from .sitemap_parser import XmlSitemapIndexIterator, XmlSitemapPageIterator
from .text_parser import PlainSitemapPageIterator

__all__ = [
    "SitemapIterator",
    "BaseSitemapIterator",
    "validate_new_iterator",
    "XmlSitemapIndexIterator",
    "XmlSitemapPageIterator",
    "PlainSitemapPageIterator",
]
