# sitemap_stream/models.py
"""
Data models for sitemap entries.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Final, Optional

DEFAULT_PRIORITY: Final[float] = 1.0


@dataclass(frozen=True, slots=True)
class PageEntry:
    """A page listed in a urlset document or a plain-text sitemap."""

    location: str
    last_modified: Optional[datetime] = None
    change_frequency: str = ""
    priority: float = DEFAULT_PRIORITY

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location,
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
            "change_frequency": self.change_frequency,
            "priority": self.priority,
        }


@dataclass(frozen=True, slots=True)
class IndexEntry:
    """A child sitemap listed in a sitemap index document."""

    location: str
    last_modified: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "location": self.location,
            "last_modified": self.last_modified.isoformat() if self.last_modified else None,
        }


@dataclass(slots=True)
class RawPageEntry:
    """Unvalidated text of one <url> element."""

    loc: Optional[str] = None
    lastmod: Optional[str] = None
    changefreq: Optional[str] = None
    priority: Optional[str] = None


@dataclass(slots=True)
class RawIndexEntry:
    """Unvalidated text of one <sitemap> element."""

    loc: Optional[str] = None
    lastmod: Optional[str] = None
