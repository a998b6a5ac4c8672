# sitemap_stream/access.py
"""
Access gate contract for crawling loops built on top of the sitemap iterators.

The iterators never call it; a crawler asks :meth:`AccessRule.can_access`
before each fetch and reports the fetch with :meth:`AccessRule.accessed`.
"""
from __future__ import annotations

from typing import Protocol, runtime_checkable

__all__ = ["AccessRule", "UnrestrictedAccess"]


@runtime_checkable
class AccessRule(Protocol):
    def can_access(self) -> bool:
        """Return True when the caller may access the site now."""
        ...

    def accessed(self) -> None:
        """Record that an access just happened."""
        ...


class UnrestrictedAccess:
    """AccessRule that always allows access and ignores notifications."""

    def can_access(self) -> bool:
        return True

    def accessed(self) -> None:
        return None
