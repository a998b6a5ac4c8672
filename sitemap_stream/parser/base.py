# File: sitemap_stream/parser/base.py
"""sitemap_stream.parser.base: Общий контракт итераторов sitemap и проверка при создании.

Iterator contract
-----------------
``advance()`` returns *True* when :attr:`current_item` holds a new entry.
*False* with ``last_error is None`` is a clean end of stream, *False* with an
error is a terminal failure. *True* with an error means the entry is usable
but a soft anomaly was found, so callers check ``last_error`` after every call.
"""

from __future__ import annotations

import os
from typing import BinaryIO, Generic, Optional, Protocol, TypeVar, runtime_checkable

from sitemap_stream.errors import ConfigurationError, RewindError, SitemapError
from sitemap_stream.logger import logger

__all__ = ["SitemapIterator", "BaseSitemapIterator", "validate_new_iterator"]

T = TypeVar("T")
T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class SitemapIterator(Protocol[T_co]):
    """Forward-only, rewindable cursor over the entries of one sitemap stream."""

    def advance(self) -> bool: ...

    @property
    def last_error(self) -> Optional[SitemapError]: ...

    @property
    def current_item(self) -> Optional[T_co]: ...

    def reset(self) -> None: ...


class BaseSitemapIterator(Generic[T]):
    """Holds the stream, current item, last error and terminal state.

    Subclasses implement :meth:`_restart` (rebuild the scanner after a seek)
    and :meth:`advance`. The stream is never closed by the iterator.
    """

    def __init__(self, stream: Optional[BinaryIO]) -> None:
        if stream is None:
            raise ConfigurationError("sitemap stream cannot be None")
        if not hasattr(stream, "read"):
            raise ConfigurationError(
                f"sitemap stream must be a readable file object, got {type(stream).__name__}"
            )
        self._stream = stream
        self._item: Optional[T] = None
        self._error: Optional[SitemapError] = None
        self._finished = False
        self._restart()

    @property
    def last_error(self) -> Optional[SitemapError]:
        return self._error

    @property
    def current_item(self) -> Optional[T]:
        return self._item

    def advance(self) -> bool:
        raise NotImplementedError

    def _restart(self) -> None:
        raise NotImplementedError

    def reset(self) -> None:
        """Rewind the stream to its start and drop all scanning state.

        State is cleared even when the seek fails; the failure is raised as
        :class:`RewindError`.
        """
        self._item = None
        self._error = None
        self._finished = False
        try:
            self._stream.seek(0, os.SEEK_SET)
        except (OSError, ValueError, AttributeError) as exc:
            self._restart()
            raise RewindError(f"cannot rewind sitemap stream: {exc}") from exc
        self._restart()
        logger.debug("%s rewound", type(self).__name__)

    def _succeed(self, item: T, error: Optional[SitemapError] = None) -> bool:
        self._item = item
        self._error = error
        return True

    def _fail(self, error: Optional[SitemapError]) -> bool:
        """Clear the current item and finish the stream; *error* None means clean end."""
        self._item = None
        self._error = error
        self._finished = True
        return False

    def _exhausted(self) -> bool:
        # terminal error (if any) stays visible until reset()
        self._item = None
        return False

    def __repr__(self) -> str:
        return f"{type(self).__name__}(item={self._item!r}, error={self._error!r})"


def validate_new_iterator(iterator: SitemapIterator[T]) -> None:
    """Probe *iterator* with one ``advance()`` and rewind it.

    Raises the probe's error when the first ``advance()`` fails with one,
    otherwise a :class:`RewindError` when the rewind fails. When both fail the
    probe error wins and the rewind failure is kept as its ``__context__``.

    The probe reads the stream up to the first entry, which for XML input
    without entries is the whole stream; construction therefore costs one
    extra pass over that initial segment.
    """
    probe_ok = iterator.advance()
    probe_error = None if probe_ok else iterator.last_error
    if probe_error is not None:
        logger.debug("Probe of %s failed: %s", type(iterator).__name__, probe_error)

    try:
        iterator.reset()
    except RewindError as exc:
        if probe_error is None:
            raise
        logger.debug("Rewind after failed probe also failed: %s", exc)
        raise probe_error

    if probe_error is not None:
        raise probe_error

