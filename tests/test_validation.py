# File: tests/test_validation.py
"""Probe-then-rewind validation, checked against a scripted iterator."""
from typing import List, Optional

import pytest

from sitemap_stream.errors import DecodeError, RewindError, SitemapError
from sitemap_stream.parser.base import SitemapIterator, validate_new_iterator


class ScriptedIterator:
    """Minimal SitemapIterator whose probe outcome and reset behaviour are fixed."""

    def __init__(self, probe_ok: bool, probe_error: Optional[SitemapError], reset_fails: bool = False):
        self._probe_ok = probe_ok
        self._probe_error = probe_error
        self._reset_fails = reset_fails
        self.calls: List[str] = []
        self._item = None
        self._error = None

    def advance(self) -> bool:
        self.calls.append("advance")
        self._item = "item" if self._probe_ok else None
        self._error = self._probe_error
        return self._probe_ok

    @property
    def last_error(self):
        return self._error

    @property
    def current_item(self):
        return self._item

    def reset(self) -> None:
        self.calls.append("reset")
        self._item = None
        self._error = None
        if self._reset_fails:
            raise RewindError("seek failed")


def test_scripted_iterator_satisfies_protocol():
    assert isinstance(ScriptedIterator(True, None), SitemapIterator)


@pytest.mark.parametrize(
    "probe_ok,probe_error",
    [
        (True, None),
        (True, DecodeError("soft-ish diagnostic")),
        (False, None),
    ],
)
def test_probe_without_terminal_error_passes(probe_ok, probe_error):
    it = ScriptedIterator(probe_ok, probe_error)
    validate_new_iterator(it)
    assert it.calls == ["advance", "reset"]
    assert it.current_item is None
    assert it.last_error is None


def test_probe_error_is_raised_after_reset():
    error = DecodeError("broken")
    it = ScriptedIterator(False, error)
    with pytest.raises(DecodeError) as exc_info:
        validate_new_iterator(it)
    assert exc_info.value is error
    assert it.calls == ["advance", "reset"]


def test_rewind_failure_after_good_probe_is_raised():
    it = ScriptedIterator(True, None, reset_fails=True)
    with pytest.raises(RewindError):
        validate_new_iterator(it)


def test_probe_error_takes_precedence_over_rewind_failure():
    error = DecodeError("broken")
    it = ScriptedIterator(False, error, reset_fails=True)
    with pytest.raises(DecodeError) as exc_info:
        validate_new_iterator(it)
    assert exc_info.value is error
    assert isinstance(exc_info.value.__context__, RewindError)
