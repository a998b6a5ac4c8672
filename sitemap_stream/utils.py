# File: sitemap_stream/utils.py
"""sitemap_stream.utils: Разбор URL и необязательных полей записей sitemap в доменные модели."""

from __future__ import annotations

import math
import re
from datetime import datetime, timezone
from typing import List, Optional, Sequence, Tuple

from pydantic import HttpUrl, TypeAdapter, ValidationError

from sitemap_stream.errors import ParseErrorKind, UrlParseError
from sitemap_stream.logger import logger
from sitemap_stream.models import (
    DEFAULT_PRIORITY,
    IndexEntry,
    PageEntry,
    RawIndexEntry,
    RawPageEntry,
)

__all__: Sequence[str] = (
    "parse_url",
    "parse_lastmod",
    "parse_priority",
    "parse_page_entry",
    "parse_index_entry",
)

_HTTP_URL: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)

# W3C Datetime reduced precision forms that datetime.fromisoformat rejects
_YEAR_MONTH_RE = re.compile(r"^(\d{4})(?:-(\d{2}))?$")


def parse_url(text: Optional[str]) -> str:
    """Проверяет, что text является абсолютным http(s) URL, и возвращает его нормализованную форму.

    Raises:
        UrlParseError: HARD, если URL отсутствует или не разбирается.
    """
    raw = (text or "").strip()
    try:
        url = _HTTP_URL.validate_python(raw)
    except ValidationError as exc:
        reason = exc.errors()[0]["msg"] if exc.errors() else str(exc)
        raise UrlParseError(
            f"invalid location {raw!r}: {reason}",
            kind=ParseErrorKind.HARD,
            fields=("loc",),
            value=raw,
        ) from exc
    return str(url)


def parse_lastmod(text: str) -> datetime:
    """Разбирает W3C Datetime (YYYY, YYYY-MM, YYYY-MM-DD, полную дату со временем).

    Значения без часового пояса считаются UTC. Бросает ValueError при неверном формате.
    """
    value = text.strip()
    match = _YEAR_MONTH_RE.match(value)
    if match:
        year, month = match.groups()
        return datetime(int(year), int(month or 1), 1, tzinfo=timezone.utc)
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_priority(text: str) -> float:
    """Разбирает приоритет в диапазоне [0.0, 1.0]; иначе ValueError."""
    value = float(text.strip())
    if math.isnan(value) or not 0.0 <= value <= 1.0:
        raise ValueError(f"priority out of range: {value}")
    return value


def _optional_fields(
    lastmod: Optional[str], priority: Optional[str] = None
) -> Tuple[Optional[datetime], float, Optional[UrlParseError]]:
    """Разбирает необязательные поля, собирая аномалии в одну мягкую ошибку."""
    anomalies: List[Tuple[str, str, str]] = []

    last_modified: Optional[datetime] = None
    if lastmod is not None and lastmod.strip():
        try:
            last_modified = parse_lastmod(lastmod)
        except ValueError as exc:
            anomalies.append(("lastmod", lastmod.strip(), str(exc)))

    prio = DEFAULT_PRIORITY
    if priority is not None and priority.strip():
        try:
            prio = parse_priority(priority)
        except ValueError as exc:
            anomalies.append(("priority", priority.strip(), str(exc)))

    if not anomalies:
        return last_modified, prio, None

    message = "; ".join(f"{name} {value!r} ignored: {reason}" for name, value, reason in anomalies)
    logger.debug("Soft entry anomaly: %s", message)
    soft = UrlParseError(
        message,
        kind=ParseErrorKind.SOFT,
        fields=tuple(name for name, _, _ in anomalies),
        value=anomalies[0][1],
    )
    return last_modified, prio, soft


def parse_page_entry(raw: RawPageEntry) -> Tuple[PageEntry, Optional[UrlParseError]]:
    """Преобразует RawPageEntry в PageEntry.

    Returns:
        Пару (entry, soft_error); soft_error равен None, если все поля корректны.

    Raises:
        UrlParseError: HARD, если нельзя разобрать <loc>.
    """
    location = parse_url(raw.loc)
    last_modified, priority, soft = _optional_fields(raw.lastmod, raw.priority)
    entry = PageEntry(
        location=location,
        last_modified=last_modified,
        change_frequency=(raw.changefreq or "").strip(),
        priority=priority,
    )
    return entry, soft


def parse_index_entry(raw: RawIndexEntry) -> Tuple[IndexEntry, Optional[UrlParseError]]:
    """Преобразует RawIndexEntry в IndexEntry; семантика ошибок как у parse_page_entry."""
    location = parse_url(raw.loc)
    last_modified, _, soft = _optional_fields(raw.lastmod)
    return IndexEntry(location=location, last_modified=last_modified), soft
