# sitemap_stream/report/json_report.py

"""
Генерация JSON-отчёта для sitemap_stream.

Сериализация записей sitemap в файл.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from sitemap_stream.models import IndexEntry, PageEntry


def entries_to_dicts(entries: Iterable[Union[PageEntry, IndexEntry]]) -> List[Dict[str, Any]]:
    """Преобразует записи в словари, пригодные для json.dumps."""
    return [entry.to_dict() for entry in entries]


def render_json(
    entries: Iterable[Union[PageEntry, IndexEntry]],
    output_path: Path | str,
    *,
    pretty: bool = True,
) -> Path:
    """
    Сохраняет записи sitemap в формате JSON по указанному пути.

    :param entries: записи PageEntry или IndexEntry
    :param output_path: путь к JSON-файлу
    :param pretty: отступ 2 пробела
    :return: Path сохранённого файла

    Пример:
    ```python
    from sitemap_stream.report.json_report import render_json
    report_path = render_json(entries, 'reports/sitemap.json')
    print(f"JSON report saved to: {report_path}")
    ```
    """
    output = Path(output_path)
    output.parent.mkdir(parents=True, exist_ok=True)

    with output.open('w', encoding='utf-8') as f:
        json.dump(entries_to_dicts(entries), f, ensure_ascii=False, indent=2 if pretty else None)

    return output
