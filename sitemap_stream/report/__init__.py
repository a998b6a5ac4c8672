"""sitemap_stream.report: Сохранение записей sitemap в JSON, используется CLI и тестами."""

from .json_report import entries_to_dicts, render_json

__all__ = ["entries_to_dicts", "render_json"]
