# === FILE: sitemap_stream/config.py ===
"""
Модуль для загрузки и валидации конфигурации чтения sitemap.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import codecs
import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from sitemap_stream.engine import SitemapFormat
from sitemap_stream.parser.text_parser import MAX_LINE_LENGTH


class ReaderConfig(BaseModel):
    """Параметры чтения одного sitemap."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    format: SitemapFormat = Field(SitemapFormat.AUTO, description="Формат входного файла.")
    strict: bool = Field(False, description="Считать мягкие ошибки записей фатальными.")
    limit: Optional[int] = Field(None, ge=1, description="Максимальное число выводимых записей.")
    encoding: str = Field("utf-8", min_length=1, description="Кодировка текстового sitemap.")
    max_line_length: int = Field(
        MAX_LINE_LENGTH, ge=1, description="Максимальная длина строки текстового sitemap (байт)."
    )

    @field_validator("encoding")
    def _check_encoding(cls, v: str) -> str:
        try:
            return codecs.lookup(v).name
        except LookupError as exc:
            raise ValueError(f"unknown encoding: {v}") from exc


_DEFAULT_CFG = Path("configs/default.yaml")


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Неправильный YAML в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень YAML должен быть mapping, получено {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Неправильный JSON в {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Верхний уровень JSON должен быть mapping, получено {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> ReaderConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ReaderConfig.
    При отсутствии файла конфига бросает FileNotFoundError.
    """
    if path is None:
        if not _DEFAULT_CFG.exists():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(_DEFAULT_CFG))
        path_obj = _DEFAULT_CFG
    else:
        path_obj = Path(path).expanduser().resolve()
        if not path_obj.is_file():
            raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")

    return ReaderConfig(**data)


__all__ = ["ReaderConfig", "load_config", "ValidationError"]
