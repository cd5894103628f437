# registry_scraper/report.py
"""Сериализация извлечённых записей в JSON."""

from __future__ import annotations

import json
from typing import Sequence

from registry_scraper.models import Registry

__all__ = ["serialize_registries"]


def serialize_registries(registries: Sequence[Registry]) -> str:
    """
    Возвращает компактный однострочный JSON-массив ``{"Country": ..., "URL": ...}``.

    Ошибки json.dumps (TypeError, ValueError) пробрасываются вызывающему.
    """
    return json.dumps(
        [r.as_dict() for r in registries],
        ensure_ascii=False,
        separators=(",", ":"),
    )
