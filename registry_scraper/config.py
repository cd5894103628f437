# === FILE: registry_scraper/config.py ===
"""
Загрузка и валидация конфигурации скрапера реестров.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import soupsieve
import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

DEFAULT_URL = "https://www.gov.uk/government/publications/overseas-registries/overseas-registries"
DEFAULT_SELECTOR = ".govspeak .govuk-link"


class ScraperConfig(BaseModel):
    """Конфигурация одного запуска скрапера."""
    model_config = ConfigDict(extra="forbid", frozen=True, validate_default=True)

    url: HttpUrl = Field(DEFAULT_URL, description="Страница, которую нужно загрузить.")
    selector: str = Field(DEFAULT_SELECTOR, min_length=1, description="CSS-селектор ссылок.")
    user_agent: Optional[str] = Field(
        None, min_length=1, description="Заголовок User-Agent (None - по умолчанию клиента)."
    )

    @field_validator("selector", mode="before")
    def _strip_selector(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("selector")
    def _compile_selector(cls, v: str) -> str:
        try:
            soupsieve.compile(v)
        except soupsieve.SelectorSyntaxError as exc:
            raise ValueError(f"Некорректный CSS-селектор {v!r}: {exc}") from exc
        return v


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


def load_config(path: Union[str, Path, None] = None) -> ScraperConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScraperConfig.
    Без пути берёт configs/default.yaml, а если его нет - значения по умолчанию.
    """
    if path is None:
        if not _DEFAULT_CFG.is_file():
            return ScraperConfig()
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

    return ScraperConfig(**data)
