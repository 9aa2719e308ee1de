# === FILE: site_validator/config.py ===
"""
Модуль для загрузки и валидации конфигурации SiteValidator.
Используется Pydantic для описания схемы и проверки данных.

Файл конфигурации (YAML или JSON) необязателен: CLI накладывает свои
опции поверх прочитанного словаря и только затем строит ValidatorConfig.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

from site_validator.errors import LinkParseError
from site_validator.utils import parse_url, strip_fragment

DEFAULT_VALIDATOR = "http://localhost:8080/check"
DEFAULT_USER_AGENT = "SiteValidator/0.1.0"


class ValidatorConfig(BaseModel):
    """Конфигурация для одного запуска проверки."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    url: str = Field(..., description="URL, с которого начинается проверка.")
    validator: HttpUrl = Field(
        DEFAULT_VALIDATOR, validate_default=True, description="Адрес W3C validation service."
    )
    check_status: bool = Field(True, description="Требовать HTTP 200 от проверяемых страниц.")
    print_message: bool = Field(False, description="Печатать ответ валидатора при ошибке.")
    recursive: bool = Field(True, description="Переходить по найденным ссылкам.")
    timeout: float = Field(30.0, gt=0, description="Таймаут на один запрос (секунд).")
    user_agent: str = Field(DEFAULT_USER_AGENT, min_length=1, description="Заголовок User-Agent.")

    @field_validator("url", mode="before")
    def _check_start_url(cls, v: Any) -> Any:
        if not isinstance(v, str):
            return v
        try:
            parts = parse_url(v.strip())
        except LinkParseError as exc:
            raise ValueError(str(exc)) from exc
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError(f"expected an absolute http(s) URL, got {v!r}")
        return strip_fragment(parts)


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


def read_config_file(path: Union[str, Path, None]) -> Dict[str, Any]:
    """
    Читает YAML или JSON и возвращает сырой словарь настроек.
    Без пути возвращает пустой словарь; отсутствующий файл даёт FileNotFoundError.
    """
    if path is None:
        return {}
    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path_obj)
    if suffix == ".json":
        return _read_json(path_obj)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None], **overrides: Any) -> ValidatorConfig:
    """
    Читает файл конфигурации, накладывает overrides (значения None пропускаются)
    и возвращает проверенный объект ValidatorConfig.
    """
    data = read_config_file(path)
    data.update({k: v for k, v in overrides.items() if v is not None})
    return ValidatorConfig(**data)
