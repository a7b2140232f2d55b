# === FILE: awareness_scout/config.py ===
"""
Модуль для загрузки и валидации конфигурации AwarenessScout.
Используется Pydantic для описания схемы и проверки данных.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Optional, Union

import yaml
from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

DEFAULT_SUBPAGE_PATHS: tuple[str, ...] = (
    "/about",
    "/about-us",
    "/media",
    "/press",
    "/news",
    "/community",
    "/contact",
)


class ScoutConfig(BaseModel):
    """Конфигурация одного анализа сайта."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    user_agent: str = Field(
        "Mozilla/5.0 (compatible; LawFirmAwarenessBot/1.0)",
        min_length=1,
        description="Заголовок User-Agent.",
    )
    accept: str = Field(
        "text/html,application/xhtml+xml", min_length=1, description="Заголовок Accept."
    )
    timeout: float = Field(8.0, gt=0, description="Таймаут на один запрос (секунд).")
    subpage_paths: tuple[str, ...] = Field(
        DEFAULT_SUBPAGE_PATHS, description="Кандидаты подстраниц, в порядке приоритета."
    )
    max_subpages: int = Field(3, ge=0, description="Сколько кандидатов запрашивать.")
    body_text_limit: int = Field(8000, ge=1, description="Лимит видимого текста страницы.")
    markup_limit: int = Field(15000, ge=1, description="Лимит сохраняемой разметки.")
    tables_path: Optional[Path] = Field(
        None, description="YAML с таблицами сигналов (по умолчанию встроенные)."
    )

    @field_validator("subpage_paths", mode="before")
    def _ensure_leading_slash(cls, v: Any) -> Any:
        if isinstance(v, (list, tuple)):
            return tuple(p if str(p).startswith("/") else f"/{p}" for p in v)
        return v

    @model_validator(mode="after")
    def _check_tables_exist(self) -> ScoutConfig:
        if self.tables_path is not None and not self.tables_path.is_file():
            raise FileNotFoundError(
                errno.ENOENT, os.strerror(errno.ENOENT), str(self.tables_path)
            )
        return self

    @property
    def candidate_paths(self) -> tuple[str, ...]:
        """Подстраницы, которые реально запрашиваются."""
        return self.subpage_paths[: self.max_subpages]


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


def read_mapping(path: Path) -> dict[str, Any]:
    """Читает YAML или JSON mapping, выбирая формат по расширению."""
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        return _read_yaml(path)
    if suffix == ".json":
        return _read_json(path)
    raise ValueError(f"Неподдерживаемый формат конфига: {suffix}")


def load_config(path: Union[str, Path, None]) -> ScoutConfig:
    """
    Читает YAML или JSON и возвращает проверенный объект ScoutConfig.
    Без пути возвращает конфигурацию по умолчанию.
    При отсутствии файла бросает FileNotFoundError.
    """
    if path is None:
        return ScoutConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    data = read_mapping(path_obj)
    try:
        return ScoutConfig(**data)
    except ValidationError:
        raise


__all__ = ["ScoutConfig", "load_config", "read_mapping", "DEFAULT_SUBPAGE_PATHS"]
