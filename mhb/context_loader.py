"""
Загрузка контекста рендеринга.

Контекст читается из YAML или JSON (JSON является подмножеством YAML)
и может дополняться присваиваниями вида key=value из командной строки.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ContextLoadError

_yaml = YAML(typ="safe")


def load_context(path: Path) -> Dict[str, Any]:
    """
    Читает файл контекста и возвращает словарь.

    Raises:
        ContextLoadError: Файл не найден, не читается или корень не является словарём
    """
    if not path.is_file():
        raise ContextLoadError(f"Context file not found: {path}")
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, YAMLError) as e:
        raise ContextLoadError(f"Failed to load context file '{path}': {e}") from e

    if raw is None:
        return {}
    if not isinstance(raw, dict):
        raise ContextLoadError(f"Context must be a mapping: {path}")
    return raw


def _parse_scalar(text: str) -> Any:
    """Значение присваивания как YAML-скаляр: true/false/числа получают свой тип."""
    try:
        value = _yaml.load(text)
    except YAMLError:
        return text
    # Составные значения (списки, словари) через --set не поддерживаются
    if isinstance(value, (dict, list)):
        return text
    return "" if value is None else value


def parse_assignments(assignments: Iterable[str] | None) -> Dict[str, Any]:
    """
    Разбирает список присваиваний 'key=value' в словарь.

    Raises:
        ContextLoadError: При отсутствии '=' или пустом ключе
    """
    result: Dict[str, Any] = {}
    if not assignments:
        return result

    for item in assignments:
        if "=" not in item:
            raise ContextLoadError(f"Invalid assignment '{item}'. Expected 'key=value'")
        key, value = item.split("=", 1)
        key = key.strip()
        if not key:
            raise ContextLoadError(f"Invalid assignment '{item}': empty key")
        result[key] = _parse_scalar(value.strip())

    return result


__all__ = ["load_context", "parse_assignments"]
