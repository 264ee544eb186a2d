"""
Опции рендеринга.

Пока движок не распознаёт ни одной опции: тип существует, чтобы
адаптер принимал его уже сейчас. Загрузка из YAML строгая, любой
ключ приводит к ConfigCoerceError.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ruamel.yaml import YAML

from .conf import build_typed
from .errors import MHBUserError

_yaml = YAML(typ="safe")


@dataclass(frozen=True)
class RenderOptions:
    """Опции рендеринга (распознаваемых опций нет)."""
    pass


DEFAULT_OPTIONS = RenderOptions()


def load_options(path: Path) -> RenderOptions:
    """
    Загружает опции из YAML-файла.

    Пустой файл даёт опции по умолчанию.

    Raises:
        MHBUserError: Если файл не читается
        ConfigCoerceError: Если содержимое не соответствует RenderOptions
    """
    try:
        raw = _yaml.load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        raise MHBUserError(f"Failed to read options file '{path}': {e}") from e
    return build_typed(RenderOptions, raw or {})


__all__ = ["RenderOptions", "DEFAULT_OPTIONS", "load_options"]
