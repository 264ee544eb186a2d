"""
Базовые исключения для пользовательских ошибок.

Все ожидаемые ошибки, которые нужно показать пользователю чистым
сообщением (без трейсбека), должны наследоваться от MHBUserError.

Ошибки программирования и баги НЕ наследуются от MHBUserError:
они пробрасываются с полным трейсбеком.

Само ядро рендеринга (mhb.template) исключений по содержимому шаблона
не бросает: все ошибки здесь относятся к слою адаптера.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class MHBUserError(Exception):
    """
    Базовый класс для всех пользовательских ошибок mini-handlebars.

    Сигнализирует о проблемах, которые пользователь может исправить:
    отсутствующий файл шаблона, битый файл контекста и т.п.
    """
    pass


class TemplateReadError(MHBUserError):
    """Файл шаблона не удалось прочитать или декодировать как UTF-8."""

    def __init__(self, path: Path, cause: Optional[Exception] = None):
        reason = f": {cause}" if cause is not None else ""
        super().__init__(f"Failed to read template '{path}'{reason}")
        self.path = path
        self.cause = cause


class ContextLoadError(MHBUserError):
    """Ошибка загрузки контекста рендеринга (файл или присваивания из CLI)."""
    pass


__all__ = ["MHBUserError", "TemplateReadError", "ContextLoadError"]
