"""
Адаптер движка шаблонов для внешнего кода.

Читает шаблон из файла и передаёт текст процессору. Это единственное
место, где возможны ошибки ввода-вывода: само ядро рендеринга
исключений по содержимому шаблона не бросает.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import Optional, Union

from .errors import TemplateReadError
from .options import DEFAULT_OPTIONS, RenderOptions
from .template import render as render_template

logger = logging.getLogger(__name__)


class MiniHandlebars:
    """
    Шаблонизатор mini-handlebars.

    Attributes:
        file_extension: Расширение файлов шаблонов
    """

    file_extension: str = "html"

    def render(
        self,
        file_path: Union[str, Path],
        context: Mapping,
        options: Optional[RenderOptions] = None,
    ) -> str:
        """
        Рендерит шаблон из файла.

        Args:
            file_path: Путь к файлу шаблона
            context: Значения для подстановки
            options: Опции рендеринга (пока без распознаваемых опций)

        Returns:
            Отрендеренный текст

        Raises:
            TemplateReadError: Если файл не читается или не декодируется как UTF-8
        """
        options = options or DEFAULT_OPTIONS
        text = read_template(Path(file_path))
        logger.debug("Rendering template file %s with %r", file_path, options)
        return self.render_string(text, context)

    @staticmethod
    def render_string(template: str, context: Mapping) -> str:
        """Рендерит шаблон из строки."""
        return render_template(template, context)


def read_template(path: Path) -> str:
    """Читает текст шаблона как UTF-8."""
    try:
        return path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateReadError(path, e) from e


__all__ = ["MiniHandlebars", "read_template"]
