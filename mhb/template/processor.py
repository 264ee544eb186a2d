"""
Процессор шаблонов.

Публичная точка входа движка: токенизирует шаблон один раз и
обрабатывает очередь директив от начала к концу, каждый раз
переписывая всю рабочую строку.

Тела блоков {{#each}} рендерятся независимыми рекурсивными вызовами
того же конвейера, по одному на элемент коллекции.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Optional

from .blocks import is_truthy, process_conditional, process_each
from .lexer import DirectiveLexer
from .matcher import DirectiveQueue, end_tag_offset, index_of_end_tag
from .tokens import DirectiveKind
from .variables import lookup, process_variable

logger = logging.getLogger(__name__)


class TemplateProcessor:
    """
    Основной процессор шаблонов.

    Не хранит состояния между вызовами: каждый рендер работает со своей
    копией строки и своей очередью директив.
    """

    def __init__(self):
        self.lexer = DirectiveLexer()

    def render(self, template: str, context: Optional[Mapping] = None) -> str:
        """
        Рендерит шаблон с заданным контекстом.

        Никогда не бросает исключений из-за содержимого шаблона:
        блоки, теги которых не удалось найти, остаются как есть.

        Args:
            template: Текст шаблона
            context: Значения для подстановки

        Returns:
            Отрендеренный текст
        """
        if not template:
            return template

        context = context if context is not None else {}
        queue = DirectiveQueue(self.lexer.tokenize(template))
        rendered = template

        while True:
            head = queue.head()
            if head is None:
                break

            directive = queue[head]

            if directive.kind is DirectiveKind.IF_OPEN:
                rendered = self._render_conditional(queue, head, rendered, context)
            elif directive.kind is DirectiveKind.EACH_OPEN:
                rendered = self._render_each(queue, head, rendered, context)
            else:
                rendered = process_variable(directive, rendered, context)

            queue.discard(head)

        return rendered

    # ======= Внутренние методы =======

    def _render_conditional(self, queue: DirectiveQueue, head: int, rendered: str, context: Mapping) -> str:
        directive = queue[head]
        offset = end_tag_offset(queue, head)
        value = is_truthy(context, directive.name)

        logger.debug("Conditional %r -> %s (closing offset %d)", directive.name, value, offset)
        rewrite = process_conditional(directive, rendered, value, offset)

        # Закрывающий тег снимается с очереди в любом случае
        end_index = index_of_end_tag(queue, offset, DirectiveKind.IF_CLOSE, head)
        if end_index is not None:
            queue.discard(end_index)

        return rewrite.text

    def _render_each(self, queue: DirectiveQueue, head: int, rendered: str, context: Mapping) -> str:
        directive = queue[head]
        items = lookup(context, directive.name)

        rewrite = process_each(directive, rendered, items, self.render)
        if not rewrite.applied:
            return rewrite.text

        # Директивы тела уже разрешены вложенным рендером или удалены вместе
        # с блоком; снимаем их вместе с ближайшим закрывающим тегом
        end_index = index_of_end_tag(queue, 0, DirectiveKind.EACH_CLOSE, head)
        if end_index is not None:
            queue.discard_through(head, end_index)

        return rewrite.text


def render(template: str, context: Optional[Mapping] = None) -> str:
    """
    Удобная функция для рендеринга шаблона.

    Args:
        template: Текст шаблона
        context: Значения для подстановки

    Returns:
        Отрендеренный текст
    """
    return TemplateProcessor().render(template, context)


__all__ = ["TemplateProcessor", "render"]
