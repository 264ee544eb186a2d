"""
Лексический анализатор директив.

Извлекает из текста шаблона все фрагменты {{...}} в порядке их появления.
Сопоставление открывающих и закрывающих скобок позиционное: k-я найденная
пара '{{' связывается с k-й найденной парой '}}', глубина вложенности
фигурных скобок не учитывается.
"""

from __future__ import annotations

import logging
from typing import List, Tuple

from .tokens import Directive

logger = logging.getLogger(__name__)


class DirectiveLexer:
    """
    Лексер директив шаблона.

    Не бросает исключений: несбалансированные или обрезанные разделители
    просто не порождают директив.
    """

    def tokenize(self, text: str) -> List[Directive]:
        """
        Разбивает текст на список директив.

        Args:
            text: Исходный текст шаблона

        Returns:
            Директивы в порядке появления в тексте
        """
        directives: List[Directive] = []

        for start, end in self._pair_delimiters(text):
            if end < start + 2:
                logger.debug("Skipping overlapping delimiters at %d..%d", start, end)
                continue
            raw = text[start:end + 2]
            directives.append(Directive.from_raw(raw, start))

        logger.debug("Tokenized %d directive(s)", len(directives))
        return directives

    @staticmethod
    def _scan_delimiters(text: str) -> Tuple[List[int], List[int]]:
        """
        Собирает позиции всех '{{' и '}}' (перекрывающиеся тоже).

        Последний символ текста не может начинать пару, поэтому обрезанная
        '}' в конце шаблона закрывающим разделителем не считается.
        """
        starts: List[int] = []
        ends: List[int] = []

        for index in range(len(text) - 1):
            char = text[index]
            if char == "{" and text[index + 1] == "{":
                starts.append(index)
            elif char == "}" and text[index + 1] == "}":
                ends.append(index)

        return starts, ends

    def _pair_delimiters(self, text: str) -> List[Tuple[int, int]]:
        # zip обрезает по более короткому списку: лишние '{{' отбрасываются
        starts, ends = self._scan_delimiters(text)
        return list(zip(starts, ends))


def tokenize_template(text: str) -> List[Directive]:
    """
    Удобная функция для токенизации шаблона.

    Args:
        text: Исходный текст шаблона

    Returns:
        Список директив
    """
    return DirectiveLexer().tokenize(text)


__all__ = ["DirectiveLexer", "tokenize_template"]
