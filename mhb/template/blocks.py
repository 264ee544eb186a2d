"""
Обработчики блочных директив {{#if}} и {{#each}}.

Оба обработчика переписывают всю текущую рабочую строку целиком.
Позиции тегов ищутся заново при каждом вызове, потому что предыдущие
переписывания сдвигают всё, что стоит правее.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable, Tuple

from .tokens import Directive
from .variables import MISSING, lookup, stringify

logger = logging.getLogger(__name__)

# Закрывающие теги допускают произвольные символы внутри скобок
IF_CLOSE_PATTERN = re.compile(r"\{\{ */if[^{}]*\}\}")
EACH_CLOSE_PATTERN = re.compile(r"\{\{ */each[^{}]*\}\}")

Span = Tuple[int, int]
RenderFunc = Callable[[str, Mapping], str]


class TagNotFound(LookupError):
    """Не удалось найти открывающий или закрывающий тег блока в рабочей строке."""
    pass


@dataclass(frozen=True)
class Rewrite:
    """Результат переписывания: новая строка и признак того, что блок был применён."""
    text: str
    applied: bool


def find_tag_ranges(text: str, open_raw: str, close_pattern: re.Pattern, offset: int = 0) -> Tuple[Span, Span]:
    """
    Находит диапазоны открывающего и закрывающего тегов блока.

    Открывающий тег: первое вхождение текста директивы. Закрывающий:
    offset-е совпадение close_pattern, считая только после открывающего.

    Raises:
        TagNotFound: Если любой из тегов отсутствует
    """
    start = text.find(open_raw)
    if start == -1:
        raise TagNotFound(f"opening tag {open_raw!r} not found")
    open_span = (start, start + len(open_raw))

    for index, match in enumerate(close_pattern.finditer(text, open_span[1])):
        if index == offset:
            return open_span, match.span()

    raise TagNotFound(f"closing tag #{offset} for {open_raw!r} not found")


def is_truthy(context: Mapping, name: str) -> bool:
    """Условие истинно, только если значение есть и его строковая форма равна 'true'."""
    value = lookup(context, name)
    if value is MISSING:
        return False
    return stringify(value) == "true"


def _is_item_sequence(value: Any) -> bool:
    if isinstance(value, (str, bytes, Mapping)) or not isinstance(value, Sequence):
        return False
    return all(isinstance(item, Mapping) for item in value)


def process_conditional(directive: Directive, text: str, value: bool, offset: int) -> Rewrite:
    """
    Применяет условный блок к рабочей строке.

    При истинном условии удаляются только теги, тело остаётся на месте.
    При ложном удаляется всё от начала открывающего тега до конца
    закрывающего.
    """
    try:
        (open_start, open_end), (close_start, close_end) = find_tag_ranges(
            text, directive.raw, IF_CLOSE_PATTERN, offset
        )
    except TagNotFound as e:
        logger.debug("Conditional %r left as is: %s", directive.name, e)
        return Rewrite(text, applied=False)

    if value:
        # Сначала правый тег, чтобы не сдвинуть левый
        result = text[:close_start] + text[close_end:]
        result = result[:open_start] + result[open_end:]
    else:
        result = text[:open_start] + text[close_end:]

    return Rewrite(result, applied=True)


def process_each(directive: Directive, text: str, items: Any, render: RenderFunc) -> Rewrite:
    """
    Применяет блок итерации к рабочей строке.

    Закрывающим считается ближайший {{/each}} после открывающего тега:
    вложенные {{#each}} глубиной не отслеживаются.

    Args:
        directive: Открывающая директива {{#each name}}
        text: Текущая рабочая строка
        items: Значение из контекста или MISSING, если ключа нет
        render: Полный конвейер рендеринга для тела блока
    """
    try:
        (open_start, open_end), (close_start, close_end) = find_tag_ranges(
            text, directive.raw, EACH_CLOSE_PATTERN
        )
    except TagNotFound as e:
        logger.debug("Iteration %r left as is: %s", directive.name, e)
        return Rewrite(text, applied=False)

    body = text[open_end:close_start]

    if items is MISSING:
        logger.debug("Iteration %r has no collection, block removed", directive.name)
        return Rewrite(text[:open_start] + text[close_end:], applied=True)

    if not _is_item_sequence(items):
        logger.debug(
            "Iteration %r skipped: expected a sequence of mappings, got %s",
            directive.name, type(items).__name__,
        )
        return Rewrite(text, applied=False)

    rendered_body = "".join(render(body, item) for item in items)

    # Справа налево: закрывающий тег, тело, открывающий тег
    result = text[:close_start] + text[close_end:]
    result = result[:open_end] + rendered_body + result[close_start:]
    result = result[:open_start] + result[open_end:]

    return Rewrite(result, applied=True)


__all__ = [
    "IF_CLOSE_PATTERN",
    "EACH_CLOSE_PATTERN",
    "TagNotFound",
    "Rewrite",
    "find_tag_ranges",
    "is_truthy",
    "process_conditional",
    "process_each",
]
