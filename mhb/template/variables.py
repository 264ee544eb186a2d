"""
Подстановка переменных.

Обработчик по умолчанию: всё, что не является блочной директивой,
считается переменной. Регулярные выражения не нужны: текст директивы
известен дословно.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from .tokens import Directive


class _Missing:
    """Маркер отсутствующего значения в контексте."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def lookup(context: Mapping, name: str) -> Any:
    """Значение по ключу или MISSING. None в контексте считается отсутствием значения."""
    value = context.get(name)
    return MISSING if value is None else value


def stringify(value: Any) -> str:
    """
    Строковая форма значения для вывода в шаблон.

    Булевы значения выводятся в нижнем регистре ('true'/'false'):
    на этом же представлении основана проверка условий {{#if}}.
    """
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def process_variable(directive: Directive, text: str, context: Mapping) -> str:
    """
    Заменяет первое вхождение директивы значением из контекста.

    Ключом служит нормализованный текст директивы. Отсутствующее значение
    заменяется пустой строкой, так что тег исчезает из результата.
    """
    position = text.find(directive.raw)
    if position == -1:
        return text

    value = lookup(context, directive.normalized)
    replacement = "" if value is MISSING else stringify(value)
    return text[:position] + replacement + text[position + len(directive.raw):]


__all__ = ["MISSING", "lookup", "stringify", "process_variable"]
