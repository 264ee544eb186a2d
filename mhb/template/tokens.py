"""
Типизированные директивы шаблона.

Каждый захваченный лексером фрагмент {{...}} превращается в Directive
с заранее вычисленным видом и именем команды, чтобы сопоставитель блоков
и оркестратор работали с видами токенов, а не разбирали текст повторно.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

OPEN_DELIMITER = "{{"
CLOSE_DELIMITER = "}}"

# Символы, которые выбрасываются при нормализации директивы
_STRIPPED_CHARS = frozenset("{} ")


class DirectiveKind(enum.Enum):
    """Виды директив."""
    VARIABLE = "variable"
    IF_OPEN = "if-open"
    IF_CLOSE = "if-close"
    EACH_OPEN = "each-open"
    EACH_CLOSE = "each-close"


# Префиксы нормализованного текста → вид директивы.
# Префиксы не пересекаются
_PREFIXES = (
    ("#if", DirectiveKind.IF_OPEN),
    ("/if", DirectiveKind.IF_CLOSE),
    ("#each", DirectiveKind.EACH_OPEN),
    ("/each", DirectiveKind.EACH_CLOSE),
)

# Вид открывающей директивы → вид её закрывающей пары
CLOSING_KIND = {
    DirectiveKind.IF_OPEN: DirectiveKind.IF_CLOSE,
    DirectiveKind.EACH_OPEN: DirectiveKind.EACH_CLOSE,
}


def normalize(raw: str) -> str:
    """Убирает из текста директивы фигурные скобки и пробелы: '{{ #if a }}' → '#ifa'."""
    return "".join(ch for ch in raw if ch not in _STRIPPED_CHARS)


def classify(normalized: str) -> tuple[DirectiveKind, str]:
    """
    Определяет вид директивы и имя команды по нормализованному тексту.

    Для блоков имя это хвост после префикса (#if/#each), для закрывающих
    тегов пустая строка, для переменных весь нормализованный текст.
    """
    for prefix, kind in _PREFIXES:
        if normalized.startswith(prefix):
            if kind in CLOSING_KIND:
                return kind, normalized[len(prefix):]
            return kind, ""
    return DirectiveKind.VARIABLE, normalized


@dataclass(frozen=True)
class Directive:
    """
    Директива в том виде, в каком она была захвачена из исходного текста.

    Позиция относится к исходному шаблону и служит только для диагностики:
    рабочая строка в процессе рендеринга постоянно переписывается,
    поэтому поиск тегов всегда выполняется заново.
    """
    raw: str
    kind: DirectiveKind
    name: str
    position: int

    @classmethod
    def from_raw(cls, raw: str, position: int) -> "Directive":
        kind, name = classify(normalize(raw))
        return cls(raw=raw, kind=kind, name=name, position=position)

    @property
    def normalized(self) -> str:
        return normalize(self.raw)

    @property
    def is_block_open(self) -> bool:
        return self.kind in CLOSING_KIND

    def __repr__(self) -> str:
        return f"Directive({self.kind.name}, {self.raw!r}, pos={self.position})"


__all__ = [
    "OPEN_DELIMITER",
    "CLOSE_DELIMITER",
    "CLOSING_KIND",
    "DirectiveKind",
    "Directive",
    "normalize",
    "classify",
]
