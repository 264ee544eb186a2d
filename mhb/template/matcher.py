"""
Очередь директив и сопоставление блоков.

Список директив строится один раз и больше не меняется; очередь лишь
помечает, какие индексы ещё ожидают обработки. Закрывающие теги,
поглощённые своими блоками, снимаются с очереди по индексу, вне порядка.
"""

from __future__ import annotations

from typing import Iterator, List, Optional, Sequence, Tuple

from .tokens import CLOSING_KIND, Directive, DirectiveKind


class DirectiveQueue:
    """Очередь ожидающих директив поверх неизменяемого списка."""

    def __init__(self, directives: Sequence[Directive]):
        self._directives: Tuple[Directive, ...] = tuple(directives)
        self._pending: List[bool] = [True] * len(self._directives)
        self._cursor = 0

    def __len__(self) -> int:
        return sum(self._pending)

    def __bool__(self) -> bool:
        return self.head() is not None

    def __getitem__(self, index: int) -> Directive:
        return self._directives[index]

    def head(self) -> Optional[int]:
        """Индекс первой ожидающей директивы или None, если очередь пуста."""
        while self._cursor < len(self._directives) and not self._pending[self._cursor]:
            self._cursor += 1
        if self._cursor >= len(self._directives):
            return None
        return self._cursor

    def pending(self, start: int = 0) -> Iterator[Tuple[int, Directive]]:
        """Ожидающие директивы начиная с индекса start (включительно)."""
        for index in range(start, len(self._directives)):
            if self._pending[index]:
                yield index, self._directives[index]

    def discard(self, index: int) -> None:
        self._pending[index] = False

    def discard_through(self, start: int, stop: int) -> None:
        """Снимает с очереди все директивы в диапазоне [start, stop]."""
        for index in range(start, stop + 1):
            self._pending[index] = False


def end_tag_offset(queue: DirectiveQueue, head: int) -> int:
    """
    Смещение закрывающего тега для блока в голове очереди.

    Возвращает номер (с нуля) среди закрывающих тегов того же вида,
    следующих за головой, который закрывает именно её. Вложенные блоки
    того же вида пропускаются; блоки другого вида игнорируются полностью.

    Если подходящий тег не найден, возвращается число просмотренных
    чужих закрывающих тегов: дальнейший поиск по строке тогда не
    найдёт тега и блок останется нетронутым.
    """
    open_kind = queue[head].kind
    close_kind = CLOSING_KIND[open_kind]

    offset = 0
    start = 0
    end = 0

    for _, directive in queue.pending(head + 1):
        if directive.kind is open_kind:
            start += 1
            continue

        if directive.kind is close_kind:
            if start == end:
                return offset
            end += 1
            offset += 1

    return offset


def index_of_end_tag(
    queue: DirectiveQueue,
    offset: int,
    close_kind: DirectiveKind,
    start: int = 0,
) -> Optional[int]:
    """
    Переводит смещение в индекс директивы в очереди.

    Returns:
        Индекс offset-й (с нуля) ожидающей директивы вида close_kind,
        начиная с позиции start, или None если таких меньше.
    """
    seen = -1
    for index, directive in queue.pending(start):
        if directive.kind is close_kind:
            seen += 1
            if seen == offset:
                return index
    return None


__all__ = ["DirectiveQueue", "end_tag_offset", "index_of_end_tag"]
