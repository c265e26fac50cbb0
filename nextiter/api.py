from typing import Iterable, Optional, TypeVar

from .cursor import Cursor, Mode
from .view import Predicate

T = TypeVar("T")


def next_iterator(
    source: Iterable[T],
    predicate: Optional[Predicate[T]] = None,
    *,
    mode: Mode = Mode.stop_at_end,
) -> Cursor[T]:
    return Cursor(source, predicate, mode)
