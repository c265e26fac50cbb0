"""

Stateless helpers the cursor is built from.

A view is derived from the source each time it is asked for, so it always
reflects the source's contents at call time. Callers that want to reuse one
view for several reads can compute it once and hand it to Cursor.next_in().

"""


from typing import Callable, Iterable, List, Optional, Sequence, TypeVar

from .result import END_OF_VIEW, Item, Result

T = TypeVar("T")

Predicate = Callable[[T], bool]


def filtered_view(source: Iterable[T], predicate: Optional[Predicate[T]]) -> List[T]:
    """Return the elements of source that pass predicate, in source order."""
    if predicate is None:
        return list(source)
    return [element for element in source if predicate(element)]


def source_has_items(source: Iterable[T]) -> bool:
    for _ in source:
        return True
    return False


def item_at(view: Sequence[T], position: int) -> Result[T]:
    if 0 <= position < len(view):
        return Item(view[position])
    return END_OF_VIEW
