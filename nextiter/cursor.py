import enum
import logging
from typing import Generic, Iterable, Optional, Sequence, TypeVar

from .result import END_OF_SOURCE, END_OF_VIEW, End, Item, Result
from .view import Predicate, filtered_view, item_at, source_has_items

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Mode(enum.Enum):
    stop_at_end = 1
    repeat = 2


class Cursor(Generic[T]):
    """Pull-based cursor over the elements of source that pass predicate.

    The source is held by reference and enumerated again on every call, so it
    must be re-iterable. Only position changes after construction, and only
    through next() and rewind().

    """

    def __init__(
        self,
        source: Iterable[T],
        predicate: Optional[Predicate[T]] = None,
        mode: Mode = Mode.stop_at_end,
    ) -> None:
        self._source = source
        self._predicate = predicate
        self._mode = mode
        self._position = 0

    def __repr__(self) -> str:
        return (
            f"Cursor(source={self._source!r}, predicate={self._predicate!r}, "
            f"mode={self._mode}, position={self._position})"
        )

    @property
    def source(self) -> Iterable[T]:
        return self._source

    @property
    def predicate(self) -> Optional[Predicate[T]]:
        return self._predicate

    @property
    def mode(self) -> Mode:
        return self._mode

    @property
    def position(self) -> int:
        return self._position

    def can_continue(self) -> bool:
        """Does the source (ignoring the predicate) have any element at all?

        This says nothing about whether next() will produce an Item: under
        stop_at_end the filtered view can be exhausted while the source is not.

        """
        return source_has_items(self.source)

    def view(self) -> Sequence[T]:
        return filtered_view(self.source, self.predicate)

    def exhausted(self, view: Optional[Sequence[T]] = None) -> bool:
        if view is None:
            view = self.view()
        return len(view) <= self.position

    def rewind(self) -> None:
        logger.debug("Rewinding cursor from position %d", self.position)
        self._position = 0

    def next(self) -> Result[T]:
        return self.next_in(self.view())

    def next_in(self, view: Sequence[T]) -> Result[T]:
        """Read the element at the current position of view and advance.

        view should be the cursor's filtered view, possibly computed once by
        the caller and reused for several reads.

        """
        if not self.can_continue():
            logger.debug("Source is empty")
            return END_OF_SOURCE
        if self.exhausted(view):
            if self.mode is Mode.repeat:
                self.rewind()
            else:
                logger.debug("View exhausted at position %d", self.position)
                return END_OF_VIEW
        result = item_at(view, self.position)
        if isinstance(result, Item):
            self._position += 1
        return result

    def __iter__(self) -> "Cursor[T]":
        return self

    def __next__(self) -> T:
        result = self.next()
        if isinstance(result, End):
            raise StopIteration
        return result.value
