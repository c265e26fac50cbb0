import enum
from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")


class EndReason(enum.Enum):
    """Why a cursor had nothing to return.

    view_exhausted is used in both modes: under stop_at_end once the filtered
    view has been read to the end, and under repeat when the predicate rejects
    every element of a non-empty source.

    """

    source_empty = 1
    view_exhausted = 2


@dataclass(frozen=True)
class Item(Generic[T]):
    value: T


@dataclass(frozen=True)
class End:
    """Returned instead of an Item when there is nothing left to read."""

    reason: EndReason


END_OF_SOURCE = End(EndReason.source_empty)
END_OF_VIEW = End(EndReason.view_exhausted)

Result = Union[Item[T], End]


def is_end(result: "Result[T]") -> bool:
    return isinstance(result, End)


def unwrap(result: "Result[T]", default: T) -> T:
    if isinstance(result, Item):
        return result.value
    return default
