"""

Tools for driving a cursor.

"""


from typing import List, TypeVar

from .cursor import Cursor, Mode
from .result import End

T = TypeVar("T")


def take(cursor: Cursor[T], count: int) -> List[T]:
    """Read up to count values, stopping early at the end of the sequence."""
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    values = []
    for _ in range(count):
        result = cursor.next()
        if isinstance(result, End):
            break
        values.append(result.value)
    return values


def drain(cursor: Cursor[T]) -> List[T]:
    """Read every remaining value."""
    if cursor.mode is Mode.repeat:
        raise ValueError("Cannot drain a repeating cursor")
    return list(cursor)
