from nextiter.result import (
    END_OF_SOURCE,
    END_OF_VIEW,
    End,
    EndReason,
    Item,
    is_end,
    unwrap,
)


def test_end_reasons() -> None:
    assert END_OF_SOURCE == End(EndReason.source_empty)
    assert END_OF_VIEW == End(EndReason.view_exhausted)
    assert END_OF_SOURCE != END_OF_VIEW


def test_zero_is_not_end() -> None:
    assert not is_end(Item(0))
    assert not is_end(Item(None))
    assert is_end(END_OF_VIEW)
    assert Item(0) != END_OF_VIEW


def test_unwrap() -> None:
    assert unwrap(Item(0), 42) == 0
    assert unwrap(END_OF_SOURCE, 42) == 42
    assert unwrap(END_OF_VIEW, None) is None
