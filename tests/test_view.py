from nextiter.result import END_OF_VIEW, Item
from nextiter.view import filtered_view, item_at, source_has_items


def test_filtered_view() -> None:
    source = (5, 1, 4, 2, 3)
    assert filtered_view(source, lambda x: x >= 3) == [5, 4, 3]
    assert filtered_view(source, None) == [5, 1, 4, 2, 3]
    assert filtered_view(source, lambda x: False) == []
    assert filtered_view([], None) == []


def test_filtered_view_is_fresh() -> None:
    source = [1, 2]
    view = filtered_view(source, None)
    view.append(3)
    assert source == [1, 2]
    source.append(4)
    assert filtered_view(source, None) == [1, 2, 4]


def test_source_has_items() -> None:
    assert source_has_items([0])
    assert source_has_items({"a": 1})
    assert source_has_items(range(3, 4))
    assert not source_has_items([])
    assert not source_has_items(range(0))


def test_item_at() -> None:
    assert item_at(["a", "b"], 0) == Item("a")
    assert item_at(["a", "b"], 1) == Item("b")
    assert item_at(["a", "b"], 2) is END_OF_VIEW
    assert item_at([], 0) is END_OF_VIEW
    assert item_at(["a"], -1) is END_OF_VIEW
