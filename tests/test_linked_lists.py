import pytest

from algocorner.linked_lists import (
    LinkedList,
    build_multilevel,
    flatten,
    iter_down,
)


def test_str_format():
    assert str(LinkedList([1, 2, 3, 4])) == "1->2->3->4->NULL"
    assert str(LinkedList()) == "NULL"


def test_insert_at_head_and_tail():
    items = LinkedList([1, 2])
    items.insert_at_head(0)
    items.insert_at_tail(3)
    assert list(items) == [0, 1, 2, 3]
    assert len(items) == 4


def test_contains():
    items = LinkedList([0, 1, 2, 3, 4])
    assert 2 in items
    assert 9 not in items


def test_delete_middle_and_head():
    items = LinkedList([0, 1, 2, 3, 4])
    items.delete(2)
    assert list(items) == [0, 1, 3, 4]
    items.delete(0)
    assert list(items) == [1, 3, 4]


def test_delete_only_node():
    items = LinkedList([5])
    items.delete(5)
    assert list(items) == []


def test_delete_missing_raises():
    with pytest.raises(ValueError):
        LinkedList([1, 2]).delete(7)
    with pytest.raises(ValueError):
        LinkedList().delete(1)


def test_delete_head():
    items = LinkedList([4, 5])
    assert items.delete_head() == 4
    assert list(items) == [5]
    items.delete_head()
    with pytest.raises(IndexError):
        items.delete_head()


@pytest.mark.parametrize("values", [[], [1], [0, 1, 3, 4], list(range(20))])
def test_reverse_iterative(values):
    items = LinkedList(values)
    items.reverse()
    assert list(items) == values[::-1]


@pytest.mark.parametrize("values", [[], [1], [0, 1, 3, 4], list(range(20))])
def test_reverse_recursive(values):
    items = LinkedList(values)
    items.reverse_recursive()
    assert list(items) == values[::-1]


def test_rotate_source_example():
    items = LinkedList([1, 2, 3, 4, 5, 6])
    items.rotate(3)
    assert list(items) == [4, 5, 6, 1, 2, 3]


@pytest.mark.parametrize("k", [0, 1, 2, 5, 6, 7, 13])
def test_rotate_moves_last_k_to_front(k):
    values = [1, 2, 3, 4, 5, 6]
    items = LinkedList(values)
    items.rotate(k)
    shift = k % len(values)
    assert list(items) == values[len(values) - shift:] + values[: len(values) - shift]
    assert len(items) == len(values)


def test_rotate_empty_list():
    items = LinkedList()
    items.rotate(3)
    assert list(items) == []


SOURCE_COLUMNS = [[5, 7, 8, 30], [10, 20], [19, 22, 50], [20, 35, 40, 45]]


def test_flatten_source_example_is_sorted_merge():
    root = build_multilevel(SOURCE_COLUMNS)
    flat = flatten(root)
    expected = sorted(value for column in SOURCE_COLUMNS for value in column)
    assert list(iter_down(flat)) == expected


def test_flatten_clears_right_links():
    flat = flatten(build_multilevel(SOURCE_COLUMNS))
    node = flat
    while node is not None:
        assert node.right is None
        node = node.down


def test_build_multilevel_links():
    root = build_multilevel([[1, 4], [2]])
    assert list(iter_down(root)) == [1, 4]
    assert list(iter_down(root.right)) == [2]


def test_flatten_single_column_and_empty():
    root = build_multilevel([[1, 2, 3]])
    assert list(iter_down(flatten(root))) == [1, 2, 3]
    assert flatten(None) is None
    assert build_multilevel([]) is None


def test_empty_column_rejected():
    with pytest.raises(ValueError):
        build_multilevel([[1], []])