import pytest

from strlist import NOT_FOUND, OrderedList, OutOfRange


@pytest.fixture
def source_data() -> OrderedList:
    return OrderedList([3, 1, 2])


@pytest.fixture
def large_source_data() -> OrderedList:
    return OrderedList([5, 3, 5, 1, 3, 5, 2])


def test_new_list_is_rewound(source_data: OrderedList):
    assert source_data.cursor == -1
    assert OrderedList().is_empty()
    assert not source_data.is_empty()


def test_constructor_copies():
    initial = [1, 2]
    copied = OrderedList(initial)
    copied.set_at(0, 9)
    assert initial == [1, 2]


def test_is_out_of_bound(source_data: OrderedList):
    assert not source_data.is_out_of_bound(0)
    assert not source_data.is_out_of_bound(2)
    assert source_data.is_out_of_bound(3)
    assert source_data.is_out_of_bound(-1)


def test_get_at(source_data: OrderedList):
    assert source_data.get_at(1) == 1
    with pytest.raises(OutOfRange) as info:
        source_data.get_at(3)
    assert info.value.index == 3
    assert info.value.length == 3


def test_checked_access_rejects_negative_index(source_data: OrderedList):
    with pytest.raises(OutOfRange):
        source_data.get_at(-1)
    with pytest.raises(OutOfRange):
        source_data.set_at(-1, 0)
    with pytest.raises(OutOfRange):
        source_data.delete_at(-1)
    with pytest.raises(OutOfRange):
        source_data.move_to(-1)
    assert source_data == [3, 1, 2]


def test_out_of_range_is_index_error(source_data: OrderedList):
    with pytest.raises(IndexError):
        source_data.get_at(10)


def test_set_at(source_data: OrderedList):
    source_data.set_at(0, 7)
    assert source_data == [7, 1, 2]
    with pytest.raises(OutOfRange):
        source_data.set_at(3, 7)
    assert source_data == [7, 1, 2]


def test_delete_at(source_data: OrderedList):
    source_data.delete_at(0)
    assert source_data == [1, 2]
    assert source_data.length() == 2
    with pytest.raises(OutOfRange):
        source_data.delete_at(2)
    assert source_data == [1, 2]


def test_find_exist_count(large_source_data: OrderedList):
    assert large_source_data.find(3) == 1
    assert large_source_data.find(4) == NOT_FOUND
    for value in (1, 2, 3, 4, 5):
        assert large_source_data.exist(value) == (large_source_data.find(value) != NOT_FOUND)
        assert (large_source_data.count(value) == 0) == (not large_source_data.exist(value))
    assert large_source_data.count(5) == 3
    assert 2 in large_source_data
    assert 4 not in large_source_data


def test_sort(source_data: OrderedList):
    source_data.sort()
    assert source_data == [1, 2, 3]


def test_reverse_sorts_descending(source_data: OrderedList):
    source_data.reverse()
    assert source_data == [3, 2, 1]


def test_dedup(large_source_data: OrderedList):
    large_source_data.dedup()
    assert large_source_data == [5, 3, 1, 2]
    for value in large_source_data:
        assert large_source_data.count(value) == 1


def test_dedup_idempotent(large_source_data: OrderedList):
    large_source_data.dedup()
    once = large_source_data.to_array()
    large_source_data.dedup()
    assert large_source_data.to_array() == once


def test_views_are_independent(large_source_data: OrderedList):
    view = large_source_data.range(1, 4)
    assert view == [3, 5, 1]
    assert isinstance(view, OrderedList)
    assert view.cursor == -1

    view.set_at(0, 0)
    assert large_source_data.get_at(1) == 3

    assert large_source_data.from_index(5) == [5, 2]
    assert large_source_data.until(2) == [5, 3]
    assert large_source_data[2:4] == [5, 1]


def test_to_array_is_a_copy(source_data: OrderedList):
    array = source_data.to_array()
    array.append(4)
    assert source_data.length() == 3


def test_iteration_leaves_cursor(source_data: OrderedList):
    assert list(source_data) == [3, 1, 2]
    assert source_data.cursor == -1


def test_equality(source_data: OrderedList):
    assert source_data == OrderedList([3, 1, 2])
    assert source_data == (3, 1, 2)
    assert source_data != [1, 2, 3]
    assert source_data != "312"
