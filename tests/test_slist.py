import pytest

from dskit.slist import SList


def test_construct_and_iterate():
    assert list(SList([1, 2, 3])) == [1, 2, 3]
    assert len(SList()) == 0


def test_push_back_and_front():
    sl = SList()
    sl.push_back(2)
    sl.push_front(1)
    sl.push_back(3)
    assert list(sl) == [1, 2, 3]


def test_pop_back_down_to_empty():
    sl = SList([1, 2, 3])
    popped = [sl.pop_back() for _ in range(3)]
    assert popped == [3, 2, 1]
    assert sl.head is None
    with pytest.raises(IndexError):
        sl.pop_back()


def test_pop_front_down_to_empty():
    sl = SList([1, 2])
    assert sl.pop_front() == 1
    assert sl.pop_front() == 2
    with pytest.raises(IndexError):
        sl.pop_front()


def test_find_returns_node():
    sl = SList([5, 6, 7])
    node = sl.find(6)
    assert node.val == 6
    assert node.next.val == 7
    assert sl.find(42) is None


def test_insert_after_and_erase_after():
    sl = SList([1, 3])
    sl.insert_after(sl.find(1), 2)
    assert list(sl) == [1, 2, 3]
    assert sl.erase_after(sl.find(2)) == 3
    assert list(sl) == [1, 2]
    with pytest.raises(ValueError):
        sl.erase_after(sl.find(2))


def test_insert_before_head_and_middle():
    sl = SList([2, 4])
    sl.insert(sl.find(2), 1)
    sl.insert(sl.find(4), 3)
    assert list(sl) == [1, 2, 3, 4]


def test_erase_head_middle_tail():
    sl = SList([1, 2, 3, 4])
    assert sl.erase(sl.find(1)) == 1
    assert sl.erase(sl.find(3)) == 3
    assert sl.erase(sl.find(4)) == 4
    assert list(sl) == [2]


def test_insert_foreign_node_raises():
    other = SList([9])
    sl = SList([1, 2])
    with pytest.raises(ValueError):
        sl.insert(other.head, 0)
    with pytest.raises(ValueError):
        sl.erase(other.head)
    assert list(sl) == [1, 2]


def test_str_and_clear():
    sl = SList([1, 2])
    assert str(sl) == "1->2->NULL"
    sl.clear()
    assert str(sl) == "NULL"