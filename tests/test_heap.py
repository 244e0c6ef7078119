import random

import pytest

from dskit.heap import (
    MinHeap,
    adjust_down,
    adjust_up,
    heap_sort_descending,
    print_top_k,
    top_k,
)


def _is_min_heap(data, size=None):
    size = len(data) if size is None else size
    return all(data[(i - 1) // 2] <= data[i] for i in range(1, size))


def _random_values(n, seed=7):
    rng = random.Random(seed)
    return [rng.randint(-1000, 1000) for _ in range(n)]


def test_min_heap_pops_in_ascending_order():
    values = _random_values(50)
    heap = MinHeap()
    for v in values:
        heap.push(v)
    assert len(heap) == len(values)
    popped = []
    while not heap.empty():
        popped.append(heap.pop())
    assert popped == sorted(values)
    assert len(heap) == 0


def test_min_heap_top_is_minimum():
    values = _random_values(20, seed=3)
    heap = MinHeap()
    for i, v in enumerate(values, start=1):
        heap.push(v)
        assert heap.top() == min(values[:i])


def test_min_heap_empty_errors():
    heap = MinHeap()
    assert heap.empty()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.top()


def test_adjust_up_moves_new_minimum_to_root():
    data = [1, 3, 5, 0]
    adjust_up(data, 3)
    assert data == [0, 1, 5, 3]


def test_adjust_up_keeps_heap_property():
    values = _random_values(40, seed=11)
    data = []
    for v in values:
        data.append(v)
        adjust_up(data, len(data) - 1)
        assert data[0] == min(data)
        assert _is_min_heap(data)
    assert sorted(data) == sorted(values)


def test_adjust_down_builds_heap():
    data = _random_values(41, seed=5)
    original = sorted(data)
    for parent in range((len(data) - 2) // 2, -1, -1):
        adjust_down(data, len(data), parent)
    assert _is_min_heap(data)
    assert sorted(data) == original


def test_adjust_down_respects_size():
    data = [5, 1, 2, 0]
    adjust_down(data, 3, 0)
    assert data[3] == 0
    assert _is_min_heap(data, 3)


@pytest.mark.parametrize("n", [0, 1, 2, 3, 10, 57])
def test_heap_sort_descending(n):
    data = _random_values(n, seed=n)
    expected = sorted(data, reverse=True)
    heap_sort_descending(data)
    assert data == expected


@pytest.mark.parametrize("k", [1, 3, 10])
def test_top_k_selects_largest(k):
    values = _random_values(100, seed=k)
    result = top_k(values, k)
    assert sorted(result) == sorted(values)[-k:]
    assert _is_min_heap(result)


def test_top_k_accepts_iterator():
    values = _random_values(30, seed=9)
    result = top_k(iter(values), 4)
    assert sorted(result) == sorted(values)[-4:]


def test_top_k_zero():
    assert top_k([1, 2, 3], 0) == []


def test_top_k_errors():
    with pytest.raises(ValueError):
        top_k([1, 2], 3)
    with pytest.raises(ValueError):
        top_k([1, 2], -1)


def test_print_top_k(tmp_path, capsys):
    values = _random_values(200, seed=21)
    path = tmp_path / "data.txt"
    path.write_text("\n".join(str(v) for v in values) + "\n", encoding="utf-8")
    print_top_k(path, 5)
    out = capsys.readouterr().out
    assert out.endswith(" \n")
    printed = [int(tok) for tok in out.split()]
    assert sorted(printed) == sorted(values)[-5:]
    assert _is_min_heap(printed)


def test_print_top_k_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        print_top_k(tmp_path / "missing.txt", 3)


def test_print_top_k_too_few_numbers(tmp_path):
    path = tmp_path / "short.txt"
    path.write_text("4 8", encoding="utf-8")
    with pytest.raises(ValueError):
        print_top_k(path, 3)