import pytest

from sequencekit.vector import Vector


def test_new_vector_is_empty():
    v = Vector()
    assert v.empty()
    assert len(v) == 0
    assert v.capacity() == 0


def test_push_back_and_index():
    v = Vector()
    v.push_back(1)
    v.push_back(2)
    v.push_back(3)
    assert len(v) == 3
    assert [v[0], v[1], v[2]] == [1, 2, 3]
    assert v.front() == 1
    assert v.back() == 3


def test_pop_back():
    v = Vector()
    for x in (1, 2, 3):
        v.push_back(x)
    assert v.pop_back() == 3
    assert len(v) == 2
    assert v.back() == 2


def test_insert_and_erase():
    v = Vector()
    v.push_back(1)
    v.push_back(2)
    assert v.insert(1, 42) == 1
    assert list(v) == [1, 42, 2]
    assert v.erase(1) == 1
    assert list(v) == [1, 2]


def test_clear_then_push_back():
    v = Vector()
    v.push_back(1)
    v.push_back(2)
    cap = v.capacity()
    v.clear()
    assert len(v) == 0
    assert v.empty()
    assert v.capacity() == cap
    v.push_back(10)
    assert len(v) == 1
    assert v[0] == 10


def test_copy_is_independent():
    v = Vector()
    v.push_back(10)
    v2 = v.copy()
    assert len(v2) == 1
    assert v2[0] == 10
    v2[0] = 5
    assert v[0] == 10
    assert v2.capacity() == 1


def test_swap_moves_contents():
    v3 = Vector()
    v3.push_back(10)
    v4 = Vector()
    v4.swap(v3)
    assert len(v4) == 1
    assert v4[0] == 10
    assert v3.empty()


def test_stress_push_back():
    big = Vector()
    for i in range(1000):
        big.push_back(i)
    assert len(big) == 1000
    assert list(big) == list(range(1000))
    assert big.capacity() >= 1000


def test_capacity_doubles():
    v = Vector()
    caps = []
    for i in range(5):
        v.push_back(i)
        caps.append(v.capacity())
    assert caps == [1, 2, 4, 4, 8]


def test_constructor_with_count_and_value():
    v = Vector(3, "x")
    assert list(v) == ["x", "x", "x"]
    assert v.capacity() == 3


def test_negative_count_rejected():
    with pytest.raises(ValueError):
        Vector(-1)


def test_out_of_range_access():
    v = Vector(2, 0)
    with pytest.raises(IndexError):
        v.at(2)
    with pytest.raises(IndexError):
        v.at(-1)
    with pytest.raises(IndexError):
        v[5]
    with pytest.raises(IndexError):
        v[5] = 1


def test_front_back_pop_on_empty():
    v = Vector()
    with pytest.raises(IndexError):
        v.front()
    with pytest.raises(IndexError):
        v.back()
    with pytest.raises(IndexError):
        v.pop_back()


def test_insert_count():
    v = Vector()
    for x in (1, 2):
        v.push_back(x)
    v.insert(1, 7, 3)
    assert list(v) == [1, 7, 7, 7, 2]
    assert v.capacity() == 5


def test_insert_out_of_range():
    v = Vector(1, 0)
    with pytest.raises(IndexError):
        v.insert(3, 1)


def test_erase_out_of_range():
    v = Vector()
    with pytest.raises(IndexError):
        v.erase(0)


def test_assign_replaces_contents():
    v = Vector(5, 1)
    v.assign(2, 9)
    assert list(v) == [9, 9]
    assert v.capacity() == 5


def test_reserve_and_shrink():
    v = Vector()
    v.reserve(0)
    assert v.capacity() == 1
    v.reserve(10)
    assert v.capacity() == 10
    v.reserve(4)
    assert v.capacity() == 10
    v.push_back(1)
    v.shrink_to_fit()
    assert v.capacity() == 1


def test_reserve_beyond_max_size():
    v = Vector()
    with pytest.raises(MemoryError):
        v.reserve(v.max_size() + 1)


def test_max_size():
    assert Vector().max_size() == 100_000_000_000


def test_resize_grow_and_truncate():
    v = Vector(2, 1)
    v.resize(4, 0)
    assert list(v) == [1, 1, 0, 0]
    assert v.capacity() >= 4
    v.resize(1)
    assert list(v) == [1]


def test_reverse_iteration():
    v = Vector()
    for x in (1, 2, 3):
        v.push_back(x)
    assert list(reversed(v)) == [3, 2, 1]


def test_equality_and_repr():
    a = Vector(2, 3)
    b = Vector()
    b.push_back(3)
    b.push_back(3)
    assert a == b
    assert repr(a) == "Vector([3, 3])"


def test_swap_rejects_other_types():
    with pytest.raises(TypeError):
        Vector().swap([1, 2])