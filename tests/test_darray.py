import pytest

from warmupkit.darray import DArray


def test_default_is_empty():
    a = DArray()
    assert len(a) == 0
    assert a.capacity == 0
    assert list(a) == []


def test_sized_constructor_fills_value():
    a = DArray(4, 1.5)
    assert list(a) == [1.5, 1.5, 1.5, 1.5]
    assert a.capacity == 4


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        DArray(-1)


def test_demo_sequence_from_main():
    a = DArray()
    a.insert(0, 2.1)
    assert list(a) == [2.1]
    a.append(3.0)
    a.append(3.1)
    a.append(3.2)
    assert list(a) == [2.1, 3.0, 3.1, 3.2]
    a.delete(0)
    assert list(a) == [3.0, 3.1, 3.2]
    a.insert(0, 4.1)
    assert list(a) == [4.1, 3.0, 3.1, 3.2]


def test_str_format():
    a = DArray()
    a.insert(0, 2.1)
    a.append(3.0)
    assert str(a) == "size = 2: 2.1 3"
    assert str(DArray()) == "size = 0:"


def test_resize_pads_with_zero():
    b = DArray()
    b.append(21)
    b.delete(0)
    assert len(b) == 0
    b.append(22)
    b.resize(5)
    assert list(b) == [22.0, 0.0, 0.0, 0.0, 0.0]


def test_resize_shrinks_and_keeps_prefix():
    a = DArray(3, 7.0)
    a[0] = 1.0
    a.resize(1)
    assert list(a) == [1.0]
    a.resize(1)
    assert list(a) == [1.0]


def test_resize_negative_rejected():
    with pytest.raises(ValueError):
        DArray().resize(-2)


def test_character_codes_are_stored_as_numbers():
    c = DArray()
    for ch in "abc":
        c.append(ord(ch))
    c.insert(0, ord("d"))
    assert list(c) == [float(ord(x)) for x in "dabc"]


def test_capacity_doubles():
    a = DArray()
    seen = []
    for i in range(5):
        a.append(i)
        seen.append(a.capacity)
    assert seen == [1, 2, 4, 4, 8]
    assert all(a.capacity >= len(a) for _ in range(1))


def test_reserve_does_not_shrink_or_change_size():
    a = DArray(3)
    a.reserve(1)
    assert a.capacity == 3
    a.reserve(5)
    assert a.capacity == 6
    assert len(a) == 3


def test_copy_is_independent():
    a = DArray()
    for v in (4.1, 3.0, 3.1):
        a.append(v)
    b = a.copy()
    assert b == a
    assert b.capacity == len(a)
    b[0] = 9.0
    assert a[0] == 4.1
    assert b != a


def test_index_bounds():
    a = DArray(2)
    with pytest.raises(IndexError):
        a[2]
    with pytest.raises(IndexError):
        a[-1]
    with pytest.raises(IndexError):
        a[5] = 1.0
    with pytest.raises(IndexError):
        a.delete(2)
    with pytest.raises(IndexError):
        a.insert(3, 1.0)
    with pytest.raises(IndexError):
        a.insert(-1, 1.0)


def test_insert_at_end_appends():
    a = DArray(2, 1.0)
    a.insert(2, 5.0)
    assert list(a) == [1.0, 1.0, 5.0]


def test_setitem_and_getitem_roundtrip():
    a = DArray(3)
    a[1] = 2.5
    assert a[1] == 2.5
    assert list(a) == [0.0, 2.5, 0.0]


def test_eq_with_other_type_is_false():
    assert (DArray(1) == [0.0]) is False
    assert DArray(2, 1.0) == DArray(2, 1.0)


def test_non_integer_index_rejected():
    with pytest.raises(TypeError):
        DArray(2)[0.5]