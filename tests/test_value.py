import pytest

from leptjson.value import JsonType, JsonValue


def _number(n):
    v = JsonValue()
    v.number = n
    return v


def _string(s):
    v = JsonValue()
    v.string = s
    return v


def _build(data):
    v = JsonValue()
    if data is None:
        v.set_null()
    elif isinstance(data, bool):
        v.boolean = data
    elif isinstance(data, (int, float)):
        v.number = data
    elif isinstance(data, str):
        v.string = data
    elif isinstance(data, list):
        v.set_array()
        for item in data:
            v.push_back().move_from(_build(item))
    else:
        v.set_object()
        for key, item in data.items():
            v.set_member(key).move_from(_build(item))
    return v


def test_new_value_is_null():
    assert JsonValue().type is JsonType.NULL


def test_access_null():
    v = _string("a")
    v.set_null()
    assert v.type is JsonType.NULL


def test_access_boolean():
    v = _string("a")
    v.boolean = True
    assert v.boolean is True
    assert v.type is JsonType.TRUE
    v.boolean = False
    assert v.boolean is False
    assert v.type is JsonType.FALSE


def test_access_number():
    v = _string("a")
    v.number = 1234.5
    assert v.number == 1234.5
    assert v.type is JsonType.NUMBER


def test_access_string():
    v = JsonValue()
    v.string = ""
    assert v.string == ""
    assert len(v) == 0
    v.string = "Hello"
    assert v.string == "Hello"
    assert len(v) == 5


def test_string_keeps_embedded_nul():
    v = _string("Hello\0World")
    assert v.string == "Hello\0World"
    assert len(v) == 11


@pytest.mark.parametrize("attribute", ["boolean", "number", "string"])
def test_wrong_type_access_raises(attribute):
    v = JsonValue()
    with pytest.raises(TypeError) as info:
        getattr(v, attribute)
    assert isinstance(info.value, TypeError)
    assert v.type is JsonType.NULL


def test_access_array():
    a = JsonValue()
    for capacity in (0, 5):
        a.set_array(capacity)
        assert len(a) == 0
        assert a.array_capacity == capacity
        for i in range(10):
            a.push_back().move_from(_number(i))
        assert len(a) == 10
        assert [a[i].number for i in range(10)] == [float(i) for i in range(10)]

    a.pop_back()
    assert len(a) == 9
    assert [a[i].number for i in range(9)] == [float(i) for i in range(9)]

    a.erase(4, 0)
    assert len(a) == 9
    assert [a[i].number for i in range(9)] == [float(i) for i in range(9)]

    a.erase(8, 1)
    assert len(a) == 8
    assert [a[i].number for i in range(8)] == [float(i) for i in range(8)]

    a.erase(0, 2)
    assert len(a) == 6
    assert [a[i].number for i in range(6)] == [float(i + 2) for i in range(6)]

    for i in range(2):
        a.insert(i).move_from(_number(i))
    assert len(a) == 8
    assert [a[i].number for i in range(8)] == [float(i) for i in range(8)]

    assert a.array_capacity > 8
    a.shrink_array()
    assert a.array_capacity == 8
    assert len(a) == 8
    assert [a[i].number for i in range(8)] == [float(i) for i in range(8)]

    a.push_back().move_from(_string("Hello"))
    capacity = a.array_capacity
    a.clear_array()
    assert len(a) == 0
    assert a.array_capacity == capacity
    a.shrink_array()
    assert a.array_capacity == 0


def test_reserve_array_only_grows():
    a = JsonValue()
    a.set_array(4)
    a.reserve_array(2)
    assert a.array_capacity == 4
    a.reserve_array(9)
    assert a.array_capacity == 9


def test_array_errors():
    a = JsonValue()
    a.set_array()
    with pytest.raises(IndexError):
        a.pop_back()
    with pytest.raises(IndexError):
        a[0]
    with pytest.raises(IndexError):
        a.insert(1)
    a.push_back()
    with pytest.raises(IndexError):
        a.erase(0, 2)
    with pytest.raises(ValueError):
        a.set_array(-1)


def test_array_operations_on_non_array_raise():
    v = _number(1)
    with pytest.raises(TypeError):
        v.push_back()
    with pytest.raises(TypeError):
        len(JsonValue())


def test_access_object():
    o = JsonValue()
    for capacity in (0, 5):
        o.set_object(capacity)
        assert len(o) == 0
        assert o.object_capacity == capacity
        for i in range(10):
            o.set_member(chr(ord("a") + i)).move_from(_number(i))
        assert len(o) == 10
        for i in range(10):
            index = o.find_index(chr(ord("a") + i))
            assert index is not None
            assert o.value_at(index).number == float(i)

    index = o.find_index("j")
    assert index is not None
    o.remove_member(index)
    assert o.find_index("j") is None
    assert len(o) == 9

    index = o.find_index("a")
    assert index is not None
    o.remove_member(index)
    assert o.find_index("a") is None
    assert len(o) == 8

    assert o.object_capacity > 8
    o.shrink_object()
    assert o.object_capacity == 8
    assert len(o) == 8
    for i in range(8):
        key = chr(ord("a") + i + 1)
        assert o.value_at(o.find_index(key)).number == float(i + 1)

    o.set_member("World").move_from(_string("Hello"))
    found = o.find("World")
    assert found is not None
    assert found.string == "Hello"

    capacity = o.object_capacity
    o.clear_object()
    assert len(o) == 0
    assert o.object_capacity == capacity
    o.shrink_object()
    assert o.object_capacity == 0


def test_object_keys_keep_insertion_order():
    o = _build({"n": None, "f": False, "t": True})
    assert [o.key_at(i) for i in range(len(o))] == ["n", "f", "t"]
    assert o["t"].boolean is True


def test_set_member_returns_existing_value():
    o = _build({"k": 1})
    assert o.set_member("k") is o.find("k")
    assert len(o) == 1


def test_object_errors():
    o = _build({"k": 1})
    with pytest.raises(IndexError):
        o.key_at(1)
    with pytest.raises(IndexError):
        o.remove_member(3)
    with pytest.raises(KeyError):
        o["missing"]
    assert o.find("missing") is None
    with pytest.raises(TypeError):
        _number(1).find("k")


@pytest.mark.parametrize(
    "left, right, equal",
    [
        (True, True, True),
        (True, False, False),
        (False, False, True),
        (None, None, True),
        (None, 0, False),
        (123, 123, True),
        (123, 456, False),
        ("abc", "abc", True),
        ("abc", "abcd", False),
        ([], [], True),
        ([], None, False),
        ([1, 2, 3], [1, 2, 3], True),
        ([1, 2, 3], [1, 2, 3, 4], False),
        ([[]], [[]], True),
        ({}, {}, True),
        ({}, None, False),
        ({}, [], False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2}, True),
        ({"a": 1, "b": 2}, {"b": 2, "a": 1}, True),
        ({"a": 1, "b": 2}, {"a": 1, "b": 3}, False),
        ({"a": 1, "b": 2}, {"a": 1, "b": 2, "c": 3}, False),
        ({"a": {"b": {"c": {}}}}, {"a": {"b": {"c": {}}}}, True),
        ({"a": {"b": {"c": {}}}}, {"a": {"b": {"c": []}}}, False),
    ],
)
def test_equal(left, right, equal):
    assert (_build(left) == _build(right)) is equal


def test_copy():
    v1 = _build({"t": True, "f": False, "n": None, "d": 1.5, "a": [1, 2, 3]})
    v2 = v1.copy()
    assert v2 == v1
    v2.find("a").push_back()
    assert len(v1.find("a")) == 3
    assert not v2 == v1


def test_move():
    v1 = _build({"t": True, "f": False, "n": None, "d": 1.5, "a": [1, 2, 3]})
    v2 = v1.copy()
    v3 = JsonValue()
    v3.move_from(v2)
    assert v2.type is JsonType.NULL
    assert v3 == v1


def test_move_into_self_raises():
    v = _number(1)
    with pytest.raises(ValueError):
        v.move_from(v)


def test_swap():
    v1 = _string("Hello")
    v2 = _string("World!")
    v1.swap(v2)
    assert v1.string == "World!"
    assert v2.string == "Hello"


def test_swap_with_self_keeps_value():
    v = _string("Hello")
    v.swap(v)
    assert v.string == "Hello"