import pytest

from jsoncobj.iterator import ObjectIterator, iter_begin, iter_default, iter_end
from jsoncobj.value import JsonArray, JsonInt, JsonObject, JsonString


def _sample():
    obj = JsonObject()
    obj.add("first", JsonString("george"))
    obj.add("age", JsonInt(100))
    obj.add("nothing", None)
    return obj


def _walk(obj):
    it = iter_begin(obj)
    end = iter_end(obj)
    pairs = []
    while it != end:
        pairs.append((it.peek_name(), it.peek_value()))
        it.next()
    return pairs


def test_walk_yields_names_in_insertion_order():
    obj = _sample()
    names = [name for name, _ in _walk(obj)]
    assert names == ["first", "age", "nothing"]


def test_walk_yields_values():
    obj = _sample()
    pairs = dict(_walk(obj))
    assert pairs["first"].value == "george"
    assert pairs["age"].value == 100
    assert pairs["nothing"] is None


def test_walk_matches_items():
    obj = _sample()
    assert _walk(obj) == list(obj.items())


def test_empty_object_begin_equals_end():
    obj = JsonObject()
    assert iter_begin(obj) == iter_end(obj)


def test_nonempty_begin_differs_from_end():
    obj = _sample()
    assert iter_begin(obj) != iter_end(obj)


def test_default_equals_end():
    assert iter_default() == iter_end(JsonObject())
    assert iter_default().at_end is True


def test_two_begins_are_equal():
    obj = _sample()
    first = iter_begin(obj)
    second = iter_begin(obj)
    assert (first == second) is True
    assert first.peek_name() == "first"
    assert second.peek_name() == "first"
    assert first.at_end is False


def test_advanced_iterator_differs_from_begin():
    obj = _sample()
    it = iter_begin(obj)
    it.next()
    assert it != iter_begin(obj)
    assert it.peek_name() == "age"


def test_begins_of_different_objects_differ():
    left = iter_begin(_sample())
    right = iter_begin(_sample())
    assert left.peek_name() == "first"
    assert right.peek_name() == "first"
    assert (left == right) is False


def test_next_at_end_raises():
    it = iter_end(_sample())
    with pytest.raises(IndexError):
        it.next()


def test_peek_at_end_raises():
    it = iter_default()
    with pytest.raises(IndexError):
        it.peek_name()
    with pytest.raises(IndexError):
        it.peek_value()


def test_begin_rejects_non_object():
    with pytest.raises(TypeError):
        iter_begin(JsonArray())
    with pytest.raises(TypeError):
        iter_begin(None)


def test_end_rejects_non_object():
    with pytest.raises(TypeError):
        iter_end(JsonString("x"))


def test_replaced_value_is_seen():
    obj = _sample()
    it = iter_begin(obj)
    obj.add("first", JsonInt(7))
    assert it.peek_name() == "first"
    assert it.peek_value().value == 7


def test_compare_with_other_type_is_false():
    assert (iter_default() == 5) is False


def test_walk_reaches_end_after_length_steps():
    obj = _sample()
    it = iter_begin(obj)
    for _ in range(len(obj)):
        it.next()
    assert it == iter_end(obj)
    assert isinstance(it, ObjectIterator) and it.at_end