import pytest

from statecheck.hashable import HashableMap, HashableSet


def _set(*values):
    result = HashableSet()
    for value in values:
        result.add(value)
    return result


def _map(*pairs):
    result = HashableMap()
    for key, value in pairs:
        result[key] = value
    return result


class TestHashableSet:
    def test_different_hash_if_items_differ(self):
        s1 = _set("one", "two", "three")
        s2 = _set("four", "five", "six")
        assert hash(s1) != hash(s2)
        assert s1 != s2
        assert hash(s1) == hash(_set("one", "two", "three"))

    def test_insertion_order_is_irrelevant(self):
        s1 = _set("one", "two", "three")
        s2 = _set("three", "one", "two")
        assert hash(s1) == hash(s2)
        assert s1 == s2

    def test_can_hash_set_of_sets(self):
        outer = _set(_set("value"))
        assert hash(outer) == hash(_set(_set("value")))
        assert _set("value") in outer
        assert outer == _set(_set("value"))

    def test_usable_as_dict_key(self):
        table = {_set(1, 2): "a"}
        assert table[_set(2, 1)] == "a"

    def test_equal_to_plain_set(self):
        assert _set(1, 2, 3) == {1, 2, 3}
        assert _set(1, 2) != {1, 2, 3}
        assert _set(1) == frozenset({1})

    def test_ordering_follows_hash(self):
        a = _set(1, 2)
        b = _set(3, 4)
        assert (a < b) == (hash(a) < hash(b))
        assert (a > b) == (hash(a) > hash(b))
        assert a <= _set(2, 1)
        assert a >= _set(2, 1)
        assert not a < _set(2, 1)

    def test_sorting_is_consistent(self):
        sets = [_set(i, i + 1) for i in range(10)]
        ordered = sorted(sets)
        assert sorted(reversed(sets)) == ordered
        assert [hash(s) for s in ordered] == sorted(hash(s) for s in sets)

    def test_copy_keeps_type_and_content(self):
        original = _set(1, 2)
        duplicate = original.copy()
        duplicate.add(3)
        assert isinstance(duplicate, HashableSet)
        assert original == {1, 2}
        assert duplicate == {1, 2, 3}

    def test_repr_is_transparent(self):
        assert repr(_set(1)) == "{1}"
        assert repr(HashableSet()) == "{}"

    def test_unhashable_entries_rejected(self):
        with pytest.raises(TypeError):
            HashableSet([[1, 2]])


class TestHashableMap:
    def test_different_hash_if_items_differ(self):
        m1 = _map(("one", 1), ("two", 2), ("three", 3))
        m2 = _map(("one", 4), ("two", 5), ("three", 6))
        m3 = _map(("four", 1), ("five", 2), ("six", 3))
        assert hash(m1) != hash(m2)
        assert hash(m1) != hash(m3)
        assert hash(m2) != hash(m3)
        assert hash(m1) == hash(_map(("one", 1), ("two", 2), ("three", 3)))

    def test_insertion_order_is_irrelevant(self):
        m1 = _map(("one", 1), ("two", 2), ("three", 3))
        m2 = _map(("three", 3), ("one", 1), ("two", 2))
        assert hash(m1) == hash(m2)
        assert m1 == m2

    def test_can_hash_map_of_maps(self):
        outer = _map(("key", _map(("key", "value"),)))
        assert hash(outer) == hash(_map(("key", _map(("key", "value"),))))
        assert outer["key"]["key"] == "value"

    def test_usable_in_set(self):
        members = {_map((1, "a")), _map((1, "a")), _map((2, "b"))}
        assert len(members) == 2

    def test_equal_to_plain_dict(self):
        assert _map(("a", 1)) == {"a": 1}
        assert _map(("a", 1)) != {"a": 2}

    def test_ordering_follows_hash(self):
        a = _map(("x", 1))
        b = _map(("y", 2))
        assert (a < b) == (hash(a) < hash(b))
        assert (a >= b) == (hash(a) >= hash(b))
        assert a <= _map(("x", 1))
        assert not a > _map(("x", 1))

    def test_unhashable_value_cannot_be_hashed(self):
        m = _map(("k", [1, 2]))
        with pytest.raises(TypeError):
            hash(m)
        assert m == {"k": [1, 2]}
        m["k"] = (1, 2)
        assert hash(m) == hash(_map(("k", (1, 2))))

    def test_copy_and_fromkeys_keep_type(self):
        original = HashableMap.fromkeys(["a", "b"], 0)
        duplicate = original.copy()
        duplicate["c"] = 1
        assert isinstance(original, HashableMap)
        assert isinstance(duplicate, HashableMap)
        assert original == {"a": 0, "b": 0}
        assert duplicate == {"a": 0, "b": 0, "c": 1}

    def test_repr_is_transparent(self):
        assert repr(_map(("a", 1))) == "{'a': 1}"