"""Tests for pick, pick_by, omit, has, last."""

from dashlet import pick, pick_by, omit, has, last


class TestPick:
    def test_picks_listed_keys(self):
        obj = {"a": 1, "b": "2", "c": 3}
        assert pick(obj, ["a", "c"]) == {"a": 1, "c": 3}

    def test_ignores_missing_keys(self):
        assert pick({"a": 1, "b": "2"}, ["a", "c"]) == {"a": 1}

    def test_no_matches(self):
        assert pick({"a": 1, "b": "2"}, ["c", "d"]) == {}

    def test_empty_object(self):
        assert pick({}, ["a", "b"]) == {}

    def test_single_key_string(self):
        assert pick({"ab": 1, "a": 2}, "ab") == {"ab": 1}

    def test_does_not_mutate(self):
        obj = {"a": 1, "b": 2}
        pick(obj, ["a"])
        assert obj == {"a": 1, "b": 2}

    def test_non_mapping_is_empty(self):
        assert pick(None, ["a"]) == {}
        assert pick([1, 2], [0]) == {}

    def test_keeps_none_values(self):
        assert pick({"a": None}, ["a"]) == {"a": None}


class TestPickBy:
    def test_picks_matching_values(self):
        obj = {"a": 1, "b": "2", "c": 3}
        assert pick_by(obj, lambda v, k: isinstance(v, int)) == {"a": 1, "c": 3}

    def test_no_matches(self):
        obj = {"a": "1", "b": "2", "c": "3"}
        assert pick_by(obj, lambda v, k: isinstance(v, int)) == {}

    def test_empty_object(self):
        assert pick_by({}, lambda v, k: v) == {}

    def test_predicate_receives_key(self):
        obj = {"keep": 1, "drop": 2}
        assert pick_by(obj, lambda v, k: k == "keep") == {"keep": 1}

    def test_preserves_order(self):
        obj = {"z": 1, "a": 2, "m": 3}
        assert list(pick_by(obj, lambda v, k: True)) == ["z", "a", "m"]

    def test_non_mapping_is_empty(self):
        assert pick_by(None, lambda v, k: True) == {}
        assert pick_by([1, 2], lambda v, k: True) == {}


class TestOmit:
    def test_omits_listed_keys(self):
        obj = {"a": 1, "b": "2", "c": 3}
        assert omit(obj, ["a", "c"]) == {"b": "2"}

    def test_missing_keys_are_noops(self):
        obj = {"a": 1, "b": 2}
        assert omit(obj, ["c"]) == obj

    def test_empty_object(self):
        assert omit({}, ["a", "b"]) == {}

    def test_returns_copy(self):
        obj = {"a": 1}
        result = omit(obj, [])
        assert result == obj
        assert result is not obj

    def test_does_not_mutate(self):
        obj = {"a": 1, "b": 2}
        omit(obj, ["a"])
        assert obj == {"a": 1, "b": 2}

    def test_copy_is_shallow(self):
        nested = {"x": 1}
        result = omit({"a": nested, "b": 2}, ["b"])
        assert result["a"] is nested

    def test_non_mapping_is_empty(self):
        assert omit(None, ["a"]) == {}
        assert omit("abc", ["a"]) == {}

    def test_matches_pick_of_remaining_keys(self):
        obj = {"a": 1, "b": 2, "c": 3, "d": 4}
        dropped = ["b", "d", "z"]
        remaining = [k for k in obj if k not in dropped]
        assert omit(obj, dropped) == pick(obj, remaining)


class TestHas:
    def test_existing_path(self):
        assert has({"a": {"b": {"c": 3}}}, "a.b.c") is True

    def test_missing_path(self):
        assert has({"a": {"b": {"c": 3}}}, "a.b.d") is False

    def test_empty_object(self):
        assert has({}, "a") is False

    def test_nested_arrays(self):
        assert has({"a": [{"b": {"c": 3}}]}, "a[0].b.c") is True

    def test_bracket_and_dot_are_synonyms(self):
        obj = {"a": [{"b": 1}]}
        assert has(obj, "a.0.b") is True

    def test_index_out_of_range(self):
        assert has({"a": [1]}, "a[1]") is False

    def test_negative_index_is_not_a_key(self):
        assert has({"a": [1]}, "a.-1") is False

    def test_key_with_none_value_is_present(self):
        assert has({"a": None}, "a") is True

    def test_cannot_descend_into_none(self):
        assert has({"a": None}, "a.b") is False

    def test_cannot_descend_into_atoms(self):
        assert has({"a": "text"}, "a.0") is False
        assert has({"a": 5}, "a.b") is False

    def test_non_container_root(self):
        assert has(None, "a") is False
        assert has(42, "a") is False
        assert has("abc", "0") is False

    def test_integer_mapping_keys(self):
        assert has({"a": {0: "x"}}, "a[0]") is True

    def test_path_as_list(self):
        assert has({"a": {"b": 1}}, ["a", "b"]) is True

    def test_decomposes_into_steps(self):
        obj = {"a": {"b": {"c": 1}}, "x": {"y": {}}}
        for path in ("a.b.c", "x.y.z"):
            first, second, third = path.split(".")
            stepwise = (
                has(obj, first)
                and has(obj[first], second)
                and has(obj[first][second], third)
            )
            assert has(obj, path) == stepwise


class TestLast:
    def test_last_element(self):
        assert last([1, 2, 3, 4]) == 4

    def test_empty(self):
        assert last([]) is None

    def test_single_element(self):
        assert last([1]) == 1

    def test_tuple(self):
        assert last(("a", "b")) == "b"
