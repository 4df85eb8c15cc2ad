"""Tests for parameter payload helpers."""

from types import MappingProxyType

from tool_gate.params import as_params, is_plain_mapping, merge_params, params_equal


class TestParamsEqual:
    """Canonical deep equality used to decide on a coach re-check."""

    def test_key_order_irrelevant(self):
        assert params_equal({"a": 1, "b": {"x": 1, "y": 2}}, {"b": {"y": 2, "x": 1}, "a": 1})

    def test_bool_is_not_int(self):
        assert not params_equal({"force": True}, {"force": 1})
        assert not params_equal([0], [False])

    def test_int_and_float(self):
        assert params_equal({"n": 1}, {"n": 1.0})

    def test_string_is_not_number(self):
        assert not params_equal({"n": "1"}, {"n": 1})

    def test_missing_vs_none(self):
        assert not params_equal({"a": None}, {})

    def test_nested_lists(self):
        assert params_equal({"args": ["-l", {"k": [1]}]}, {"args": ["-l", {"k": [1]}]})
        assert not params_equal({"args": ["-l"]}, {"args": ["-l", "-a"]})

    def test_list_and_tuple_compare_as_sequences(self):
        assert params_equal([1, 2], (1, 2))

    def test_mapping_vs_non_mapping(self):
        assert not params_equal({}, [])
        assert not params_equal({"a": 1}, None)


class TestMappingHelpers:
    """Tests for mapping detection and merging."""

    def test_is_plain_mapping(self):
        assert is_plain_mapping({})
        assert is_plain_mapping(MappingProxyType({"a": 1}))
        assert not is_plain_mapping([("a", 1)])
        assert not is_plain_mapping("a")
        assert not is_plain_mapping(None)

    def test_as_params(self):
        params = {"a": 1}
        assert as_params(params) is params
        assert as_params(MappingProxyType({"a": 1})) == {"a": 1}
        assert as_params("nope") == {}

    def test_merge_params_is_shallow_and_new(self):
        base = {"a": 1, "nested": {"x": 1}}
        merged = merge_params(base, {"nested": {"y": 2}, "b": 2})

        assert merged == {"a": 1, "nested": {"y": 2}, "b": 2}
        assert base == {"a": 1, "nested": {"x": 1}}

    def test_merge_over_non_mapping(self):
        assert merge_params(None, {"a": 1}) == {"a": 1}
