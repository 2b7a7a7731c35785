# pyright: reportExplicitAny=false
"""Tests for configuration dictionary merging."""

from typing import Any

from gitsemver.config import copy_value, deep_merge


class TestDeepMerge:
    def test_override_scalar_wins(self) -> None:
        assert deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_missing_keys_preserved(self) -> None:
        assert deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_dicts_merged(self) -> None:
        base: dict[str, Any] = {"branches": {"main": {"tag": "", "increment": "Patch"}}}
        override: dict[str, Any] = {"branches": {"main": {"tag": "rc"}}}

        assert deep_merge(base, override) == {
            "branches": {"main": {"tag": "rc", "increment": "Patch"}}
        }

    def test_lists_replaced(self) -> None:
        assert deep_merge({"sha": ["a", "b"]}, {"sha": ["c"]}) == {"sha": ["c"]}

    def test_type_mismatch_override_wins(self) -> None:
        assert deep_merge({"a": {"b": 1}}, {"a": "flat"}) == {"a": "flat"}

    def test_key_order_base_first(self) -> None:
        merged = deep_merge({"x": 1, "y": 2}, {"z": 3, "x": 4})
        assert list(merged) == ["x", "y", "z"]

    def test_inputs_not_modified(self) -> None:
        base: dict[str, Any] = {"a": {"b": [1]}}
        override: dict[str, Any] = {"a": {"c": 2}}

        merged = deep_merge(base, override)
        merged["a"]["b"].append(2)

        assert base == {"a": {"b": [1]}}
        assert override == {"a": {"c": 2}}


class TestCopyValue:
    def test_copies_nested_structures(self) -> None:
        original: dict[str, Any] = {"a": [{"b": 1}]}
        copied = copy_value(original)

        copied["a"][0]["b"] = 2

        assert original == {"a": [{"b": 1}]}

    def test_primitives_returned_as_is(self) -> None:
        assert copy_value("text") == "text"
        assert copy_value(None) is None
