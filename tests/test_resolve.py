"""Tests for ptrwalk.resolve: node kinds, the array index rule and options."""

from __future__ import annotations

from types import MappingProxyType

import pytest
from pydantic import BaseModel

from ptrwalk.errors import ResolutionError
from ptrwalk.resolve import ResolveOptions, array_index, evaluate, resolve
from ptrwalk.types import Found, Missing

# ===================================================================
# Array index rule
# ===================================================================


class TestArrayIndex:
    @pytest.mark.parametrize(("token", "expected"), [("0", 0), ("7", 7), ("10", 10)])
    def test_canonical_indices(self, token, expected):
        assert array_index(token) == expected

    @pytest.mark.parametrize("token", ["", "-", "-1", "+1", "01", "00", " 1", "1 ", "1.0", "x"])
    def test_rejected_in_strict_mode(self, token):
        assert array_index(token) is None

    def test_leading_zero_allowed_when_lenient(self):
        assert array_index("01", strict=False) == 1
        assert array_index("-1", strict=False) is None

    def test_non_ascii_digits_rejected(self):
        # Arabic-Indic digit one
        assert array_index("١") is None


# ===================================================================
# Sequences
# ===================================================================


class TestSequences:
    def test_index_within_bounds(self):
        assert evaluate(["a", "b"], ["1"]) == "b"

    def test_index_out_of_bounds(self):
        with pytest.raises(ResolutionError) as excinfo:
            evaluate(["a", "b"], ["2"])
        assert excinfo.value.instance == ["a", "b"]
        assert excinfo.value.token == "2"

    @pytest.mark.parametrize("token", ["-", "-1", "01"])
    def test_non_canonical_tokens_absent(self, token):
        assert resolve(["a", "b"], [token]) == Missing(instance=["a", "b"], token=token, depth=0)

    def test_lenient_leading_zero(self):
        opts = ResolveOptions(strict_array_index=False)
        assert resolve(["a", "b"], ["01"], options=opts) == Found("b")

    def test_evaluate_raises_the_missing_error(self):
        doc = {"a": [1]}
        missing = resolve(doc, ["a", "3"])
        with pytest.raises(ResolutionError) as excinfo:
            evaluate(doc, ["a", "3"])
        expected = missing.to_error()
        assert excinfo.value.instance is expected.instance
        assert excinfo.value.token == expected.token
        assert str(excinfo.value) == str(expected)

    def test_tuple_is_a_sequence(self):
        assert evaluate(("x", ("y", "z")), ["1", "0"]) == "y"

    def test_bytes_are_not_a_sequence(self):
        assert isinstance(resolve(b"abc", ["0"]), Missing)


# ===================================================================
# Mappings and scalars
# ===================================================================


class TestMappings:
    def test_mapping_proxy(self):
        assert evaluate(MappingProxyType({"k": 1}), ["k"]) == 1

    def test_numeric_key_is_a_string_key(self):
        assert evaluate({"0": "zero"}, ["0"]) == "zero"

    def test_int_keys_do_not_match_tokens(self):
        assert isinstance(resolve({0: "zero"}, ["0"]), Missing)

    def test_empty_key(self):
        assert evaluate({"": {"": 1}}, ["", ""]) == 1


class TestScalars:
    @pytest.mark.parametrize("value", [None, True, False, 0, 1.5, "text"])
    def test_scalars_have_no_members(self, value):
        result = resolve(value, ["0"])
        assert isinstance(result, Missing)
        assert result.instance is value

    def test_empty_tokens_return_document(self):
        doc = object()
        assert resolve(doc, []) == Found(doc)
        assert evaluate(doc, ()) is doc


# ===================================================================
# ResolveOptions
# ===================================================================


class Inner(BaseModel):
    tags: list[str]


class Outer(BaseModel):
    inner: Inner
    meta: dict[str, int] = {}


class TestResolveOptions:
    def test_defaults(self):
        opts = ResolveOptions()
        assert opts.strict_array_index is True
        assert opts.traverse_models is False
        assert opts.max_depth is None

    def test_negative_max_depth_rejected(self):
        with pytest.raises(ValueError, match="max_depth must be >= 0"):
            ResolveOptions(max_depth=-1)

    def test_max_depth_exceeded(self):
        opts = ResolveOptions(max_depth=2)
        with pytest.raises(ValueError, match="depth 3 exceeds max_depth=2"):
            resolve({"a": {"b": {"c": 1}}}, ["a", "b", "c"], options=opts)

    def test_max_depth_within_limit(self):
        opts = ResolveOptions(max_depth=2)
        assert evaluate({"a": {"b": 1}}, ["a", "b"], options=opts) == 1

    def test_models_are_opaque_by_default(self):
        doc = Outer(inner=Inner(tags=["a"]))
        with pytest.raises(ResolutionError) as excinfo:
            evaluate(doc, ["inner"])
        assert excinfo.value.instance is doc

    def test_traverse_models(self):
        doc = Outer(inner=Inner(tags=["a", "b"]), meta={"n": 3})
        opts = ResolveOptions(traverse_models=True)
        assert evaluate(doc, ["inner", "tags", "1"], options=opts) == "b"
        assert evaluate(doc, ["meta", "n"], options=opts) == 3

    def test_traverse_models_unknown_field(self):
        doc = Outer(inner=Inner(tags=[]))
        opts = ResolveOptions(traverse_models=True)
        result = resolve(doc, ["inner", "missing"], options=opts)
        assert result == Missing(instance=doc.inner, token="missing", depth=1)
