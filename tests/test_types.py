"""
Tests for amass.types.
"""

import pytest

from amass import Invalid, Valid


class TestValid:
    def test_holds_value(self):
        v = Valid(42)
        assert v.value == 42
        assert v.is_valid()
        assert not v.is_invalid()
        assert bool(v)

    def test_map_and_then(self):
        assert Valid(2).map(lambda x: x * 10) == Valid(20)
        assert Valid(2).and_then(lambda x: Invalid("nope")) == Invalid(("nope",))

    def test_unwrap(self):
        assert Valid("a").unwrap() == "a"
        assert Valid("a").unwrap_or("b") == "a"

    def test_structural_equality(self):
        assert Valid([1, 2]) == Valid([1, 2])
        assert Valid(1) != Valid(2)


class TestInvalid:
    def test_empty_errors_rejected(self):
        with pytest.raises(ValueError):
            Invalid(())
        with pytest.raises(ValueError):
            Invalid([])

    def test_non_string_message_rejected(self):
        with pytest.raises(TypeError):
            Invalid((1,))

    def test_single_string_wrapped(self):
        assert Invalid("too short").errors == ("too short",)

    def test_list_normalized_to_tuple(self):
        inv = Invalid(["a", "b"])
        assert inv.errors == ("a", "b")
        assert inv == Invalid(("a", "b"))
        assert hash(inv) == hash(Invalid(("a", "b")))

    def test_duplicates_preserved(self):
        assert Invalid(["same", "same"]).errors == ("same", "same")

    def test_flags(self):
        inv = Invalid("x")
        assert inv.is_invalid()
        assert not inv.is_valid()
        assert not bool(inv)

    def test_map_and_then_short_circuit(self):
        inv = Invalid("x")

        def boom(_):
            raise AssertionError("must not be called")

        assert inv.map(boom) is inv
        assert inv.and_then(boom) is inv

    def test_unwrap(self):
        with pytest.raises(ValueError, match="Called unwrap on Invalid"):
            Invalid("x").unwrap()
        assert Invalid("x").unwrap_or(0) == 0

    def test_match_dispatch(self):
        def describe(outcome):
            match outcome:
                case Valid(value=v):
                    return f"ok {v}"
                case Invalid(errors=errs):
                    return f"{len(errs)} errors"

        assert describe(Valid(1)) == "ok 1"
        assert describe(Invalid(["a", "b"])) == "2 errors"
