"""
Tests for the @check and @validates decorators.
"""

import pytest
from helpers import Person, PersonModel

from amass import Below, Check, Empty, Invalid, Valid, check, run_single, validates


class TestCheckDecorator:
    def test_bare_decorator(self):
        @check
        def no_spaces(s):
            if " " in s:
                return "No spaces allowed"

        assert isinstance(no_spaces, Check)
        assert no_spaces.name == "no_spaces"
        assert no_spaces("ab") == Valid("ab")
        assert no_spaces("a b") == Invalid(("No spaces allowed",))

    def test_list_of_messages(self):
        @check
        def password(s):
            errors = []
            if len(s) < 8:
                errors.append("Too short")
            if s.isalpha():
                errors.append("Needs a digit")
            return errors

        assert password("abc") == Invalid(("Too short", "Needs a digit"))
        assert password("abcdefg1") == Valid("abcdefg1")

    def test_with_arguments(self):
        @check(name="lower", transform=True)
        def lowercase(s):
            return Valid(s.lower())

        assert lowercase.name == "lower"
        assert lowercase.transform
        assert run_single([lowercase, Empty()], "ABC") == Valid("abc")

    def test_unsupported_result_is_fault(self):
        @check
        def sloppy(s):
            return 42

        result = sloppy("x")
        assert isinstance(result, Invalid)
        assert "sloppy" in result.errors[0]


class TestValidates:
    def test_positional(self):
        @validates([Empty("Name must not be empty")], [Below(18, "You must be at least 18 to buy beer")])
        def make_person(name, age):
            return Person(name, age)

        assert make_person("Dennis", 42) == Valid(Person("Dennis", 42))
        assert make_person("", 17) == Invalid(
            ("Name must not be empty", "You must be at least 18 to buy beer")
        )
        assert make_person.plan.arity == 2

    def test_named(self):
        @validates(
            name=[Empty("Name must not be empty")],
            age=[Below(18, "You must be at least 18 to buy beer")],
        )
        def make_person(name, age):
            return PersonModel(name=name, age=age)

        assert make_person("Dennis", age=42) == Valid(PersonModel(name="Dennis", age=42))
        assert make_person(name="", age=17).errors == (
            "Name must not be empty",
            "You must be at least 18 to buy beer",
        )

    def test_body_not_run_on_failure(self):
        calls = []

        @validates([Empty("empty")])
        def record(x):
            calls.append(x)
            return x

        assert isinstance(record(""), Invalid)
        assert calls == []

    def test_argument_errors(self):
        @validates(name=[], age=[])
        def make_person(name, age):
            return Person(name, age)

        with pytest.raises(TypeError):
            make_person("Dennis", 42, "extra")
        with pytest.raises(TypeError):
            make_person("Dennis", name="Dennis")

        @validates([])
        def positional_only(x):
            return x

        with pytest.raises(TypeError):
            positional_only(x=1)


class TestPredicateStyleCheck:
    def test_false_is_rule_violation(self):
        @check
        def is_alpha(s):
            return s.isalpha()

        assert run_single([is_alpha], "abc") == Valid("abc")
        assert run_single([is_alpha], "a1") == Invalid(("Check 'is_alpha' failed",))

    def test_false_uses_custom_name(self):
        @check(name="letters only")
        def is_alpha(s):
            return s.isalpha()

        assert is_alpha("a1") == Invalid(("Check 'letters only' failed",))


class TestValidatesFieldNames:
    def test_reserved_looking_names_are_fields(self):
        @validates(cls=[Empty("cls empty")], combiner=[Empty("combiner empty")])
        def pair(cls, combiner):
            return (cls, combiner)

        assert pair("a", "b") == Valid(("a", "b"))
        assert pair(cls="", combiner="").errors == ("cls empty", "combiner empty")

    def test_mixed_fields_rejected(self):
        with pytest.raises(ValueError):
            validates([Empty()], age=[])
