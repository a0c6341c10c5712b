"""Tests for the declarative rule engine"""
import math
import pytest

from product_api.validators.rules import (
    MISSING,
    RequestInput,
    body,
    build_input,
    chain,
    greater_than_zero,
    is_boolean,
    is_int,
    is_numeric,
    not_empty,
    param,
    to_json_value,
    to_number,
    to_text,
    validate,
)


class TestToText:
    """String rendering used by text-based checks"""

    @pytest.mark.parametrize("value,expected", [
        (MISSING, ""),
        (None, ""),
        (True, "true"),
        (False, "false"),
        (300, "300"),
        (300.0, "300"),
        (12.5, "12.5"),
        ("Hola", "Hola"),
        ([1, 2], "1,2"),
        ({"a": 1}, "[object Object]"),
    ])
    def test_rendering(self, value, expected):
        assert to_text(value) == expected


class TestToNumber:

    def test_numbers_and_booleans(self):
        assert to_number(5) == 5.0
        assert to_number(True) == 1.0
        assert to_number(" 7 ") == 7.0
        assert to_number("") == 0.0

    def test_non_numeric(self):
        assert math.isnan(to_number("Hola"))
        assert math.isnan(to_number(None))
        assert math.isnan(to_number(MISSING))
        assert math.isnan(to_number({"a": 1}))


class TestPredicates:

    @pytest.mark.parametrize("value", [1, "1", "-500", "+3", "12.5", ".5", 0])
    def test_is_numeric_accepts(self, value):
        assert is_numeric(value)

    @pytest.mark.parametrize("value", [MISSING, None, "", "Hola", "1e5", True, "1.", " 1"])
    def test_is_numeric_rejects(self, value):
        assert not is_numeric(value)

    def test_is_int(self):
        assert is_int("42")
        assert is_int(-3)
        assert is_int(7.0)
        assert not is_int("1.5")
        assert not is_int("abc")
        assert not is_int(MISSING)

    def test_not_empty(self):
        assert not_empty("x")
        assert not_empty(0)
        assert not_empty(False)
        assert not not_empty("")
        assert not not_empty(None)
        assert not not_empty(MISSING)

    @pytest.mark.parametrize("value", [True, False, "true", "false", 1, 0, "1", "0"])
    def test_is_boolean_accepts(self, value):
        assert is_boolean(value)

    @pytest.mark.parametrize("value", [MISSING, None, "yes", "True", 2, ""])
    def test_is_boolean_rejects(self, value):
        assert not is_boolean(value)

    def test_greater_than_zero(self):
        assert greater_than_zero(1)
        assert greater_than_zero("0.01")
        assert not greater_than_zero(0)
        assert not greater_than_zero(-500)
        assert not greater_than_zero("Hola")
        assert not greater_than_zero("")
        assert not greater_than_zero(None)
        assert not greater_than_zero(MISSING)


class TestChain:

    def test_with_message_relabels_previous_rule_only(self):
        rules = chain(body("price").is_numeric().not_empty().with_message("vacio"))

        assert [rule.message for rule in rules] == ["Invalid value", "vacio"]

    def test_with_message_requires_a_rule(self):
        with pytest.raises(ValueError):
            body("price").with_message("nothing to label")

    def test_rules_keep_declaration_order(self):
        rules = chain(param("id").is_int(), body("name").not_empty())

        assert [(rule.location, rule.field) for rule in rules] == [("params", "id"), ("body", "name")]


class TestValidate:

    def test_collects_every_failure(self):
        rules = chain(
            param("id").is_int().with_message("bad id"),
            body("name").not_empty().with_message("no name"),
        )

        errors = validate(rules, RequestInput(params={"id": "x"}, body={}))

        assert [error["msg"] for error in errors] == ["bad id", "no name"]
        assert errors[0] == {
            "type": "field",
            "value": "x",
            "msg": "bad id",
            "path": "id",
            "location": "params",
        }
        assert errors[1]["value"] is None

    def test_passing_input(self):
        rules = chain(body("name").not_empty())

        assert validate(rules, RequestInput(body={"name": "Monitor"})) == []

    def test_build_input_ignores_non_object_payloads(self):
        request_input = build_input({"id": "1"}, ["name"])

        assert request_input.params == {"id": "1"}
        assert request_input.body == {}

    def test_non_finite_values_are_echoed_as_null(self):
        rules = chain(body("price").is_numeric())

        errors = validate(rules, RequestInput(body={"price": math.inf}))

        assert errors[0]["value"] is None


class TestToJsonValue:

    @pytest.mark.parametrize("value,expected", [
        (MISSING, None),
        (math.inf, None),
        (-math.inf, None),
        (math.nan, None),
        (12.5, 12.5),
        ("Hola", "Hola"),
        ([1, math.inf], [1, None]),
        ({"a": -math.inf, "b": 2}, {"a": None, "b": 2}),
    ])
    def test_rendering(self, value, expected):
        assert to_json_value(value) == expected
