"""Tests for the product route validation chains"""
import pytest

from product_api.validators.product import (
    CREATE_PRODUCT_RULES,
    GET_PRODUCT_RULES,
    PRODUCT_ID_RULES,
    UPDATE_PRODUCT_RULES,
    parse_product_id,
)
from product_api.validators.rules import RequestInput, validate


def run(rules, params=None, body=None):
    return validate(rules, RequestInput(params=params or {}, body=body or {}))


class TestCreateRules:

    def test_empty_body_yields_four_errors(self):
        assert len(run(CREATE_PRODUCT_RULES)) == 4

    def test_negative_price(self):
        errors = run(CREATE_PRODUCT_RULES, body={"name": "Monitor", "price": -500})

        assert [error["msg"] for error in errors] == ["El Precio debe ser mayor a 0"]

    def test_text_price(self):
        errors = run(CREATE_PRODUCT_RULES, body={"name": "Monitor", "price": "Hola"})

        assert [error["msg"] for error in errors] == ["Invalid value", "El Precio debe ser mayor a 0"]

    @pytest.mark.parametrize("price", [0, -0.01, "0", "-1"])
    def test_non_positive_price_always_fails(self, price):
        errors = run(CREATE_PRODUCT_RULES, body={"name": "Monitor", "price": price})

        assert "El Precio debe ser mayor a 0" in [error["msg"] for error in errors]

    def test_valid_body(self):
        assert run(CREATE_PRODUCT_RULES, body={"name": "Monitor", "price": 399}) == []


class TestUpdateRules:

    def test_empty_body_yields_five_errors(self):
        assert len(run(UPDATE_PRODUCT_RULES, params={"id": "1"})) == 5

    def test_invalid_id_with_valid_body(self):
        errors = run(
            UPDATE_PRODUCT_RULES,
            params={"id": "not-validate-id"},
            body={"name": "Monitor", "price": 300, "availability": True},
        )

        assert [error["msg"] for error in errors] == ["ID no válido"]

    def test_zero_price(self):
        errors = run(
            UPDATE_PRODUCT_RULES,
            params={"id": "1"},
            body={"name": "Monitor", "price": 0, "availability": True},
        )

        assert len(errors) == 1


class TestIdRules:

    @pytest.mark.parametrize("rules", [GET_PRODUCT_RULES, PRODUCT_ID_RULES])
    def test_non_numeric_id_yields_one_error(self, rules):
        errors = run(rules, params={"id": "abc"})

        assert len(errors) == 1
        assert errors[0]["msg"] == "ID no válido"

    def test_get_accepts_decimal_ids(self):
        assert run(GET_PRODUCT_RULES, params={"id": "1.5"}) == []

    def test_mutations_require_integer_ids(self):
        assert len(run(PRODUCT_ID_RULES, params={"id": "1.5"})) == 1


class TestParseProductId:

    @pytest.mark.parametrize("raw,expected", [
        ("1", 1),
        ("+7", 7),
        ("10000", 10000),
        ("2.0", 2),
        ("1.5", None),
        ("abc", None),
        ("NaN", None),
        ("inf", None),
        ("99999999999999999999", None),
    ])
    def test_parse(self, raw, expected):
        assert parse_product_id(raw) == expected
