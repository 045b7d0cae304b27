"""Tests for product payload validation.

These tests verify:
- Valid payloads produce a ProductInput
- Each field constraint yields a single readable message
- The first failing field (in declaration order) is reported
"""

import pytest

from product_service.exceptions import ValidationError
from product_service.validation import validate_product


def valid_payload(**overrides):
    payload = {
        "name": "Widget A",
        "description": "A sturdy widget",
        "price": 9.99,
        "category": "tools",
        "stock": 5,
    }
    payload.update(overrides)
    return payload


class TestValidProducts:
    """Payloads that should pass validation."""

    def test_full_payload(self):
        product = validate_product(valid_payload())

        assert product.name == "Widget A"
        assert product.description == "A sturdy widget"
        assert product.price == 9.99
        assert product.category == "tools"
        assert product.stock == 5

    def test_description_is_optional(self):
        payload = valid_payload()
        del payload["description"]

        product = validate_product(payload)

        assert product.description is None

    def test_boundary_values(self):
        product = validate_product(
            valid_payload(name="abc", description="d" * 500, price=0.01, stock=0)
        )

        assert product.name == "abc"
        assert product.stock == 0

        assert validate_product(valid_payload(name="n" * 100)).name == "n" * 100

    def test_integer_price_kept_as_int(self):
        price = validate_product(valid_payload(price=1)).price

        assert price == 1
        assert isinstance(price, int)

    def test_integral_float_stock_accepted(self):
        stock = validate_product(valid_payload(stock=5.0)).stock

        assert stock == 5
        assert isinstance(stock, int)

    def test_extra_fields_ignored(self):
        product = validate_product(valid_payload(color="red"))

        assert not hasattr(product, "color")


class TestInvalidProducts:
    """Payloads that should be rejected with a specific message."""

    @pytest.mark.parametrize(
        "overrides, expected",
        [
            ({"name": "AB"}, '"name" length must be at least 3 characters long'),
            ({"name": "n" * 101}, '"name" length must be less than or equal to 100 characters long'),
            ({"name": 123}, '"name" must be a string'),
            ({"description": "d" * 501}, '"description" length must be less than or equal to 500 characters long'),
            ({"description": ""}, '"description" is not allowed to be empty'),
            ({"price": 0}, '"price" must be a positive number'),
            ({"price": -5}, '"price" must be a positive number'),
            ({"price": 9.999}, '"price" must have no more than 2 decimal places'),
            ({"price": "9.99"}, '"price" must be a number'),
            ({"price": True}, '"price" must be a number'),
            ({"category": ""}, '"category" is not allowed to be empty'),
            ({"stock": -1}, '"stock" must be greater than or equal to 0'),
            ({"stock": 2.5}, '"stock" must be an integer'),
            ({"stock": "5"}, '"stock" must be an integer'),
            ({"stock": 10**20}, '"stock" must be less than or equal to 9007199254740991'),
            ({"stock": True}, '"stock" must be an integer'),
        ],
    )
    def test_constraint_messages(self, overrides, expected):
        with pytest.raises(ValidationError) as exc_info:
            validate_product(valid_payload(**overrides))

        assert exc_info.value.message == expected

    @pytest.mark.parametrize("field", ["name", "price", "category", "stock"])
    def test_required_fields(self, field):
        payload = valid_payload()
        del payload[field]

        with pytest.raises(ValidationError) as exc_info:
            validate_product(payload)

        assert exc_info.value.message == f'"{field}" is required'

    def test_first_failing_field_reported(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_product(valid_payload(name="AB", price=-1, stock=-1))

        assert exc_info.value.message.startswith('"name"')

    def test_non_object_payload(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_product(["not", "an", "object"])

        assert exc_info.value.message == '"value" must be of type object'
