"""
Validation chains for the product routes
"""

import math
from typing import Any, Optional

from product_api.validators.rules import body, chain, greater_than_zero, is_int, param, to_number, to_text

INVALID_ID = "ID no válido"
EMPTY_NAME = "El nombre no puede ir vacio"
EMPTY_PRICE = "El precio no puede ir vacio"
NON_POSITIVE_PRICE = "El Precio debe ser mayor a 0"
INVALID_AVAILABILITY = "Disponibilidad no valida"

# Largest signed 64-bit integer a primary key column can hold
MAX_PRODUCT_ID = 2 ** 63 - 1


def _name():
    return body("name").not_empty().with_message(EMPTY_NAME)


def _price():
    return (
        body("price")
        .is_numeric()
        .not_empty().with_message(EMPTY_PRICE)
        .custom(greater_than_zero).with_message(NON_POSITIVE_PRICE)
    )


# GET /:id accepts any numeric id; the mutating routes require an integer
GET_PRODUCT_RULES = chain(param("id").is_numeric().with_message(INVALID_ID))

PRODUCT_ID_RULES = chain(param("id").is_int().with_message(INVALID_ID))

CREATE_PRODUCT_RULES = chain(_name(), _price())

UPDATE_PRODUCT_RULES = chain(
    param("id").is_int().with_message(INVALID_ID),
    _name(),
    _price(),
    body("availability").is_boolean().with_message(INVALID_AVAILABILITY),
)


def parse_product_id(raw: Any) -> Optional[int]:
    """
    Turn a validated id path segment into a primary key.

    Numeric ids without an integral value cannot match a row and map to None.
    """
    if is_int(raw):
        product_id = int(to_text(raw))
    else:
        number = to_number(raw)
        if math.isnan(number) or not number.is_integer():
            return None
        product_id = int(number)
    if abs(product_id) > MAX_PRODUCT_ID:
        return None
    return product_id
