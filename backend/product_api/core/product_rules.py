"""Product Route Rules - the rule table each product route is validated against.

Invariants:
    - Every route taking an :id starts with ID_RULES, so a malformed id is reported
      before any persistence lookup can happen
    - Messages are the public API contract (clients match on them)
"""

from product_api.core.validation import Check, Location, Rule, is_positive


INVALID_ID_MESSAGE = "ID no Válido"
EMPTY_NAME_MESSAGE = "El nombre del producto no puede ir vacío"
INVALID_VALUE_MESSAGE = "Valor no válido"
EMPTY_PRICE_MESSAGE = "El precio del producto no puede ir vacío"
INVALID_PRICE_MESSAGE = "Precio no válido"
INVALID_AVAILABILITY_MESSAGE = "Valor para disponibilidad no válido"


ID_RULES: list[Rule] = [
    Rule("id", Location.PATH, Check.IS_INT, INVALID_ID_MESSAGE),
]

NAME_RULES: list[Rule] = [
    Rule("name", Location.BODY, Check.NOT_EMPTY, EMPTY_NAME_MESSAGE),
]

PRICE_RULES: list[Rule] = [
    Rule("price", Location.BODY, Check.IS_NUMERIC, INVALID_VALUE_MESSAGE),
    Rule("price", Location.BODY, Check.NOT_EMPTY, EMPTY_PRICE_MESSAGE),
    Rule(
        "price", Location.BODY, Check.CUSTOM, INVALID_PRICE_MESSAGE,
        predicate=is_positive,
    ),
]

AVAILABILITY_RULES: list[Rule] = [
    Rule("availability", Location.BODY, Check.IS_BOOLEAN, INVALID_AVAILABILITY_MESSAGE),
]


# ─── Per-route tables ───────────────────────────────────────────

GET_PRODUCT_RULES = ID_RULES
CREATE_PRODUCT_RULES = NAME_RULES + PRICE_RULES
UPDATE_PRODUCT_RULES = ID_RULES + NAME_RULES + PRICE_RULES + AVAILABILITY_RULES
TOGGLE_AVAILABILITY_RULES = ID_RULES
DELETE_PRODUCT_RULES = ID_RULES
