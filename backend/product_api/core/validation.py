"""Request Rules - declarative per-field checks evaluated against a raw request.

Invariants:
    - All functions are PURE: no IO, no async, no DB, no framework objects
    - evaluate_rules runs EVERY rule in declaration order and collects every failure;
      it never stops at the first one
    - Checks operate on the textual form of a value, the way the HTTP layer receives it
      (path params are always strings, JSON bodies may carry numbers or booleans)
    - Patterns must cover the whole text (fullmatch): a trailing newline is not a digit

Design Decisions:
    - Tagged rules (Check enum + optional predicate) instead of closures per route:
      rule tables stay inspectable and testable as plain data
"""

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Mapping

from product_api.core.errors import FieldError


_INT_RE = re.compile(r"[-+]?(0|[1-9][0-9]*)")
_NUMERIC_RE = re.compile(r"[+-]?([0-9]*[.])?[0-9]+")
_BOOLEAN_VALUES = frozenset({"true", "false", "1", "0"})


class Location(str, Enum):
    """Where a rule reads its field from."""
    PATH = "path"
    BODY = "body"


class Check(str, Enum):
    """Kinds of checks a rule can apply."""
    NOT_EMPTY = "not_empty"
    IS_INT = "is_int"
    IS_NUMERIC = "is_numeric"
    IS_BOOLEAN = "is_boolean"
    CUSTOM = "custom"


@dataclass(frozen=True)
class Rule:
    """One check on one field, with the message reported when it fails."""
    field: str
    location: Location
    check: Check
    message: str
    predicate: Callable[[Any], bool] | None = None

    def __post_init__(self):
        if self.check is Check.CUSTOM and self.predicate is None:
            raise ValueError(f"custom rule on '{self.field}' needs a predicate")


# ─── Value Coercion ─────────────────────────────────────────────

def as_text(value: Any) -> str:
    """Textual form of a request value; missing values read as ''."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def as_number(value: Any) -> float | None:
    """Loose numeric coercion. None when the value has no numeric reading."""
    if value is None:
        return None
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            number = float(text)
        except ValueError:
            return None
        return None if math.isnan(number) else number
    return None


# ─── Checks ─────────────────────────────────────────────────────

def is_not_empty(value: Any) -> bool:
    return as_text(value) != ""


def is_int(value: Any) -> bool:
    return bool(_INT_RE.fullmatch(as_text(value)))


def is_numeric(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    return bool(_NUMERIC_RE.fullmatch(as_text(value)))


def is_boolean(value: Any) -> bool:
    return as_text(value) in _BOOLEAN_VALUES


def is_positive(value: Any) -> bool:
    number = as_number(value)
    return number is not None and number > 0


_CHECKS: dict[Check, Callable[[Any], bool]] = {
    Check.NOT_EMPTY: is_not_empty,
    Check.IS_INT: is_int,
    Check.IS_NUMERIC: is_numeric,
    Check.IS_BOOLEAN: is_boolean,
}


def rule_passes(rule: Rule, value: Any) -> bool:
    """Apply a single rule to a single value."""
    if rule.check is Check.CUSTOM:
        try:
            return bool(rule.predicate(value))
        except (TypeError, ValueError):
            return False
    return _CHECKS[rule.check](value)


def evaluate_rules(
    rules: list[Rule],
    path_params: Mapping[str, Any],
    body: Mapping[str, Any],
) -> list[FieldError]:
    """Evaluate every rule in order. Returns all failures, [] when the request is valid."""
    sources = {Location.PATH: path_params, Location.BODY: body}
    return [
        FieldError(field=rule.field, message=rule.message)
        for rule in rules
        if not rule_passes(rule, sources[rule.location].get(rule.field))
    ]
