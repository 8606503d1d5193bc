"""Predicate evaluation for condition blocks.

Comparisons are fail-closed: a missing input, an unknown operator or a value
that cannot be read as a number all evaluate to ``False`` instead of raising.
Values typed into the editor are text, so equality follows loose coercion
rules (``20 == "20"``) unless the strict ``===`` / ``!==`` operators are used.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Callable, Mapping
from typing import Any

from rulecanvas.core.models import ConditionPayload

logger = logging.getLogger(__name__)

# Leading numeric prefix, e.g. "25", "-3.5e2", ".5", "12px" -> 12
_FLOAT_PREFIX = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
# A whole string that is a decimal number
_NUMERIC_STRING = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_float(value: Any) -> float:
    """Parse the leading number of a value; ``nan`` when there is none."""
    if _is_number(value):
        return float(value)
    if not isinstance(value, str):
        return math.nan

    text = value.strip()
    for sign in ("", "+", "-"):
        if text.startswith(sign + "Infinity"):
            return -math.inf if sign == "-" else math.inf

    match = _FLOAT_PREFIX.match(text)
    return float(match.group(0)) if match else math.nan


def to_number(value: Any) -> float:
    """Convert a whole value to a number for loose equality.

    Unlike :func:`parse_float`, trailing garbage makes the result ``nan`` and
    the empty string is zero.
    """
    if isinstance(value, bool):
        return 1.0 if value else 0.0
    if _is_number(value):
        return float(value)
    if value is None:
        return 0.0
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        if text in ("Infinity", "+Infinity"):
            return math.inf
        if text == "-Infinity":
            return -math.inf
        if _NUMERIC_STRING.match(text):
            return float(text)
    return math.nan


def loose_equals(left: Any, right: Any) -> bool:
    """Type-coercing equality: numbers and numeric text compare by value."""
    if left is None or right is None:
        return left is None and right is None

    if isinstance(left, bool) and not isinstance(right, bool):
        return loose_equals(to_number(left), right)
    if isinstance(right, bool) and not isinstance(left, bool):
        return loose_equals(left, to_number(right))

    if _is_number(left) and isinstance(right, str):
        return left == to_number(right)
    if isinstance(left, str) and _is_number(right):
        return to_number(left) == right

    return left == right


def strict_equals(left: Any, right: Any) -> bool:
    """Equality requiring the same kind of value (number, text, boolean...)."""
    if _is_number(left) and _is_number(right):
        return left == right
    if type(left) is not type(right):
        return False
    return left == right


def _contains(actual: Any, expected: Any) -> bool:
    if actual is None or expected is None:
        return False
    return _as_text(expected) in _as_text(actual)


def _as_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _numeric(compare: Callable[[float, float], bool]) -> Callable[[Any, Any], bool]:
    def check(actual: Any, expected: Any) -> bool:
        # nan on either side compares False
        return compare(parse_float(actual), parse_float(expected))

    return check


_OPERATORS: dict[str, Callable[[Any, Any], bool]] = {
    "greaterThan": _numeric(lambda a, b: a > b),
    ">": _numeric(lambda a, b: a > b),
    "lessThan": _numeric(lambda a, b: a < b),
    "<": _numeric(lambda a, b: a < b),
    "greaterOrEqual": _numeric(lambda a, b: a >= b),
    ">=": _numeric(lambda a, b: a >= b),
    "lessOrEqual": _numeric(lambda a, b: a <= b),
    "<=": _numeric(lambda a, b: a <= b),
    "equals": loose_equals,
    "==": loose_equals,
    "notEquals": lambda a, b: not loose_equals(a, b),
    "!=": lambda a, b: not loose_equals(a, b),
    "===": strict_equals,
    "!==": lambda a, b: not strict_equals(a, b),
    "contains": _contains,
}

SUPPORTED_OPERATORS: tuple[str, ...] = tuple(_OPERATORS)


def evaluate_condition(
    condition: ConditionPayload | Mapping[str, Any],
    inputs: Mapping[str, Any],
) -> bool:
    """Evaluate one condition against an input snapshot."""
    if not isinstance(condition, ConditionPayload):
        condition = ConditionPayload.model_validate(condition)

    variable = condition.variable_name
    if variable is None or variable not in inputs:
        logger.debug("No input value found for variable: %s", variable)
        return False

    actual = inputs[variable]
    check = _OPERATORS.get(condition.operator or "")
    if check is None:
        logger.debug("Unknown operator %r for variable %s", condition.operator, variable)
        return False

    result = check(actual, condition.value)
    logger.debug(
        "Evaluated %s %s %r with input %r: %s",
        variable, condition.operator, condition.value, actual, result,
    )
    return result
