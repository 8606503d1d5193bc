"""Tests for condition predicate evaluation."""

import math

import pytest

from rulecanvas.core.models import ConditionPayload
from rulecanvas.rules.predicates import (
    evaluate_condition,
    loose_equals,
    parse_float,
    strict_equals,
    to_number,
)


def cond(field, operator, value):
    return ConditionPayload(field=field, operator=operator, value=value)


class TestMissingInputs:
    """Missing data fails closed."""

    def test_absent_field_is_false(self):
        assert evaluate_condition(cond("speed", "greaterThan", "10"), {}) is False

    def test_absent_field_with_negated_operator_is_false(self):
        assert evaluate_condition(cond("speed", "notEquals", "10"), {"other": 1}) is False

    def test_condition_without_field_is_false(self):
        assert evaluate_condition(cond(None, "equals", "x"), {"x": "x"}) is False

    def test_unknown_operator_is_false(self):
        assert evaluate_condition(cond("speed", "between", "10"), {"speed": 10}) is False

    def test_missing_operator_is_false(self):
        assert evaluate_condition(cond("speed", None, "10"), {"speed": 10}) is False


class TestNumericComparisons:
    @pytest.mark.parametrize(
        "operator,value,expected",
        [
            ("greaterThan", "20", True),
            (">", "25", False),
            ("lessThan", "30", True),
            ("<", "25", False),
            ("greaterOrEqual", "25", True),
            (">=", "26", False),
            ("lessOrEqual", "25", True),
            ("<=", "24", False),
        ],
    )
    def test_operators(self, operator, value, expected):
        assert evaluate_condition(cond("marks", operator, value), {"marks": "25"}) is expected

    def test_non_numeric_input_is_false_both_ways(self):
        inputs = {"marks": "abc"}
        assert evaluate_condition(cond("marks", ">", "20"), inputs) is False
        assert evaluate_condition(cond("marks", "<=", "20"), inputs) is False

    def test_leading_number_is_parsed(self):
        assert evaluate_condition(cond("width", ">", "10"), {"width": "12px"}) is True

    def test_numeric_input_against_text_value(self):
        assert evaluate_condition(cond("cooker_time", "lessOrEqual", "60"), {"cooker_time": 30})


class TestEquality:
    def test_loose_equals_number_and_text(self):
        assert evaluate_condition(cond("score", "equals", "20"), {"score": 20}) is True
        assert evaluate_condition(cond("score", "==", "20.0"), {"score": 20}) is True

    def test_strict_equals_requires_same_type(self):
        assert evaluate_condition(cond("score", "===", "20"), {"score": 20}) is False
        assert evaluate_condition(cond("score", "===", "20"), {"score": "20"}) is True

    def test_negations(self):
        inputs = {"score": 20}
        assert evaluate_condition(cond("score", "notEquals", "20"), inputs) is False
        assert evaluate_condition(cond("score", "!=", "21"), inputs) is True
        assert evaluate_condition(cond("score", "!==", "20"), inputs) is True

    def test_text_equality(self):
        assert evaluate_condition(cond("pot_placed", "equals", "true"), {"pot_placed": "true"})
        assert not evaluate_condition(cond("pot_placed", "equals", "true"), {"pot_placed": "false"})

    def test_boolean_input_coerces_to_number(self):
        assert evaluate_condition(cond("flag", "equals", "1"), {"flag": True}) is True
        assert evaluate_condition(cond("flag", "equals", "true"), {"flag": True}) is False


class TestContains:
    def test_substring(self):
        assert evaluate_condition(cond("room", "contains", "bath"), {"room": "bathroom"}) is True
        assert evaluate_condition(cond("room", "contains", "kitchen"), {"room": "bathroom"}) is False

    def test_number_rendered_as_text(self):
        assert evaluate_condition(cond("code", "contains", "42"), {"code": 1423}) is True


class TestConditionInput:
    def test_accepts_mapping(self):
        data = {"field": "marks", "operator": ">=", "value": "20"}
        assert evaluate_condition(data, {"marks": 20}) is True

    def test_legacy_variable_key(self):
        data = {"variable": "marks", "operator": ">", "value": "5"}
        assert evaluate_condition(data, {"marks": 6}) is True


class TestCoercionHelpers:
    def test_parse_float(self):
        assert parse_float("3.5kg") == 3.5
        assert parse_float(" -2e2") == -200.0
        assert parse_float(7) == 7.0
        assert parse_float("Infinity") == math.inf
        assert math.isnan(parse_float("abc"))
        assert math.isnan(parse_float(True))
        assert math.isnan(parse_float(None))

    def test_to_number(self):
        assert to_number("") == 0.0
        assert to_number(" 12 ") == 12.0
        assert to_number(False) == 0.0
        assert math.isnan(to_number("12px"))

    def test_loose_equals(self):
        assert loose_equals(None, None)
        assert not loose_equals(None, 0)
        assert loose_equals("", 0)
        assert not loose_equals(math.nan, math.nan)

    def test_strict_equals(self):
        assert strict_equals(1, 1.0)
        assert not strict_equals(1, True)
        assert not strict_equals("1", 1)
