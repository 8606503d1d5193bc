"""Tests for natural language and pseudocode rendering."""

from typing import Any

from rulecanvas.core.models import RuleDocument
from rulecanvas.rendering import (
    EMPTY_RULE_TEXT,
    NO_CONTENT_TEXT,
    render_natural_language,
    render_pseudocode,
)

from graph_helpers import action, condition, operator, rule


def parse(nodes: list[dict[str, Any]]) -> RuleDocument:
    return RuleDocument.model_validate(rule(nodes=nodes))


class TestNaturalLanguage:
    def test_empty_rule_placeholder(self):
        assert render_natural_language([], []) == EMPTY_RULE_TEXT

    def test_chain(self, cooker_rule: RuleDocument):
        text = render_natural_language(cooker_rule.nodes, cooker_rule.edges)
        assert text == (
            "IF pot_placed equals true AND cooker_time is less than or equal to 60 "
            "THEN turn on cooker"
        )

    def test_join_operator_comes_from_first_operator(self):
        doc = parse([
            condition("c1", "a", "greaterThan", "1"),
            operator("op1", "OR"),
            operator("op2", "AND"),
            condition("c2", "b", "notEquals", "2"),
            action("a1", "turn_off", "heater"),
            action("a2", label="Open window"),
        ])
        assert render_natural_language(doc.nodes, doc.edges) == (
            "IF a is greater than 1 OR b does not equal 2 THEN turn off heater, Open window"
        )

    def test_unknown_operator_uses_equals_phrase(self):
        doc = parse([condition("c1", "a", "===", "1")])
        assert render_natural_language(doc.nodes) == "IF a equals 1"

    def test_incomplete_blocks_fall_back_to_labels(self):
        doc = parse([
            condition("c1", "a", "equals", None, label="a is set"),
            condition("c2", None, "equals", None),
            action("a1", "turn_on"),
        ])
        assert render_natural_language(doc.nodes) == (
            "IF a is set AND condition THEN action"
        )

    def test_actions_only(self):
        doc = parse([action("a1", "turn_on", "cooker")])
        assert render_natural_language(doc.nodes) == "THEN turn on cooker"

    def test_operators_only(self):
        doc = parse([operator("op", "AND")])
        assert render_natural_language(doc.nodes) == NO_CONTENT_TEXT

    def test_deterministic(self, cooker_rule: RuleDocument):
        first = render_natural_language(cooker_rule.nodes, cooker_rule.edges)
        second = render_natural_language(cooker_rule.nodes, cooker_rule.edges)
        assert first == second


class TestPseudocode:
    def test_chain(self, cooker_rule: RuleDocument):
        assert render_pseudocode(cooker_rule.nodes, cooker_rule.edges) == "\n".join([
            "IF",
            "  pot_placed equals true",
            "AND",
            "  cooker_time is less than or equal to 60",
            "THEN",
            "  turn on: cooker",
            "END IF",
        ])

    def test_parameters_and_raw_operator(self):
        doc = parse([
            condition("c1", "level", "===", "3"),
            action("a1", "set_value", "thermostat", parameters="21C"),
        ])
        assert render_pseudocode(doc.nodes) == "\n".join([
            "IF",
            "  level === 3",
            "THEN",
            "  set value: thermostat with parameters (21C)",
            "END IF",
        ])

    def test_missing_parts_use_placeholders(self):
        doc = parse([condition("c1", None, None, None), action("a1", label="Action")])
        assert render_pseudocode(doc.nodes) == "\n".join([
            "IF",
            "  variable equals value",
            "THEN",
            "  (Action not fully defined - click to edit)",
            "END IF",
        ])

    def test_no_actions(self):
        doc = parse([condition("c1", "a", "lessThan", "5")])
        assert render_pseudocode(doc.nodes).splitlines()[-2:] == [
            "  (No actions defined)",
            "END IF",
        ]

    def test_no_conditions_executes_unconditionally(self):
        doc = parse([action("a1", "turn_on", "cooker"), action("a2", "log_data")])
        assert render_pseudocode(doc.nodes) == "\n".join([
            "(No conditions defined)",
            "",
            "EXECUTE:",
            "  turn on: cooker",
            "  log data (target not specified)",
        ])

    def test_unconditional_actions_omit_parameters_and_labels(self):
        doc = parse([
            action("a1", "set_value", "thermostat", "21"),
            action("a2", label="Open the window"),
        ])
        assert render_pseudocode(doc.nodes).splitlines()[-2:] == [
            "  set value: thermostat",
            "  (Action not fully defined)",
        ]

    def test_empty(self):
        assert render_pseudocode([], []) == "(No conditions defined)"

    def test_bundled_rule(self, rule_loader):
        rule_doc = rule_loader.get_rule("smart-cooker")
        lines = render_pseudocode(rule_doc.nodes, rule_doc.edges).splitlines()
        assert lines[0] == "IF"
        assert lines.count("AND") == 2
        assert "  Allow cooker to switch ON" in lines
