"""Structural validation of rules.

Validation decides whether a rule may be saved or test-run: it needs at least
one condition and one action. Connectivity problems are reported as warnings
only and never make a rule invalid.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field

from rulecanvas.core.models import LogicalOperator, RuleGraph, coerce_rule

MSG_EMPTY = "Add some blocks to validate"
MSG_NO_CONDITION = "Rule must have at least one condition"
MSG_NO_ACTION = "Rule must have at least one action"
MSG_VALID = "Rule validation passed!"


class ValidationResult(BaseModel):
    """Outcome of a structural check."""

    is_valid: bool
    message: str
    warnings: list[str] = Field(default_factory=list)


def validate_rule(rule: RuleGraph | Mapping[str, Any]) -> ValidationResult:
    """Check that a rule has blocks, a condition and an action."""
    rule = coerce_rule(rule)
    warnings = find_warnings(rule)

    if not rule.nodes:
        return ValidationResult(is_valid=False, message=MSG_EMPTY, warnings=warnings)
    if not rule.conditions():
        return ValidationResult(is_valid=False, message=MSG_NO_CONDITION, warnings=warnings)
    if not rule.actions():
        return ValidationResult(is_valid=False, message=MSG_NO_ACTION, warnings=warnings)
    return ValidationResult(is_valid=True, message=MSG_VALID, warnings=warnings)


def find_warnings(rule: RuleGraph) -> list[str]:
    """Non-blocking connectivity findings, in a stable order."""
    warnings = []
    node_ids = {node.id for node in rule.nodes}

    for edge in rule.edges:
        for end in (edge.source, edge.target):
            if end not in node_ids:
                warnings.append(f"Edge {edge.id or '?'} references unknown block {end}")

    connected = {edge.source for edge in rule.edges} | {edge.target for edge in rule.edges}
    for node in rule.conditions():
        if node.id not in connected and len(rule.nodes) > 1:
            warnings.append(f"Condition {node.id} is not connected to any block")
    for node in rule.actions():
        if node.id not in connected and rule.conditions():
            warnings.append(f"Action {node.id} is not connected and will fire unconditionally")

    supported = {op.value for op in LogicalOperator}
    for node in rule.operators():
        if node.payload.resolved_type not in supported:
            warnings.append(
                f"Operator {node.id} has unsupported type {node.payload.resolved_type}"
            )

    cycle = find_cycle(rule)
    if cycle:
        warnings.append("Blocks form a cycle: " + " -> ".join(cycle))

    return warnings


def find_cycle(rule: RuleGraph) -> list[str] | None:
    """Return one cycle as a list of node ids (first id repeated at the end).

    Iterative depth-first search with white/grey/black colouring, so long
    chains do not hit the recursion limit.
    """
    adjacency: dict[str, list[str]] = {node.id: [] for node in rule.nodes}
    for edge in rule.edges:
        if edge.source in adjacency and edge.target in adjacency:
            adjacency[edge.source].append(edge.target)

    white, grey, black = 0, 1, 2
    color = dict.fromkeys(adjacency, white)

    for start in adjacency:
        if color[start] != white:
            continue
        color[start] = grey
        # Path of grey nodes, each with an iterator over its remaining targets
        path = [start]
        pending = [iter(adjacency[start])]
        while pending:
            target = next(pending[-1], None)
            if target is None:
                color[path.pop()] = black
                pending.pop()
            elif color[target] == grey:
                return path[path.index(target):] + [target]
            elif color[target] == white:
                color[target] = grey
                path.append(target)
                pending.append(iter(adjacency[target]))
    return None


def extract_input_variables(rule: RuleGraph | Mapping[str, Any]) -> list[str]:
    """Distinct variables read by condition blocks, first-seen order.

    Falls back to the first word of the block label for blocks saved before
    the field was stored separately.
    """
    rule = coerce_rule(rule)
    variables: dict[str, None] = {}
    for node in rule.conditions():
        name = node.payload.variable_name
        if not name and node.payload.label:
            name = node.payload.label.split(" ")[0]
        if name:
            variables.setdefault(name, None)
    return list(variables)
