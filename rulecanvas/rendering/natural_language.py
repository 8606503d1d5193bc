"""One-line natural language summary of a rule."""

from __future__ import annotations

from collections.abc import Sequence

from rulecanvas.core.models import (
    ActionNode,
    ConditionNode,
    Edge,
    LogicalOperator,
    Node,
    OperatorNode,
)
from .phrases import OPERATOR_PHRASES, humanize

EMPTY_RULE_TEXT = "Your rule will appear here as you build it..."
NO_CONTENT_TEXT = "Add blocks to start building your rule..."


def join_operator(nodes: Sequence[Node]) -> str:
    """The operator joining conditions in text views.

    Taken from the first operator block; this is a single global join, not
    derived from the graph topology.
    """
    for node in nodes:
        if isinstance(node, OperatorNode):
            return node.payload.operator_type or LogicalOperator.AND.value
    return LogicalOperator.AND.value


def _condition_phrase(node: ConditionNode) -> str:
    data = node.payload
    if data.field and data.value not in (None, ""):
        phrase = OPERATOR_PHRASES.get(data.operator or "equals", OPERATOR_PHRASES["equals"])
        return f"{data.field} {phrase} {data.value}"
    return data.label or "condition"


def _action_phrase(node: ActionNode) -> str:
    data = node.payload
    if data.action_type and data.target:
        return f"{humanize(data.action_type)} {data.target}"
    return data.label or "action"


def render_natural_language(nodes: Sequence[Node], edges: Sequence[Edge] = ()) -> str:
    """Render ``IF <conditions> THEN <actions>`` in node order.

    ``edges`` is accepted for symmetry with the evaluator; the summary does
    not follow connections.
    """
    if not nodes:
        return EMPTY_RULE_TEXT

    conditions = [node for node in nodes if isinstance(node, ConditionNode)]
    actions = [node for node in nodes if isinstance(node, ActionNode)]

    parts = []
    if conditions:
        joiner = f" {join_operator(nodes)} "
        parts.append("IF " + joiner.join(_condition_phrase(node) for node in conditions))
    if actions:
        parts.append("THEN " + ", ".join(_action_phrase(node) for node in actions))

    return " ".join(parts) or NO_CONTENT_TEXT
