"""Phrase tables shared by the evaluator trace and the text renderers."""

from __future__ import annotations

from rulecanvas.core.models import ActionPayload, ConditionOperator

OPERATOR_PHRASES: dict[str, str] = {
    ConditionOperator.EQUALS.value: "equals",
    ConditionOperator.NOT_EQUALS.value: "does not equal",
    ConditionOperator.GREATER_THAN.value: "is greater than",
    ConditionOperator.LESS_THAN.value: "is less than",
    ConditionOperator.GREATER_OR_EQUAL.value: "is greater than or equal to",
    ConditionOperator.LESS_OR_EQUAL.value: "is less than or equal to",
    ConditionOperator.CONTAINS.value: "contains",
}

# Default labels the editor gives new action blocks; they say nothing useful
PLACEHOLDER_ACTION_LABELS = frozenset({"Action", "New action"})

UNDEFINED_ACTION = "Action not fully defined - click to edit"


def humanize(action_type: str) -> str:
    """``send_notification`` -> ``send notification``."""
    return action_type.replace("_", " ")


def has_meaningful_label(payload: ActionPayload) -> bool:
    return bool(payload.label) and payload.label not in PLACEHOLDER_ACTION_LABELS


def describe_action(payload: ActionPayload) -> str:
    """Display text for a fired action.

    Priority: type and target, then type alone, then a non-placeholder label.
    """
    if payload.action_type and payload.target:
        text = f"{humanize(payload.action_type)}: {payload.target}"
        if payload.parameters:
            text += f" ({payload.parameters})"
        return text
    if payload.action_type:
        return f"{humanize(payload.action_type)} (target not specified)"
    if has_meaningful_label(payload):
        return payload.label
    return UNDEFINED_ACTION
