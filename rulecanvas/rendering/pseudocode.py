"""Multi-line pseudocode view of a rule."""

from __future__ import annotations

from collections.abc import Sequence

from rulecanvas.core.models import ActionNode, ConditionNode, Edge, Node
from .natural_language import join_operator
from .phrases import OPERATOR_PHRASES, has_meaningful_label, humanize

INDENT = "  "


def _condition_line(node: ConditionNode) -> str:
    data = node.payload
    field = data.variable_name or "variable"
    operator = data.operator or "equals"
    value = data.value if data.value not in (None, "") else "value"
    return f"{INDENT}{field} {OPERATOR_PHRASES.get(operator, operator)} {value}"


def _action_line(node: ActionNode) -> str:
    data = node.payload
    if data.action_type and data.target:
        line = f"{humanize(data.action_type)}: {data.target}"
        if data.parameters:
            line += f" with parameters ({data.parameters})"
        return INDENT + line
    if data.action_type:
        return f"{INDENT}{humanize(data.action_type)} (target not specified)"
    if has_meaningful_label(data):
        return INDENT + data.label
    return f"{INDENT}(Action not fully defined - click to edit)"


def _execute_line(node: ActionNode) -> str:
    # Unconditional actions list type and target only
    data = node.payload
    if data.action_type and data.target:
        return f"{INDENT}{humanize(data.action_type)}: {data.target}"
    if data.action_type:
        return f"{INDENT}{humanize(data.action_type)} (target not specified)"
    return f"{INDENT}(Action not fully defined)"


def render_pseudocode(nodes: Sequence[Node], edges: Sequence[Edge] = ()) -> str:
    """Render an IF / THEN / END IF block in node order.

    Without conditions the actions are listed under ``EXECUTE:`` since they
    would run unconditionally.
    """
    conditions = [node for node in nodes if isinstance(node, ConditionNode)]
    actions = [node for node in nodes if isinstance(node, ActionNode)]
    lines: list[str] = []

    if conditions:
        joiner = join_operator(nodes)
        lines.append("IF")
        for idx, node in enumerate(conditions):
            lines.append(_condition_line(node))
            if idx < len(conditions) - 1:
                lines.append(joiner)

        lines.append("THEN")
        if actions:
            lines.extend(_action_line(node) for node in actions)
        else:
            lines.append(f"{INDENT}(No actions defined)")
        lines.append("END IF")
    else:
        lines.append("(No conditions defined)")
        if actions:
            lines.append("")
            lines.append("EXECUTE:")
            lines.extend(_execute_line(node) for node in actions)

    return "\n".join(lines)
