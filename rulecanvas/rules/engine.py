"""Rule evaluation engine with trace generation."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Mapping
from typing import Any

from rulecanvas.core.models import (
    ActionNode,
    ConditionNode,
    ConditionPayload,
    Edge,
    LogicalOperator,
    OperatorNode,
    RuleGraph,
    coerce_rule,
)
from rulecanvas.rendering.phrases import describe_action
from rulecanvas.runtime.trace import EvaluationResult, StepOutcome, TraceStep
from .predicates import evaluate_condition

logger = logging.getLogger(__name__)

UNSET = "(unset)"


def _display(value: Any) -> str:
    if value is None or value == "":
        return UNSET
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def condition_text(payload: ConditionPayload) -> str:
    """``<field> <operator> <value>`` as written in the trace."""
    return " ".join(
        _display(part) for part in (payload.variable_name, payload.operator, payload.value)
    )


def combine(operator_type: str, results: list[bool]) -> bool | None:
    """Apply a logical operator to operand results; None if the type is unknown."""
    if operator_type == LogicalOperator.AND:
        return all(results)
    if operator_type == LogicalOperator.OR:
        return any(results)
    if operator_type == LogicalOperator.NOT:
        return not any(results)
    if operator_type == LogicalOperator.XOR:
        return sum(results) == 1
    return None


class GraphWalker:
    """Evaluates one rule graph against one input snapshot.

    Traversal starts at every root block and proceeds depth-first in edge
    order. Conditions and operators gate their outgoing edges; actions fire
    whenever they are reached. A block already on the current path is not
    entered again, so cyclic graphs terminate. The walk runs on an explicit
    stack, so long chains do not hit the interpreter's recursion limit.
    """

    def __init__(self, rule: RuleGraph, inputs: Mapping[str, Any]):
        self.rule = rule
        self.inputs = inputs
        self._nodes = rule.node_index()
        self._outgoing: dict[str, list[Edge]] = defaultdict(list)
        self._incoming: dict[str, list[Edge]] = defaultdict(list)
        for edge in rule.edges:
            self._outgoing[edge.source].append(edge)
            self._incoming[edge.target].append(edge)

    def run(self) -> EvaluationResult:
        """Walk from every root and merge the results."""
        result = EvaluationResult()
        for root in self.rule.roots():
            result = result.merge(self._walk(root.id))
        return result

    def _walk(self, root_id: str) -> EvaluationResult:
        steps: list[TraceStep] = []
        actions: list[str] = []
        # Frames are (node id, depth, ancestors on the current path)
        stack: list[tuple[str, int, tuple[str, ...]]] = [(root_id, 0, ())]

        while stack:
            node_id, depth, path = stack.pop()
            node = self._nodes.get(node_id)
            if node is None:
                # Dangling edge: the branch ends without a trace
                continue

            if node_id in path:
                logger.warning("Cycle detected at node %s; branch not re-entered", node_id)
                steps.append(
                    TraceStep(
                        node_id=node_id,
                        kind="Cycle",
                        description=node_id,
                        outcome=StepOutcome.SKIPPED,
                        depth=depth,
                    )
                )
                continue

            if isinstance(node, ActionNode):
                step = self._action_step(node, depth)
                steps.append(step)
                actions.append(step.description)
                continue

            if isinstance(node, ConditionNode):
                step = self._condition_step(node, depth)
            else:
                step = self._operator_step(node, depth)
            steps.append(step)

            if step.passed:
                child_path = (*path, node_id)
                # Pushed in reverse so targets pop in edge order
                for edge in reversed(self._outgoing[node_id]):
                    stack.append((edge.target, depth + 1, child_path))

        return EvaluationResult(matched=bool(actions), actions=actions, steps=steps)

    def _condition_step(self, node: ConditionNode, depth: int) -> TraceStep:
        passed = evaluate_condition(node.payload, self.inputs)
        return TraceStep(
            node_id=node.id,
            kind="Condition",
            description=condition_text(node.payload),
            outcome=StepOutcome.from_bool(passed),
            depth=depth,
        )

    def _operator_step(self, node: OperatorNode, depth: int) -> TraceStep:
        # Operands are the blocks pointing into the operator. Only conditions
        # are resolved; any other operand counts as false.
        operand_results = []
        for edge in self._incoming[node.id]:
            operand = self._nodes.get(edge.source)
            if isinstance(operand, ConditionNode):
                operand_results.append(evaluate_condition(operand.payload, self.inputs))
            else:
                operand_results.append(False)

        operator_type = node.payload.resolved_type
        passed = combine(operator_type, operand_results)
        if passed is None:
            logger.warning("Unsupported operator type %r on node %s", operator_type, node.id)
            passed = False

        return TraceStep(
            node_id=node.id,
            kind="Operator",
            description=operator_type,
            outcome=StepOutcome.from_bool(passed),
            depth=depth,
        )

    def _action_step(self, node: ActionNode, depth: int) -> TraceStep:
        return TraceStep(
            node_id=node.id,
            kind="Action",
            description=describe_action(node.payload),
            outcome=StepOutcome.EXECUTED,
            depth=depth,
        )


def evaluate_rule(
    rule: RuleGraph | Mapping[str, Any], inputs: Mapping[str, Any]
) -> EvaluationResult:
    """Evaluate a rule against an input snapshot.

    Args:
        rule: Parsed rule or raw rule document
        inputs: Variable name to current value

    Returns:
        EvaluationResult with match flag, fired actions and trace
    """
    return GraphWalker(coerce_rule(rule), inputs).run()
