"""
Execution tracing for rule evaluation.

Every block visited during a traversal leaves a TraceStep. The steps render to
the indented, human-readable evaluation path shown next to a test run, e.g.::

    Condition: pot_placed equals true → ✓ TRUE
      Action: turn on: cooker → ✓ EXECUTED
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field, computed_field


class StepOutcome(str, Enum):
    """Outcome marker printed at the end of a trace line."""

    TRUE = "✓ TRUE"
    FALSE = "✗ FALSE"
    EXECUTED = "✓ EXECUTED"
    SKIPPED = "SKIPPED"

    @classmethod
    def from_bool(cls, value: bool) -> "StepOutcome":
        return cls.TRUE if value else cls.FALSE


class TraceStep(BaseModel):
    """A single visited block in the execution trace."""

    node_id: str
    """Identifier of the visited block."""

    kind: str
    """Label of the step kind: Condition, Operator, Action or Cycle."""

    description: str
    """What was evaluated, e.g. ``marks >= 20`` or ``AND``."""

    outcome: StepOutcome
    """How the block resolved."""

    depth: int = 0
    """Nesting depth below the root the traversal started from."""

    @property
    def passed(self) -> bool:
        return self.outcome in (StepOutcome.TRUE, StepOutcome.EXECUTED)

    def render(self) -> str:
        """Format as an indented trace line."""
        indent = "  " * self.depth
        return f"{indent}{self.kind}: {self.description} → {self.outcome.value}"


class EvaluationResult(BaseModel):
    """Outcome of evaluating a rule against one input snapshot.

    Results are plain accumulators: the walk from each root yields its own
    result and the walker merges them in root order.
    """

    matched: bool = False
    """True if any action block fired."""

    actions: list[str] = Field(default_factory=list)
    """Descriptions of fired actions, in firing order."""

    steps: list[TraceStep] = Field(default_factory=list)
    """Structured trace, in traversal order."""

    @computed_field
    @property
    def evaluation_path(self) -> list[str]:
        """The trace as display lines."""
        return [step.render() for step in self.steps]

    def merge(self, other: "EvaluationResult") -> "EvaluationResult":
        """Combine with a later branch's result."""
        return EvaluationResult(
            matched=self.matched or other.matched,
            actions=[*self.actions, *other.actions],
            steps=[*self.steps, *other.steps],
        )
