"""
Runtime package.

Execution traces produced while a rule graph is walked.
"""

from rulecanvas.runtime.trace import EvaluationResult, StepOutcome, TraceStep

__all__ = [
    "EvaluationResult",
    "StepOutcome",
    "TraceStep",
]
