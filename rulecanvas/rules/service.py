"""Rule service - save preparation, previews and gated test runs."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, Field

from rulecanvas.core.models import RuleDocument, RuleGraph, coerce_rule
from rulecanvas.rendering import render_natural_language, render_pseudocode
from rulecanvas.runtime.trace import EvaluationResult
from .engine import evaluate_rule
from .validator import ValidationResult, extract_input_variables, validate_rule

logger = logging.getLogger(__name__)


class InvalidRuleError(ValueError):
    """Raised when a structurally invalid rule is saved or test-run."""

    def __init__(self, validation: ValidationResult):
        super().__init__(validation.message)
        self.validation = validation


class RulePreview(BaseModel):
    """Everything the editor shows next to a rule without running it."""

    natural_language: str
    pseudocode: str
    validation: ValidationResult
    input_variables: list[str] = Field(default_factory=list)


def preview_rule(rule: RuleGraph | Mapping[str, Any]) -> RulePreview:
    """Render and validate a rule."""
    rule = coerce_rule(rule)
    return RulePreview(
        natural_language=render_natural_language(rule.nodes, rule.edges),
        pseudocode=render_pseudocode(rule.nodes, rule.edges),
        validation=validate_rule(rule),
        input_variables=extract_input_variables(rule),
    )


def prepare_for_save(
    rule: RuleDocument,
    user_id: str | None = None,
    now: datetime | None = None,
) -> RuleDocument:
    """Refresh derived fields before handing a rule to storage.

    Recomputes the natural language summary and validity flag, stamps
    ``updatedAt`` (and ``createdAt`` for new rules) and records the owner.

    Raises:
        ValueError: If the rule has no name
    """
    if not rule.name.strip():
        raise ValueError("Please enter a rule name")

    now = now or datetime.now(timezone.utc)
    validation = validate_rule(rule)
    return rule.model_copy(
        update={
            "natural_language": render_natural_language(rule.nodes, rule.edges),
            "is_valid": validation.is_valid,
            "created_at": rule.created_at or now,
            "updated_at": now,
            "user_id": user_id or rule.user_id,
        }
    )


def run_test(
    rule: RuleGraph | Mapping[str, Any], inputs: Mapping[str, Any]
) -> EvaluationResult:
    """Validate a rule, then evaluate it against test inputs.

    Raises:
        InvalidRuleError: If the rule has no condition or no action
    """
    rule = coerce_rule(rule)
    validation = validate_rule(rule)
    if not validation.is_valid:
        raise InvalidRuleError(validation)

    result = evaluate_rule(rule, inputs)
    name = getattr(rule, "name", "") or "rule"
    if result.matched:
        logger.info("Rule %s matched: %s", name, ", ".join(result.actions))
    else:
        logger.info("Rule %s did not match", name)
    return result
