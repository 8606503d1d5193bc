"""Pydantic models for API requests and responses."""

from typing import Any
from pydantic import BaseModel, Field

from rulecanvas.core.models import AlarmConfig, RuleDocument
from rulecanvas.rules.validator import ValidationResult
from rulecanvas.runtime.trace import TraceStep


# =============================================================================
# Rules Models
# =============================================================================


class RuleInfo(BaseModel):
    """Summary information about a stored rule."""

    rule_id: str
    name: str
    is_valid: bool
    conditions: int
    actions: int
    natural_language: str


class RulesListResponse(BaseModel):
    """List of available rules."""

    rules: list[RuleInfo]
    total: int


class RuleDetailResponse(BaseModel):
    """A stored rule with its derived views."""

    rule_id: str
    rule: dict[str, Any] = Field(..., description="Rule document (camelCase keys)")
    natural_language: str
    pseudocode: str
    input_variables: list[str]
    validation: ValidationResult


class RenderResponse(BaseModel):
    """Text views of a rule."""

    natural_language: str
    pseudocode: str
    input_variables: list[str]


class PrepareRequest(BaseModel):
    """Request to prepare a rule document for storage."""

    rule: RuleDocument
    user_id: str | None = None


# =============================================================================
# Evaluation Models
# =============================================================================


class EvaluateRequest(BaseModel):
    """Evaluate an inline rule against test inputs."""

    rule: RuleDocument
    inputs: dict[str, Any] = Field(default_factory=dict)
    require_valid: bool = Field(
        False, description="Reject structurally invalid rules instead of evaluating them"
    )


class EvaluateStoredRequest(BaseModel):
    """Evaluate a stored rule against test inputs or live metrics."""

    inputs: dict[str, Any] = Field(default_factory=dict)
    use_system_metrics: bool = Field(
        False, description="Evaluate against a fresh system metrics snapshot"
    )


class EvaluationResponse(BaseModel):
    """Result of one evaluation."""

    matched: bool
    actions: list[str]
    evaluation_path: list[str]
    steps: list[TraceStep]
    inputs: dict[str, Any]
    alarm_config: AlarmConfig | None = Field(
        None, description="Alarm settings to apply, present only when the rule matched"
    )


# =============================================================================
# Metrics Models
# =============================================================================


class MetricsResponse(BaseModel):
    """Current system metrics snapshot."""

    metrics: dict[str, Any]
