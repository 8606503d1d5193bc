"""Routes for evaluating rules against inputs."""

from typing import Any

from fastapi import APIRouter, HTTPException

from rulecanvas.core.config import get_settings
from rulecanvas.core.models import AlarmConfig, RuleDocument
from rulecanvas.monitoring import sample_system_metrics
from rulecanvas.rules import InvalidRuleError, evaluate_rule, run_test
from rulecanvas.runtime.trace import EvaluationResult
from .models import EvaluateRequest, EvaluateStoredRequest, EvaluationResponse
from .routes_rules import get_loader

router = APIRouter(prefix="/evaluate", tags=["Evaluation"])


def _to_response(
    rule: RuleDocument, inputs: dict[str, Any], result: EvaluationResult
) -> EvaluationResponse:
    alarm_config = None
    if result.matched:
        alarm_config = rule.alarm_config or AlarmConfig()
    return EvaluationResponse(
        matched=result.matched,
        actions=result.actions,
        evaluation_path=result.evaluation_path,
        steps=result.steps,
        inputs=inputs,
        alarm_config=alarm_config,
    )


@router.post("", response_model=EvaluationResponse)
async def evaluate(request: EvaluateRequest) -> EvaluationResponse:
    """Evaluate an inline rule.

    Returns the match flag, fired actions and the evaluation path.
    """
    if request.require_valid:
        try:
            result = run_test(request.rule, request.inputs)
        except InvalidRuleError as e:
            raise HTTPException(status_code=422, detail=str(e))
    else:
        result = evaluate_rule(request.rule, request.inputs)

    return _to_response(request.rule, request.inputs, result)


@router.post("/{rule_id}", response_model=EvaluationResponse)
def evaluate_stored(rule_id: str, request: EvaluateStoredRequest) -> EvaluationResponse:
    """Test-run a stored rule against manual inputs or live system metrics."""
    rule = get_loader().get_rule(rule_id)
    if not rule:
        raise HTTPException(status_code=404, detail=f"Rule not found: {rule_id}")

    if request.use_system_metrics:
        inputs = sample_system_metrics(cpu_interval=get_settings().cpu_sample_interval)
    else:
        inputs = request.inputs
    try:
        result = run_test(rule, inputs)
    except InvalidRuleError as e:
        raise HTTPException(status_code=422, detail=str(e))

    return _to_response(rule, inputs, result)
