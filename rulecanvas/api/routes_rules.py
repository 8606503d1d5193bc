"""Routes for inspecting, validating and rendering rules."""

import logging

from fastapi import APIRouter, HTTPException

from rulecanvas.core.config import get_settings
from rulecanvas.core.models import RuleDocument
from rulecanvas.rules import RuleLoader, prepare_for_save, preview_rule, validate_rule
from rulecanvas.rules.validator import ValidationResult
from .models import (
    PrepareRequest,
    RenderResponse,
    RuleDetailResponse,
    RuleInfo,
    RulesListResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/rules", tags=["Rules"])

# Global instance
_loader: RuleLoader | None = None


def get_loader() -> RuleLoader:
    """Get or create the rule loader instance."""
    global _loader
    if _loader is None:
        settings = get_settings()
        _loader = RuleLoader(settings.rules_dir)
        try:
            _loader.load_directory()
        except FileNotFoundError:
            logger.warning("Rules directory not found: %s", settings.rules_dir)
    return _loader


@router.get("", response_model=RulesListResponse)
async def list_rules() -> RulesListResponse:
    """List all stored rules."""
    loader = get_loader()

    rule_infos = []
    for rule in loader.get_all_rules():
        preview = preview_rule(rule)
        rule_infos.append(
            RuleInfo(
                rule_id=rule.id,
                name=rule.name,
                is_valid=preview.validation.is_valid,
                conditions=len(rule.conditions()),
                actions=len(rule.actions()),
                natural_language=preview.natural_language,
            )
        )

    return RulesListResponse(rules=rule_infos, total=len(rule_infos))


@router.get("/{rule_id}", response_model=RuleDetailResponse)
async def get_rule(rule_id: str) -> RuleDetailResponse:
    """Get a stored rule with its natural language, pseudocode and inputs."""
    rule = get_loader().get_rule(rule_id)
    if not rule:
        raise HTTPException(status_code=404, detail=f"Rule not found: {rule_id}")

    preview = preview_rule(rule)
    return RuleDetailResponse(
        rule_id=rule_id,
        rule=rule.to_document(),
        natural_language=preview.natural_language,
        pseudocode=preview.pseudocode,
        input_variables=preview.input_variables,
        validation=preview.validation,
    )


@router.post("/validate", response_model=ValidationResult)
async def validate(rule: RuleDocument) -> ValidationResult:
    """Check that a rule has at least one condition and one action."""
    return validate_rule(rule)


@router.post("/render", response_model=RenderResponse)
async def render(rule: RuleDocument) -> RenderResponse:
    """Render the natural language summary and pseudocode of a rule."""
    preview = preview_rule(rule)
    return RenderResponse(
        natural_language=preview.natural_language,
        pseudocode=preview.pseudocode,
        input_variables=preview.input_variables,
    )


@router.post("/prepare")
async def prepare(request: PrepareRequest) -> dict:
    """Return the rule document with derived fields refreshed for storage."""
    try:
        prepared = prepare_for_save(request.rule, user_id=request.user_id)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return prepared.to_document()
