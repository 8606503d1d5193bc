"""Rules domain - evaluation engine, validation, loading and the rule service."""

from rulecanvas.core.models import (
    ActionNode,
    ActionPayload,
    AlarmConfig,
    AlarmType,
    ConditionNode,
    ConditionOperator,
    ConditionPayload,
    Edge,
    LogicalOperator,
    Node,
    OperatorNode,
    OperatorPayload,
    Position,
    RuleDocument,
    RuleGraph,
    coerce_rule,
)
from rulecanvas.rendering import render_natural_language, render_pseudocode
from .predicates import evaluate_condition, loose_equals, parse_float, strict_equals
from .engine import GraphWalker, evaluate_rule
from .validator import ValidationResult, extract_input_variables, validate_rule
from .loader import RuleLoader, RuleNotFoundError, export_rule, write_rule
from .service import InvalidRuleError, RulePreview, prepare_for_save, preview_rule, run_test

__all__ = [
    # Schema
    "ActionNode",
    "ActionPayload",
    "AlarmConfig",
    "AlarmType",
    "ConditionNode",
    "ConditionOperator",
    "ConditionPayload",
    "Edge",
    "LogicalOperator",
    "Node",
    "OperatorNode",
    "OperatorPayload",
    "Position",
    "RuleDocument",
    "RuleGraph",
    "coerce_rule",
    # Predicates
    "evaluate_condition",
    "loose_equals",
    "parse_float",
    "strict_equals",
    # Engine
    "GraphWalker",
    "evaluate_rule",
    # Validation
    "ValidationResult",
    "extract_input_variables",
    "validate_rule",
    # Rendering
    "render_natural_language",
    "render_pseudocode",
    # Loader
    "RuleLoader",
    "RuleNotFoundError",
    "export_rule",
    "write_rule",
    # Service
    "InvalidRuleError",
    "RulePreview",
    "prepare_for_save",
    "preview_rule",
    "run_test",
]
