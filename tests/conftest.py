"""Pytest fixtures for test suite."""

import pytest
from pathlib import Path
from typing import Any

from rulecanvas.core.models import RuleDocument
from rulecanvas.rules import RuleLoader

from graph_helpers import action, condition, edge, operator, rule


# =============================================================================
# Core Fixtures
# =============================================================================


@pytest.fixture
def rules_dir() -> Path:
    """Path to the bundled example rules."""
    return Path(__file__).parent.parent / "rulecanvas" / "rules" / "data"


@pytest.fixture
def rule_loader(rules_dir: Path) -> RuleLoader:
    """Rule loader with the example rules loaded."""
    loader = RuleLoader(rules_dir)
    loader.load_directory()
    return loader


# =============================================================================
# Rule Graph Fixtures
# =============================================================================


@pytest.fixture
def cooker_chain() -> dict[str, Any]:
    """pot_placed == true -> cooker_time <= 60 -> turn on cooker."""
    return rule(
        nodes=[
            condition("c1", "pot_placed", "equals", "true"),
            condition("c2", "cooker_time", "lessOrEqual", "60"),
            action("a1", "turn_on", "cooker"),
        ],
        edges=[edge("c1", "c2"), edge("c2", "a1")],
        name="Cooker",
    )


@pytest.fixture
def cooker_rule(cooker_chain: dict[str, Any]) -> RuleDocument:
    """The cooker chain parsed into a RuleDocument."""
    return RuleDocument.model_validate(cooker_chain)


@pytest.fixture
def marks_rule() -> dict[str, Any]:
    """Two marks conditions feeding an AND operator that gates an action."""
    return rule(
        nodes=[
            condition("c1", "marks", ">=", "20"),
            condition("c2", "marks", "<=", "100"),
            operator("op", "AND"),
            action("a1", "send_notification", "advisor"),
        ],
        edges=[edge("c1", "op"), edge("c2", "op"), edge("op", "a1")],
    )


@pytest.fixture
def smart_cooker_inputs() -> dict[str, Any]:
    """Inputs that satisfy every condition of the bundled smart cooker rule."""
    return {"food_added": "true", "pot_placed": "true", "cooker_time": 30}
