"""Core package - shared configuration, logging and rule document models."""

from .config import Settings, get_settings
from .logging_config import configure_logging
from .models import (
    AlarmConfig,
    RuleDocument,
    RuleGraph,
    coerce_rule,
)

__all__ = [
    # Config
    "Settings",
    "get_settings",
    "configure_logging",
    # Models
    "AlarmConfig",
    "RuleDocument",
    "RuleGraph",
    "coerce_rule",
]
