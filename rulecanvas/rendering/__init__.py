"""Text views of rules: natural language summary and pseudocode."""

from .natural_language import (
    EMPTY_RULE_TEXT,
    NO_CONTENT_TEXT,
    join_operator,
    render_natural_language,
)
from .phrases import OPERATOR_PHRASES, describe_action, humanize
from .pseudocode import render_pseudocode

__all__ = [
    "EMPTY_RULE_TEXT",
    "NO_CONTENT_TEXT",
    "OPERATOR_PHRASES",
    "describe_action",
    "humanize",
    "join_operator",
    "render_natural_language",
    "render_pseudocode",
]
