"""Pydantic models for rule documents.

A rule is a graph of condition, operator and action blocks joined by directed
edges. The wire format follows the editor's document shape: camelCase keys,
node kind under ``type`` and the kind-specific payload under ``data``.
"""

from __future__ import annotations

from collections.abc import Mapping
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _CamelModel(BaseModel):
    """Base model accepting both camelCase wire keys and snake_case names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# =============================================================================
# Operators
# =============================================================================


class ConditionOperator(str, Enum):
    """Named comparison operators offered by the condition block."""

    EQUALS = "equals"
    NOT_EQUALS = "notEquals"
    GREATER_THAN = "greaterThan"
    LESS_THAN = "lessThan"
    GREATER_OR_EQUAL = "greaterOrEqual"
    LESS_OR_EQUAL = "lessOrEqual"
    CONTAINS = "contains"


class LogicalOperator(str, Enum):
    """Operator block types."""

    AND = "AND"
    OR = "OR"
    NOT = "NOT"
    XOR = "XOR"


class AlarmType(str, Enum):
    """Severity tag carried by the alarm configuration."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"


# =============================================================================
# Node payloads
# =============================================================================


class Position(BaseModel):
    """Canvas coordinates of a block (display only)."""

    x: float = 0.0
    y: float = 0.0


class ConditionPayload(_CamelModel):
    """Data of a condition block: ``<field> <operator> <value>``."""

    field: str | None = None
    variable: str | None = None
    operator: str | None = None
    value: Any = None
    label: str | None = None

    @property
    def variable_name(self) -> str | None:
        """The input variable this condition reads (``variable`` is the legacy key)."""
        return self.field or self.variable


class OperatorPayload(_CamelModel):
    """Data of a logical operator block."""

    operator_type: str | None = None
    operator: str | None = None
    label: str | None = None

    @property
    def resolved_type(self) -> str:
        return (self.operator_type or self.operator or LogicalOperator.AND.value).upper()


class ActionPayload(_CamelModel):
    """Data of an action block."""

    action_type: str | None = None
    target: str | None = None
    parameters: str | None = None
    label: str | None = None


# =============================================================================
# Nodes and edges
# =============================================================================


class ConditionNode(_CamelModel):
    id: str
    kind: Literal["condition"] = Field("condition", alias="type")
    position: Position = Field(default_factory=Position)
    payload: ConditionPayload = Field(default_factory=ConditionPayload, alias="data")


class OperatorNode(_CamelModel):
    id: str
    kind: Literal["operator"] = Field("operator", alias="type")
    position: Position = Field(default_factory=Position)
    payload: OperatorPayload = Field(default_factory=OperatorPayload, alias="data")


class ActionNode(_CamelModel):
    id: str
    kind: Literal["action"] = Field("action", alias="type")
    position: Position = Field(default_factory=Position)
    payload: ActionPayload = Field(default_factory=ActionPayload, alias="data")


Node = Annotated[
    Union[ConditionNode, OperatorNode, ActionNode],
    Field(discriminator="kind"),
]


class Edge(_CamelModel):
    """Directed connection from ``source`` block to ``target`` block."""

    id: str = ""
    source: str
    target: str


# =============================================================================
# Rules
# =============================================================================


class RuleGraph(_CamelModel):
    """The evaluable part of a rule: its blocks and connections."""

    nodes: list[Node] = Field(default_factory=list)
    edges: list[Edge] = Field(default_factory=list)

    def node_index(self) -> dict[str, ConditionNode | OperatorNode | ActionNode]:
        """Map node id to node; the first node wins on duplicate ids."""
        return {node.id: node for node in reversed(self.nodes)}

    def outgoing(self, node_id: str) -> list[Edge]:
        return [edge for edge in self.edges if edge.source == node_id]

    def incoming(self, node_id: str) -> list[Edge]:
        return [edge for edge in self.edges if edge.target == node_id]

    def roots(self) -> list[ConditionNode | OperatorNode | ActionNode]:
        """Nodes with no incoming edge, in node order."""
        targets = {edge.target for edge in self.edges}
        return [node for node in self.nodes if node.id not in targets]

    def conditions(self) -> list[ConditionNode]:
        return [node for node in self.nodes if isinstance(node, ConditionNode)]

    def operators(self) -> list[OperatorNode]:
        return [node for node in self.nodes if isinstance(node, OperatorNode)]

    def actions(self) -> list[ActionNode]:
        return [node for node in self.nodes if isinstance(node, ActionNode)]


class AlarmConfig(_CamelModel):
    """Alert channel settings consumed by alerting collaborators on a match."""

    audio_enabled: bool = True
    audio_frequency: float = 1000
    audio_duration: float = 300
    audio_volume: float = 0.3
    voice_enabled: bool = True
    voice_rate: float = 1.0
    voice_pitch: float = 1.0
    visual_enabled: bool = True
    visual_duration: float = 1700
    notification_enabled: bool = True
    alarm_type: AlarmType = AlarmType.CRITICAL


class RuleDocument(RuleGraph):
    """A complete stored rule as exchanged with the storage collaborator."""

    id: str | None = None
    name: str = ""
    alarm_config: AlarmConfig | None = None
    natural_language: str | None = None
    is_valid: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None
    user_id: str | None = None

    def to_document(self) -> dict[str, Any]:
        """Serialize to the camelCase document shape."""
        return self.model_dump(by_alias=True, mode="json", exclude_none=True)


def coerce_rule(rule: RuleGraph | Mapping[str, Any]) -> RuleGraph:
    """Accept either a parsed rule or a raw document mapping."""
    if isinstance(rule, RuleGraph):
        return rule
    return RuleDocument.model_validate(rule)
