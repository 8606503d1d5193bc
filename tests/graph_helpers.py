"""Builders for rule documents in the editor's wire format."""

from __future__ import annotations

from typing import Any


def condition(node_id: str, field: str | None, operator: str | None = "equals", value: Any = None,
              **extra: Any) -> dict[str, Any]:
    data = {"field": field, "operator": operator, "value": value, **extra}
    return {"id": node_id, "type": "condition", "position": {"x": 0, "y": 0}, "data": data}


def operator(node_id: str, operator_type: str = "AND") -> dict[str, Any]:
    return {"id": node_id, "type": "operator", "data": {"operatorType": operator_type}}


def action(node_id: str, action_type: str | None = None, target: str | None = None,
           parameters: str | None = None, label: str | None = None) -> dict[str, Any]:
    data = {"actionType": action_type, "target": target, "parameters": parameters, "label": label}
    return {"id": node_id, "type": "action", "data": data}


def edge(source: str, target: str) -> dict[str, Any]:
    return {"id": f"{source}->{target}", "source": source, "target": target}


def rule(nodes: list[dict[str, Any]], edges: list[dict[str, Any]] | None = None,
         name: str = "Test Rule") -> dict[str, Any]:
    return {"name": name, "nodes": nodes, "edges": edges or []}


def condition_chain(length: int, field: str = "x", value: str = "1") -> dict[str, Any]:
    """``length`` identical conditions in a row, ending in one action."""
    nodes = [condition(f"c{i}", field, "equals", value) for i in range(length)]
    nodes.append(action("a1", "turn_on", "fan"))
    ids = [node["id"] for node in nodes]
    edges = [edge(source, target) for source, target in zip(ids, ids[1:])]
    return rule(nodes=nodes, edges=edges, name="Long chain")
