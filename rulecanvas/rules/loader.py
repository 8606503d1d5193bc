"""Rule document loader and exporter.

Rule documents are stored as JSON (the editor's export format) or YAML.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import yaml

from rulecanvas.core.models import RuleDocument

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".json", ".yaml", ".yml")

EXPORT_FIELDS = ("name", "nodes", "edges", "naturalLanguage", "createdAt", "updatedAt")


class RuleNotFoundError(KeyError):
    """Raised when a rule id is not loaded."""


class RuleLoader:
    """Loads rule documents from files or directories and keeps them by id."""

    def __init__(self, rules_dir: str | Path | None = None):
        self.rules_dir = Path(rules_dir) if rules_dir else None
        self._rules: dict[str, RuleDocument] = {}

    def load_file(self, path: str | Path) -> list[RuleDocument]:
        """Load one or more rules from a single file."""
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Rule file not found: {path}")
        if path.suffix.lower() not in SUPPORTED_SUFFIXES:
            raise ValueError(f"Unsupported rule file type: {path.suffix}")

        with open(path, "r", encoding="utf-8") as f:
            if path.suffix.lower() == ".json":
                content = json.load(f)
            else:
                content = yaml.safe_load(f)

        # Handle single rule or list of rules
        items = content if isinstance(content, list) else [content]
        rules = []
        for idx, item in enumerate(items):
            if not isinstance(item, dict):
                raise ValueError(f"Rule document must be a mapping: {path}")
            if "id" not in item or not item["id"]:
                suffix = f"-{idx + 1}" if len(items) > 1 else ""
                item = {**item, "id": f"{path.stem}{suffix}"}
            rules.append(self.add_rule(RuleDocument.model_validate(item)))

        return rules

    def load_directory(self, path: str | Path | None = None) -> list[RuleDocument]:
        """Load all rule files from a directory (sorted by file name)."""
        path = Path(path) if path else self.rules_dir
        if not path:
            raise ValueError("No rules directory specified")
        if not path.exists():
            raise FileNotFoundError(f"Rules directory not found: {path}")

        rules = []
        for rule_file in sorted(path.iterdir()):
            if rule_file.suffix.lower() not in SUPPORTED_SUFFIXES:
                continue
            try:
                rules.extend(self.load_file(rule_file))
            except (OSError, ValueError, yaml.YAMLError) as e:
                logger.warning("Failed to load %s: %s", rule_file, e)

        return rules

    def add_rule(self, rule: RuleDocument) -> RuleDocument:
        """Register a rule; rules without an id are keyed by name."""
        rule_id = rule.id or rule.name
        if not rule_id:
            raise ValueError("Rule needs an id or a name")
        if rule.id is None:
            rule = rule.model_copy(update={"id": rule_id})
        self._rules[rule_id] = rule
        return rule

    def get_rule(self, rule_id: str) -> RuleDocument | None:
        """Get a loaded rule by ID."""
        return self._rules.get(rule_id)

    def require_rule(self, rule_id: str) -> RuleDocument:
        """Get a loaded rule by ID or raise RuleNotFoundError."""
        rule = self.get_rule(rule_id)
        if rule is None:
            raise RuleNotFoundError(rule_id)
        return rule

    def get_all_rules(self) -> list[RuleDocument]:
        """Get all loaded rules."""
        return list(self._rules.values())


def export_rule(rule: RuleDocument) -> dict[str, Any]:
    """Export shape of a rule: graph, summary and timestamps only."""
    document = rule.to_document()
    return {key: document[key] for key in EXPORT_FIELDS if key in document}


def write_rule(rule: RuleDocument, path: str | Path) -> Path:
    """Write a rule export as JSON or YAML depending on the suffix."""
    path = Path(path)
    if path.suffix.lower() not in SUPPORTED_SUFFIXES:
        raise ValueError(f"Unsupported rule file type: {path.suffix}")

    data = export_rule(rule)
    with open(path, "w", encoding="utf-8") as f:
        if path.suffix.lower() == ".json":
            json.dump(data, f, indent=2)
        else:
            yaml.safe_dump(data, f, sort_keys=False)
    return path
