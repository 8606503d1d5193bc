"""Live monitoring - system metrics snapshots and periodic rule evaluation."""

from .metrics import sample_system_metrics
from .monitor import RuleMonitor

__all__ = [
    "sample_system_metrics",
    "RuleMonitor",
]
