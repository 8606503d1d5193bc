"""Periodic evaluation of a rule against freshly sampled inputs."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from rulecanvas.core.config import get_settings
from rulecanvas.core.models import RuleGraph, coerce_rule
from rulecanvas.rules.engine import evaluate_rule
from rulecanvas.runtime.trace import EvaluationResult
from .metrics import sample_system_metrics

logger = logging.getLogger(__name__)

SnapshotProvider = Callable[[], Mapping[str, Any]]
ResultHandler = Callable[[RuleGraph, EvaluationResult], None]


class RuleMonitor:
    """Re-evaluates one rule on a fixed interval.

    Each tick samples a new snapshot and evaluates the rule synchronously.
    ``on_result`` receives every result; alerting collaborators hook in there
    and check ``result.matched``. Stopping only prevents further ticks.
    """

    def __init__(
        self,
        rule: RuleGraph | Mapping[str, Any],
        snapshot_provider: SnapshotProvider = sample_system_metrics,
        interval: float | None = None,
        on_result: ResultHandler | None = None,
    ):
        self.rule = coerce_rule(rule)
        self.snapshot_provider = snapshot_provider
        self.interval = interval if interval is not None else get_settings().monitor_interval_seconds
        self.on_result = on_result

        self.ticks = 0
        self.last_snapshot: dict[str, Any] = {}
        self.last_result: EvaluationResult | None = None
        self._stop_event: asyncio.Event | None = None

    @property
    def is_running(self) -> bool:
        return self._stop_event is not None and not self._stop_event.is_set()

    def tick(self) -> EvaluationResult:
        """Sample once and evaluate."""
        snapshot = dict(self.snapshot_provider())
        result = evaluate_rule(self.rule, snapshot)

        self.ticks += 1
        self.last_snapshot = snapshot
        self.last_result = result
        if result.matched:
            logger.info("Monitored rule matched: %s", ", ".join(result.actions))
        else:
            logger.debug("Monitored rule did not match")

        if self.on_result is not None:
            self.on_result(self.rule, result)
        return result

    async def run(self, max_ticks: int | None = None) -> None:
        """Tick every ``interval`` seconds until stopped (or ``max_ticks``)."""
        self._stop_event = asyncio.Event()
        count = 0
        logger.info("Monitoring started (every %.1fs)", self.interval)

        while not self._stop_event.is_set():
            self.tick()
            count += 1
            if max_ticks is not None and count >= max_ticks:
                break
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval)
            except asyncio.TimeoutError:
                pass

        self._stop_event.set()
        logger.info("Monitoring stopped after %d ticks", count)

    def stop(self) -> None:
        """Prevent further ticks."""
        if self._stop_event is not None:
            self._stop_event.set()
