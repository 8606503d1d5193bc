"""Routes exposing live system metrics."""

from fastapi import APIRouter

from rulecanvas.core.config import get_settings
from rulecanvas.monitoring import sample_system_metrics
from .models import MetricsResponse

router = APIRouter(prefix="/metrics", tags=["Metrics"])


@router.get("/snapshot", response_model=MetricsResponse)
def snapshot() -> MetricsResponse:
    """Sample the metrics available as rule inputs in monitoring mode.

    Blocks for ``cpu_sample_interval`` to measure CPU usage, so it runs in the
    threadpool.
    """
    metrics = sample_system_metrics(cpu_interval=get_settings().cpu_sample_interval)
    return MetricsResponse(metrics=metrics)
