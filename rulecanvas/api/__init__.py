"""HTTP API routers."""

from .routes_evaluate import router as evaluate_router
from .routes_metrics import router as metrics_router
from .routes_rules import get_loader, router as rules_router

__all__ = [
    "evaluate_router",
    "metrics_router",
    "rules_router",
    "get_loader",
]
