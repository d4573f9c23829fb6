"""Dashboard metrics route."""

from __future__ import annotations

from datetime import datetime, timezone

from fastapi import APIRouter

from ..metrics import MetricsReport, compute_metrics
from ..services import ServicesDep

router = APIRouter(tags=["metrics"])


@router.get("/metrics", response_model=MetricsReport)
def get_metrics(services: ServicesDep) -> MetricsReport:
    """Aggregate the full store, independent of any listing filter."""

    metrics = compute_metrics(services.conversations.snapshot())
    return MetricsReport(
        **metrics.model_dump(), last_updated=datetime.now(timezone.utc)
    )
