"""Dashboard metrics aggregated over the whole conversation store."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import datetime

from pydantic import Field

from .conversations.schemas import (
    RESOLVED_STATUSES,
    CamelModel,
    Conversation,
    Sentiment,
)


class Metrics(CamelModel):
    total_conversations: int = 0
    positive_count: int = 0
    negative_count: int = 0
    neutral_count: int = 0
    average_ai_score: int = 0
    resolution_rate: int = 0
    average_handle_time: int = 0


class MetricTrends(CamelModel):
    conversations_change: int = 12
    score_change: int = 5
    resolution_change: int = -3


class MetricsReport(Metrics):
    trends: MetricTrends = Field(default_factory=MetricTrends)
    last_updated: datetime


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def compute_metrics(conversations: Sequence[Conversation]) -> Metrics:
    """Count sentiments and derive averages; an empty snapshot yields zeros."""

    total = len(conversations)
    if total == 0:
        return Metrics()
    resolved = sum(1 for c in conversations if c.status in RESOLVED_STATUSES)
    return Metrics(
        total_conversations=total,
        positive_count=sum(1 for c in conversations if c.sentiment == Sentiment.POSITIVE),
        negative_count=sum(1 for c in conversations if c.sentiment == Sentiment.NEGATIVE),
        neutral_count=sum(1 for c in conversations if c.sentiment == Sentiment.NEUTRAL),
        average_ai_score=round_half_up(sum(c.ai_score for c in conversations) / total),
        resolution_rate=round_half_up(resolved / total * 100),
        average_handle_time=round_half_up(sum(c.duration for c in conversations) / total),
    )
