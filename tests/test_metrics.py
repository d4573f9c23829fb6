from datetime import datetime, timezone

from crestastream_mock.conversations.schemas import Conversation
from crestastream_mock.metrics import Metrics, compute_metrics, round_half_up
from crestastream_mock.seed_data import demo_conversations


def _conversation(ai_score: int, duration: int = 0, status: str = "pending", sentiment: str = "neutral"):
    return Conversation(
        id=f"conv-{ai_score}-{duration}",
        title="t",
        customer_name="c",
        agent_name="a",
        sentiment=sentiment,
        status=status,
        ai_score=ai_score,
        duration=duration,
        created_at=datetime.now(timezone.utc),
    )


def test_metrics_over_demo_data():
    metrics = compute_metrics(demo_conversations())

    assert metrics.total_conversations == 5
    assert metrics.positive_count == 2
    assert metrics.negative_count == 2
    assert metrics.neutral_count == 1
    assert metrics.average_ai_score == 64
    assert metrics.resolution_rate == 60
    assert metrics.average_handle_time == 353


def test_metrics_on_empty_store_are_zero():
    metrics = compute_metrics([])
    assert metrics == Metrics()
    assert metrics.average_ai_score == 0
    assert metrics.resolution_rate == 0
    assert metrics.average_handle_time == 0


def test_averages_round_half_up():
    metrics = compute_metrics([_conversation(50, 1), _conversation(51, 2)])
    assert metrics.average_ai_score == 51
    assert metrics.average_handle_time == 2


def test_free_text_status_is_not_resolved():
    metrics = compute_metrics(
        [
            _conversation(10, status="closed"),
            _conversation(20, status="resolved"),
            _conversation(30, status="completed"),
        ]
    )
    assert metrics.resolution_rate == 67


def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(0) == 0
