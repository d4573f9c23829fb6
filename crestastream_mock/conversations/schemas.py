"""Pydantic schemas for conversation APIs.

Field names are snake_case in Python and camelCase on the wire.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, use_enum_values=True
    )


class Sentiment(str, Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


class ConversationStatus(str, Enum):
    """Well-known statuses; free-text statuses are tolerated as well."""

    PENDING = "pending"
    RESOLVED = "resolved"
    COMPLETED = "completed"
    ESCALATED = "escalated"


RESOLVED_STATUSES = frozenset(
    {ConversationStatus.RESOLVED.value, ConversationStatus.COMPLETED.value}
)


class Message(CamelModel):
    role: str = "customer"
    text: str
    timestamp: datetime | None = None


class Conversation(CamelModel):
    id: str
    title: str
    customer_name: str
    agent_name: str
    agent_id: str | None = None
    sentiment: Sentiment
    status: str
    ai_score: int = Field(ge=0, le=100)
    duration: int = Field(ge=0)
    created_at: datetime
    messages: list[Message] = Field(default_factory=list)


class ConversationPatch(CamelModel):
    """Optional conversation fields; ``id`` and ``createdAt`` are not patchable."""

    title: str | None = None
    customer_name: str | None = None
    agent_name: str | None = None
    agent_id: str | None = None
    sentiment: Sentiment | None = None
    status: str | None = None
    ai_score: int | None = Field(default=None, ge=0, le=100)
    duration: int | None = Field(default=None, ge=0)
    messages: list[Message] | None = None


class ConversationCreate(ConversationPatch):
    """Payload used to create a conversation; absent fields get defaults."""


class ConversationUpdate(ConversationPatch):
    """Partial update; only keys present in the request body are merged."""


class MessageCreate(CamelModel):
    role: str | None = None
    text: str | None = None


class Pagination(CamelModel):
    total: int
    page: int
    limit: int
    total_pages: int


class ConversationPage(CamelModel):
    data: list[Conversation]
    pagination: Pagination
