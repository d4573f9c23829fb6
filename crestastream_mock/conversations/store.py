"""In-memory conversation store."""

from __future__ import annotations

import logging
import secrets
from collections.abc import Iterable
from datetime import datetime, timezone
from threading import RLock
from typing import Any

from . import schemas
from .query import ConversationQuery

logger = logging.getLogger(__name__)

CREATE_DEFAULTS: dict[str, Any] = {
    "title": "New Conversation",
    "customer_name": "Unknown Customer",
    "agent_name": "Unassigned",
    "agent_id": None,
    "sentiment": schemas.Sentiment.NEUTRAL.value,
    "status": schemas.ConversationStatus.PENDING.value,
    "ai_score": 50,
    "duration": 0,
}

# Fields an update may explicitly clear by sending ``null``.
NULLABLE_FIELDS = frozenset({"agent_id"})


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def matches(conversation: schemas.Conversation, query: ConversationQuery) -> bool:
    """Return whether ``conversation`` satisfies every filter set on ``query``."""

    if query.sentiment is not None and conversation.sentiment != query.sentiment:
        return False
    if query.status is not None and conversation.status != query.status:
        return False
    if query.agent_id is not None and conversation.agent_id != query.agent_id:
        return False
    if query.search is not None:
        needle = query.search.lower()
        if (
            needle not in conversation.title.lower()
            and needle not in conversation.customer_name.lower()
        ):
            return False
    if query.min_score is not None and conversation.ai_score < query.min_score:
        return False
    if query.max_score is not None and conversation.ai_score > query.max_score:
        return False
    return True


class ConversationStore:
    """Ordered, most-recent-first collection of conversations.

    All reads and writes hold a re-entrant lock so concurrent requests served
    from the thread pool never interleave on the collection. Records handed
    out are copies; the live records are only touched under the lock.
    """

    def __init__(self, conversations: Iterable[schemas.Conversation] = ()) -> None:
        self._lock = RLock()
        self._records: list[schemas.Conversation] = [
            c.model_copy(deep=True) for c in conversations
        ]
        self._issued_ids: set[str] = {c.id for c in self._records}

    def __len__(self) -> int:
        with self._lock:
            return len(self._records)

    def _new_id(self) -> str:
        while True:
            candidate = f"conv-{secrets.token_hex(4)}"
            if candidate not in self._issued_ids:
                self._issued_ids.add(candidate)
                return candidate

    def _index_of(self, conversation_id: str) -> int | None:
        for index, record in enumerate(self._records):
            if record.id == conversation_id:
                return index
        return None

    # ------------------------------------------------------------------
    # Queries

    def snapshot(self) -> list[schemas.Conversation]:
        with self._lock:
            return [c.model_copy(deep=True) for c in self._records]

    def list(
        self, query: ConversationQuery
    ) -> tuple[list[schemas.Conversation], int]:
        """Return one page of matching records and the total match count."""

        with self._lock:
            matched = [c for c in self._records if matches(c, query)]
            page = matched[query.offset : query.offset + query.limit]
            return [c.model_copy(deep=True) for c in page], len(matched)

    def get(self, conversation_id: str) -> schemas.Conversation | None:
        with self._lock:
            index = self._index_of(conversation_id)
            if index is None:
                return None
            return self._records[index].model_copy(deep=True)

    # ------------------------------------------------------------------
    # Mutations

    def create(self, payload: schemas.ConversationCreate) -> schemas.Conversation:
        fields = {**CREATE_DEFAULTS, **payload.model_dump(exclude_none=True)}
        with self._lock:
            record = schemas.Conversation(
                id=self._new_id(), created_at=_utcnow(), **fields
            )
            self._records.insert(0, record)
        logger.info("Created conversation %s", record.id)
        return record.model_copy(deep=True)

    def update(
        self, conversation_id: str, patch: schemas.ConversationUpdate
    ) -> schemas.Conversation | None:
        changes = {
            key: value
            for key, value in patch.model_dump(exclude_unset=True).items()
            if value is not None or key in NULLABLE_FIELDS
        }
        with self._lock:
            index = self._index_of(conversation_id)
            if index is None:
                return None
            merged = {**self._records[index].model_dump(), **changes}
            record = schemas.Conversation.model_validate(merged)
            self._records[index] = record
        logger.info(
            "Updated conversation %s fields=%s", conversation_id, sorted(changes)
        )
        return record.model_copy(deep=True)

    def delete(self, conversation_id: str) -> bool:
        with self._lock:
            index = self._index_of(conversation_id)
            if index is None:
                return False
            del self._records[index]
        logger.info("Deleted conversation %s", conversation_id)
        return True

    def append_message(
        self, conversation_id: str, text: str, role: str | None = None
    ) -> schemas.Conversation | None:
        message = schemas.Message(
            role=role or "customer", text=text, timestamp=_utcnow()
        )
        with self._lock:
            index = self._index_of(conversation_id)
            if index is None:
                return None
            record = self._records[index]
            record.messages.append(message)
            result = record.model_copy(deep=True)
        logger.info("Added %s message to %s", message.role, conversation_id)
        return result
