"""Conversation records, listing queries and the in-memory store."""

from .query import ConversationQuery
from .store import ConversationStore

__all__ = ["ConversationQuery", "ConversationStore"]
