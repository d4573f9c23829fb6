"""Listing filters and pagination parsed from raw query strings."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_INTEGER = re.compile(r"[+-]?[0-9]+")


def parse_int(value: str | None) -> int | None:
    """Return ``value`` as an integer or ``None`` when it is not one."""

    if value is None:
        return None
    value = value.strip()
    if not _INTEGER.fullmatch(value):
        return None
    return int(value)


def _positive_or(value: int | None, default: int) -> int:
    if value is None or value < 1:
        return default
    return value


def _text(value: str | None) -> str | None:
    return value if value else None


@dataclass(frozen=True)
class ConversationQuery:
    """Typed listing options; a ``None`` filter is not applied."""

    sentiment: str | None = None
    status: str | None = None
    agent_id: str | None = None
    search: str | None = None
    min_score: int | None = None
    max_score: int | None = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "ConversationQuery":
        """Build a query from request parameters without ever raising.

        Empty strings and unparsable numbers are treated as absent; ``page``
        and ``limit`` fall back to their defaults unless they are positive.
        """

        return cls(
            sentiment=_text(params.get("sentiment")),
            status=_text(params.get("status")),
            agent_id=_text(params.get("agentId")),
            search=_text(params.get("search")),
            min_score=parse_int(params.get("minScore")),
            max_score=parse_int(params.get("maxScore")),
            page=_positive_or(parse_int(params.get("page")), DEFAULT_PAGE),
            limit=_positive_or(parse_int(params.get("limit")), DEFAULT_LIMIT),
        )

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit
