"""Conversation CRUD and listing routes."""

from __future__ import annotations

import logging
import math
from typing import Annotated

from fastapi import APIRouter, Body, HTTPException, Request, status

from ..conversations import schemas as convo_schemas
from ..conversations.query import ConversationQuery
from ..services import ServicesDep

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/conversations", tags=["conversations"])

NOT_FOUND = "Conversation not found"


def _not_found() -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=NOT_FOUND)


@router.get("", response_model=convo_schemas.ConversationPage)
def list_conversations(
    request: Request, services: ServicesDep
) -> convo_schemas.ConversationPage:
    """Filter and paginate; query parameters are coerced, never rejected."""

    query = ConversationQuery.from_params(request.query_params)
    items, total = services.conversations.list(query)
    logger.debug("Listing conversations: %d matched", total)
    return convo_schemas.ConversationPage(
        data=items,
        pagination=convo_schemas.Pagination(
            total=total,
            page=query.page,
            limit=query.limit,
            total_pages=math.ceil(total / query.limit),
        ),
    )


@router.get("/{conversation_id}", response_model=convo_schemas.Conversation)
def get_conversation(
    conversation_id: str, services: ServicesDep
) -> convo_schemas.Conversation:
    conversation = services.conversations.get(conversation_id)
    if conversation is None:
        raise _not_found()
    return conversation


@router.post(
    "",
    response_model=convo_schemas.Conversation,
    status_code=status.HTTP_201_CREATED,
)
def create_conversation(
    services: ServicesDep,
    payload: Annotated[convo_schemas.ConversationCreate | None, Body()] = None,
) -> convo_schemas.Conversation:
    """Create a conversation; every absent field takes its default."""

    return services.conversations.create(payload or convo_schemas.ConversationCreate())


@router.put("/{conversation_id}", response_model=convo_schemas.Conversation)
def update_conversation(
    conversation_id: str,
    services: ServicesDep,
    payload: Annotated[convo_schemas.ConversationUpdate | None, Body()] = None,
) -> convo_schemas.Conversation:
    conversation = services.conversations.update(
        conversation_id, payload or convo_schemas.ConversationUpdate()
    )
    if conversation is None:
        raise _not_found()
    return conversation


@router.delete("/{conversation_id}")
def delete_conversation(conversation_id: str, services: ServicesDep) -> dict[str, bool]:
    if not services.conversations.delete(conversation_id):
        raise _not_found()
    return {"success": True}


@router.post(
    "/{conversation_id}/messages", response_model=convo_schemas.Conversation
)
def add_message(
    conversation_id: str,
    services: ServicesDep,
    payload: Annotated[convo_schemas.MessageCreate | None, Body()] = None,
) -> convo_schemas.Conversation:
    """Append one message; ``role`` defaults to ``customer``."""

    if payload is None or not payload.text:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Message text is required",
        )
    conversation = services.conversations.append_message(
        conversation_id, payload.text, role=payload.role
    )
    if conversation is None:
        raise _not_found()
    return conversation
