"""Explicitly owned service state injected into the FastAPI app."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Annotated

from fastapi import Depends, Request

from . import seed_data
from .agents import AgentDirectory
from .conversations import ConversationStore
from .security.identities import IdentityStore
from .security.sessions import SessionRegistry


@dataclass
class ServiceContainer:
    """Everything a request handler may read or mutate.

    One container is created per application; its lifetime is the process
    lifetime and nothing is persisted.
    """

    identities: IdentityStore
    sessions: SessionRegistry
    conversations: ConversationStore
    agents: AgentDirectory
    started_at: float = field(default_factory=time.monotonic)

    @classmethod
    def build(cls, *, seed_demo_data: bool = True) -> "ServiceContainer":
        return cls(
            identities=IdentityStore(seed_data.DEMO_IDENTITIES),
            sessions=SessionRegistry(),
            conversations=ConversationStore(
                seed_data.demo_conversations() if seed_demo_data else ()
            ),
            agents=AgentDirectory(seed_data.demo_agents() if seed_demo_data else ()),
        )

    @property
    def uptime(self) -> float:
        return time.monotonic() - self.started_at


def get_services(request: Request) -> ServiceContainer:
    """FastAPI dependency returning the container owned by the app."""

    return request.app.state.services


ServicesDep = Annotated[ServiceContainer, Depends(get_services)]
