"""Static agent reference data."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum

from ..conversations.schemas import CamelModel


class AgentStatus(str, Enum):
    ONLINE = "online"
    OFFLINE = "offline"


class Agent(CamelModel):
    id: str
    name: str
    team: str
    status: AgentStatus


class AgentDirectory:
    """Agents in seed order; nothing in the public surface mutates them."""

    def __init__(self, agents: Iterable[Agent] = ()) -> None:
        self._agents: tuple[Agent, ...] = tuple(agents)

    def __len__(self) -> int:
        return len(self._agents)

    def list_agents(self) -> list[Agent]:
        return [agent.model_copy() for agent in self._agents]

    def get(self, agent_id: str) -> Agent | None:
        for agent in self._agents:
            if agent.id == agent_id:
                return agent.model_copy()
        return None
