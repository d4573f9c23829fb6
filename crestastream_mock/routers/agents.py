"""Agent listing route."""

from __future__ import annotations

from fastapi import APIRouter

from ..agents import Agent
from ..services import ServicesDep

router = APIRouter(tags=["agents"])


@router.get("/agents", response_model=list[Agent])
def list_agents(services: ServicesDep) -> list[Agent]:
    return services.agents.list_agents()
