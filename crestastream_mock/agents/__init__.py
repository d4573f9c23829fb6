"""Read-only agent directory."""

from .directory import Agent, AgentDirectory, AgentStatus

__all__ = ["Agent", "AgentDirectory", "AgentStatus"]
