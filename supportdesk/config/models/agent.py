"""Agent-level configuration models."""

from typing import Literal

from pydantic import BaseModel, Field

ParadigmName = Literal["rule_based", "learning_based", "hybrid"]


class AgentConfig(BaseModel):
    """Configuration for the support agent and its service wrapper.

    The perception backend is chosen here by name so alternate
    implementations can be swapped in without touching the agent.
    """

    paradigm: ParadigmName = Field(
        default="hybrid",
        description="AI paradigm reported by the agent",
    )
    perception_backend: str = Field(
        default="rule_based",
        description="Registered perception implementation to use",
    )
    serialize_per_customer: bool = Field(
        default=True,
        description="Hold the context lock for the whole turn in the service",
    )
