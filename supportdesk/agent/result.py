"""Turn result models for the support agent.

Carries the response together with every intermediate output so a
turn can be inspected after the fact.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from supportdesk.agent.enums import PlannedAction, Strategy
from supportdesk.agent.ethics.models import ValidationResult
from supportdesk.agent.perception import PerceptionResult
from supportdesk.conversation.models import Response


class PipelineStepTiming(BaseModel):
    """Timing information for a single pipeline step."""

    step: str = Field(..., description="Step name")
    started_at: datetime
    ended_at: datetime
    duration_ms: float = Field(ge=0)


class TurnResult(BaseModel):
    """Complete result of processing one query.

    ``actions`` is the informational plan for the turn; response text is
    chosen from the strategy alone and does not consume it.
    """

    response: Response
    perception: PerceptionResult
    strategy: Strategy
    actions: list[PlannedAction] = Field(default_factory=list)
    validation: ValidationResult

    pipeline_timings: list[PipelineStepTiming] = Field(default_factory=list)
    total_time_ms: float = Field(default=0.0, ge=0)

    @property
    def escalated(self) -> bool:
        return self.response.requires_escalation
