"""Query and response models for conversation domain."""

from datetime import UTC, datetime
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field

from supportdesk.conversation.models.enums import QueryCategory, QueryPriority


def utc_now() -> datetime:
    """Return current UTC time."""
    return datetime.now(UTC)


class Query(BaseModel):
    """A single customer submission.

    Identity and text are fixed at creation. Priority, category and
    timestamp may be adjusted by the caller afterwards.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    query_id: str = Field(..., frozen=True, description="Caller-assigned identifier")
    customer_id: str | None = Field(
        ..., frozen=True, description="Owning customer, checked by the fairness gate"
    )
    text: str = Field(..., frozen=True, description="Raw query text")
    created_at: datetime = Field(default_factory=utc_now, description="Creation time")
    priority: QueryPriority = Field(
        default=QueryPriority.MEDIUM, description="Caller-assigned priority"
    )
    category: QueryCategory = Field(
        default=QueryCategory.GENERAL, description="Caller-assigned category"
    )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Query):
            return NotImplemented
        return self.query_id == other.query_id

    def __hash__(self) -> int:
        return hash(self.query_id)


class Response(BaseModel):
    """Agent reply to a query.

    Confidence is validated on every assignment; an out-of-range value
    raises ``pydantic.ValidationError`` and leaves the previous value intact.
    ``escalation_reason`` is set whenever ``requires_escalation`` is true
    by the agent, but the model does not enforce it.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    response_id: str = Field(
        default_factory=lambda: str(uuid4()), description="Unique identifier"
    )
    query_id: str = Field(..., description="Originating query")
    text: str = Field(..., description="Response text")
    confidence: float = Field(
        default=1.0, ge=0.0, le=1.0, description="Confidence in the response"
    )
    requires_escalation: bool = Field(default=False, description="Needs human hand-off")
    escalation_reason: str | None = Field(default=None, description="Why escalation was chosen")
    created_at: datetime = Field(default_factory=utc_now, description="Creation time")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Response):
            return NotImplemented
        return self.response_id == other.response_id

    def __hash__(self) -> int:
        return hash(self.response_id)
