"""Perception interface and result model."""

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from supportdesk.agent.enums import Intent, Sentiment
from supportdesk.conversation.models import Query

MAX_KEYWORDS = 5


class PerceptionResult(BaseModel):
    """What perception extracted from a single query.

    Reasoning and planning depend only on this shape, never on the
    implementation that produced it.
    """

    model_config = ConfigDict(frozen=True)

    intent: Intent = Field(..., description="Detected purpose of the query")
    sentiment: Sentiment = Field(..., description="Detected emotional tone")
    urgency: float = Field(..., le=1.0, description="Time-sensitivity score")
    keywords: tuple[str, ...] = Field(
        default=(), max_length=MAX_KEYWORDS, description="Salient words in original order"
    )


class PerceptionMechanism(ABC):
    """Interprets raw query text.

    Implementations must be deterministic for identical input.
    """

    name: str = "base"

    @abstractmethod
    def analyze(self, query: Query) -> PerceptionResult:
        """Extract intent, sentiment, urgency and keywords from a query."""
        pass
