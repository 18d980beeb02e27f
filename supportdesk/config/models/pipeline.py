"""Decision pipeline configuration models.

Defaults reproduce the fixed thresholds of the rule-based pipeline;
overriding them is opt-in.
"""

from pydantic import BaseModel, Field

DEFAULT_BIASED_TERMS = ["always", "never", "all", "none", "must", "should"]


class ReasoningConfig(BaseModel):
    """Escalation and confidence thresholds."""

    escalation_urgency_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Escalate when urgency is at or above this value",
    )
    negative_sentiment_min_interactions: int = Field(
        default=2,
        ge=0,
        description="Escalate negative sentiment once interactions exceed this count",
    )
    base_confidence: float = Field(default=0.8, ge=0.0, le=1.0)
    confidence_urgency_threshold: float = Field(
        default=0.7,
        ge=0.0,
        le=1.0,
        description="Apply the urgency penalty when urgency is strictly above this",
    )
    urgency_confidence_penalty: float = Field(default=0.2, ge=0.0)
    negative_confidence_penalty: float = Field(default=0.15, ge=0.0)
    general_inquiry_confidence_bonus: float = Field(default=0.1, ge=0.0)


class EthicsConfig(BaseModel):
    """Advisory response checks."""

    biased_terms: list[str] = Field(
        default_factory=lambda: list(DEFAULT_BIASED_TERMS),
        description="Terms counted by the biased-language check",
    )
    biased_term_limit: int = Field(
        default=2,
        ge=0,
        description="Flag a response when more terms than this are present",
    )
    discriminatory_terms: list[str] = Field(
        default_factory=list,
        description="Denylist for the discriminatory-content check (empty by default)",
    )
    min_transparent_confidence: float = Field(
        default=0.3,
        ge=0.0,
        le=1.0,
        description="Responses at or below this confidence fail the transparency check",
    )
