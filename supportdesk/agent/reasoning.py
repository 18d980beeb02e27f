"""Escalation and response-strategy decisions."""

from supportdesk.agent.enums import Intent, Sentiment, Strategy
from supportdesk.agent.perception import PerceptionResult
from supportdesk.config.models.pipeline import ReasoningConfig
from supportdesk.conversation.models import ConversationContext, Query

STRATEGY_BY_INTENT: dict[Intent, Strategy] = {
    Intent.HELP_REQUEST: Strategy.PROVIDE_GUIDANCE,
    Intent.BILLING_INQUIRY: Strategy.EXPLAIN_BILLING,
    Intent.TECHNICAL_ISSUE: Strategy.TROUBLESHOOT,
    Intent.REFUND_REQUEST: Strategy.ESCALATE_TO_HUMAN,
}

ESCALATING_INTENTS = frozenset({Intent.REFUND_REQUEST, Intent.TECHNICAL_ISSUE})


class ReasoningEngine:
    """Decides escalation, response strategy and confidence.

    Works purely from a PerceptionResult and the context as it stood
    before the current turn; it never mutates either.
    """

    def __init__(self, config: ReasoningConfig | None = None) -> None:
        self._config = config or ReasoningConfig()

    @property
    def config(self) -> ReasoningConfig:
        return self._config

    def should_escalate(
        self,
        query: Query,  # noqa: ARG002
        perception: PerceptionResult,
        context: ConversationContext,
    ) -> bool:
        """Return True when the turn needs a human.

        Rules are checked in order and the first hit wins:
        1. Urgency at or above the escalation threshold
        2. Negative sentiment after more than N prior interactions
        3. Refund requests and technical issues
        """
        if perception.urgency >= self._config.escalation_urgency_threshold:
            return True

        if (
            perception.sentiment == Sentiment.NEGATIVE
            and context.interaction_count > self._config.negative_sentiment_min_interactions
        ):
            return True

        return perception.intent in ESCALATING_INTENTS

    def determine_response_strategy(self, intent: Intent) -> Strategy:
        return STRATEGY_BY_INTENT.get(intent, Strategy.GENERAL_ASSISTANCE)

    def calculate_confidence(
        self,
        strategy: Strategy,  # noqa: ARG002
        perception: PerceptionResult,
    ) -> float:
        """Score confidence in [0.0, 1.0].

        Urgency and negative-sentiment penalties stack; general inquiries
        get a bonus.
        """
        cfg = self._config
        confidence = cfg.base_confidence

        if perception.urgency > cfg.confidence_urgency_threshold:
            confidence -= cfg.urgency_confidence_penalty

        if perception.sentiment == Sentiment.NEGATIVE:
            confidence -= cfg.negative_confidence_penalty

        if perception.intent == Intent.GENERAL_INQUIRY:
            confidence += cfg.general_inquiry_confidence_bonus

        return max(0.0, min(1.0, confidence))
