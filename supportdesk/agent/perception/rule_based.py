"""Rule-based perception using fixed keyword tables."""

import re

from supportdesk.agent.enums import Intent, Sentiment
from supportdesk.agent.perception.base import (
    MAX_KEYWORDS,
    PerceptionMechanism,
    PerceptionResult,
)
from supportdesk.conversation.models import Query

# First matching rule wins
INTENT_RULES: tuple[tuple[Intent, tuple[str, ...]], ...] = (
    (Intent.REFUND_REQUEST, ("refund", "money back")),
    (Intent.HELP_REQUEST, ("how to", "help with")),
    (Intent.TECHNICAL_ISSUE, ("not working", "broken")),
    (Intent.BILLING_INQUIRY, ("billing", "charge")),
)

URGENT_KEYWORDS = ("urgent", "emergency", "immediately", "critical", "asap")
NEGATIVE_KEYWORDS = ("unhappy", "frustrated", "angry", "disappointed", "terrible")
POSITIVE_KEYWORDS = ("thank", "happy", "great", "excellent", "appreciate")
STOP_WORDS = frozenset({"the", "and", "for", "with", "that", "this", "from", "have"})

BASE_URGENCY = 0.3
URGENT_KEYWORD_WEIGHT = 0.2
EXCLAMATION_WEIGHT = 0.15
SHOUTING_WEIGHT = 0.15

SHOUTING_RE = re.compile(r"[A-Z]{3,}")


class RuleBasedPerception(PerceptionMechanism):
    """Case-insensitive substring matching over the query text.

    Stateless: the same query text always yields the same result.
    """

    name = "rule_based"

    def analyze(self, query: Query) -> PerceptionResult:
        text = query.text or ""
        lowered = text.lower()
        return PerceptionResult(
            intent=self.detect_intent(lowered),
            sentiment=self.detect_sentiment(lowered),
            urgency=self.calculate_urgency(text),
            keywords=tuple(self.extract_keywords(lowered)),
        )

    def detect_intent(self, text: str) -> Intent:
        for intent, phrases in INTENT_RULES:
            if any(phrase in text for phrase in phrases):
                return intent
        return Intent.GENERAL_INQUIRY

    def detect_sentiment(self, text: str) -> Sentiment:
        negative = sum(1 for word in NEGATIVE_KEYWORDS if word in text)
        positive = sum(1 for word in POSITIVE_KEYWORDS if word in text)
        if negative > positive:
            return Sentiment.NEGATIVE
        if positive > negative:
            return Sentiment.POSITIVE
        return Sentiment.NEUTRAL

    def calculate_urgency(self, text: str) -> float:
        """Score time-sensitivity of the raw (un-lowered) text.

        Keyword hits are matched case-insensitively; the shouting check
        needs the original casing.
        """
        lowered = text.lower()
        urgency = BASE_URGENCY
        urgency += URGENT_KEYWORD_WEIGHT * sum(1 for word in URGENT_KEYWORDS if word in lowered)
        if "!" in text:
            urgency += EXCLAMATION_WEIGHT
        if SHOUTING_RE.search(text):
            urgency += SHOUTING_WEIGHT
        return min(urgency, 1.0)

    def extract_keywords(self, text: str) -> list[str]:
        keywords = [
            word for word in text.split() if len(word) > 3 and word not in STOP_WORDS
        ]
        return keywords[:MAX_KEYWORDS]
