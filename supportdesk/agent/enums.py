"""Enums for the decision pipeline."""

from enum import Enum


class AIParadigm(str, Enum):
    """Decision-making paradigm the agent reports.

    - RULE_BASED: Predefined rules and patterns
    - LEARNING_BASED: Machine learning for adaptive responses
    - HYBRID: Rules combined with learned behaviour
    """

    RULE_BASED = "rule_based"
    LEARNING_BASED = "learning_based"
    HYBRID = "hybrid"

    @property
    def description(self) -> str:
        return _PARADIGM_DESCRIPTIONS[self]


_PARADIGM_DESCRIPTIONS = {
    AIParadigm.RULE_BASED: "Uses predefined rules and patterns",
    AIParadigm.LEARNING_BASED: "Uses machine learning for adaptive responses",
    AIParadigm.HYBRID: "Combines rule-based and learning-based approaches",
}


class Intent(str, Enum):
    """Coarse purpose of a query."""

    REFUND_REQUEST = "REFUND_REQUEST"
    HELP_REQUEST = "HELP_REQUEST"
    TECHNICAL_ISSUE = "TECHNICAL_ISSUE"
    BILLING_INQUIRY = "BILLING_INQUIRY"
    GENERAL_INQUIRY = "GENERAL_INQUIRY"


class Sentiment(str, Enum):
    """Coarse emotional tone of a query."""

    NEGATIVE = "NEGATIVE"
    NEUTRAL = "NEUTRAL"
    POSITIVE = "POSITIVE"


class Strategy(str, Enum):
    """Selects which canned response template the agent uses."""

    PROVIDE_GUIDANCE = "PROVIDE_GUIDANCE"
    EXPLAIN_BILLING = "EXPLAIN_BILLING"
    TROUBLESHOOT = "TROUBLESHOOT"
    ESCALATE_TO_HUMAN = "ESCALATE_TO_HUMAN"
    GENERAL_ASSISTANCE = "GENERAL_ASSISTANCE"


class PlannedAction(str, Enum):
    """Steps in an informational action plan."""

    ACKNOWLEDGE_QUERY = "ACKNOWLEDGE_QUERY"
    SEARCH_KNOWLEDGE_BASE = "SEARCH_KNOWLEDGE_BASE"
    PROVIDE_STEP_BY_STEP_GUIDE = "PROVIDE_STEP_BY_STEP_GUIDE"
    GATHER_SYSTEM_INFO = "GATHER_SYSTEM_INFO"
    RUN_DIAGNOSTICS = "RUN_DIAGNOSTICS"
    SUGGEST_SOLUTIONS = "SUGGEST_SOLUTIONS"
    RETRIEVE_BILLING_INFO = "RETRIEVE_BILLING_INFO"
    EXPLAIN_CHARGES = "EXPLAIN_CHARGES"
    VERIFY_ELIGIBILITY = "VERIFY_ELIGIBILITY"
    ESCALATE_TO_SPECIALIST = "ESCALATE_TO_SPECIALIST"
    PROVIDE_GENERAL_INFO = "PROVIDE_GENERAL_INFO"
    UPDATE_CONTEXT = "UPDATE_CONTEXT"
