"""Support agent - main pipeline orchestrator.

Runs a query through the fixed sequence of stages:
fairness gate -> perception -> reasoning -> planning -> response
synthesis -> ethics validation -> context update.
"""

import time
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime

import structlog

from supportdesk.agent.enums import AIParadigm, Strategy
from supportdesk.agent.ethics import EthicsValidator
from supportdesk.agent.perception import (
    PerceptionMechanism,
    PerceptionResult,
    create_perception,
)
from supportdesk.agent.planning import ActionPlanner, TaskQueue
from supportdesk.agent.reasoning import ReasoningEngine
from supportdesk.agent.result import PipelineStepTiming, TurnResult
from supportdesk.config.settings import Settings
from supportdesk.conversation.models import ConversationContext, Query, Response
from supportdesk.exceptions import FairnessViolationError
from supportdesk.observability.logging import get_logger
from supportdesk.observability.metrics import (
    ESCALATIONS,
    ETHICS_ISSUES,
    FAIRNESS_VIOLATIONS,
    PIPELINE_STEP_LATENCY,
    QUERIES_PROCESSED,
)

LAST_INTENT_KEY = "lastIntent"
LAST_SENTIMENT_KEY = "lastSentiment"

RESPONSE_TEMPLATES: dict[Strategy, str] = {
    Strategy.PROVIDE_GUIDANCE: (
        "I'd be happy to help you with that. "
        "Let me provide you with step-by-step guidance."
    ),
    Strategy.EXPLAIN_BILLING: (
        "I understand you have a billing inquiry. "
        "Let me explain the charges on your account."
    ),
    Strategy.TROUBLESHOOT: (
        "I see you're experiencing a technical issue. "
        "Let's work together to resolve this."
    ),
    Strategy.ESCALATE_TO_HUMAN: (
        "I understand your concern. "
        "Let me connect you with a specialist who can better assist you."
    ),
}

DEFAULT_RESPONSE = (
    "Thank you for contacting support. I'm here to help you with your inquiry."
)


def escalation_reason(perception: PerceptionResult) -> str:
    """Format the reason attached to an escalated response."""
    return f"Urgency: {perception.urgency:.2f}, Intent: {perception.intent.value}"


class SupportAgent:
    """Orchestrate the customer-support decision pipeline.

    Each turn is strictly sequential and purely in-memory. Reasoning and
    planning see the context as it was before the turn; the context is
    only mutated once the response has been built.

    The agent holds no per-customer state. It never keeps a reference to
    a context beyond the call it was handed in.
    """

    def __init__(
        self,
        paradigm: AIParadigm = AIParadigm.HYBRID,
        perception: PerceptionMechanism | None = None,
        reasoning: ReasoningEngine | None = None,
        planner: ActionPlanner | None = None,
        ethics: EthicsValidator | None = None,
        metrics_enabled: bool = True,
    ) -> None:
        """Initialize the support agent.

        Args:
            paradigm: Decision paradigm reported to callers
            perception: Perception backend (rule-based when omitted)
            reasoning: Escalation/strategy/confidence engine
            planner: Action planner with its task queue
            ethics: Fairness gate and advisory validator
            metrics_enabled: Record Prometheus metrics for each turn
        """
        self._paradigm = paradigm
        self._perception = perception or create_perception("rule_based")
        self._reasoning = reasoning or ReasoningEngine()
        self._planner = planner or ActionPlanner()
        self._ethics = ethics or EthicsValidator()
        self._metrics_enabled = metrics_enabled
        self._logger = get_logger(__name__)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SupportAgent":
        """Build an agent whose stages are configured from settings."""
        metrics_enabled = settings.observability.metrics.enabled
        return cls(
            paradigm=AIParadigm(settings.agent.paradigm),
            perception=create_perception(settings.agent.perception_backend),
            reasoning=ReasoningEngine(settings.reasoning),
            planner=ActionPlanner(TaskQueue(metrics_enabled=metrics_enabled)),
            ethics=EthicsValidator(settings.ethics),
            metrics_enabled=metrics_enabled,
        )

    @property
    def paradigm(self) -> AIParadigm:
        return self._paradigm

    @property
    def perception(self) -> PerceptionMechanism:
        return self._perception

    @property
    def reasoning(self) -> ReasoningEngine:
        return self._reasoning

    @property
    def planner(self) -> ActionPlanner:
        return self._planner

    @property
    def ethics(self) -> EthicsValidator:
        return self._ethics

    def check_fairness(self, query: Query) -> None:
        """Apply the fairness precondition.

        Raises:
            FairnessViolationError: If the query has no customer identifier
        """
        if self._ethics.ensure_fairness(query):
            return
        if self._metrics_enabled:
            FAIRNESS_VIOLATIONS.inc()
        self._logger.warning("fairness_violation", query_id=query.query_id)
        raise FairnessViolationError(
            "Query does not meet fairness criteria", query_id=query.query_id
        )

    def process_query(self, query: Query, context: ConversationContext) -> Response:
        """Process a query and return the agent's response.

        Raises:
            FairnessViolationError: If the query has no customer identifier
        """
        return self.run_turn(query, context).response

    def run_turn(self, query: Query, context: ConversationContext) -> TurnResult:
        """Process a query and return the response with all intermediate outputs.

        Raises:
            FairnessViolationError: If the query has no customer identifier
        """
        self.check_fairness(query)

        start_time = time.perf_counter()
        timings: list[PipelineStepTiming] = []

        with structlog.contextvars.bound_contextvars(
            customer_id=query.customer_id,
            query_id=query.query_id,
            session_id=context.session_id,
        ):
            with self._step("perception", timings):
                perception = self._perception.analyze(query)

            self._logger.debug(
                "query_perceived",
                intent=perception.intent,
                sentiment=perception.sentiment,
                urgency=perception.urgency,
                keywords=list(perception.keywords),
            )

            with self._step("reasoning", timings):
                escalate = self._reasoning.should_escalate(query, perception, context)
                strategy = self._reasoning.determine_response_strategy(perception.intent)
                confidence = self._reasoning.calculate_confidence(strategy, perception)

            with self._step("planning", timings):
                actions = self._planner.plan_actions(query, perception, context)

            with self._step("generation", timings):
                response = Response(
                    query_id=query.query_id,
                    text=RESPONSE_TEMPLATES.get(strategy, DEFAULT_RESPONSE),
                    confidence=confidence,
                    requires_escalation=escalate,
                    escalation_reason=escalation_reason(perception) if escalate else None,
                )

            with self._step("validation", timings):
                validation = self._ethics.validate(response, query)

            if not validation.valid:
                self._logger.warning(
                    "ethics_validation_issues",
                    response_id=response.response_id,
                    issues=validation.messages,
                )
                if self._metrics_enabled:
                    for issue in validation.issues:
                        ETHICS_ISSUES.labels(check=issue.check.value).inc()

            with self._step("context_update", timings):
                with context.lock:
                    context.add_query(query)
                    context.add_response(response)
                    context.set_context_value(LAST_INTENT_KEY, perception.intent)
                    context.set_context_value(LAST_SENTIMENT_KEY, perception.sentiment)

            if self._metrics_enabled:
                QUERIES_PROCESSED.labels(
                    intent=perception.intent.value, strategy=strategy.value
                ).inc()
                if escalate:
                    ESCALATIONS.labels(intent=perception.intent.value).inc()

            self._logger.info(
                "query_processed",
                strategy=strategy,
                confidence=confidence,
                escalated=escalate,
                interaction_count=context.interaction_count,
            )

        return TurnResult(
            response=response,
            perception=perception,
            strategy=strategy,
            actions=actions,
            validation=validation,
            pipeline_timings=timings,
            total_time_ms=(time.perf_counter() - start_time) * 1000,
        )

    @contextmanager
    def _step(self, step: str, timings: list[PipelineStepTiming]) -> Iterator[None]:
        started_at = datetime.now(UTC)
        start = time.perf_counter()
        yield
        elapsed = time.perf_counter() - start
        timings.append(
            PipelineStepTiming(
                step=step,
                started_at=started_at,
                ended_at=datetime.now(UTC),
                duration_ms=elapsed * 1000,
            )
        )
        if self._metrics_enabled:
            PIPELINE_STEP_LATENCY.labels(step=step).observe(elapsed)
