"""Service layer for customer support operations.

Owns the context store and the agent for its whole lifetime and is the
single entry point callers use to submit queries.
"""

from supportdesk.agent import AIParadigm, SupportAgent
from supportdesk.config import get_settings
from supportdesk.config.settings import Settings
from supportdesk.conversation.models import ConversationContext, Query, Response
from supportdesk.conversation.stores import ContextStore, InMemoryContextStore
from supportdesk.observability.logging import get_logger

logger = get_logger(__name__)


class CustomerSupportService:
    """Route queries to the agent against each customer's context.

    One context is kept per customer identifier. With
    ``serialize_per_customer`` enabled, the context's lock is held for
    the whole turn, so concurrent queries for the same customer run one
    after another while different customers proceed in parallel.
    """

    def __init__(
        self,
        agent: SupportAgent | None = None,
        store: ContextStore | None = None,
        serialize_per_customer: bool = True,
    ) -> None:
        self._agent = agent or SupportAgent()
        self._store = store or InMemoryContextStore()
        self._serialize_per_customer = serialize_per_customer

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "CustomerSupportService":
        """Build the service from settings, loading them when not given."""
        settings = settings or get_settings()
        return cls(
            agent=SupportAgent.from_settings(settings),
            store=InMemoryContextStore(
                metrics_enabled=settings.observability.metrics.enabled
            ),
            serialize_per_customer=settings.agent.serialize_per_customer,
        )

    @property
    def agent(self) -> SupportAgent:
        return self._agent

    @property
    def store(self) -> ContextStore:
        return self._store

    @property
    def paradigm(self) -> AIParadigm:
        return self._agent.paradigm

    def handle_query(self, query: Query) -> Response:
        """Process a query for its customer, creating the context on first contact.

        Raises:
            FairnessViolationError: If the query has no customer identifier
        """
        # Reject before the store sees an empty customer identifier
        self._agent.check_fairness(query)

        context = self._store.get_or_create(query.customer_id)
        if not self._serialize_per_customer:
            return self._agent.process_query(query, context)

        with context.lock:
            return self._agent.process_query(query, context)

    def get_context(self, customer_id: str) -> ConversationContext | None:
        return self._store.get(customer_id)

    def clear_context(self, customer_id: str) -> bool:
        cleared = self._store.clear(customer_id)
        if cleared:
            logger.info("conversation_cleared", customer_id=customer_id)
        return cleared

    def active_conversation_count(self) -> int:
        return self._store.count()
