"""In-memory implementation of ContextStore."""

import threading

from supportdesk.conversation.models import ConversationContext
from supportdesk.conversation.store import ContextStore
from supportdesk.observability.logging import get_logger
from supportdesk.observability.metrics import ACTIVE_CONVERSATIONS

logger = get_logger(__name__)


class InMemoryContextStore(ContextStore):
    """Thread-safe in-memory implementation of ContextStore.

    A single lock guards the map, so lookup-and-insert in
    ``get_or_create`` happens as one step. Contexts live until
    ``clear`` is called or the store is dropped; there is no eviction.

    With metrics enabled the store adds its contexts to the process-wide
    ``ACTIVE_CONVERSATIONS`` gauge, so the gauge reports the total across
    every such store.
    """

    def __init__(self, metrics_enabled: bool = True) -> None:
        """Initialize empty storage."""
        self._contexts: dict[str, ConversationContext] = {}
        self._lock = threading.Lock()
        self._metrics_enabled = metrics_enabled

    def get_or_create(self, customer_id: str) -> ConversationContext:
        with self._lock:
            context = self._contexts.get(customer_id)
            if context is None:
                context = ConversationContext(customer_id=customer_id)
                self._contexts[customer_id] = context
                if self._metrics_enabled:
                    ACTIVE_CONVERSATIONS.inc()
                logger.debug(
                    "context_created",
                    customer_id=customer_id,
                    session_id=context.session_id,
                )
            return context

    def get(self, customer_id: str) -> ConversationContext | None:
        with self._lock:
            return self._contexts.get(customer_id)

    def clear(self, customer_id: str) -> bool:
        with self._lock:
            context = self._contexts.pop(customer_id, None)
            if context is None:
                return False
            if self._metrics_enabled:
                ACTIVE_CONVERSATIONS.dec()
        logger.debug("context_cleared", customer_id=customer_id)
        return True

    def count(self) -> int:
        with self._lock:
            return len(self._contexts)
