"""ContextStore abstract interface."""

from abc import ABC, abstractmethod

from supportdesk.conversation.models import ConversationContext


class ContextStore(ABC):
    """Abstract interface for per-customer context storage.

    Holds exactly one ConversationContext per customer identifier.
    Implementations must make ``get_or_create`` atomic: concurrent
    first-touch calls for the same customer observe a single instance.
    """

    @abstractmethod
    def get_or_create(self, customer_id: str) -> ConversationContext:
        """Return the customer's context, creating it if absent."""
        pass

    @abstractmethod
    def get(self, customer_id: str) -> ConversationContext | None:
        """Return the customer's context without creating one."""
        pass

    @abstractmethod
    def clear(self, customer_id: str) -> bool:
        """Drop the customer's context. Returns False if none existed."""
        pass

    @abstractmethod
    def count(self) -> int:
        """Number of live contexts."""
        pass
