"""Context stores for conversation management."""

from supportdesk.conversation.store import ContextStore
from supportdesk.conversation.stores.inmemory import InMemoryContextStore

__all__ = [
    "ContextStore",
    "InMemoryContextStore",
]
