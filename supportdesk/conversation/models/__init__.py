"""Conversation domain models.

Contains the Pydantic models for conversation state:
- Query and Response for individual exchanges
- ConversationContext for per-customer history and scratch values
"""

from supportdesk.conversation.models.context import ConversationContext
from supportdesk.conversation.models.enums import QueryCategory, QueryPriority
from supportdesk.conversation.models.query import Query, Response

__all__ = [
    # Enums
    "QueryCategory",
    "QueryPriority",
    # Exchange models
    "Query",
    "Response",
    # Context
    "ConversationContext",
]
