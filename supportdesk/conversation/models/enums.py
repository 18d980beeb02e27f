"""Enums for conversation domain."""

from enum import Enum


class QueryPriority(str, Enum):
    """Caller-assigned priority of a customer query."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


class QueryCategory(str, Enum):
    """Caller-assigned category of a customer query."""

    GENERAL = "general"
    TECHNICAL = "technical"
    BILLING = "billing"
    ACCOUNT = "account"
    PRODUCT = "product"
