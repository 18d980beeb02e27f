"""Perception: turns raw query text into a PerceptionResult."""

from supportdesk.agent.perception.base import PerceptionMechanism, PerceptionResult
from supportdesk.agent.perception.factory import (
    available_backends,
    create_perception,
    register_perception,
)
from supportdesk.agent.perception.rule_based import RuleBasedPerception

__all__ = [
    "PerceptionMechanism",
    "PerceptionResult",
    "RuleBasedPerception",
    "available_backends",
    "create_perception",
    "register_perception",
]
