"""Ethics validation: fairness gate and advisory response checks."""

from supportdesk.agent.ethics.models import EthicsCheck, EthicsIssue, ValidationResult
from supportdesk.agent.ethics.validator import EthicsValidator

__all__ = [
    "EthicsCheck",
    "EthicsIssue",
    "EthicsValidator",
    "ValidationResult",
]
