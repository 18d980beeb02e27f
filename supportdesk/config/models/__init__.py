"""Configuration model exports.

This module exports all configuration models for easy access:

    from supportdesk.config.models import AgentConfig, ReasoningConfig
"""

from supportdesk.config.models.agent import AgentConfig
from supportdesk.config.models.observability import (
    LoggingConfig,
    MetricsConfig,
    ObservabilityConfig,
)
from supportdesk.config.models.pipeline import EthicsConfig, ReasoningConfig

__all__ = [
    # Agent
    "AgentConfig",
    # Observability
    "LoggingConfig",
    "MetricsConfig",
    "ObservabilityConfig",
    # Pipeline
    "EthicsConfig",
    "ReasoningConfig",
]
