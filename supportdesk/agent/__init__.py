"""Support agent exports."""

from supportdesk.agent.engine import SupportAgent
from supportdesk.agent.enums import (
    AIParadigm,
    Intent,
    PlannedAction,
    Sentiment,
    Strategy,
)
from supportdesk.agent.ethics import (
    EthicsCheck,
    EthicsIssue,
    EthicsValidator,
    ValidationResult,
)
from supportdesk.agent.perception import (
    PerceptionMechanism,
    PerceptionResult,
    RuleBasedPerception,
    create_perception,
    register_perception,
)
from supportdesk.agent.planning import ActionPlanner, Task, TaskQueue
from supportdesk.agent.reasoning import ReasoningEngine
from supportdesk.agent.result import PipelineStepTiming, TurnResult

__all__ = [
    "SupportAgent",
    "TurnResult",
    "PipelineStepTiming",
    # Enums
    "AIParadigm",
    "Intent",
    "PlannedAction",
    "Sentiment",
    "Strategy",
    # Perception
    "PerceptionMechanism",
    "PerceptionResult",
    "RuleBasedPerception",
    "create_perception",
    "register_perception",
    # Reasoning
    "ReasoningEngine",
    # Planning
    "ActionPlanner",
    "Task",
    "TaskQueue",
    # Ethics
    "EthicsCheck",
    "EthicsIssue",
    "EthicsValidator",
    "ValidationResult",
]
