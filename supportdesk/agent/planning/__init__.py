"""Planning: per-turn action plans and the standalone task queue."""

from supportdesk.agent.planning.models import Task
from supportdesk.agent.planning.planner import ActionPlanner
from supportdesk.agent.planning.task_queue import TaskQueue

__all__ = [
    "ActionPlanner",
    "Task",
    "TaskQueue",
]
