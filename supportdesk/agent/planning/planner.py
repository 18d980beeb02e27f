"""Action planning for a single turn."""

from supportdesk.agent.enums import Intent, PlannedAction
from supportdesk.agent.perception import PerceptionResult
from supportdesk.agent.planning.models import Task
from supportdesk.agent.planning.task_queue import TaskQueue
from supportdesk.conversation.models import ConversationContext, Query

INTENT_ACTIONS: dict[Intent, tuple[PlannedAction, ...]] = {
    Intent.HELP_REQUEST: (
        PlannedAction.SEARCH_KNOWLEDGE_BASE,
        PlannedAction.PROVIDE_STEP_BY_STEP_GUIDE,
    ),
    Intent.TECHNICAL_ISSUE: (
        PlannedAction.GATHER_SYSTEM_INFO,
        PlannedAction.RUN_DIAGNOSTICS,
        PlannedAction.SUGGEST_SOLUTIONS,
    ),
    Intent.BILLING_INQUIRY: (
        PlannedAction.RETRIEVE_BILLING_INFO,
        PlannedAction.EXPLAIN_CHARGES,
    ),
    Intent.REFUND_REQUEST: (
        PlannedAction.VERIFY_ELIGIBILITY,
        PlannedAction.ESCALATE_TO_SPECIALIST,
    ),
}

DEFAULT_ACTIONS: tuple[PlannedAction, ...] = (PlannedAction.PROVIDE_GENERAL_INFO,)


class ActionPlanner:
    """Builds the ordered action plan for a turn and owns a task queue.

    ``plan_actions`` is pure and never touches the queue. The queue is a
    separate scheduling facility for callers juggling several pieces of
    work; the per-query pipeline does not use it.
    """

    def __init__(self, task_queue: TaskQueue | None = None) -> None:
        self._tasks = task_queue if task_queue is not None else TaskQueue()

    def plan_actions(
        self,
        query: Query,  # noqa: ARG002
        perception: PerceptionResult,
        context: ConversationContext,  # noqa: ARG002
    ) -> list[PlannedAction]:
        return [
            PlannedAction.ACKNOWLEDGE_QUERY,
            *INTENT_ACTIONS.get(perception.intent, DEFAULT_ACTIONS),
            PlannedAction.UPDATE_CONTEXT,
        ]

    @property
    def task_queue(self) -> TaskQueue:
        return self._tasks

    def add_task(self, task_id: str, priority: int, description: str = "") -> Task:
        return self._tasks.add_task(task_id, priority, description)

    def get_next_task(self) -> Task | None:
        return self._tasks.get_next_task()

    def has_pending_tasks(self) -> bool:
        return self._tasks.has_pending_tasks()

    def pending_count(self) -> int:
        return self._tasks.pending_count()
