"""Planning models."""

from pydantic import BaseModel, ConfigDict, Field


class Task(BaseModel):
    """A unit of work waiting in a TaskQueue.

    Unrelated to the query/response lifecycle; higher priority runs first.
    """

    model_config = ConfigDict(frozen=True)

    task_id: str = Field(..., description="Caller-assigned identifier")
    priority: int = Field(..., description="Higher values are served first")
    description: str = Field(default="", description="Human-readable summary")
