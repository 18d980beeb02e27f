"""Per-customer conversation context."""

import threading
from datetime import datetime
from typing import Any
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr

from supportdesk.conversation.models.query import Query, Response, utc_now


class ConversationContext(BaseModel):
    """Accumulated history and scratch state for one customer.

    Query and response histories are append-only. The interaction count
    is incremented together with every query append, so it always equals
    the length of the query history. Accessors hand out copies; mutating
    a returned list or dict has no effect on the stored state.

    ``lock`` is a re-entrant lock owned by this context. The context's own
    mutators take it, and callers that need a whole turn to be atomic for
    one customer can hold it around the turn.
    """

    model_config = ConfigDict(frozen=False, validate_assignment=True)

    session_id: str = Field(
        default_factory=lambda: str(uuid4()), description="Unique session identifier"
    )
    customer_id: str = Field(..., description="Owning customer")
    created_at: datetime = Field(default_factory=utc_now, description="Creation time")

    _queries: list[Query] = PrivateAttr(default_factory=list)
    _responses: list[Response] = PrivateAttr(default_factory=list)
    _data: dict[str, Any] = PrivateAttr(default_factory=dict)
    _interaction_count: int = PrivateAttr(default=0)
    _lock: threading.RLock = PrivateAttr(default_factory=threading.RLock)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def add_query(self, query: Query) -> None:
        """Append a query and count the interaction."""
        with self._lock:
            self._queries.append(query)
            self._interaction_count += 1

    def add_response(self, response: Response) -> None:
        with self._lock:
            self._responses.append(response)

    def set_context_value(self, key: str, value: Any) -> None:
        with self._lock:
            self._data[key] = value

    def get_context_value(self, key: str, default: Any = None) -> Any:
        with self._lock:
            return self._data.get(key, default)

    @property
    def interaction_count(self) -> int:
        return self._interaction_count

    @property
    def query_history(self) -> list[Query]:
        with self._lock:
            return list(self._queries)

    @property
    def response_history(self) -> list[Response]:
        with self._lock:
            return list(self._responses)

    @property
    def context_data(self) -> dict[str, Any]:
        with self._lock:
            return dict(self._data)

    @property
    def last_query(self) -> Query | None:
        with self._lock:
            return self._queries[-1] if self._queries else None

    @property
    def last_response(self) -> Response | None:
        with self._lock:
            return self._responses[-1] if self._responses else None

    def __repr__(self) -> str:
        return (
            f"ConversationContext(session_id={self.session_id!r}, "
            f"customer_id={self.customer_id!r}, "
            f"interaction_count={self._interaction_count}, "
            f"responses={len(self._responses)})"
        )
