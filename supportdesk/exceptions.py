"""Exception hierarchy for supportdesk.

All errors raised by the pipeline inherit from SupportDeskError so callers
can catch them in one place and map them onto their own protocol.
"""


class SupportDeskError(Exception):
    """Base exception for all supportdesk errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FairnessViolationError(SupportDeskError):
    """Raised when a query fails the fairness precondition.

    The query is rejected before any pipeline stage runs: no response is
    produced and the conversation context is left untouched.
    """

    def __init__(self, message: str, query_id: str | None = None) -> None:
        super().__init__(message)
        self.query_id = query_id
