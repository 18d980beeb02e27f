"""Supportdesk: customer-support decision pipeline.

Runs each customer query through perception, reasoning, planning and
ethics validation against that customer's conversation context.
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
