"""
Exceptions raised by the card store.

Every record operation reports failure by raising one of these from inside
the coroutine, so callers only need a single ``try/except`` around ``await``.
"""

from typing import List, Optional


class KanbanDBError(Exception):
    """Base class for all card store errors"""


class NotReadyError(KanbanDBError):
    """Raised when an operation runs on an instance that is not connected"""

    def __init__(self, message: str = "Database not ready"):
        super().__init__(message)


class CardNotFoundError(KanbanDBError):
    """Raised when a card id does not exist in the current namespace"""

    def __init__(self, card_id: str):
        self.card_id = card_id
        super().__init__(f"Card with ID {card_id} not found.")


class InvalidCardError(KanbanDBError):
    """Raised when a card fails validation; nothing is written"""

    def __init__(self, message: str = "Invalid card data.", messages: Optional[List[str]] = None):
        self.messages = list(messages or [])
        if self.messages:
            message = f"{message} {'; '.join(self.messages)}"
        super().__init__(message)


class InvalidStatusError(KanbanDBError):
    """Raised when a status filter contains an unknown status code"""

    def __init__(self, status_code: object):
        self.status_code = status_code
        super().__init__(f"Invalid status: {status_code!r}")


class CorruptRecordError(KanbanDBError):
    """Raised when a stored value cannot be parsed back into a card"""

    def __init__(self, key: str, reason: str):
        self.key = key
        super().__init__(f"Stored record {key} is corrupt: {reason}")
