"""Failure taxonomy for chat actions."""

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional


class ErrorKind(str, Enum):
    """Which operation failed; chosen per action type."""

    ACTION_FAILURE = "action_failure"
    MESSAGE_POST_FAILURE = "message_post_failure"
    MESSAGE_EDIT_FAILURE = "message_edit_failure"


class FailureReason(str, Enum):
    """Why an action failed."""

    TRANSPORT = "transport"
    INVALID_RESPONSE = "invalid_response"
    RETRY_BUDGET_EXHAUSTED = "retry_budget_exhausted"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class ActionError:
    """Failure value carried by a failed ActionResult."""

    kind: ErrorKind
    reason: FailureReason
    message: str
    details: Optional[Dict[str, Any]] = None

    def __str__(self) -> str:
        return f"{self.kind.value}: {self.message}"


class TransportError(Exception):
    """Raised by a transport when the chat service could not be reached or
    answered with something that is not a decodable success response."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status
