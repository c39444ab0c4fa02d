"""Domain layer — pure Python, no framework dependencies beyond pydantic models."""

from roombot.domain.models import PendingMessage, PostedMessage, PostMessageResponse, RoomIdentifier
from roombot.domain.errors import ActionError, ErrorKind, FailureReason, TransportError
from roombot.domain.results import ActionResult, ActionStatus
from roombot.domain.tracker import PostedMessageTracker
from roombot.domain.actions import Action, EditMessageAction, Outcome, PostMessageAction
from roombot.domain.executor import ActionExecutor
from roombot.domain.rooms import RoomContext, RoomRegistry

__all__ = [
    "Action",
    "ActionError",
    "ActionExecutor",
    "ActionResult",
    "ActionStatus",
    "EditMessageAction",
    "ErrorKind",
    "FailureReason",
    "Outcome",
    "PendingMessage",
    "PostMessageAction",
    "PostMessageResponse",
    "PostedMessage",
    "PostedMessageTracker",
    "RoomContext",
    "RoomIdentifier",
    "RoomRegistry",
    "TransportError",
]
