"""roombot — reliable message posting for chat room bots."""

from roombot.config import CONFIG, AppConfig, ChatConfig, __version__
from roombot.domain import (
    ActionError,
    ActionExecutor,
    ActionResult,
    ActionStatus,
    ErrorKind,
    FailureReason,
    PendingMessage,
    PostedMessage,
    PostedMessageTracker,
    RoomIdentifier,
)
from roombot.adapters.chat import AiohttpTransport, ChatClient
from roombot.adapters.log import NullLogger, StderrLogger, create_logger

__all__ = [
    "CONFIG",
    "AppConfig",
    "ChatConfig",
    "__version__",
    "ActionError",
    "ActionExecutor",
    "ActionResult",
    "ActionStatus",
    "ErrorKind",
    "FailureReason",
    "PendingMessage",
    "PostedMessage",
    "PostedMessageTracker",
    "RoomIdentifier",
    "AiohttpTransport",
    "ChatClient",
    "NullLogger",
    "StderrLogger",
    "create_logger",
]
