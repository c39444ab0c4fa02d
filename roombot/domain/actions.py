"""Chat actions: one outbound request each, with retry state and a result future.

An action never sends anything itself. ActionExecutor asks it whether it is
still worth sending (``is_valid``), sends its ``request`` and hands the decoded
reply to ``process_response``, which either settles the future or asks for a
retry after a delay in milliseconds.
"""

import asyncio
from abc import ABC, abstractmethod
from dataclasses import replace
from enum import Enum
from typing import Any, Optional, Union

from roombot.domain.errors import ActionError, ErrorKind, FailureReason
from roombot.domain.models import PendingMessage, PostedMessage, PostMessageResponse, RoomIdentifier
from roombot.domain.results import ActionResult
from roombot.domain.tracker import PostedMessageTracker
from roombot.ports.outbound import ActionRequest, Level, LoggerPort


class Outcome(Enum):
    """Terminal results of ``process_response``; any positive int is a retry delay."""

    SUCCESS = "success"
    FAILURE = "failure"


ResponseOutcome = Union[Outcome, int]


class Action(ABC):
    """Base class for retryable chat actions."""

    def __init__(self, logger: LoggerPort, request: ActionRequest, room: RoomIdentifier):
        self.logger = logger
        self.request = request
        self.room = room
        self.attempt = 1
        self._future: Optional[asyncio.Future] = None

    @property
    def future(self) -> asyncio.Future:
        """Settles exactly once with an ActionResult. Needs a running loop."""
        if self._future is None:
            self._future = asyncio.get_running_loop().create_future()
        return self._future

    @property
    def done(self) -> bool:
        return self._future is not None and self._future.done()

    def error_kind(self) -> ErrorKind:
        return ErrorKind.ACTION_FAILURE

    def is_valid(self) -> bool:
        return True

    @abstractmethod
    def process_response(self, response: Any, attempt: int) -> ResponseOutcome:
        """Interpret one decoded reply."""

    def error(
        self,
        reason: FailureReason,
        message: str,
        details: Optional[dict] = None,
    ) -> ActionError:
        return ActionError(kind=self.error_kind(), reason=reason, message=message, details=details)

    def succeed(self, value: Any) -> None:
        self._settle(ActionResult.succeeded(value))

    def fail(self, error: ActionError) -> None:
        self._settle(ActionResult.failed(error))

    def abandon(self) -> None:
        self._settle(ActionResult.superseded())

    def _settle(self, result: ActionResult) -> None:
        if self.future.done():
            self.logger.log(
                Level.ERROR,
                f"BUG: {type(self).__name__} settled twice, ignoring {result.status.value}",
                {"room": str(self.room), "url": self.request.url},
            )
            return
        self.future.set_result(result)


class PostMessageAction(Action):
    """Posts a PendingMessage and turns the server's ack into a PostedMessage."""

    def __init__(
        self,
        logger: LoggerPort,
        request: ActionRequest,
        room: RoomIdentifier,
        tracker: PostedMessageTracker,
        message: PendingMessage,
    ):
        super().__init__(logger, request, room)
        self.tracker = tracker
        self.message = message

    def error_kind(self) -> ErrorKind:
        return ErrorKind.MESSAGE_POST_FAILURE

    def is_valid(self) -> bool:
        # Another submission for this room supersedes us.
        return self.tracker.peek_message(self.room) is self.message

    def process_response(self, response: Any, attempt: int) -> ResponseOutcome:
        parsed = PostMessageResponse.from_payload(response)

        if parsed is not None and parsed.is_confirmed:
            posted = PostedMessage(
                room=self.room,
                message_id=parsed.id,
                time=parsed.time,
                pending=self.message,
            )
            self.tracker.push_message(posted)
            self.succeed(posted)
            return Outcome.SUCCESS

        if not (isinstance(response, dict) and "id" in response):
            self.logger.log(Level.ERROR, "A JSON response that I don't understand was received", response)
            self.fail(self.error(
                FailureReason.INVALID_RESPONSE,
                "Invalid response from server",
                {"response": response},
            ))
            return Outcome.FAILURE

        # {"id": null, "time": null}, seen when repeating ourselves too quickly.
        # Any other id-bearing reply without a usable id/time pair is treated the same.
        delay = attempt * 1000
        self.logger.log(
            Level.ERROR,
            f"WARN: Got a null message post response, waiting for {delay}ms before trying again",
        )
        return delay


class EditMessageAction(Action):
    """Replaces the text of a message we posted earlier."""

    def __init__(
        self,
        logger: LoggerPort,
        request: ActionRequest,
        tracker: PostedMessageTracker,
        message: PostedMessage,
        text: str,
    ):
        super().__init__(logger, request, message.room)
        self.tracker = tracker
        self.message = message
        self.text = text

    def error_kind(self) -> ErrorKind:
        return ErrorKind.MESSAGE_EDIT_FAILURE

    def process_response(self, response: Any, attempt: int) -> ResponseOutcome:
        if response == "ok":
            edited = replace(self.message, pending=PendingMessage(self.room, self.text))
            last = self.tracker.last_posted(self.room)
            # Only the room's latest message feeds the repeat guard.
            if last is not None and last.message_id == edited.message_id:
                self.tracker.push_message(edited)
            self.succeed(edited)
            return Outcome.SUCCESS

        self.logger.log(Level.ERROR, "A JSON response that I don't understand was received", response)
        self.fail(self.error(
            FailureReason.INVALID_RESPONSE,
            "Invalid response from server",
            {"response": response},
        ))
        return Outcome.FAILURE
