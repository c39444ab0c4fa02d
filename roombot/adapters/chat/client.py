"""Chat client: builds actions for chat operations and runs them one room at a time."""

import asyncio
from typing import Optional

from roombot.adapters.chat.transport import AiohttpTransport
from roombot.adapters.log.logger import StderrLogger
from roombot.config import ChatConfig
from roombot.domain.actions import EditMessageAction, PostMessageAction
from roombot.domain.executor import ActionExecutor, Sleep
from roombot.domain.models import PendingMessage, PostedMessage, RoomIdentifier
from roombot.domain.results import ActionResult
from roombot.domain.rooms import RoomRegistry
from roombot.domain.tracker import PostedMessageTracker
from roombot.ports.outbound import ActionRequest, Level, LoggerPort, TransportPort


class ChatClient:
    """Posts and edits messages in chat rooms.

    Every call returns an ActionResult: SUCCEEDED with a PostedMessage,
    FAILED with an ActionError, or ABANDONED when a newer submission for the
    same room superseded it.
    """

    def __init__(
        self,
        config: ChatConfig,
        transport: Optional[TransportPort] = None,
        logger: Optional[LoggerPort] = None,
        sleep: Sleep = asyncio.sleep,
    ):
        self.config = config
        self.logger = logger or StderrLogger()
        self.tracker = PostedMessageTracker()
        self.rooms = RoomRegistry(config.host)
        self.executor = ActionExecutor(
            transport or AiohttpTransport(timeout=config.request_timeout),
            self.logger,
            max_attempts=config.max_attempts,
            sleep=sleep,
        )
        self._sleep = sleep

    @property
    def is_configured(self) -> bool:
        return self.config.is_configured

    def room(self, room_id: int) -> RoomIdentifier:
        return self.rooms.identify(room_id)

    def _post_request(self, room: RoomIdentifier, text: str) -> ActionRequest:
        return ActionRequest(
            method="POST",
            url=f"{room.host}/chats/{room.room_id}/messages/new",
            data={"text": text, "fkey": self.config.fkey},
        )

    def _edit_request(self, message: PostedMessage, text: str) -> ActionRequest:
        return ActionRequest(
            method="POST",
            url=f"{message.room.host}/messages/{message.message_id}",
            data={"text": text, "fkey": self.config.fkey},
        )

    async def post_message(self, room: RoomIdentifier, text: str) -> ActionResult:
        if not text.strip():
            raise ValueError("Message text must not be empty")

        context = self.rooms.get(room)
        async with context.send_lock:
            wait = self.tracker.repeat_wait(room, text, self.config.repeat_guard_seconds)
            if wait > 0:
                self.logger.log(Level.INFO, f"Repeating last message in {room}, waiting {wait:.1f}s")
                await self._sleep(wait)

            message = PendingMessage(room=room, text=text)
            self.tracker.submit_message(message)
            action = PostMessageAction(
                self.logger,
                self._post_request(room, text),
                room,
                self.tracker,
                message,
            )
            return await self.executor.execute(action)

    async def edit_message(self, message: PostedMessage, text: str) -> ActionResult:
        if not text.strip():
            raise ValueError("Message text must not be empty")

        context = self.rooms.get(message.room)
        async with context.send_lock:
            action = EditMessageAction(
                self.logger,
                self._edit_request(message, text),
                self.tracker,
                message,
                text,
            )
            return await self.executor.execute(action)
