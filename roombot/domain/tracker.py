"""Per-room bookkeeping of the latest submitted and confirmed messages.

Used to spot superseded sends and rapid repeats. State lives in memory for
the lifetime of the owning client; a restart forgets it.
"""

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, Optional

from roombot.domain.models import PendingMessage, PostedMessage, RoomIdentifier


@dataclass
class _RoomSlot:
    pending: Optional[PendingMessage] = None
    posted: Optional[PostedMessage] = None


class PostedMessageTracker:
    """Latest-only view per room. Slots are never evicted."""

    def __init__(self):
        self._slots: Dict[RoomIdentifier, _RoomSlot] = {}

    def _slot(self, room: RoomIdentifier) -> _RoomSlot:
        slot = self._slots.get(room)
        if slot is None:
            slot = self._slots[room] = _RoomSlot()
        return slot

    def submit_message(self, message: PendingMessage) -> None:
        """Make ``message`` the room's current pending message."""
        self._slot(message.room).pending = message

    def peek_message(self, room: RoomIdentifier) -> Optional[PendingMessage]:
        """Return the room's most recently submitted, unconfirmed message."""
        slot = self._slots.get(room)
        return slot.pending if slot else None

    def push_message(self, message: PostedMessage) -> None:
        """Record a confirmed message, replacing the peeked entry it confirms."""
        slot = self._slot(message.room)
        slot.posted = message
        if slot.pending is message.pending:
            slot.pending = None

    def last_posted(self, room: RoomIdentifier) -> Optional[PostedMessage]:
        slot = self._slots.get(room)
        return slot.posted if slot else None

    def repeat_wait(
        self,
        room: RoomIdentifier,
        text: str,
        window: float,
        now: Optional[datetime] = None,
    ) -> float:
        """Seconds left before ``text`` stops counting as a rapid repeat (0 if not one)."""
        last = self.last_posted(room)
        if window <= 0 or last is None or last.text != text:
            return 0.0
        now = now or datetime.now(timezone.utc)
        elapsed = (now - last.confirmed_at).total_seconds()
        return max(0.0, window - elapsed)

    def is_repeat(
        self,
        room: RoomIdentifier,
        text: str,
        window: float,
        now: Optional[datetime] = None,
    ) -> bool:
        return self.repeat_wait(room, text, window, now=now) > 0
