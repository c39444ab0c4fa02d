"""Domain data models — pure Python dataclasses plus the post response shape."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, ValidationError


@dataclass(frozen=True)
class RoomIdentifier:
    """A chat room on a given chat host."""

    room_id: int
    host: str

    def __str__(self) -> str:
        return f"{self.host}#{self.room_id}"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True, eq=False)
class PendingMessage:
    """Text submitted for posting but not yet confirmed by the server.

    Compared by identity: the same text sent twice is two distinct messages.
    """

    room: RoomIdentifier
    text: str
    created_at: datetime = field(default_factory=_utc_now)


@dataclass(frozen=True)
class PostedMessage:
    """A message the server confirmed, with its server-assigned id and time."""

    room: RoomIdentifier
    message_id: int
    time: int
    pending: PendingMessage = field(compare=False, repr=False)
    confirmed_at: datetime = field(default_factory=_utc_now, compare=False, repr=False)

    @property
    def text(self) -> str:
        return self.pending.text


class PostMessageResponse(BaseModel):
    """Decoded body of a message-post response.

    ``{"id": null, "time": null}`` and ``{"foo": "bar"}`` are different cases:
    the first has the ``id`` key (``has_id``) but is not confirmed, the second
    has no ``id`` key at all.
    """

    model_config = ConfigDict(extra="allow")

    id: Optional[int] = None
    time: Optional[int] = None

    @property
    def has_id(self) -> bool:
        return "id" in self.model_fields_set

    @property
    def is_confirmed(self) -> bool:
        return self.id is not None and self.time is not None

    @classmethod
    def from_payload(cls, payload: Any) -> Optional["PostMessageResponse"]:
        """Parse a decoded JSON payload; None when it is not a usable object."""
        if not isinstance(payload, dict):
            return None
        try:
            return cls.model_validate(payload)
        except ValidationError:
            return None
