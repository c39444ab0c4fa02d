"""Room-scoped state owned by a client."""

import asyncio
from dataclasses import dataclass, field
from typing import Dict, List

from roombot.domain.models import RoomIdentifier


@dataclass
class RoomContext:
    room: RoomIdentifier
    # Held for the whole life of an outgoing action: one send per room at a time
    send_lock: asyncio.Lock = field(default_factory=asyncio.Lock)


class RoomRegistry:
    """Maps room identifiers to their RoomContext, creating contexts on first use."""

    def __init__(self, host: str):
        self._host = host
        self._rooms: Dict[RoomIdentifier, RoomContext] = {}

    def identify(self, room_id: int) -> RoomIdentifier:
        return RoomIdentifier(room_id=room_id, host=self._host)

    def get(self, room: RoomIdentifier) -> RoomContext:
        context = self._rooms.get(room)
        if context is None:
            context = self._rooms[room] = RoomContext(room=room)
        return context

    def __contains__(self, room: RoomIdentifier) -> bool:
        return room in self._rooms

    def rooms(self) -> List[RoomIdentifier]:
        return list(self._rooms)
