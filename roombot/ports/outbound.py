"""Outbound ports — interfaces for external system adapters."""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Optional, Protocol, runtime_checkable


@dataclass(frozen=True)
class ActionRequest:
    """Descriptor of one outbound HTTP request."""

    method: str
    url: str
    data: Dict[str, Any] = field(default_factory=dict)


class Level(IntEnum):
    """Log severities, ordered so that filtering is a comparison."""

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40


@runtime_checkable
class TransportPort(Protocol):
    """Interface for sending a request and decoding the JSON reply.

    Raises TransportError when no decoded success response is available.
    """

    async def request(self, request: ActionRequest) -> Any: ...


@runtime_checkable
class LoggerPort(Protocol):
    """Interface for diagnostic logging."""

    def log(self, level: Level, message: str, context: Optional[Any] = None) -> None: ...
