"""Port interfaces (Hexagonal Architecture)."""

from roombot.ports.outbound import ActionRequest, Level, LoggerPort, TransportPort

__all__ = [
    "ActionRequest",
    "Level",
    "LoggerPort",
    "TransportPort",
]
