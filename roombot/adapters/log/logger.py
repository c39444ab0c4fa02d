"""Logger adapters — implement LoggerPort."""

import json
import sys
from datetime import datetime
from typing import Any, Optional

from roombot.ports.outbound import Level

LEVELS_BY_NAME = {
    "debug": Level.DEBUG,
    "info": Level.INFO,
    "warning": Level.WARNING,
    "error": Level.ERROR,
}


class StderrLogger:
    """Prints ``[time] LEVEL message {context}`` lines to stderr."""

    def __init__(self, min_level: Level = Level.INFO, stream=None):
        self.min_level = min_level
        self._stream = stream

    def log(self, level: Level, message: str, context: Optional[Any] = None) -> None:
        if level < self.min_level:
            return
        line = f"[{datetime.now().isoformat()}] {Level(level).name} {message}"
        if context is not None:
            line += " " + json.dumps(context, ensure_ascii=False, default=str)
        print(line, file=self._stream or sys.stderr)


class NullLogger:
    """Accepts and discards everything."""

    def __init__(self, min_level: Level = Level.DEBUG):
        self.min_level = min_level

    def log(self, level: Level, message: str, context: Optional[Any] = None) -> None:
        return None


def create_logger(level_name: str = "info"):
    """Build the stderr logger for a configured level name ("debug" … "error")."""
    level = LEVELS_BY_NAME.get(level_name.strip().lower())
    if level is None:
        raise ValueError(f"Unsupported log level: {level_name}")
    return StderrLogger(min_level=level)
