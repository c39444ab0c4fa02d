"""Configuration and shared settings."""

__version__ = "0.1.0"

import os
import sys
from dataclasses import dataclass, field

from dotenv import load_dotenv

load_dotenv()

_stderr_print = lambda *a, **kw: print(*a, **kw, file=sys.stderr)

DEFAULT_CHAT_HOST = "https://chat.stackoverflow.com"
DEFAULT_MAX_ATTEMPTS = 5
DEFAULT_REQUEST_TIMEOUT = 30.0
DEFAULT_REPEAT_GUARD_SECONDS = 2.0

SUPPORTED_LOG_LEVELS = ("debug", "info", "warning", "error")


def _env_int(name: str, default: int, minimum: int = 1) -> int:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = int(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    if value < minimum:
        _stderr_print(f"{name}={value} is below {minimum}, falling back to {default}")
        return default
    return value


def _env_float(name: str, default: float, minimum: float = 0.0) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        _stderr_print(f"Invalid {name}={raw!r}, falling back to {default}")
        return default
    if value < minimum:
        _stderr_print(f"{name}={value} is below {minimum}, falling back to {default}")
        return default
    return value


LOG_LEVEL = os.getenv("LOG_LEVEL", "info").strip().lower()
if LOG_LEVEL not in SUPPORTED_LOG_LEVELS:
    _stderr_print(f"Unsupported LOG_LEVEL={LOG_LEVEL!r}, falling back to 'info'")
    LOG_LEVEL = "info"

CONFIG = {
    "port": _env_int("PORT", 3000),
    "log_level": LOG_LEVEL,
    # Chat service
    "chat_host": os.getenv("CHAT_HOST", DEFAULT_CHAT_HOST).strip().rstrip("/"),
    "chat_fkey": os.getenv("CHAT_FKEY", ""),
    "request_timeout": _env_float("CHAT_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT, minimum=1.0),
    # Null-ack retries: total attempts per action, including the first send
    "max_attempts": _env_int("CHAT_MAX_ATTEMPTS", DEFAULT_MAX_ATTEMPTS),
    # Wait before repeating the room's last message; 0 disables the guard
    "repeat_guard_seconds": _env_float("CHAT_REPEAT_GUARD_SECONDS", DEFAULT_REPEAT_GUARD_SECONDS),
}


# ── Typed config ────────────────────────────────────────────


@dataclass
class ChatConfig:
    host: str = DEFAULT_CHAT_HOST
    fkey: str = ""
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    repeat_guard_seconds: float = DEFAULT_REPEAT_GUARD_SECONDS

    @property
    def is_configured(self) -> bool:
        return bool(self.host and self.fkey)


@dataclass
class AppConfig:
    """Typed configuration built from CONFIG."""

    port: int = 3000
    log_level: str = "info"
    chat: ChatConfig = field(default_factory=ChatConfig)

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Create AppConfig from environment variables."""
        return cls(
            port=CONFIG["port"],
            log_level=CONFIG["log_level"],
            chat=ChatConfig(
                host=CONFIG["chat_host"],
                fkey=CONFIG["chat_fkey"],
                request_timeout=CONFIG["request_timeout"],
                max_attempts=CONFIG["max_attempts"],
                repeat_guard_seconds=CONFIG["repeat_guard_seconds"],
            ),
        )
