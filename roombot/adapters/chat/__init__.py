from roombot.adapters.chat.client import ChatClient
from roombot.adapters.chat.transport import AiohttpTransport

__all__ = ["AiohttpTransport", "ChatClient"]
