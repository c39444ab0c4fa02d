"""Chat transport using aiohttp — implements TransportPort."""

import asyncio
import json
from typing import Any

import aiohttp

from roombot.domain.errors import TransportError
from roombot.ports.outbound import ActionRequest

USER_AGENT = "roombot/0.1"


def _preview(body: bytes) -> str:
    return body[:200].decode("utf-8", errors="replace")


class AiohttpTransport:
    """Sends form-encoded requests and returns the decoded JSON body."""

    def __init__(self, timeout: float = 30.0):
        self._timeout = timeout

    async def request(self, request: ActionRequest) -> Any:
        timeout = aiohttp.ClientTimeout(total=self._timeout)
        headers = {"User-Agent": USER_AGENT}
        try:
            async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
                async with session.request(request.method, request.url, data=request.data) as resp:
                    body = await resp.read()
                    if resp.status < 200 or resp.status >= 300:
                        raise TransportError(
                            f"HTTP {resp.status} from {request.url}: {_preview(body)}",
                            status=resp.status,
                        )
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TransportError(f"{type(e).__name__}: {str(e) or 'request failed'}") from e

        try:
            return json.loads(body)
        except ValueError:
            raise TransportError(f"Undecodable response from {request.url}: {_preview(body)}", status=resp.status)
