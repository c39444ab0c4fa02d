"""Unit tests for AiohttpTransport."""

import asyncio
import json

import aiohttp
import pytest
from unittest.mock import patch

from roombot.adapters.chat.transport import AiohttpTransport
from roombot.domain.errors import TransportError
from roombot.ports.outbound import ActionRequest

REQUEST = ActionRequest(
    method="POST",
    url="https://chat.stackoverflow.com/chats/11/messages/new",
    data={"text": "hello", "fkey": "abc"},
)


def _mock_aiohttp_session(responses, calls=None):
    """Return a class that replaces aiohttp.ClientSession.
    responses: list of (status, body) tuples or exceptions, consumed in order.
    """
    call_idx = 0

    class FakeResponse:
        def __init__(self, status, body):
            self.status = status
            self._body = body

        async def read(self):
            if isinstance(self._body, bytes):
                return self._body
            return self._body.encode("utf-8")

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    class FakeSession:
        def __init__(self, **kwargs):
            pass

        def request(self, method, url, **kwargs):
            nonlocal call_idx
            if calls is not None:
                calls.append((method, url, kwargs))
            item = responses[call_idx]
            call_idx += 1
            if isinstance(item, Exception):
                raise item
            return FakeResponse(*item)

        async def __aenter__(self):
            return self

        async def __aexit__(self, *args):
            pass

    return FakeSession


class TestRequest:
    @pytest.mark.asyncio
    async def test_decodes_json(self):
        calls = []
        session = _mock_aiohttp_session([(200, json.dumps({"id": 42, "time": 1000}))], calls)
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            data = await AiohttpTransport().request(REQUEST)
        assert data == {"id": 42, "time": 1000}
        assert calls == [("POST", REQUEST.url, {"data": {"text": "hello", "fkey": "abc"}})]

    @pytest.mark.asyncio
    async def test_null_ack_passes_through(self):
        session = _mock_aiohttp_session([(200, '{"id":null,"time":null}')])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            data = await AiohttpTransport().request(REQUEST)
        assert data == {"id": None, "time": None}

    @pytest.mark.asyncio
    async def test_json_string_body(self):
        session = _mock_aiohttp_session([(200, '"ok"')])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            assert await AiohttpTransport().request(REQUEST) == "ok"

    @pytest.mark.asyncio
    async def test_non_2xx_raises(self):
        session = _mock_aiohttp_session([(409, "You can perform this action again in 3 seconds")])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            with pytest.raises(TransportError) as exc:
                await AiohttpTransport().request(REQUEST)
        assert exc.value.status == 409
        assert "again in 3 seconds" in str(exc.value)

    @pytest.mark.asyncio
    async def test_undecodable_body_raises(self):
        session = _mock_aiohttp_session([(200, "<html>login</html>")])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            with pytest.raises(TransportError, match="Undecodable"):
                await AiohttpTransport().request(REQUEST)

    @pytest.mark.asyncio
    async def test_connection_error_raises(self):
        session = _mock_aiohttp_session([aiohttp.ClientConnectionError("connection reset")])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            with pytest.raises(TransportError, match="connection reset"):
                await AiohttpTransport().request(REQUEST)

    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        session = _mock_aiohttp_session([asyncio.TimeoutError()])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            with pytest.raises(TransportError, match="TimeoutError"):
                await AiohttpTransport().request(REQUEST)

    @pytest.mark.asyncio
    async def test_invalid_utf8_body_raises(self):
        session = _mock_aiohttp_session([(200, b'{"id": "\xff\xfe"}')])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            with pytest.raises(TransportError, match="Undecodable"):
                await AiohttpTransport().request(REQUEST)

    @pytest.mark.asyncio
    async def test_invalid_utf8_error_body_raises(self):
        session = _mock_aiohttp_session([(500, b"\xff\xfe oops")])
        with patch("roombot.adapters.chat.transport.aiohttp.ClientSession", session):
            with pytest.raises(TransportError) as exc:
                await AiohttpTransport().request(REQUEST)
        assert exc.value.status == 500
        assert "oops" in str(exc.value)
