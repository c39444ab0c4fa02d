"""Attempt loop shared by every Action.

Pure asyncio, no framework dependencies: the transport and logger come in
through ports, and ``sleep`` can be swapped in tests.
"""

import asyncio
from typing import Awaitable, Callable

from roombot.domain.actions import Action, Outcome
from roombot.domain.errors import FailureReason, TransportError
from roombot.domain.results import ActionResult
from roombot.ports.outbound import Level, LoggerPort, TransportPort

DEFAULT_MAX_ATTEMPTS = 5

Sleep = Callable[[float], Awaitable[None]]


class ActionExecutor:
    """Validates, sends and interprets an action until it settles.

    The action decides the backoff; the executor only enforces
    ``max_attempts`` so a server stuck on null acks cannot keep us looping.
    """

    def __init__(
        self,
        transport: TransportPort,
        logger: LoggerPort,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        sleep: Sleep = asyncio.sleep,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        self._transport = transport
        self._logger = logger
        self.max_attempts = max_attempts
        self._sleep = sleep

    async def execute(self, action: Action) -> ActionResult:
        """Drive ``action`` to a terminal state and return its result."""
        action.attempt = 1
        while not action.done:
            if not action.is_valid():
                self._logger.log(
                    Level.DEBUG,
                    f"{type(action).__name__} superseded before attempt {action.attempt}",
                    {"room": str(action.room)},
                )
                action.abandon()
                break

            try:
                response = await self._transport.request(action.request)
            except TransportError as e:
                self._logger.log(
                    Level.ERROR,
                    f"Request failed on attempt {action.attempt}: {e}",
                    {"room": str(action.room), "url": action.request.url, "status": e.status},
                )
                action.fail(action.error(FailureReason.TRANSPORT, str(e), {"status": e.status}))
                break
            except Exception as e:
                action.fail(action.error(FailureReason.UNEXPECTED, f"{type(e).__name__}: {e}"))
                raise

            try:
                outcome = action.process_response(response, action.attempt)
            except Exception as e:
                action.fail(action.error(FailureReason.UNEXPECTED, f"{type(e).__name__}: {e}"))
                raise

            if outcome is Outcome.SUCCESS or outcome is Outcome.FAILURE:
                if not action.done:
                    self._logger.log(
                        Level.ERROR,
                        f"BUG: {type(action).__name__} returned {outcome.value} without settling",
                    )
                    action.fail(action.error(FailureReason.UNEXPECTED, "Action did not settle"))
                break

            if isinstance(outcome, bool) or not isinstance(outcome, int) or outcome <= 0:
                action.fail(action.error(FailureReason.UNEXPECTED, f"Invalid retry delay {outcome!r}"))
                break

            if action.attempt >= self.max_attempts:
                self._logger.log(
                    Level.ERROR,
                    f"Giving up after {action.attempt} attempts",
                    {"room": str(action.room), "url": action.request.url},
                )
                action.fail(action.error(
                    FailureReason.RETRY_BUDGET_EXHAUSTED,
                    f"No usable response after {action.attempt} attempts",
                ))
                break

            await self._sleep(outcome / 1000)
            action.attempt += 1

        return action.future.result()
