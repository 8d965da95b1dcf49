#
# SPDX-FileCopyrightText: Copyright (c) 2025 provide.io llc. All rights reserved.
# SPDX-License-Identifier: Apache-2.0
#

"""Bounded polling for remote state that becomes true eventually.

A probe is called repeatedly until it returns. Raising one of the ``retry_on``
exceptions means "not ready yet"; anything else is treated as terminal and
propagates straight away. Elapsed time is the number of sleeps times the
interval, so a timeout that is not a multiple of the interval gets one extra
attempt rather than being clamped.
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
import math
import time
from typing import TypeVar

from provide.foundation import logger

from flexkit.exceptions import PollTimeoutError

T = TypeVar("T")


class OnExhaustion(Enum):
    """What to raise once the poll budget is spent."""

    SYNTHESIZE_TIMEOUT = "synthesize_timeout"
    PROPAGATE_LAST = "propagate_last"


class PollLoop:
    """Retry a probe on a fixed interval until it succeeds or time runs out."""

    def __init__(
        self,
        timeout: float,
        interval: float,
        on_exhaustion: OnExhaustion = OnExhaustion.SYNTHESIZE_TIMEOUT,
        retry_on: tuple[type[BaseException], ...] = (Exception,),
        description: str = "condition",
        timeout_message: str | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        """Initialize the loop.

        Args:
            timeout: Total budget in seconds, must be >= 0
            interval: Seconds slept between attempts, must be > 0
            on_exhaustion: Raise a fresh PollTimeoutError or re-raise the last probe error
            retry_on: Exception types that mean "not ready yet"
            description: What is being waited for, used in logs
            timeout_message: Message of the synthesized PollTimeoutError
            sleep: Sleep primitive, replaced by a fake in tests
        """
        if timeout < 0:
            raise ValueError(f"timeout must be >= 0, got {timeout}")
        if interval <= 0:
            raise ValueError(f"interval must be > 0, got {interval}")

        self.timeout = timeout
        self.interval = interval
        self.on_exhaustion = on_exhaustion
        self.retry_on = retry_on
        self.description = description
        self.timeout_message = timeout_message
        self._sleep = sleep

    def run(self, probe: Callable[[], T]) -> T:
        """Call ``probe`` until it returns, and return its value.

        Raises:
            PollTimeoutError: Budget spent with SYNTHESIZE_TIMEOUT
            Exception: The last probe error with PROPAGATE_LAST, or any
                error not listed in ``retry_on``
        """
        attempts = 0
        sleeps = 0

        while True:
            attempts += 1
            elapsed = sleeps * self.interval
            try:
                result = probe()
            except self.retry_on as e:
                if self._exhausted(elapsed):
                    self._escalate(e, attempts, elapsed)
                logger.trace(
                    "Poll attempt not ready",
                    waiting_for=self.description,
                    attempt=attempts,
                    elapsed=elapsed,
                    error=str(e),
                )
            else:
                logger.debug(
                    "Poll succeeded",
                    waiting_for=self.description,
                    attempts=attempts,
                    elapsed=elapsed,
                )
                return result

            self._sleep(self.interval)
            sleeps += 1

    def _exhausted(self, elapsed: float) -> bool:
        # Float multiples of the interval can land a hair short of the timeout
        return elapsed >= self.timeout or math.isclose(elapsed, self.timeout)

    def _escalate(self, error: BaseException, attempts: int, elapsed: float) -> None:
        if self.on_exhaustion is OnExhaustion.PROPAGATE_LAST:
            logger.debug(
                "Poll budget exhausted, propagating last error",
                waiting_for=self.description,
                attempts=attempts,
                elapsed=elapsed,
            )
            raise error

        logger.error(
            "Poll budget exhausted",
            waiting_for=self.description,
            attempts=attempts,
            elapsed=elapsed,
            error=str(error),
        )
        message = self.timeout_message or f"Timed out after {elapsed:g}s waiting for {self.description}"
        raise PollTimeoutError(message) from error


def poll_until(
    probe: Callable[[], T],
    timeout: float,
    interval: float,
    **kwargs: object,
) -> T:
    """Shorthand for ``PollLoop(timeout, interval, **kwargs).run(probe)``."""
    return PollLoop(timeout, interval, **kwargs).run(probe)  # type: ignore[arg-type]


# 🔌📦🔚
