# ================================================================================
# Polling Module
# ================================================================================
#
# Bounded polling for UI content that renders asynchronously and exposes no
# ready signal beyond element presence (calendars, suggestion lists, lazily
# populated result cards).
#
# Key Features:
#   - Probe / predicate split so the probe can return rich results
#   - Fixed interval between attempts, hard cap on attempt count
#   - Last probe result kept on the raised error for diagnosis
#   - Allure step integration
#
# Usage:
#   button = await poll_until(
#       probe=find_day_button,
#       predicate=lambda found: found is not None,
#       config=PollingConfig(max_attempts=10, interval_ms=500),
#       description="calendar day 15",
#   )
#
# ================================================================================

import asyncio
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional, TypeVar

import allure
from loguru import logger


T = TypeVar("T")


@dataclass
class PollingConfig:
    """
    Configuration for a bounded polling loop.

    Attributes:
        max_attempts: Number of probes before giving up (>= 1)
        interval_ms: Fixed pause between two probes in milliseconds
    """
    max_attempts: int = 10
    interval_ms: int = 500


class PollingExhaustedError(Exception):
    """Raised when every polling attempt failed the predicate."""

    def __init__(self, description: str, attempts: int, last_result: Any = None):
        self.description = description
        self.attempts = attempts
        self.last_result = last_result
        super().__init__(
            f"Condition not met after {attempts} attempts: {description} "
            f"(last result: {last_result!r})"
        )


async def _asyncio_sleep_ms(ms: int) -> None:
    await asyncio.sleep(ms / 1000)


async def poll_until(
    probe: Callable[[], Awaitable[T]],
    predicate: Callable[[T], bool],
    config: Optional[PollingConfig] = None,
    description: str = "condition",
    sleep: Optional[Callable[[int], Awaitable[None]]] = None,
) -> T:
    """
    Call ``probe`` until ``predicate`` accepts its result.

    Args:
        probe: Async callable returning the current observation
        predicate: Returns True when the observation is acceptable
        config: Attempt count and interval (defaults to PollingConfig())
        description: Human-readable description for logs and errors
        sleep: Async callable taking milliseconds; defaults to asyncio.sleep.
               Page objects pass ``page.wait_for_timeout``.

    Returns:
        The first probe result accepted by ``predicate``

    Raises:
        ValueError: If ``max_attempts`` is lower than 1
        PollingExhaustedError: If no attempt satisfied the predicate
    """
    config = config or PollingConfig()
    if config.max_attempts < 1:
        raise ValueError(f"max_attempts must be >= 1, got {config.max_attempts}")

    sleep = sleep or _asyncio_sleep_ms
    last_result: Any = None

    with allure.step(f"Poll for {description} (max {config.max_attempts} attempts)"):
        for attempt in range(1, config.max_attempts + 1):
            last_result = await probe()
            if predicate(last_result):
                logger.debug(f"Polling succeeded on attempt {attempt}: {description}")
                return last_result

            if attempt < config.max_attempts:
                logger.warning(
                    f"Attempt {attempt}/{config.max_attempts} did not match "
                    f"{description}. Retrying in {config.interval_ms}ms..."
                )
                await sleep(config.interval_ms)

    error = PollingExhaustedError(description, config.max_attempts, last_result)
    logger.error(str(error))
    raise error


__all__ = [
    "PollingConfig",
    "PollingExhaustedError",
    "poll_until",
]
