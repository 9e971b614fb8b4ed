# ipl_live/retry.py
from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Callable, Generic, Literal, Optional, Tuple, Type, TypeVar

from ipl_live.errors import ScrapeError

logger = logging.getLogger(__name__)

T = TypeVar("T")
BackoffMode = Literal["exponential", "linear"]


@dataclass
class RetryOutcome(Generic[T]):
    value: T
    attempts: int
    # True when every attempt failed and `value` came from the fallback
    degraded: bool = False
    error: Optional[str] = None


def backoff_delay(base_delay: float, attempt: int, mode: BackoffMode = "exponential") -> float:
    """
    Delay to sleep after a failed `attempt` (1-based).
      exponential: base * 2^(attempt-1)  -> 1s, 2s, 4s ...
      linear:      base * attempt        -> 1s, 2s, 3s ...
    """
    if attempt < 1:
        raise ValueError("attempt must be >= 1")
    if mode == "exponential":
        return base_delay * (2 ** (attempt - 1))
    if mode == "linear":
        return base_delay * attempt
    raise ValueError(f"Invalid backoff mode: {mode}")


def retry_with_fallback(
    operation: Callable[[], T],
    fallback: Callable[[], T],
    *,
    max_attempts: int = 3,
    base_delay: float = 1.0,
    backoff: BackoffMode = "exponential",
    retry_on: Tuple[Type[BaseException], ...] = (ScrapeError,),
    sleep: Callable[[float], None] = time.sleep,
) -> RetryOutcome[T]:
    """
    Call `operation` up to `max_attempts` times.

    - errors in `retry_on` are logged and retried after a backoff delay
    - any other exception propagates immediately
    - after the last failed attempt `fallback()` is returned (never raises)
    """
    if max_attempts <= 0:
        raise ValueError("max_attempts must be positive")

    last_err: Optional[BaseException] = None

    for attempt in range(1, max_attempts + 1):
        try:
            value = operation()
        except retry_on as e:
            last_err = e
            logger.warning("Attempt %d/%d failed: %s: %s", attempt, max_attempts, type(e).__name__, e)
            if attempt < max_attempts:
                delay = backoff_delay(base_delay, attempt, backoff)
                if delay > 0:
                    sleep(delay)
            continue

        logger.info("Attempt %d/%d succeeded", attempt, max_attempts)
        return RetryOutcome(value=value, attempts=attempt)

    logger.error("All %d attempts failed, serving fallback data. Last error: %s", max_attempts, last_err)
    return RetryOutcome(
        value=fallback(),
        attempts=max_attempts,
        degraded=True,
        error=f"{type(last_err).__name__}: {last_err}",
    )
