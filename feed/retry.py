"""
Retry with exponential backoff for the Bluesky calls.

The policy is deliberately small: a fixed number of retries after the
first attempt, waiting ``base_delay_s`` before the first retry and twice
as long before each following one.
"""
import logging
import time
from dataclasses import dataclass
from typing import Callable, Tuple, Type, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class RetryPolicy:
    max_retries: int = 3
    base_delay_s: float = 1.0

    def compute_backoff_s(self, attempt: int) -> float:
        """
        attempt: 1..max_retries
        """
        return max(0.0, self.base_delay_s * (2 ** max(0, attempt - 1)))


def retry_with_backoff(
    fn: Callable[[], T],
    policy: RetryPolicy = RetryPolicy(),
    retry_on: Tuple[Type[BaseException], ...] = (Exception,),
    sleep: Callable[[float], None] = time.sleep,
) -> T:
    """Call ``fn`` until it succeeds or the policy is exhausted, then re-raise."""
    attempt = 0
    while True:
        try:
            return fn()
        except retry_on as exc:
            attempt += 1
            if attempt > policy.max_retries:
                raise
            delay = policy.compute_backoff_s(attempt)
            logger.warning("Attempt %d failed (%s); retrying after %.2fs", attempt, exc, delay)
            sleep(delay)
