"""Retry policy for responses that come back without a translation."""

import random
from dataclasses import dataclass


@dataclass(frozen=True)
class RetryPolicy:
    """
    Bounded retry budget with a randomized, whole-step delay.

    The delay is a uniform integer in [0, max_delay_steps] scaled by
    delay_unit seconds, so the default draws one of 0, 1, 2, 3, 4 or 5 s.
    """

    max_retries: int = 3
    max_delay_steps: int = 5
    delay_unit: float = 1.0

    def __post_init__(self):
        if self.max_retries < 0:
            raise ValueError("max_retries must be >= 0")
        if self.max_delay_steps < 0:
            raise ValueError("max_delay_steps must be >= 0")
        if self.delay_unit < 0:
            raise ValueError("delay_unit must be >= 0")

    @property
    def total_attempts(self) -> int:
        """Initial attempt plus every retry."""
        return self.max_retries + 1

    def next_delay(self, rng: random.Random) -> float:
        """Draw the number of seconds to wait before the next attempt."""
        return rng.randint(0, self.max_delay_steps) * self.delay_unit
