"""Domain service: human-readable order numbers.

Numbers look like ``MAC-48213``.  Candidates are drawn at random and
checked against the store; after ``attempts_per_width`` collisions in a
row the numeric part grows by one digit, so generation always
terminates even when the five-digit space is crowded.
"""

from __future__ import annotations

import random
from collections.abc import Callable

DEFAULT_PREFIX = "MAC"
DEFAULT_DIGITS = 5


class OrderNumberGenerator:

    def __init__(
        self,
        prefix: str = DEFAULT_PREFIX,
        digits: int = DEFAULT_DIGITS,
        attempts_per_width: int = 20,
        rng: random.Random | None = None,
    ) -> None:
        if digits < 1:
            raise ValueError("digits must be positive")
        self._prefix = prefix
        self._digits = digits
        self._attempts = attempts_per_width
        self._rng = rng or random.SystemRandom()

    def generate(self, is_taken: Callable[[str], bool]) -> str:
        """Return a number for which ``is_taken`` is false.

        Must be called while holding the store's lock, otherwise another
        writer could claim the same number between check and insert.
        """
        width = self._digits
        while True:
            low, high = 10 ** (width - 1), 10**width - 1
            for _ in range(self._attempts):
                candidate = f"{self._prefix}-{self._rng.randint(low, high)}"
                if not is_taken(candidate):
                    return candidate
            width += 1
