from __future__ import annotations

import logging
import random
from typing import Callable, Iterable, Optional

from ..errors import IdSpaceExhaustedError

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 1000
ID_LOW = 1000
ID_HIGH = 9999


class UniqueIdGenerator:
    """Draw random numeric ids until one is not taken.

    Candidates are drawn uniformly from ``[low, high]`` and rendered as
    decimal strings. After ``max_attempts`` collisions the generator gives up
    with ``IdSpaceExhaustedError`` instead of looping forever.
    """

    def __init__(
        self,
        rng: Optional[random.Random] = None,
        low: int = ID_LOW,
        high: int = ID_HIGH,
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
    ) -> None:
        if low > high:
            raise ValueError("low must not exceed high")
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._rng = rng or random.Random()
        self._low = low
        self._high = high
        self._max_attempts = max_attempts

    @property
    def capacity(self) -> int:
        return self._high - self._low + 1

    def _in_range(self, candidate: str) -> bool:
        if not candidate.isdigit() or str(int(candidate)) != candidate:
            return False
        return self._low <= int(candidate) <= self._high

    def generate(self, is_taken: Callable[[str], bool], taken_ids: Iterable[str] = ()) -> str:
        if sum(1 for taken in taken_ids if self._in_range(taken)) >= self.capacity:
            raise IdSpaceExhaustedError(
                f"All {self.capacity} reminder ids are in use"
            )
        for attempt in range(1, self._max_attempts + 1):
            candidate = str(self._rng.randint(self._low, self._high))
            if not is_taken(candidate):
                if attempt > 1:
                    logger.debug("id_generated id=%s attempts=%d", candidate, attempt)
                return candidate
        logger.warning("id_generation_exhausted attempts=%d", self._max_attempts)
        raise IdSpaceExhaustedError(
            f"No free reminder id after {self._max_attempts} attempts"
        )
