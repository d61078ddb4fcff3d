import random

import pytest

from packages.core.errors import IdSpaceExhaustedError
from packages.core.reminders.ids import UniqueIdGenerator


class ScriptedRandom:
    def __init__(self, values):
        self._values = list(values)

    def randint(self, low, high):
        return self._values.pop(0)


def test_generate_skips_taken_candidates():
    generator = UniqueIdGenerator(rng=ScriptedRandom([1111, 1111, 2222]))
    taken = {"1111"}

    assert generator.generate(taken.__contains__, taken_ids=taken) == "2222"


def test_generate_stays_in_four_digit_range():
    generator = UniqueIdGenerator(rng=random.Random(3))
    for _ in range(500):
        candidate = generator.generate(lambda _: False)
        assert 1000 <= int(candidate) <= 9999


def test_generate_gives_up_after_max_attempts():
    generator = UniqueIdGenerator(rng=random.Random(1), max_attempts=10)

    with pytest.raises(IdSpaceExhaustedError):
        generator.generate(lambda _: True)


def test_generate_fails_fast_when_space_is_full():
    generator = UniqueIdGenerator(low=1, high=3)
    assert generator.capacity == 3

    with pytest.raises(IdSpaceExhaustedError):
        generator.generate(lambda _: True, taken_ids=["1", "2", "3"])


def test_out_of_range_ids_do_not_count_as_taken():
    generator = UniqueIdGenerator(rng=ScriptedRandom([2]), low=1, high=3)
    taken = {"1", "3", "0042", "02", "note"}

    assert generator.generate(taken.__contains__, taken_ids=taken) == "2"


def test_invalid_bounds_rejected():
    with pytest.raises(ValueError):
        UniqueIdGenerator(low=10, high=1)
    with pytest.raises(ValueError):
        UniqueIdGenerator(max_attempts=0)
