import random
from collections import Counter

import pytest

from random_note_viewer.core.selection import RandomSelector
from tests.fakes import scripted


@pytest.mark.parametrize("size", [1, 2, 5, 9])
def test_selection_frequency_is_uniform(size):
    selector = RandomSelector(random.Random(20240501).random)
    draws = 20000
    counts = Counter(selector.pick_index(size) for _ in range(draws))

    assert set(counts) == set(range(size))
    for index in range(size):
        assert abs(counts[index] / draws - 1 / size) < 0.02


def test_index_follows_random_source():
    selector = RandomSelector(scripted(0.0, 0.25, 0.5, 0.999999))
    assert [selector.pick_index(4) for _ in range(4)] == [0, 1, 2, 3]


def test_out_of_range_source_is_clamped():
    selector = RandomSelector(scripted(1.0, -0.1))
    assert selector.pick_index(3) == 2
    assert selector.pick_index(3) == 0


def test_empty_set():
    selector = RandomSelector()
    assert selector.choose([]) is None
    with pytest.raises(ValueError):
        selector.pick_index(0)


def test_choose_returns_element():
    selector = RandomSelector(scripted(0.7))
    assert selector.choose(["a", "b", "c"]) == "c"


def test_default_source_stays_in_range():
    selector = RandomSelector()
    assert all(0 <= selector.pick_index(7) < 7 for _ in range(500))
