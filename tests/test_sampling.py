import random
from collections import Counter

import pytest

from luck.errors import InvalidArgumentError
from luck.sampling import WeightedSampler, sample


def test_uniform_sampling_converges_to_equal_frequencies():
    collection = ["a", "b", "c", "d"]
    generator = random.Random(17)

    counts = Counter(sample(collection, generator) for _ in range(8000))

    assert set(counts) == set(collection)
    for value in collection:
        assert 1750 <= counts[value] <= 2250, counts


def test_empty_collections_return_none():
    generator = random.Random(2)

    assert sample([], generator) is None
    assert sample((), generator) is None
    assert sample(set(), generator) is None
    assert sample(iter([]), generator) is None


def test_reiterable_collections_are_counted_then_traversed():
    keys = {"alpha": 1, "beta": 2, "gamma": 3}.keys()
    generator = random.Random(21)

    picks = {sample(keys, generator) for _ in range(200)}

    assert picks == {"alpha", "beta", "gamma"}


def test_one_shot_iterators_are_materialised():
    assert sample((n for n in [7]), random.Random(1)) == 7


def test_sequences_are_indexed_with_one_draw():
    class Recorder(random.Random):
        def __init__(self, seed):
            super().__init__(seed)
            self.stops = []

        def randrange(self, *args, **kwargs):
            self.stops.append(args)
            return super().randrange(*args, **kwargs)

    source = Recorder(3)
    value = sample(range(10, 20), source)

    assert source.stops == [(10,)]
    assert 10 <= value < 20


def test_missing_collection_is_invalid_argument():
    with pytest.raises(InvalidArgumentError) as excinfo:
        sample(None)
    assert excinfo.value.parameter == "collection"


def test_non_iterable_collection_is_invalid_argument():
    with pytest.raises(InvalidArgumentError):
        sample(42, random.Random(1))


def test_shared_generator_produces_varied_results():
    collection = list(range(100))

    assert any(sample(collection) != sample(collection) for _ in range(1000))


def test_sampler_bound_generator_is_reproducible():
    first = WeightedSampler(generator=random.Random(5))
    second = WeightedSampler(generator=random.Random(5))
    collection = list(range(50))

    assert [first.sample(collection) for _ in range(20)] == [second.sample(collection) for _ in range(20)]


def test_sampler_rejects_invalid_bound_generator():
    with pytest.raises(InvalidArgumentError):
        WeightedSampler(generator="not a generator")
