"""Uniform and weighted selection of a single element from a collection."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from typing import Any, Optional, TypeVar

from . import rng
from .config import LuckConfig, SamplingConfig
from .errors import InvalidArgumentError, UnreachableError
from .ranges import float_below
from .types import RandomSource, WeightFunction, ZeroWeightPolicy

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


def _default_weight(element: Any) -> float:
    return element.weight


def _weight_of(element: Any, weigh: WeightFunction) -> float:
    # None entries are placeholders with zero weight
    if element is None:
        return 0.0
    return weigh(element)


def _replayable(collection: Optional[Iterable[T]]) -> Iterable[T]:
    """Return something that can be traversed more than once."""

    if collection is None:
        raise InvalidArgumentError("collection must not be None", parameter="collection")
    if isinstance(collection, Sequence):
        return collection
    try:
        iterator = iter(collection)
    except TypeError as exc:
        raise InvalidArgumentError(
            f"collection must be iterable, got {type(collection).__name__}",
            parameter="collection",
        ) from exc
    if iterator is collection:
        return list(iterator)
    return collection


def _resolve_source(generator: Optional[RandomSource]) -> RandomSource:
    if generator is None:
        return rng.current()
    if not isinstance(generator, RandomSource):
        raise InvalidArgumentError(
            f"generator must provide random() and randrange(), got {type(generator).__name__}",
            parameter="generator",
        )
    return generator


class WeightedSampler:
    """Select elements uniformly or in proportion to their weight.

    A sampler holds a :class:`SamplingConfig` and optionally a generator. When
    neither the sampler nor the call provides a generator, the calling
    thread's shared generator is used.
    """

    def __init__(
        self,
        config: Optional[SamplingConfig] = None,
        *,
        generator: Optional[RandomSource] = None,
    ) -> None:
        self.config = config or SamplingConfig()
        if generator is not None:
            _resolve_source(generator)
        self.generator = generator

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def sample(
        self,
        collection: Optional[Iterable[T]],
        generator: Optional[RandomSource] = None,
    ) -> Optional[T]:
        """Return a uniformly chosen element, or ``None`` when empty."""

        items = _replayable(collection)
        source = self._source(generator)

        if isinstance(items, Sequence):
            length = len(items)
            if length == 0:
                return None
            return items[source.randrange(length)]

        count = sum(1 for _ in items)
        if count == 0:
            return None
        index = source.randrange(count)
        for position, element in enumerate(items):
            if position == index:
                return element
        raise UnreachableError(
            f"collection yielded fewer than {count} elements on its second traversal"
        )

    def weighted_sample(
        self,
        collection: Optional[Iterable[T]],
        generator: Optional[RandomSource] = None,
        *,
        weight: Optional[WeightFunction] = None,
    ) -> Optional[T]:
        """Return an element chosen with probability proportional to its weight.

        ``weight`` extracts the weight of an element and defaults to reading
        its ``weight`` attribute. ``None`` elements weigh zero and are never
        returned. Returns ``None`` for an empty collection.
        """

        items = _replayable(collection)
        source = self._source(generator)
        weigh = weight or _default_weight

        count = 0
        total = 0.0
        for element in items:
            count += 1
            total += _weight_of(element, weigh)
        if count == 0:
            return None
        if total == 0:
            return self._zero_total(items, source)

        target = float_below(source, total)
        running_total = 0.0
        for element in items:
            running_total += _weight_of(element, weigh)
            if running_total > target:
                return element

        raise UnreachableError(
            f"weighted walk selected nothing for target {target!r} of total weight {total!r}"
        )

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _source(self, generator: Optional[RandomSource]) -> RandomSource:
        return _resolve_source(generator if generator is not None else self.generator)

    def _zero_total(self, items: Iterable[T], source: RandomSource) -> Optional[T]:
        policy = self.config.zero_weight_policy
        if policy is ZeroWeightPolicy.RAISE:
            raise InvalidArgumentError(
                "collection has no element with a positive weight",
                parameter="collection",
            )
        if policy is ZeroWeightPolicy.UNIFORM:
            candidates = [element for element in items if element is not None]
            LOGGER.debug("Total weight is zero, sampling %d elements uniformly", len(candidates))
            if not candidates:
                return None
            return candidates[source.randrange(len(candidates))]
        LOGGER.debug("Total weight is zero, nothing to select")
        return None


_default_sampler = WeightedSampler()


def sample(
    collection: Optional[Iterable[T]],
    generator: Optional[RandomSource] = None,
) -> Optional[T]:
    """Return a uniformly chosen element of ``collection``, or ``None`` when empty."""

    return _default_sampler.sample(collection, generator)


def weighted_sample(
    collection: Optional[Iterable[T]],
    generator: Optional[RandomSource] = None,
    *,
    weight: Optional[WeightFunction] = None,
) -> Optional[T]:
    """Return an element of ``collection`` chosen in proportion to its weight."""

    return _default_sampler.weighted_sample(collection, generator, weight=weight)


def configure(config: LuckConfig) -> None:
    """Apply a :class:`LuckConfig` to the shared provider and the module-level sampler."""

    rng.configure(config.rng)
    _default_sampler.config = config.sampling


__all__ = ["WeightedSampler", "configure", "sample", "weighted_sample"]
