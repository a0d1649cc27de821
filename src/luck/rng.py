"""Thread-safe access to pseudo-random number generators.

Every thread lazily receives its own :class:`Generator`, so callers on
different threads never share generator state. New generators are seeded from
a single shared seed generator; only that seed draw is serialised.
"""

from __future__ import annotations

import logging
import random
import threading
from typing import Optional

from .config import RngConfig
from .errors import InvalidArgumentError
from .ranges import float_below, float_between, int_below, int_between

LOGGER = logging.getLogger(__name__)

MAX_INT = 2**31 - 1
_SEED_BITS = 64


def _check_pair(a: Optional[float], b: Optional[float]) -> None:
    if a is None and b is not None:
        raise InvalidArgumentError(
            "an upper bound was given without a lower bound", parameter="a"
        )


class Generator(random.Random):
    """``random.Random`` with bounded ``next`` helpers.

    ``next()`` and ``next_float()`` accept zero, one or two bounds: with one
    bound it is the exclusive maximum, with two they are the inclusive minimum
    and the exclusive maximum.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        super().__init__(seed)
        self.initial_seed = seed

    def next(self, a: Optional[int] = None, b: Optional[int] = None) -> int:
        """Return a random int in ``[0, MAX_INT)``, ``[0, a)`` or ``[a, b)``."""

        _check_pair(a, b)
        if a is None:
            return self.randrange(MAX_INT)
        if b is None:
            return int_below(self, a)
        return int_between(self, a, b)

    def next_float(self, a: Optional[float] = None, b: Optional[float] = None) -> float:
        """Return a random float in ``[0.0, 1.0)``, ``[0, a)`` or ``[a, b)``."""

        _check_pair(a, b)
        if a is None:
            return self.random()
        if b is None:
            return float_below(self, a)
        return float_between(self, a, b)

    def __repr__(self) -> str:
        return f"<Generator seed={self.initial_seed!r}>"


_local = threading.local()
_seed_lock = threading.Lock()
_seed_generator = random.Random()
_generation = 0


def _draw_seed() -> tuple[int, int]:
    with _seed_lock:
        return _seed_generator.getrandbits(_SEED_BITS), _generation


def create() -> Generator:
    """Return a new generator seeded from the shared seed generator."""

    seed, _ = _draw_seed()
    return Generator(seed)


def current() -> Generator:
    """Return the calling thread's generator, creating it on first access."""

    generator = getattr(_local, "generator", None)
    if generator is None or _local.generation != _generation:
        seed, generation = _draw_seed()
        generator = Generator(seed)
        _local.generator = generator
        _local.generation = generation
        LOGGER.debug(
            "Created generator for thread %s (generation %d)",
            threading.current_thread().name,
            generation,
        )
    return generator


def reseed(seed: Optional[int] = None) -> None:
    """Re-seed the shared seed generator.

    Every thread's generator is replaced on its next :func:`current` call, so
    a fixed seed makes a single-threaded run reproducible. ``None`` returns to
    OS-entropy seeding.
    """

    global _generation
    with _seed_lock:
        _seed_generator.seed(seed)
        _generation += 1
        generation = _generation
    LOGGER.debug("Reseeded shared seed generator (generation %d)", generation)


def configure(config: RngConfig) -> None:
    """Apply an :class:`RngConfig` to the shared provider."""

    reseed(config.seed)


def next(a: Optional[int] = None, b: Optional[int] = None) -> int:
    """Draw an int from the calling thread's generator; see :meth:`Generator.next`."""

    return current().next(a, b)


def next_float(a: Optional[float] = None, b: Optional[float] = None) -> float:
    """Draw a float from the calling thread's generator; see :meth:`Generator.next_float`."""

    return current().next_float(a, b)


__all__ = [
    "Generator",
    "MAX_INT",
    "configure",
    "create",
    "current",
    "next",
    "next_float",
    "reseed",
]
