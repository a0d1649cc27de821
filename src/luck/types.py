"""Common data types used across the luck package."""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Protocol, runtime_checkable

from pydantic import BaseModel, Field


@runtime_checkable
class Weighted(Protocol):
    """Anything exposing a non-negative ``weight`` relative to its siblings."""

    @property
    def weight(self) -> float:  # pragma: no cover - protocol definition
        ...


@runtime_checkable
class RandomSource(Protocol):
    """Minimal generator capability needed by the samplers.

    ``random.Random`` and :class:`luck.rng.Generator` both satisfy it.
    """

    def random(self) -> float:  # pragma: no cover - protocol definition
        ...

    def randrange(self, stop: int) -> int:  # pragma: no cover - protocol definition
        ...


class ZeroWeightPolicy(str, Enum):
    """What weighted sampling does when every element weighs zero."""

    ABSENT = "absent"
    UNIFORM = "uniform"
    RAISE = "raise"


class WeightedItem(BaseModel):
    """Attaches a weight to an arbitrary value."""

    value: Any = Field(..., description="The payload returned when this item is selected.")
    weight: float = Field(default=1.0, ge=0.0)


WeightFunction = Callable[[Any], float]


__all__ = [
    "RandomSource",
    "Weighted",
    "WeightedItem",
    "WeightFunction",
    "ZeroWeightPolicy",
]
