"""Public package interface for luck."""

from .config import LuckConfig, RngConfig, SamplingConfig
from .errors import InvalidArgumentError, InvalidRangeError, LuckError, UnreachableError
from .rng import Generator
from .rng import current as current_generator
from .sampling import WeightedSampler, configure, sample, weighted_sample
from .tables import WeightedTable
from .types import RandomSource, Weighted, WeightedItem, ZeroWeightPolicy

__all__ = [
    "Generator",
    "InvalidArgumentError",
    "InvalidRangeError",
    "LuckConfig",
    "LuckError",
    "RandomSource",
    "RngConfig",
    "SamplingConfig",
    "UnreachableError",
    "Weighted",
    "WeightedItem",
    "WeightedSampler",
    "WeightedTable",
    "ZeroWeightPolicy",
    "configure",
    "current_generator",
    "sample",
    "weighted_sample",
]
