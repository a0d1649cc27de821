"""Configuration models for the luck package."""

from __future__ import annotations

import os
from typing import Mapping, Optional

from pydantic import BaseModel, Field

from .errors import InvalidArgumentError
from .types import ZeroWeightPolicy

SEED_ENV_VAR = "LUCK_SEED"


class RngConfig(BaseModel):
    """Seeding behaviour of the shared generator provider."""

    seed: Optional[int] = Field(
        default=None,
        description="Seed for the shared seed generator. None draws from OS entropy.",
    )

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RngConfig":
        """Build a config from the ``LUCK_SEED`` environment variable."""

        env = os.environ if environ is None else environ
        raw = env.get(SEED_ENV_VAR, "").strip()
        if not raw:
            return cls()
        try:
            seed = int(raw)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"{SEED_ENV_VAR} must be an integer, got {raw!r}",
                parameter=SEED_ENV_VAR,
            ) from exc
        return cls(seed=seed)


class SamplingConfig(BaseModel):
    """Sampler behaviour for degenerate inputs."""

    zero_weight_policy: ZeroWeightPolicy = Field(
        default=ZeroWeightPolicy.ABSENT,
        description="Outcome of weighted sampling when the total weight is zero.",
    )


class LuckConfig(BaseModel):
    """Top-level configuration object for the package."""

    rng: RngConfig = Field(default_factory=RngConfig)
    sampling: SamplingConfig = Field(default_factory=SamplingConfig)


__all__ = [
    "LuckConfig",
    "RngConfig",
    "SamplingConfig",
    "SEED_ENV_VAR",
]
