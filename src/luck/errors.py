"""Error types raised by the luck package."""

from __future__ import annotations

from typing import Optional


class LuckError(Exception):
    """Base class for all errors raised by this package."""

    def __init__(self, message: str, *, parameter: Optional[str] = None) -> None:
        super().__init__(message)
        self.parameter = parameter


class InvalidArgumentError(LuckError, ValueError):
    """A required argument was missing or unusable."""


class InvalidRangeError(InvalidArgumentError):
    """A numeric range was requested with bounds that cannot be satisfied."""


class UnreachableError(LuckError, RuntimeError):
    """The sampler reached a state a correct implementation never reaches.

    Seeing this error points at a defect in the library rather than at the
    caller's input.
    """

    def __init__(self, message: str = "Reached code that should be unreachable") -> None:
        super().__init__(message)


__all__ = [
    "InvalidArgumentError",
    "InvalidRangeError",
    "LuckError",
    "UnreachableError",
]
