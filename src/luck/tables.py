"""Weighted item tables, optionally loaded from JSON or YAML files."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional, Sequence

from pydantic import ValidationError

try:
    import yaml
except ImportError:  # pragma: no cover - optional dependency
    yaml = None

from .errors import InvalidArgumentError
from .sampling import sample, weighted_sample
from .types import RandomSource, WeightedItem

LOGGER = logging.getLogger(__name__)


class WeightedTable:
    """An ordered table of weighted values."""

    def __init__(self, items: Sequence[WeightedItem] | None = None) -> None:
        self._items: list[WeightedItem] = []
        self.extend(items or [])

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[WeightedItem]:
        return iter(self._items)

    def all(self) -> list[WeightedItem]:
        return list(self._items)

    @property
    def total_weight(self) -> float:
        return sum(item.weight for item in self._items)

    def extend(self, items: Iterable[WeightedItem]) -> None:
        self._items.extend(items)

    def weighted_sample(self, generator: Optional[RandomSource] = None) -> Any:
        """Return the value of an item chosen in proportion to its weight."""

        chosen = weighted_sample(self._items, generator)
        return None if chosen is None else chosen.value

    def sample(self, generator: Optional[RandomSource] = None) -> Any:
        """Return the value of a uniformly chosen item, ignoring weights."""

        chosen = sample(self._items, generator)
        return None if chosen is None else chosen.value

    @classmethod
    def from_file(cls, path: str | Path) -> "WeightedTable":
        """Load a table from a JSON or YAML file.

        The file holds either a list of ``{"value": ..., "weight": ...}``
        entries or a mapping with such a list under ``items``.
        """

        payload = _read_file(path)
        if isinstance(payload, dict):
            payload = payload.get("items", [])
        if not isinstance(payload, list):
            raise InvalidArgumentError(
                f"{path} must hold a list of weighted items, got {type(payload).__name__}",
                parameter="path",
            )
        items = []
        for entry in payload:
            try:
                items.append(WeightedItem.model_validate(entry))
            except ValidationError as exc:
                LOGGER.warning("Invalid weighted item skipped in %s: %s", path, exc)
        if not items:
            raise InvalidArgumentError(f"{path} contains no weighted items", parameter="path")
        return cls(items)


def _read_file(path: str | Path) -> Any:
    payload = Path(path).read_text(encoding="utf-8")
    suffix = Path(path).suffix.lower()
    if suffix in {".yaml", ".yml"}:
        if yaml is None:
            raise RuntimeError("PyYAML is required for YAML weighted tables")
        return yaml.safe_load(payload) or []
    return json.loads(payload)


__all__ = ["WeightedTable"]
