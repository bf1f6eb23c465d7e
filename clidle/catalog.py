"""ProducerCatalog registry and JSON catalog loading."""
from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterator

from clidle.pricing import geometric, make_policy
from clidle.types import ProducerKind, UnknownProducerError

logger = logging.getLogger(__name__)


class CatalogError(ValueError):
    """Raised when a catalog file cannot be turned into producer kinds."""


class ProducerCatalog:
    """Ordered table of producer kinds, keyed by name."""

    def __init__(self, kinds: list[ProducerKind] | None = None) -> None:
        self._kinds: dict[str, ProducerKind] = {}
        for kind in kinds or ():
            self.define(kind)

    def define(self, kind: ProducerKind) -> None:
        """Register a producer kind. Overwrites if name exists."""
        self._kinds[kind.name] = kind

    def get(self, name: str) -> ProducerKind:
        """Look up a kind. Raises UnknownProducerError if not defined."""
        try:
            return self._kinds[name]
        except KeyError:
            raise UnknownProducerError(name) from None

    def has(self, name: str) -> bool:
        return name in self._kinds

    def names(self) -> list[str]:
        return list(self._kinds)

    def __iter__(self) -> Iterator[ProducerKind]:
        return iter(list(self._kinds.values()))

    def __len__(self) -> int:
        return len(self._kinds)


def default_catalog() -> ProducerCatalog:
    """The built-in producer table used when no catalog file is given."""
    return ProducerCatalog(
        [
            ProducerKind("dev", "Junior developer", 10, 0.5, geometric(1.15)),
            ProducerKind("senior", "Senior developer", 100, 4, geometric(1.15)),
            ProducerKind("team", "Dev team", 1_100, 30, geometric(1.15)),
            ProducerKind("bot", "Pair-programming bot", 12_000, 260, geometric(1.2)),
        ]
    )


def load_catalog(path: str | Path) -> ProducerCatalog:
    """Read a JSON array of producer objects.

    Each object needs ``name``, ``base_price`` and ``rate``; ``display_name``
    defaults to the name and ``growth`` to ``{"policy": "geometric"}``::

        [{"name": "dev", "display_name": "Junior developer",
          "base_price": 10, "rate": 0.5,
          "growth": {"policy": "geometric", "factor": 1.15}}]
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise CatalogError(f"Cannot read catalog {path}: {exc.strerror}") from exc
    except json.JSONDecodeError as exc:
        raise CatalogError(f"Catalog {path} is not valid JSON: {exc}") from exc

    if not isinstance(raw, list) or not raw:
        raise CatalogError(f"Catalog {path} must be a non-empty JSON array")

    catalog = ProducerCatalog()
    for index, entry in enumerate(raw):
        kind = _parse_entry(entry, index)
        if catalog.has(kind.name):
            raise CatalogError(f"Duplicate producer name {kind.name!r} in {path}")
        catalog.define(kind)

    logger.info("Loaded %d producer kinds from %s", len(catalog), path)
    return catalog


def _parse_entry(entry: Any, index: int) -> ProducerKind:
    if not isinstance(entry, dict):
        raise CatalogError(f"Catalog entry {index} must be an object")
    try:
        name = entry["name"]
        return ProducerKind(
            name=name,
            display_name=entry.get("display_name", name),
            base_price=float(entry["base_price"]),
            rate=float(entry["rate"]),
            growth=make_policy(entry.get("growth", {"policy": "geometric"})),
        )
    except KeyError as exc:
        raise CatalogError(f"Catalog entry {index} is missing {exc.args[0]!r}") from exc
    except (TypeError, ValueError) as exc:
        raise CatalogError(f"Catalog entry {index}: {exc}") from exc
