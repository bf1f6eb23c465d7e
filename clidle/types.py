"""Core data types for the idle simulation."""
from __future__ import annotations

import enum
import math
from dataclasses import dataclass, field
from typing import Callable

from clidle.pricing import geometric

GrowthPolicy = Callable[[int], float]


class InputMode(enum.Enum):
    IDLE = "idle"
    BUYING = "buying"


@dataclass(frozen=True)
class ProducerKind:
    """Immutable producer catalog entry.

    Attributes:
        name: Lookup key, the word the player types to buy one.
        display_name: Human-readable label shown by the presenter.
        base_price: Cost of the first unit (> 0).
        rate: Code lines produced per second by one unit (>= 0).
        growth: Price multiplier as a function of units already owned.
    """

    name: str
    display_name: str
    base_price: float
    rate: float
    growth: GrowthPolicy = field(default_factory=lambda: geometric(1.15))

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError("ProducerKind name must be a non-empty string")
        if not isinstance(self.display_name, str):
            raise ValueError(
                f"display_name must be a string, got {self.display_name!r}"
            )
        if not math.isfinite(self.base_price) or self.base_price <= 0:
            raise ValueError(f"base_price must be finite and > 0, got {self.base_price}")
        if not math.isfinite(self.rate) or self.rate < 0:
            raise ValueError(f"rate must be finite and >= 0, got {self.rate}")

    def price_at(self, owned: int) -> float:
        """Cost of the next unit when *owned* units are already held."""
        return self.base_price * self.growth(owned)


@dataclass(frozen=True, slots=True)
class ProducerView:
    name: str
    display_name: str
    owned: int
    price: float
    rate: float
    affordable: bool

    @property
    def production(self) -> float:
        return self.owned * self.rate


@dataclass(frozen=True, slots=True)
class GameSnapshot:
    """Read-only view of the game for one rendered frame."""

    resource: float
    elapsed: float
    total_rate: float
    producers: tuple[ProducerView, ...]
    mode: InputMode = InputMode.IDLE
    input_buffer: str = ""
    messages: tuple[str, ...] = ()

    def producer(self, name: str) -> ProducerView:
        for view in self.producers:
            if view.name == name:
                return view
        raise UnknownProducerError(name)


class UnknownProducerError(KeyError):
    """Raised when a producer name is not in the catalog."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Unknown producer {name!r}")

    def __str__(self) -> str:
        return self.args[0]


class InsufficientResources(Exception):
    """Raised when a purchase costs more than the code lines available."""

    def __init__(self, name: str, price: float, available: float) -> None:
        self.name = name
        self.price = price
        self.available = available
        super().__init__(
            f"Cannot buy {name}: costs {price:.2f} code lines, have {available:.2f}"
        )
