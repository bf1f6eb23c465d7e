"""GameState - the mutable aggregate owned by a Simulation."""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class GameState:
    """Mutable game state.

    Attributes:
        resource: Code lines currently held. Never negative.
        owned: Mapping of producer name -> units owned.
        last_tick: Simulated seconds accrued so far. Never decreases.
    """

    resource: float = 0.0
    owned: dict[str, int] = field(default_factory=dict)
    last_tick: float = 0.0
