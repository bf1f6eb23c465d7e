"""Simulation - resource accrual, pricing and purchases."""
from __future__ import annotations

import logging

from clidle.catalog import ProducerCatalog
from clidle.state import GameState
from clidle.types import GameSnapshot, InsufficientResources, ProducerView

logger = logging.getLogger(__name__)


class Simulation:
    """Owns one GameState and applies every transition to it.

    Two kinds of transition exist: passive accrual over elapsed time
    (``advance``) and discrete player actions (``produce_manual``,
    ``purchase``). All of them are synchronous and do no I/O.
    """

    def __init__(
        self,
        catalog: ProducerCatalog,
        manual_increment: float = 1.0,
    ) -> None:
        if manual_increment <= 0:
            raise ValueError(f"manual_increment must be > 0, got {manual_increment}")
        self._catalog = catalog
        self._manual_increment = manual_increment
        self._state = GameState(owned={name: 0 for name in catalog.names()})

    @property
    def catalog(self) -> ProducerCatalog:
        return self._catalog

    @property
    def resource(self) -> float:
        return self._state.resource

    @property
    def elapsed(self) -> float:
        return self._state.last_tick

    def owned_count(self, name: str) -> int:
        self._catalog.get(name)
        return self._state.owned.get(name, 0)

    def total_rate(self) -> float:
        """Code lines produced per second by everything owned."""
        return sum(
            self._state.owned.get(kind.name, 0) * kind.rate for kind in self._catalog
        )

    def advance(self, elapsed: float) -> None:
        """Accrue production for *elapsed* seconds. Negative values count as 0."""
        elapsed = max(0.0, elapsed)
        if elapsed == 0.0:
            return
        self._state.resource += elapsed * self.total_rate()
        self._state.last_tick += elapsed

    def produce_manual(self) -> None:
        self._state.resource += self._manual_increment

    def current_price(self, name: str) -> float:
        kind = self._catalog.get(name)
        return kind.price_at(self._state.owned.get(name, 0))

    def can_afford(self, name: str) -> bool:
        return self._state.resource >= self.current_price(name)

    def purchase(self, name: str) -> float:
        """Buy one unit of *name* and return the price paid.

        Raises InsufficientResources, leaving the state untouched, when the
        code lines held do not cover the price.
        """
        price = self.current_price(name)
        available = self._state.resource
        if available < price:
            logger.info("Rejected %s: price %.2f, have %.2f", name, price, available)
            raise InsufficientResources(name, price, available)
        self._state.resource = max(0.0, available - price)
        self._state.owned[name] = self._state.owned.get(name, 0) + 1
        logger.debug(
            "Bought %s for %.2f, now own %d", name, price, self._state.owned[name]
        )
        return price

    def snapshot(self) -> GameSnapshot:
        resource = self._state.resource
        views = []
        for kind in self._catalog:
            owned = self._state.owned.get(kind.name, 0)
            price = kind.price_at(owned)
            views.append(
                ProducerView(
                    name=kind.name,
                    display_name=kind.display_name,
                    owned=owned,
                    price=price,
                    rate=kind.rate,
                    affordable=resource >= price,
                )
            )
        return GameSnapshot(
            resource=resource,
            elapsed=self._state.last_tick,
            total_rate=self.total_rate(),
            producers=tuple(views),
        )
