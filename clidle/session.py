"""Session - input-mode state machine and command routing."""
from __future__ import annotations

import dataclasses
import logging
from collections import deque
from typing import Any, Callable

from clidle.commands import (
    CancelPurchase,
    EnterPurchaseMode,
    ManualProduce,
    Quit,
    SelectProducer,
)
from clidle.simulation import Simulation
from clidle.types import (
    GameSnapshot,
    InputMode,
    InsufficientResources,
    UnknownProducerError,
)

logger = logging.getLogger(__name__)


class Session:
    """Routes player commands to the simulation for one game.

    One handler per command class, dispatched by type. A handler returns
    True when it accepted the command. Commands with no handler, or that do
    not apply in the current mode, are ignored.
    """

    def __init__(self, simulation: Simulation, max_messages: int = 50) -> None:
        self._sim = simulation
        self._mode = InputMode.IDLE
        self._quit_requested = False
        self._messages: deque[str] = deque(maxlen=max_messages)
        self._handlers: dict[type[Any], Callable[[Any], bool]] = {}

        self.handle(ManualProduce, self._on_manual_produce)
        self.handle(EnterPurchaseMode, self._on_enter_purchase)
        self.handle(SelectProducer, self._on_select_producer)
        self.handle(CancelPurchase, self._on_cancel_purchase)
        self.handle(Quit, self._on_quit)

    @property
    def simulation(self) -> Simulation:
        return self._sim

    @property
    def mode(self) -> InputMode:
        return self._mode

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    @property
    def messages(self) -> list[str]:
        return list(self._messages)

    def handle(self, cmd_type: type[Any], handler: Callable[[Any], bool]) -> None:
        """Register ``handler(cmd) -> bool`` for *cmd_type*. Later calls overwrite."""
        self._handlers[cmd_type] = handler

    def dispatch(self, cmd: Any) -> bool:
        handler = self._handlers.get(type(cmd))
        if handler is None:
            return False
        return handler(cmd)

    def advance(self, elapsed: float) -> None:
        self._sim.advance(elapsed)

    def notify(self, text: str) -> None:
        self._messages.append(text)

    def snapshot(self, input_buffer: str = "") -> GameSnapshot:
        return dataclasses.replace(
            self._sim.snapshot(),
            mode=self._mode,
            input_buffer=input_buffer,
            messages=tuple(self._messages),
        )

    def _set_mode(self, mode: InputMode) -> None:
        logger.debug("Input mode %s -> %s", self._mode.value, mode.value)
        self._mode = mode

    def _on_manual_produce(self, cmd: ManualProduce) -> bool:
        if self._mode is not InputMode.IDLE:
            return False
        self._sim.produce_manual()
        return True

    def _on_enter_purchase(self, cmd: EnterPurchaseMode) -> bool:
        if self._mode is not InputMode.IDLE:
            return False
        self._set_mode(InputMode.BUYING)
        return True

    def _on_select_producer(self, cmd: SelectProducer) -> bool:
        if self._mode is not InputMode.BUYING:
            return False
        name = cmd.name.strip()
        try:
            price = self._sim.purchase(name)
        except InsufficientResources as exc:
            self.notify(str(exc))
            return False
        except UnknownProducerError as exc:
            self.notify(str(exc))
            return False
        kind = self._sim.catalog.get(name)
        self.notify(
            f"Bought a {kind.display_name} for {price:.2f} code lines "
            f"(now {self._sim.owned_count(name)})"
        )
        return True

    def _on_cancel_purchase(self, cmd: CancelPurchase) -> bool:
        if self._mode is not InputMode.BUYING:
            return False
        self._set_mode(InputMode.IDLE)
        return True

    def _on_quit(self, cmd: Quit) -> bool:
        self._quit_requested = True
        return True
