"""GameLoop - per-frame poll, accrual, dispatch and render."""
from __future__ import annotations

import logging
from typing import Any, Callable, Protocol

from clidle.clock import FrameClock
from clidle.session import Session
from clidle.types import GameSnapshot

logger = logging.getLogger(__name__)


class InputSource(Protocol):
    @property
    def buffer(self) -> str: ...

    def poll(self, timeout: float) -> list[Any]: ...


Renderer = Callable[[GameSnapshot], None]


class GameLoop:
    """Single-threaded frame loop.

    Every frame waits at most ``poll_timeout`` seconds for input, then
    accrues production for the wall-clock time since the previous frame,
    whether or not a key arrived. Commands are dispatched after accrual so a
    purchase can spend what was produced during the wait.
    """

    def __init__(
        self,
        session: Session,
        source: InputSource,
        render: Renderer,
        poll_timeout: float = 0.1,
        clock: FrameClock | None = None,
    ) -> None:
        if poll_timeout < 0:
            raise ValueError("poll_timeout must be >= 0")
        self._session = session
        self._source = source
        self._render = render
        self._poll_timeout = poll_timeout
        self._clock = clock if clock is not None else FrameClock()
        self._start_hooks: list[Callable[[Session], None]] = []
        self._stop_hooks: list[Callable[[Session], None]] = []

    @property
    def session(self) -> Session:
        return self._session

    @property
    def clock(self) -> FrameClock:
        return self._clock

    def on_start(self, hook: Callable[[Session], None]) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Callable[[Session], None]) -> None:
        self._stop_hooks.append(hook)

    def step(self) -> None:
        commands = self._source.poll(self._poll_timeout)
        self._session.advance(self._clock.tick())
        for cmd in commands:
            self._session.dispatch(cmd)
            if self._session.quit_requested:
                break
        self._render(self._session.snapshot(self._source.buffer))

    def run(self, n: int) -> None:
        self._begin()
        for _ in range(n):
            self.step()
            if self._session.quit_requested:
                break
        self._end()

    def run_forever(self) -> None:
        self._begin()
        while not self._session.quit_requested:
            self.step()
        self._end()

    def _begin(self) -> None:
        self._clock.reset()
        for hook in self._start_hooks:
            hook(self._session)
        self._render(self._session.snapshot(self._source.buffer))

    def _end(self) -> None:
        logger.info(
            "Session ended after %d frames, %.1f s simulated",
            self._clock.frame_number,
            self._session.simulation.elapsed,
        )
        for hook in self._stop_hooks:
            hook(self._session)
