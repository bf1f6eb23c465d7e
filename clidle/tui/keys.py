"""Terminal input adapter: raw key polling and key -> command translation."""
from __future__ import annotations

import codecs
import os
import select
import sys
import termios
import tty
from typing import IO, Any

from clidle.commands import (
    CancelPurchase,
    EnterPurchaseMode,
    ManualProduce,
    Quit,
    SelectProducer,
)
from clidle.session import Session
from clidle.types import InputMode

ESC = "\x1b"
ENTER_KEYS = ("\r", "\n")
BACKSPACE_KEYS = ("\x7f", "\b")

IDLE_BINDINGS: dict[str, Any] = {
    "c": ManualProduce(),
    "b": EnterPurchaseMode(),
    "q": Quit(),
}


def split_keys(data: str) -> list[str]:
    """Split raw terminal input into keys.

    A lone ESC is a key of its own; ESC followed by ``[`` or ``O`` starts an
    escape sequence (arrow keys, function keys) that is kept as one token.
    """
    keys: list[str] = []
    i = 0
    while i < len(data):
        ch = data[i]
        if ch == ESC and i + 1 < len(data) and data[i + 1] in "[O":
            j = i + 2
            # CSI parameters run until a final byte in @..~
            while j < len(data) and not ("@" <= data[j] <= "~"):
                j += 1
            keys.append(data[i : j + 1])
            i = j + 1
            continue
        keys.append(ch)
        i += 1
    return keys


class KeyTranslator:
    """Turns keys into commands according to the session's input mode.

    In BUYING mode printable keys edit a name buffer, which Enter submits as
    ``SelectProducer``.
    """

    def __init__(self, session: Session) -> None:
        self._session = session
        self._buffer: list[str] = []

    @property
    def buffer(self) -> str:
        return "".join(self._buffer)

    def feed(self, key: str, mode: InputMode | None = None) -> Any | None:
        if mode is None:
            mode = self._session.mode
        if key == "\x03":
            return Quit()
        if mode is InputMode.IDLE:
            self._buffer.clear()
            return IDLE_BINDINGS.get(key)

        if key == ESC:
            self._buffer.clear()
            return CancelPurchase()
        if key in ENTER_KEYS:
            if not self._buffer:
                return None
            name = self.buffer
            self._buffer.clear()
            return SelectProducer(name)
        if key in BACKSPACE_KEYS:
            if self._buffer:
                self._buffer.pop()
            return None
        if len(key) == 1 and key.isprintable():
            self._buffer.append(key)
        return None

    def translate(self, data: str) -> list[Any]:
        """Translate a chunk of raw input, in order.

        The mode is tracked across the chunk, so ``b`` followed by ``dev``
        within one read lands ``dev`` in the buffer.
        """
        mode = self._session.mode
        commands: list[Any] = []
        for key in split_keys(data):
            cmd = self.feed(key, mode)
            if cmd is None:
                continue
            commands.append(cmd)
            if isinstance(cmd, EnterPurchaseMode):
                mode = InputMode.BUYING
            elif isinstance(cmd, CancelPurchase):
                mode = InputMode.IDLE
        return commands


class TerminalInput:
    """Context manager that puts the terminal in cbreak mode and polls keys.

    The previous terminal attributes are restored on exit, including when the
    game loop raises.
    """

    def __init__(self, translator: KeyTranslator, stream: IO[Any] | None = None) -> None:
        self._translator = translator
        self._stream = stream if stream is not None else sys.stdin
        self._saved: list[Any] | None = None
        # Keeps a multibyte character split across reads until it completes.
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="ignore")

    @property
    def buffer(self) -> str:
        return self._translator.buffer

    def __enter__(self) -> TerminalInput:
        fd = self._stream.fileno()
        self._saved = termios.tcgetattr(fd)
        tty.setcbreak(fd)
        return self

    def __exit__(self, *exc_info: object) -> None:
        if self._saved is not None:
            termios.tcsetattr(self._stream.fileno(), termios.TCSADRAIN, self._saved)
            self._saved = None

    def poll(self, timeout: float) -> list[Any]:
        fd = self._stream.fileno()
        ready, _, _ = select.select([fd], [], [], timeout)
        if not ready:
            return []
        data = self._decoder.decode(os.read(fd, 1024))
        return self._translator.translate(data)
