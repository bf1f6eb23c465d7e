"""Terminal front end: key input adapter and rich presenter."""
from clidle.tui.keys import KeyTranslator, TerminalInput, split_keys
from clidle.tui.render import TerminalPresenter, build_view

__all__ = [
    "KeyTranslator",
    "TerminalInput",
    "TerminalPresenter",
    "build_view",
    "split_keys",
]
