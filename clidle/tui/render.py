"""Terminal presenter built on rich."""
from __future__ import annotations

from rich.console import Console, Group, RenderableType
from rich.live import Live
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from clidle.types import GameSnapshot, InputMode

MESSAGE_LINES = 8

_HELP = {
    InputMode.IDLE: [
        ("q", " to exit, "),
        ("c", " to code, "),
        ("b", " to start buying."),
    ],
    InputMode.BUYING: [
        ("Esc", " to stop buying, "),
        ("Enter", " to buy the producer typed below."),
    ],
}


def help_line(snapshot: GameSnapshot) -> Text:
    text = Text(f"Owning {snapshot.resource:.2f} code lines, Press ")
    for key, rest in _HELP[snapshot.mode]:
        text.append(key, style="bold")
        text.append(rest)
    return text


def input_panel(snapshot: GameSnapshot) -> Panel:
    if snapshot.mode is InputMode.BUYING:
        body = Text(snapshot.input_buffer, style="green")
        body.append("_", style="blink green")
    else:
        body = Text("")
    return Panel(body, title="Input", title_align="left")


def owned_table(snapshot: GameSnapshot) -> Table:
    table = Table(
        title=f"Owned ({snapshot.total_rate:.2f} code lines per second)",
        show_header=True,
        header_style="bold magenta",
        expand=True,
    )
    table.add_column("Producer", style="cyan")
    table.add_column("Count", justify="right")
    table.add_column("Lines/s", style="yellow", justify="right")

    for view in snapshot.producers:
        if view.owned == 0:
            continue
        table.add_row(view.display_name, str(view.owned), f"{view.production:.2f}")
    return table


def shop_table(snapshot: GameSnapshot) -> Table:
    table = Table(title="Shop", show_header=True, header_style="bold magenta", expand=True)
    table.add_column("Buy as", style="bold")
    table.add_column("Producer", style="cyan")
    table.add_column("Price", justify="right")
    table.add_column("Lines/s each", style="yellow", justify="right")

    for view in snapshot.producers:
        table.add_row(
            view.name,
            view.display_name,
            f"{view.price:.2f}",
            f"{view.rate:.2f}",
            style=None if view.affordable else "dim",
        )
    return table


def messages_panel(snapshot: GameSnapshot, lines: int = MESSAGE_LINES) -> Panel:
    recent = snapshot.messages[-lines:] if lines > 0 else ()
    body = Text("\n".join(recent)) if recent else Text("No messages yet.", style="dim")
    return Panel(body, title="Messages", title_align="left")


def build_view(snapshot: GameSnapshot) -> RenderableType:
    """Assemble the whole screen for one frame."""
    return Group(
        help_line(snapshot),
        input_panel(snapshot),
        owned_table(snapshot),
        shop_table(snapshot),
        messages_panel(snapshot),
    )


class TerminalPresenter:
    """Draws snapshots on the alternate screen through ``rich.live.Live``."""

    def __init__(self, console: Console | None = None, screen: bool = True) -> None:
        self._console = console if console is not None else Console()
        self._live = Live(
            console=self._console,
            screen=screen,
            auto_refresh=False,
            transient=True,
        )

    def __enter__(self) -> TerminalPresenter:
        self._live.start()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self._live.stop()

    def __call__(self, snapshot: GameSnapshot) -> None:
        self._live.update(build_view(snapshot), refresh=True)
