"""Tests for the rich presenter layout."""
from __future__ import annotations

from rich.console import Console

from clidle import EnterPurchaseMode, ManualProduce, SelectProducer, Session
from clidle.tui import build_view
from clidle.tui.render import messages_panel


def _text(renderable) -> str:
    console = Console(width=120, record=True, color_system=None)
    console.print(renderable)
    return console.export_text()


class TestBuildView:
    def test_idle_help(self, session: Session) -> None:
        text = _text(build_view(session.snapshot()))
        assert "Owning 0.00 code lines" in text
        assert "to code" in text
        assert "to start buying" in text

    def test_buying_help_and_buffer(self, session: Session) -> None:
        session.dispatch(EnterPurchaseMode())
        text = _text(build_view(session.snapshot("fa")))
        assert "to stop buying" in text
        assert "fa_" in text

    def test_shop_lists_catalog(self, session: Session) -> None:
        text = _text(build_view(session.snapshot()))
        assert "Developer" in text
        assert "Code farm" in text
        assert "10.00" in text
        assert "50.00" in text

    def test_owned_lists_only_owned(self, session: Session) -> None:
        for _ in range(10):
            session.dispatch(ManualProduce())
        session.dispatch(EnterPurchaseMode())
        session.dispatch(SelectProducer("dev"))
        text = _text(build_view(session.snapshot()))
        assert "Owned (0.50 code lines per second)" in text
        assert "11.50" in text
        assert "Bought a Developer" in text

    def test_no_messages_placeholder(self, session: Session) -> None:
        assert "No messages yet." in _text(build_view(session.snapshot()))


class TestMessagesPanel:
    def test_shows_most_recent(self, session: Session) -> None:
        session.dispatch(EnterPurchaseMode())
        for name in ("a", "b", "c"):
            session.dispatch(SelectProducer(name))
        text = _text(messages_panel(session.snapshot(), lines=2))
        assert "'a'" not in text
        assert "'b'" in text
        assert "'c'" in text
