"""clidle command-line entry point."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from clidle.catalog import CatalogError
from clidle.config import GameConfig
from clidle.loop import GameLoop
from clidle.session import Session
from clidle.simulation import Simulation
from clidle.tui import KeyTranslator, TerminalInput, TerminalPresenter

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="clidle",
        description="Clidle: write code lines, hire devs, write more code lines",
    )
    p.add_argument("--catalog", type=Path, default=None, metavar="FILE",
                   help="JSON producer catalog (default: built-in)")
    p.add_argument("--poll-timeout", type=float, default=0.1, metavar="SECONDS",
                   help="Seconds to wait for a key before redrawing (default: 0.1)")
    p.add_argument("--manual-increment", type=float, default=1.0, metavar="N",
                   help="Code lines per 'c' press (default: 1)")
    p.add_argument("--log-file", type=Path, default=None, metavar="FILE",
                   help="Write a debug log to FILE")
    p.add_argument("--log-level", default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                   help="Log level for --log-file (default: INFO)")
    return p


def config_from_args(
    parser: argparse.ArgumentParser, args: argparse.Namespace
) -> GameConfig:
    try:
        return GameConfig(
            manual_increment=args.manual_increment,
            poll_timeout=args.poll_timeout,
            catalog_path=args.catalog,
        )
    except ValueError as exc:
        parser.error(str(exc))


def configure_logging(log_file: Path | None, level: str) -> None:
    # The live display owns the terminal, so logs only ever go to a file.
    if log_file is None:
        return
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(
        logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
    )
    root = logging.getLogger("clidle")
    root.addHandler(handler)
    root.setLevel(level)


def build_session(config: GameConfig) -> Session:
    simulation = Simulation(config.catalog(), manual_increment=config.manual_increment)
    return Session(simulation, max_messages=config.max_messages)


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    config = config_from_args(parser, args)
    configure_logging(args.log_file, args.log_level)

    try:
        session = build_session(config)
    except CatalogError as exc:
        parser.error(str(exc))

    translator = KeyTranslator(session)
    try:
        with TerminalInput(translator) as source, TerminalPresenter() as presenter:
            loop = GameLoop(session, source, presenter, poll_timeout=config.poll_timeout)
            loop.run_forever()
    except KeyboardInterrupt:
        logger.info("Interrupted, quitting")

    snap = session.snapshot()
    print(f"You wrote {snap.resource:.2f} code lines in {snap.elapsed:.0f} seconds.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
