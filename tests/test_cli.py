"""Tests for CLI argument handling and game wiring."""
from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from clidle import GameConfig
from clidle.cli import build_parser, build_session, config_from_args, configure_logging


class TestGameConfig:
    def test_defaults(self) -> None:
        config = GameConfig()
        assert config.manual_increment == 1.0
        assert config.poll_timeout == 0.1
        assert config.catalog_path is None
        assert config.catalog().names()[0] == "dev"

    @pytest.mark.parametrize(
        "kwargs,match",
        [
            ({"manual_increment": 0}, "manual_increment"),
            ({"poll_timeout": 0}, "poll_timeout"),
            ({"max_messages": 0}, "max_messages"),
        ],
    )
    def test_validation(self, kwargs: dict, match: str) -> None:
        with pytest.raises(ValueError, match=match):
            GameConfig(**kwargs)


class TestArgs:
    def test_no_arguments(self) -> None:
        parser = build_parser()
        config = config_from_args(parser, parser.parse_args([]))
        assert config == GameConfig()

    def test_flags(self, tmp_path: Path) -> None:
        parser = build_parser()
        args = parser.parse_args(
            ["--catalog", str(tmp_path / "c.json"), "--poll-timeout", "0.5",
             "--manual-increment", "3"]
        )
        config = config_from_args(parser, args)
        assert config.catalog_path == tmp_path / "c.json"
        assert config.poll_timeout == 0.5
        assert config.manual_increment == 3

    def test_invalid_value_exits_2(self) -> None:
        parser = build_parser()
        args = parser.parse_args(["--poll-timeout", "-1"])
        with pytest.raises(SystemExit) as info:
            config_from_args(parser, args)
        assert info.value.code == 2


class TestBuildSession:
    def test_uses_catalog_file(self, tmp_path: Path) -> None:
        path = tmp_path / "items.json"
        path.write_text(
            json.dumps([{"name": "intern", "base_price": 3, "rate": 0.1}]),
            encoding="utf-8",
        )
        session = build_session(GameConfig(catalog_path=path, manual_increment=2))
        assert session.simulation.catalog.names() == ["intern"]
        session.simulation.produce_manual()
        assert session.simulation.resource == 2


class TestConfigureLogging:
    def test_no_file_adds_no_handler(self) -> None:
        logger = logging.getLogger("clidle")
        before = list(logger.handlers)
        configure_logging(None, "DEBUG")
        assert logger.handlers == before

    def test_file_handler(self, tmp_path: Path) -> None:
        logger = logging.getLogger("clidle")
        log_file = tmp_path / "clidle.log"
        configure_logging(log_file, "DEBUG")
        try:
            logging.getLogger("clidle.simulation").debug("hello")
            for handler in logger.handlers:
                handler.flush()
            assert "hello" in log_file.read_text(encoding="utf-8")
        finally:
            for handler in list(logger.handlers):
                if isinstance(handler, logging.FileHandler):
                    logger.removeHandler(handler)
                    handler.close()
            logger.setLevel(logging.NOTSET)
