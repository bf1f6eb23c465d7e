"""Game configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from clidle.catalog import ProducerCatalog, default_catalog, load_catalog


@dataclass(frozen=True)
class GameConfig:
    """Immutable settings for one game.

    Attributes:
        manual_increment: Code lines added per manual keypress.
        poll_timeout: Seconds each frame waits for a key before redrawing.
        max_messages: Entries kept in the message log.
        catalog_path: JSON producer catalog, or None for the built-in table.
    """

    manual_increment: float = 1.0
    poll_timeout: float = 0.1
    max_messages: int = 50
    catalog_path: Path | None = None

    def __post_init__(self) -> None:
        if self.manual_increment <= 0:
            raise ValueError(
                f"manual_increment must be > 0, got {self.manual_increment}"
            )
        if self.poll_timeout <= 0:
            raise ValueError(f"poll_timeout must be > 0, got {self.poll_timeout}")
        if self.max_messages < 1:
            raise ValueError(f"max_messages must be >= 1, got {self.max_messages}")

    def catalog(self) -> ProducerCatalog:
        if self.catalog_path is None:
            return default_catalog()
        return load_catalog(self.catalog_path)
