"""clidle - a terminal idle game about writing code lines."""
import logging

from clidle.catalog import CatalogError, ProducerCatalog, default_catalog, load_catalog
from clidle.clock import FrameClock
from clidle.commands import (
    CancelPurchase,
    EnterPurchaseMode,
    ManualProduce,
    Quit,
    SelectProducer,
)
from clidle.config import GameConfig
from clidle.loop import GameLoop
from clidle.session import Session
from clidle.simulation import Simulation
from clidle.types import (
    GameSnapshot,
    InputMode,
    InsufficientResources,
    ProducerKind,
    ProducerView,
    UnknownProducerError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "CancelPurchase",
    "CatalogError",
    "EnterPurchaseMode",
    "FrameClock",
    "GameConfig",
    "GameLoop",
    "GameSnapshot",
    "InputMode",
    "InsufficientResources",
    "ManualProduce",
    "ProducerCatalog",
    "ProducerKind",
    "ProducerView",
    "Quit",
    "SelectProducer",
    "Session",
    "Simulation",
    "UnknownProducerError",
    "default_catalog",
    "load_catalog",
]
