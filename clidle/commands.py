"""Player commands forwarded by the input adapter."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ManualProduce:
    pass


@dataclass(frozen=True)
class EnterPurchaseMode:
    pass


@dataclass(frozen=True)
class SelectProducer:
    name: str


@dataclass(frozen=True)
class CancelPurchase:
    pass


@dataclass(frozen=True)
class Quit:
    pass
