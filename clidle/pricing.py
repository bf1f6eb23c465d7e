"""Price growth policies.

Every policy maps the number of units already owned to a price multiplier.
Multipliers start at 1.0 for zero owned and never decrease as the count grows.
"""
from __future__ import annotations

import math
from typing import Any, Callable, Mapping


def constant() -> Callable[[int], float]:
    """Flat price: every unit costs the base price."""

    def policy(owned: int) -> float:
        return 1.0

    return policy


def linear(step: float = 0.1) -> Callable[[int], float]:
    """Linear: y = 1 + step*owned."""
    if not math.isfinite(step) or step < 0:
        raise ValueError(f"step must be finite and >= 0, got {step}")

    def policy(owned: int) -> float:
        return 1.0 + step * max(0, owned)

    return policy


def geometric(factor: float = 1.15) -> Callable[[int], float]:
    """Geometric: y = factor^owned."""
    if not math.isfinite(factor) or factor < 1.0:
        raise ValueError(f"factor must be finite and >= 1, got {factor}")

    def policy(owned: int) -> float:
        try:
            return factor ** max(0, owned)
        except OverflowError:
            return math.inf

    return policy


_FACTORIES: dict[str, Callable[..., Callable[[int], float]]] = {
    "constant": constant,
    "linear": linear,
    "geometric": geometric,
}


def make_policy(definition: Mapping[str, Any]) -> Callable[[int], float]:
    """Build a policy from ``{"policy": name, **params}``.

    >>> make_policy({"policy": "linear", "step": 0.5})(2)
    2.0
    """
    params = dict(definition)
    name = params.pop("policy", None)
    factory = _FACTORIES.get(name) if isinstance(name, str) else None
    if factory is None:
        raise ValueError(
            f"Unknown pricing policy {name!r}, expected one of {sorted(_FACTORIES)}"
        )
    try:
        return factory(**params)
    except TypeError as exc:
        raise ValueError(f"Bad parameters for {name} policy: {exc}") from exc