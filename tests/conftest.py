"""Shared fixtures for clidle tests."""
from __future__ import annotations

import pytest
from clidle import ProducerCatalog, ProducerKind, Session, Simulation
from clidle.pricing import constant, geometric


@pytest.fixture
def catalog() -> ProducerCatalog:
    return ProducerCatalog(
        [
            ProducerKind("dev", "Developer", 10, 0.5, geometric(1.15)),
            ProducerKind("farm", "Code farm", 50, 2, constant()),
        ]
    )


@pytest.fixture
def sim(catalog: ProducerCatalog) -> Simulation:
    return Simulation(catalog)


@pytest.fixture
def session(sim: Simulation) -> Session:
    return Session(sim, max_messages=5)
