"""Unit test configuration and fixtures."""
from __future__ import annotations

import random

import pytest

from stress_module.config import Config
from stress_module.item_registry import ItemRegistry
from stress_module.module import StressModule
from stress_module.random_generator import RandomGenerator
from stress_module.request import ItemContext

SEED = 20150101


@pytest.fixture
def rng():
    """Deterministic generator, already seeded."""
    return RandomGenerator(random.Random(SEED))


@pytest.fixture
def sentinel(tmp_path):
    """Sentinel path inside a temp dir. The file is not created."""
    return tmp_path / "stress_file"


@pytest.fixture
def config(sentinel):
    return Config(sentinel_path=str(sentinel))


@pytest.fixture
def context(rng, config):
    return ItemContext(rng=rng, config=config)


@pytest.fixture(scope="session")
def registry():
    return ItemRegistry.default()


@pytest.fixture
def module(config, rng, registry):
    """Initialized StressModule with deterministic randomness."""
    module = StressModule(config, registry=registry, rng=rng)
    module.init()
    yield module
    module.shutdown()
