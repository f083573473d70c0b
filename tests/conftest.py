"""Global pytest fixtures for ATC."""

from __future__ import annotations

import pytest

from atc.adapters.tariff_registry import InMemoryTariffRegistry
from atc.domain.value_objects import City, MissingTariffPolicy
from atc.service_layer.directory import ExchangeDirectory

# pylint: disable=redefined-outer-name


@pytest.fixture
def registry() -> InMemoryTariffRegistry:
    """Registry seeded the way the console starts: Minsk 0.5, Gomel 0.4."""
    reg = InMemoryTariffRegistry()
    reg.set_tariff(City.MINSK, 0.5)
    reg.set_tariff(City.GOMEL, 0.4)
    return reg


@pytest.fixture
def empty_registry() -> InMemoryTariffRegistry:
    return InMemoryTariffRegistry()


@pytest.fixture
def directory(registry: InMemoryTariffRegistry) -> ExchangeDirectory:
    """Lenient (skip) directory billing against the seeded registry."""
    return ExchangeDirectory(registry)


@pytest.fixture
def strict_directory(registry: InMemoryTariffRegistry) -> ExchangeDirectory:
    """Directory that fails on calls without a tariff."""
    return ExchangeDirectory(registry, policy=MissingTariffPolicy.FAIL)
