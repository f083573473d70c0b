"""Bootstrap the exchange directory with a seeded tariff registry."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass

from atc import config
from atc.adapters.tariff_registry import InMemoryTariffRegistry
from atc.domain.value_objects import MissingTariffPolicy
from atc.interfaces.tariff_registry import TariffRegistry
from atc.service_layer.directory import ExchangeDirectory

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring constants."""

    registry: TariffRegistry
    directory: ExchangeDirectory


def build_registry(seed_tariffs: Mapping[str, float]) -> TariffRegistry:
    """Build a new in-memory registry holding flat tariffs for ``seed_tariffs``."""
    registry = InMemoryTariffRegistry()
    for destination, price in seed_tariffs.items():
        registry.set_tariff(destination, price)
    return registry


def build_directory(
    registry: TariffRegistry, policy: MissingTariffPolicy
) -> ExchangeDirectory:
    """Build an exchange directory billing against ``registry``."""
    return ExchangeDirectory(registry, policy=policy)


def bootstrap(
    seed_tariffs: Mapping[str, float] | None = None,
    policy: MissingTariffPolicy | None = None,
) -> AppContainer:
    """Wire a registry and a directory sharing it.

    Args:
        seed_tariffs: Initial flat tariffs. Read from the environment when None.
        policy: Missing-tariff policy. Read from the environment when None.

    Raises:
        ConfigError: If the environment holds invalid values.
        InvalidDestination: If a seed names an invalid destination.
        InvalidTariff: If a seed price is not positive.
    """
    if seed_tariffs is None:
        seed_tariffs = config.get_seed_tariffs()
    if policy is None:
        policy = config.get_missing_tariff_policy()
    registry = build_registry(seed_tariffs)
    directory = build_directory(registry, policy)
    logger.debug(
        "Bootstrapped directory with %d seed tariff(s), policy=%s",
        len(registry),
        policy.value,
    )
    return AppContainer(registry=registry, directory=directory)
