"""In-memory TariffRegistry implementation."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from atc.domain.pricing import PricingRule
from atc.domain.value_objects import Destination
from atc.interfaces.tariff_registry import DestinationLike, TariffRegistry

logger = logging.getLogger(__name__)


class InMemoryTariffRegistry(TariffRegistry):
    """Dict-backed tariff registry keyed by casefolded destination name.

    Insertion order is preserved; replacing a tariff keeps the destination's
    original position.
    """

    def __init__(self, rules: Iterable[PricingRule] = ()) -> None:
        self._rules: dict[str, PricingRule] = {}
        for rule in rules:
            self.set_rule(rule)

    def set_rule(self, rule: PricingRule) -> None:
        key = rule.destination.key
        if (previous := self._rules.get(key)) is not None:
            logger.info(
                "Replacing tariff: %s -> %s", previous.describe(), rule.describe()
            )
        else:
            logger.info("Setting tariff: %s", rule.describe())
        self._rules[key] = rule

    def find_rule(self, destination: DestinationLike) -> PricingRule | None:
        return self._rules.get(Destination.of(destination).key)

    def rules(self) -> list[PricingRule]:
        return list(self._rules.values())

    def clear(self) -> None:
        logger.info("Clearing %d tariff(s)", len(self._rules))
        self._rules.clear()

    def __len__(self) -> int:
        return len(self._rules)
