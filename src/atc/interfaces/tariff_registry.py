"""Interface for the Tariff Registry."""

from __future__ import annotations

import abc
from collections import Counter
from dataclasses import dataclass
from typing import TYPE_CHECKING

from atc.domain.errors import NoTariffsError, TariffNotFound
from atc.domain.pricing import DiscountedRate, FlatRate
from atc.domain.value_objects import City, Destination

if TYPE_CHECKING:
    from atc.domain.pricing import PricingRule

DestinationLike = Destination | City | str

# --- Read Model ---


@dataclass(frozen=True, slots=True)
class TariffStatistics:
    """Summary of the tariffs currently registered.

    Conventions:
      - `regular` and `benefit` count rules by their type label.
      - `average` is the mean effective price per minute, None if empty.
    """

    total: int
    regular: int
    benefit: int
    average: float | None


# --- Interface ---


class TariffRegistry(abc.ABC):
    """Mapping from destination to the pricing rule that bills it.

    At most one rule exists per destination (destinations compare
    case-insensitively); setting a tariff again replaces the previous rule.
    """

    @abc.abstractmethod
    def set_rule(self, rule: PricingRule) -> None:
        """Insert or replace the rule for ``rule.destination``."""

    @abc.abstractmethod
    def find_rule(self, destination: DestinationLike) -> PricingRule | None:
        """Return the rule for ``destination``, or None if it has no tariff.

        Raises:
            InvalidDestination: If ``destination`` is not a valid name.
        """

    @abc.abstractmethod
    def rules(self) -> list[PricingRule]:
        """Return every registered rule in insertion order."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Remove every tariff."""

    @abc.abstractmethod
    def __len__(self) -> int:
        """Number of destinations with a tariff."""

    def set_tariff(self, destination: DestinationLike, price_per_minute: float) -> None:
        """Insert or replace a regular (flat) tariff.

        Raises:
            InvalidDestination: If ``destination`` is not a valid name.
            InvalidTariff: If ``price_per_minute`` is not positive.
        """
        self.set_rule(FlatRate(Destination.of(destination), price_per_minute))

    def set_benefit_tariff(
        self,
        destination: DestinationLike,
        price_per_minute: float,
        discount_percent: float,
    ) -> None:
        """Insert or replace a benefit (discounted) tariff.

        Raises:
            InvalidDestination: If ``destination`` is not a valid name.
            InvalidTariff: If ``price_per_minute`` is not positive.
            InvalidDiscount: If ``discount_percent`` is outside 1..99.
        """
        self.set_rule(
            DiscountedRate(
                Destination.of(destination), price_per_minute, discount_percent
            )
        )

    def has_tariff(self, destination: DestinationLike) -> bool:
        return self.find_rule(destination) is not None

    def get_rule(self, destination: DestinationLike) -> PricingRule:
        """Return the rule for ``destination``.

        Raises:
            TariffNotFound: If no tariff is set for ``destination``.
        """
        if (rule := self.find_rule(destination)) is None:
            raise TariffNotFound(Destination.of(destination).name)
        return rule

    def get_tariff(self, destination: DestinationLike) -> float:
        """Return the effective price per minute for ``destination``.

        Raises:
            TariffNotFound: If no tariff is set for ``destination``.
        """
        return self.get_rule(destination).effective_price_per_minute()

    def list_all(self) -> list[tuple[Destination, float]]:
        """Return ``(destination, effective price per minute)`` pairs for display."""
        return [
            (rule.destination, rule.effective_price_per_minute())
            for rule in self.rules()
        ]

    def average_price_per_minute(self) -> float:
        """Mean effective price per minute over all tariffs.

        Raises:
            NoTariffsError: If the registry is empty.
        """
        rules = self.rules()
        if not rules:
            raise NoTariffsError
        return sum(rule.effective_price_per_minute() for rule in rules) / len(rules)

    def statistics(self) -> TariffStatistics:
        """Count tariffs by type and compute the average effective price."""
        rules = self.rules()
        labels = Counter(rule.type_label() for rule in rules)
        return TariffStatistics(
            total=len(rules),
            regular=labels[FlatRate.LABEL],
            benefit=labels[DiscountedRate.LABEL],
            average=self.average_price_per_minute() if rules else None,
        )
