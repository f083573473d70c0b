"""Pricing rules that turn call minutes into a cost.

A pricing rule is attached to one destination and knows its base price per
minute. Two variants exist:

- `FlatRate` ("Regular" tariff): cost = base × minutes.
- `DiscountedRate` ("Benefit" tariff): cost = base × minutes × (1 − discount/100).

Rules validate their inputs on construction and are immutable afterwards, so
a single rule can be shared freely between registries and reports.
"""

from __future__ import annotations

import abc
import math
from dataclasses import dataclass
from numbers import Real
from typing import ClassVar

from .errors import InvalidDiscount, InvalidDuration, InvalidTariff
from .value_objects import Destination

MIN_DISCOUNT_PERCENT = 1.0
MAX_DISCOUNT_PERCENT = 99.0


def _check_minutes(minutes: int) -> None:
    if isinstance(minutes, bool) or not isinstance(minutes, int):
        raise InvalidDuration(minutes, "minutes must be an integer")
    if minutes < 0:
        raise InvalidDuration(minutes, "minutes must not be negative")


@dataclass(frozen=True)
class PricingRule(abc.ABC):
    """Base class for per-destination pricing rules."""

    LABEL: ClassVar[str]

    destination: Destination
    base_price: float

    def __post_init__(self) -> None:
        destination = Destination.of(self.destination)
        object.__setattr__(self, "destination", destination)
        if (
            isinstance(self.base_price, bool)
            or not isinstance(self.base_price, Real)
            or not math.isfinite(self.base_price)
            or not self.base_price > 0
        ):
            raise InvalidTariff(destination.name, self.base_price)

    @abc.abstractmethod
    def calculate_cost(self, minutes: int) -> float:
        """Return the cost of a call lasting ``minutes`` whole minutes.

        Raises:
            InvalidDuration: If ``minutes`` is negative or not an integer.
        """

    @abc.abstractmethod
    def effective_price_per_minute(self) -> float:
        """Return the price actually charged for one minute."""

    def type_label(self) -> str:
        """Return the tariff kind shown to users ("Regular" or "Benefit")."""
        return self.LABEL

    def describe(self) -> str:
        """One-line human-readable summary of the rule."""
        return (
            f"{self.destination}: {self.base_price:.2f} per minute ({self.LABEL})"
        )


@dataclass(frozen=True)
class FlatRate(PricingRule):
    """Regular tariff: every minute costs the base price."""

    LABEL: ClassVar[str] = "Regular"

    def calculate_cost(self, minutes: int) -> float:
        _check_minutes(minutes)
        return self.base_price * minutes

    def effective_price_per_minute(self) -> float:
        return self.base_price


@dataclass(frozen=True)
class DiscountedRate(PricingRule):
    """Benefit tariff: the base price reduced by a percentage discount."""

    LABEL: ClassVar[str] = "Benefit"

    discount_percent: float

    def __post_init__(self) -> None:
        PricingRule.__post_init__(self)
        if (
            isinstance(self.discount_percent, bool)
            or not isinstance(self.discount_percent, Real)
            or not MIN_DISCOUNT_PERCENT
            <= self.discount_percent
            <= MAX_DISCOUNT_PERCENT
        ):
            raise InvalidDiscount(self.destination.name, self.discount_percent)

    @property
    def multiplier(self) -> float:
        """Fraction of the base price that is still charged."""
        return 1.0 - self.discount_percent / 100.0

    def calculate_cost(self, minutes: int) -> float:
        _check_minutes(minutes)
        return self.base_price * minutes * self.multiplier

    def effective_price_per_minute(self) -> float:
        return self.base_price * self.multiplier

    def describe(self) -> str:
        return (
            f"{self.destination}: {self.base_price:.2f} per minute, "
            f"{self.discount_percent:.1f}% off -> "
            f"{self.effective_price_per_minute():.2f} per minute ({self.LABEL})"
        )
