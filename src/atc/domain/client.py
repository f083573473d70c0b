"""Client aggregate: a subscriber and the calls billed to them."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from .errors import InvalidLastName, TariffNotFound
from .value_objects import CallRecord, City, Destination, MissingTariffPolicy

if TYPE_CHECKING:
    from atc.interfaces.tariff_registry import TariffRegistry

logger = logging.getLogger(__name__)


def normalize_last_name(last_name: str) -> str:
    """Return the lookup key for a last name (trimmed and casefolded)."""
    return last_name.strip().casefold()


class Client:
    """A subscriber of the exchange identified by last name.

    Calls are kept in the order they were registered. The client never owns
    prices: costs are always computed against a registry supplied by the
    caller, so the same client can be billed against different tariff tables.
    """

    def __init__(self, last_name: str) -> None:
        if not isinstance(last_name, str) or not last_name.strip():
            raise InvalidLastName(last_name)
        self._last_name = last_name.strip()
        self._calls: list[CallRecord] = []

    def __repr__(self) -> str:
        return f"Client(last_name={self._last_name!r}, calls={len(self._calls)})"

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def key(self) -> str:
        return normalize_last_name(self._last_name)

    @property
    def calls(self) -> tuple[CallRecord, ...]:
        return tuple(self._calls)

    def add_call(
        self, destination: Destination | City | str, minutes: int
    ) -> CallRecord:
        """Append a call to the history.

        Tariff existence is not checked here; an unpriced call is simply
        handled by the missing-tariff policy when costs are computed.

        Raises:
            InvalidDestination: If the destination is not a valid city name.
            InvalidDuration: If ``minutes`` is out of range.
        """
        record = CallRecord(Destination.of(destination), minutes)
        self._calls.append(record)
        return record

    def compute_total_cost(
        self,
        registry: TariffRegistry,
        policy: MissingTariffPolicy = MissingTariffPolicy.SKIP,
    ) -> float:
        """Sum ``price(destination) × minutes`` over every call.

        Args:
            registry: Tariff table to price the calls with.
            policy: `SKIP` leaves calls without a tariff out of the total;
                `FAIL` raises on the first such call.

        Returns:
            The total cost of the priced calls.

        Raises:
            TariffNotFound: Only with `MissingTariffPolicy.FAIL`.
        """
        total = 0.0
        for call in self._calls:
            rule = registry.find_rule(call.destination)
            if rule is None:
                if policy is MissingTariffPolicy.FAIL:
                    raise TariffNotFound(call.destination.name)
                logger.debug(
                    "Skipping %s-minute call of %s to %s: no tariff",
                    call.minutes,
                    self._last_name,
                    call.destination,
                )
                continue
            total += rule.calculate_cost(call.minutes)
        return total

    def itemize(
        self, registry: TariffRegistry
    ) -> list[tuple[CallRecord, float | None]]:
        """Return each call with its cost, or ``None`` when it has no tariff."""
        items: list[tuple[CallRecord, float | None]] = []
        for call in self._calls:
            rule = registry.find_rule(call.destination)
            cost = None if rule is None else rule.calculate_cost(call.minutes)
            items.append((call, cost))
        return items
