"""Exchange directory: the client book and call-billing aggregator of the ATC."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from atc.domain.client import Client, normalize_last_name
from atc.domain.errors import ClientNotFound
from atc.domain.value_objects import MissingTariffPolicy

if TYPE_CHECKING:
    from atc.interfaces.tariff_registry import DestinationLike, TariffRegistry

logger = logging.getLogger(__name__)


class ExchangeDirectory:
    """Owns the clients of the exchange and bills them against a tariff registry.

    Clients are looked up case-insensitively by last name. Expected outcomes
    such as a duplicate name or an unknown client are reported through return
    values (`False`, `None`); only `cost_for_client` raises, because a cost
    for a missing client has no meaningful value.

    Args:
        registry: Shared tariff registry used for every cost computation.
            The directory does not copy it, so later tariff changes are seen
            by all clients immediately.
        policy: How calls without a tariff are priced. Defaults to
            `MissingTariffPolicy.SKIP` (they contribute zero).
    """

    def __init__(
        self,
        registry: TariffRegistry,
        policy: MissingTariffPolicy = MissingTariffPolicy.SKIP,
    ) -> None:
        self._registry = registry
        self._policy = policy
        self._clients: dict[str, Client] = {}

    @property
    def registry(self) -> TariffRegistry:
        return self._registry

    @property
    def policy(self) -> MissingTariffPolicy:
        return self._policy

    def __len__(self) -> int:
        return len(self._clients)

    def add_client(self, last_name: str) -> bool:
        """Register a new client.

        Returns:
            True if the client was added; False if the name is empty or a
            client with the same name (ignoring case) already exists.
        """
        key = normalize_last_name(last_name)
        if not key:
            logger.debug("Rejected client with empty last name")
            return False
        if key in self._clients:
            logger.debug("Rejected duplicate client %r", last_name)
            return False
        self._clients[key] = Client(last_name)
        logger.info("Added client %s", last_name.strip())
        return True

    def find_client(self, last_name: str) -> Client | None:
        return self._clients.get(normalize_last_name(last_name))

    def register_call(
        self, last_name: str, destination: DestinationLike, minutes: int
    ) -> bool:
        """Record a call for an existing client.

        Tariff existence is not checked; warning the user about an unpriced
        destination is up to the caller.

        Returns:
            True if the call was recorded; False if no such client exists,
            in which case nothing is changed.

        Raises:
            InvalidDestination: If the destination is not a valid city name.
            InvalidDuration: If ``minutes`` is out of range.
        """
        if (client := self.find_client(last_name)) is None:
            logger.debug("Call not registered: unknown client %r", last_name)
            return False
        record = client.add_call(destination, minutes)
        logger.info(
            "Registered %d-minute call of %s to %s",
            record.minutes,
            client.last_name,
            record.destination,
        )
        return True

    def cost_for_client(self, last_name: str) -> float:
        """Total cost of one client's calls.

        Raises:
            ClientNotFound: If no client matches ``last_name``.
            TariffNotFound: Only under `MissingTariffPolicy.FAIL`.
        """
        if (client := self.find_client(last_name)) is None:
            raise ClientNotFound(last_name)
        return client.compute_total_cost(self._registry, self._policy)

    def total_cost_all_calls(self) -> float:
        """Total cost of every call of every client."""
        return sum(
            (
                client.compute_total_cost(self._registry, self._policy)
                for client in self._clients.values()
            ),
            0.0,
        )

    def list_clients(self) -> list[str]:
        """Last names of all clients in the order they were added."""
        return [client.last_name for client in self._clients.values()]

    def clients(self) -> list[Client]:
        return list(self._clients.values())
