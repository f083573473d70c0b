"""Tariff registry adapters."""

from .memory import InMemoryTariffRegistry

__all__ = ["InMemoryTariffRegistry"]
