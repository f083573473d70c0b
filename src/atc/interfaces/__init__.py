"""Ports (interfaces) that the ATC service layer depends on."""

from .tariff_registry import TariffRegistry, TariffStatistics

__all__ = ["TariffRegistry", "TariffStatistics"]
