"""Bootstrap (composition root) for ATC.

Assembles the application at runtime: builds the tariff registry from
configuration and hands the same registry instance to the exchange directory.

Import rules:
- Entry points import *this* package for wiring.
- This package may import: `atc.adapters`, `atc.service_layer`,
  `atc.interfaces`, `atc.domain`, and `atc.config`.
- Inner layers must not import `atc.bootstrap`.
"""

from .bootstrap import AppContainer, bootstrap

__all__ = ["AppContainer", "bootstrap"]
