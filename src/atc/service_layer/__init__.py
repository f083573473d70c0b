"""Service layer for ATC.

Use cases that combine the domain model with the ports in `atc.interfaces`.
The exchange directory is the main entrypoint used by the CLI.
"""

from .directory import ExchangeDirectory

__all__ = ["ExchangeDirectory"]
