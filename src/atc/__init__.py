"""ATC

A small telephone-exchange billing core. Clients place calls to destinations,
a tariff registry prices each destination per minute, and the exchange
directory reports per-client and aggregate call costs.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
