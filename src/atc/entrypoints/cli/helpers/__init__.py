"""CLI helpers for ATC.

Utilities used by the command-line interface: status-line emitters with
emoji→ASCII fallbacks, the destination parameter type, amount formatting and
the logger-level option parser.
"""

from .messages import error, success, warn
from .params import DESTINATION, city_menu, format_amount

__all__ = ["error", "success", "warn", "DESTINATION", "city_menu", "format_amount"]
