"""Configuration utilities for ATC.

This module centralizes the environment variables and boundary constants the
application reads at startup.
"""

import os
import re

from atc.domain.value_objects import MissingTariffPolicy

SEED_TARIFFS_ENV = "ATC_SEED_TARIFFS"  # pragma: no mutate
MISSING_TARIFF_POLICY_ENV = "ATC_MISSING_TARIFF_POLICY"  # pragma: no mutate
CURRENCY_ENV = "ATC_CURRENCY"  # pragma: no mutate

DEFAULT_SEED_TARIFFS = "Minsk=0.5,Gomel=0.4"
DEFAULT_CURRENCY = "rub."

# Input bounds enforced at the CLI boundary.
MIN_PRICE_PER_MINUTE = 0.01
MAX_PRICE_PER_MINUTE = 1000.0


class ConfigError(Exception):
    """Raised when an ATC_* environment variable holds an unusable value."""

    def __init__(self, variable: str, value: str, reason: str) -> None:
        super().__init__(f"{variable}={value!r} is invalid: {reason}")
        self.variable = variable
        self.value = value


def parse_seed_tariffs(value: str) -> dict[str, float]:
    """Parse ``NAME=PRICE`` pairs separated by commas or semicolons.

    Destination names may contain spaces, so whitespace is not a separator.
    Later pairs for the same name win. Names are not validated here; the
    registry rejects invalid destinations when the seeds are applied.

    Args:
        value: Raw variable value, e.g. ``"Minsk=0.5, Gomel=0.4"``.

    Returns:
        Mapping of destination name to price per minute.

    Raises:
        ConfigError: If a pair is malformed or its price is not a number
            within `MIN_PRICE_PER_MINUTE`..`MAX_PRICE_PER_MINUTE`.
    """
    seeds: dict[str, float] = {}
    for item in (s.strip() for s in re.split(r"[,;]", value)):
        if not item:
            continue
        name, sep, price_str = item.partition("=")
        if not sep or not name.strip():
            raise ConfigError(
                SEED_TARIFFS_ENV, value, f"expected NAME=PRICE, got {item!r}"
            )
        try:
            price = float(price_str.strip())
        except ValueError as e:
            raise ConfigError(
                SEED_TARIFFS_ENV, value, f"price {price_str.strip()!r} is not a number"
            ) from e
        if not MIN_PRICE_PER_MINUTE <= price <= MAX_PRICE_PER_MINUTE:
            raise ConfigError(
                SEED_TARIFFS_ENV,
                value,
                f"price {price_str.strip()!r} must be between "
                f"{MIN_PRICE_PER_MINUTE} and {MAX_PRICE_PER_MINUTE}",
            )
        seeds[name.strip()] = price
    return seeds


def get_seed_tariffs() -> dict[str, float]:
    """Get the tariffs to seed the registry with.

    Returns:
        Parsed `ATC_SEED_TARIFFS`, or the default Minsk/Gomel seed when unset.
        An empty variable disables seeding.

    Raises:
        ConfigError: If the variable is malformed.
    """
    return parse_seed_tariffs(os.environ.get(SEED_TARIFFS_ENV, DEFAULT_SEED_TARIFFS))


def get_missing_tariff_policy() -> MissingTariffPolicy:
    """Get the missing-tariff policy from `ATC_MISSING_TARIFF_POLICY`.

    Returns:
        The configured policy; `MissingTariffPolicy.SKIP` when unset.

    Raises:
        ConfigError: If the value is not ``skip`` or ``fail``.
    """
    if not (raw := os.environ.get(MISSING_TARIFF_POLICY_ENV)):
        return MissingTariffPolicy.SKIP
    try:
        return MissingTariffPolicy(raw.strip().lower())
    except ValueError as e:
        choices = ", ".join(p.value for p in MissingTariffPolicy)
        raise ConfigError(
            MISSING_TARIFF_POLICY_ENV, raw, f"expected one of: {choices}"
        ) from e


def get_currency() -> str:
    """Currency suffix used when printing amounts."""
    return os.environ.get(CURRENCY_ENV) or DEFAULT_CURRENCY
