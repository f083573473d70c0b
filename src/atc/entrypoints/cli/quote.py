"""One-shot ATC commands that need no session state.

- ``atc quote`` prices a single call with a one-off tariff.
- ``atc cities`` lists the enumerated cities and their selection numbers.

Examples
    $ atc quote Minsk 10 --price 0.5
    5.00 rub.
    $ atc quote 4 30 --price 0.4 --discount 25
    9.00 rub.
"""

from __future__ import annotations

import logging

import click

from atc import config
from atc.domain.errors import DomainError
from atc.domain.pricing import DiscountedRate, FlatRate, PricingRule
from atc.domain.value_objects import MAX_CALL_MINUTES, Destination

from .console import DISCOUNT_RANGE, PRICE_RANGE
from .helpers import DESTINATION, city_menu, format_amount

logger = logging.getLogger(__name__)


@click.command()
@click.argument("destination", type=DESTINATION)
@click.argument("minutes", type=click.IntRange(0, MAX_CALL_MINUTES))
@click.option(
    "--price",
    "-p",
    type=PRICE_RANGE,
    required=True,
    help="Base price per minute.",
)
@click.option(
    "--discount",
    "-d",
    type=DISCOUNT_RANGE,
    default=None,
    help="Benefit discount in percent; omit for a regular tariff.",
)
def quote(
    destination: Destination, minutes: int, price: float, discount: float | None
) -> None:
    """Print the cost of a MINUTES-long call to DESTINATION.

    DESTINATION is a city number (see `atc cities`) or a city name.
    """
    try:
        rule: PricingRule = (
            FlatRate(destination, price)
            if discount is None
            else DiscountedRate(destination, price, discount)
        )
        cost = rule.calculate_cost(minutes)
    except DomainError as e:
        raise click.ClickException(str(e)) from e
    logger.info("Quoted %s for %d minute(s)", rule.describe(), minutes)
    click.echo(format_amount(cost, config.get_currency()))


@click.command()
def cities() -> None:
    """List the cities that can be picked by number."""
    click.echo(city_menu())
