"""Click parameter types and output formatting for billing values."""

from __future__ import annotations

import click

from atc.domain.errors import InvalidDestination
from atc.domain.value_objects import City, Destination


def format_amount(amount: float, currency: str | None = None) -> str:
    """Format a monetary amount with exactly two decimals.

    Examples:
        >>> format_amount(7)
        '7.00'
        >>> format_amount(2.5, "rub.")
        '2.50 rub.'
    """
    text = f"{amount:.2f}"
    return f"{text} {currency}" if currency else text


def city_menu() -> str:
    """Numbered list of the enumerated cities, one per line."""
    return "\n".join(f"  {city.index}) {city.value}" for city in City)


class DestinationParamType(click.ParamType):
    """Accept a city index (``1``..``N``) or a free-text city name.

    ASCII digits-only input is read as an index into `City`; anything else,
    including other Unicode digits, must pass the city-name validator.
    """

    name = "destination"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> Destination:
        if isinstance(value, Destination):
            return value
        text = str(value).strip()
        try:
            if text.isascii() and text.isdigit():
                return Destination.of(City.from_index(int(text)))
            return Destination.of(text)
        except InvalidDestination as e:
            self.fail(e.reason, param, ctx)


DESTINATION = DestinationParamType()
