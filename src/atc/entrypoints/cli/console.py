"""ATC interactive console.

A menu-driven loop over one in-memory exchange: tariffs are set and listed,
clients are added, calls are registered and billed. All state lives for the
duration of the command only.

Behavior
- Input is validated by Click prompt types and re-asked until valid.
- Billing data (listings, amounts) goes to **stdout**; status lines go to
  **stderr** through the message helpers.
- Any `DomainError` raised by an action is reported and the menu is shown
  again; the loop only ends on ``0`` (exit) or end of input.

Configuration
- ``ATC_SEED_TARIFFS``, ``ATC_MISSING_TARIFF_POLICY`` and ``ATC_CURRENCY`` are
  read once at startup (see `atc.config`).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

import click

from atc import config
from atc.bootstrap import AppContainer, bootstrap
from atc.domain.errors import ClientNotFound, DomainError
from atc.domain.pricing import MAX_DISCOUNT_PERCENT, MIN_DISCOUNT_PERCENT
from atc.domain.value_objects import MAX_CALL_MINUTES, Destination

from .helpers import DESTINATION, city_menu, error, format_amount, success, warn

logger = logging.getLogger(__name__)

PRICE_RANGE = click.FloatRange(
    config.MIN_PRICE_PER_MINUTE, config.MAX_PRICE_PER_MINUTE
)
DISCOUNT_RANGE = click.FloatRange(MIN_DISCOUNT_PERCENT, MAX_DISCOUNT_PERCENT)
MINUTES_RANGE = click.IntRange(1, MAX_CALL_MINUTES)

DESTINATION_PROMPT = "Destination (city number or name)"
LAST_NAME_PROMPT = "Client last name"


@dataclass(frozen=True)
class Session:
    """Everything a menu action needs."""

    app: AppContainer
    currency: str

    def money(self, amount: float) -> str:
        return format_amount(amount, self.currency)


# --- Actions ---


def _prompt_destination() -> Destination:
    click.echo(city_menu())
    return click.prompt(DESTINATION_PROMPT, type=DESTINATION)


def set_regular_tariff(session: Session) -> None:
    destination = _prompt_destination()
    price = click.prompt("Price per minute", type=PRICE_RANGE)
    session.app.registry.set_tariff(destination, price)
    success(f"Regular tariff for {destination} set to {session.money(price)}.")


def set_benefit_tariff(session: Session) -> None:
    destination = _prompt_destination()
    price = click.prompt("Base price per minute", type=PRICE_RANGE)
    discount = click.prompt("Discount (%)", type=DISCOUNT_RANGE)
    session.app.registry.set_benefit_tariff(destination, price, discount)
    rule = session.app.registry.get_rule(destination)
    success(
        f"Benefit tariff for {destination} set to "
        f"{session.money(rule.effective_price_per_minute())}."
    )


def show_tariffs(session: Session) -> None:
    rules = session.app.registry.rules()
    if not rules:
        warn("No tariffs are set.")
        return
    click.echo("Tariffs (price per minute):")
    for i, rule in enumerate(rules, start=1):
        click.echo(f"  {i}. {rule.describe()}")


def show_statistics(session: Session) -> None:
    stats = session.app.registry.statistics()
    if stats.average is None:
        warn("No tariffs are set.")
        return
    click.echo(f"Tariffs: {stats.total}")
    click.echo(f"Regular: {stats.regular}")
    click.echo(f"Benefit: {stats.benefit}")
    click.echo(f"Average price per minute: {session.money(stats.average)}")


def clear_tariffs(session: Session) -> None:
    registry = session.app.registry
    if not len(registry):
        warn("No tariffs are set.")
        return
    if click.confirm(f"Remove all {len(registry)} tariff(s)?", default=False):
        registry.clear()
        success("All tariffs removed.")


def add_client(session: Session) -> None:
    last_name = click.prompt(LAST_NAME_PROMPT).strip()
    if session.app.directory.add_client(last_name):
        success(f"Client {last_name} added.")
    elif not last_name:
        error("Last name must not be empty.")
    else:
        error(f"Client {last_name} already exists.")


def show_clients(session: Session) -> None:
    names = session.app.directory.list_clients()
    if not names:
        warn("No clients are registered.")
        return
    click.echo("Clients:")
    for name in names:
        click.echo(f"  - {name}")


def register_call(session: Session) -> None:
    last_name = click.prompt(LAST_NAME_PROMPT)
    destination = _prompt_destination()
    if not session.app.registry.has_tariff(destination):
        warn(f"No tariff is set for {destination}. Set a tariff first.")
        return
    minutes = click.prompt(
        f"Call duration in minutes (1..{MAX_CALL_MINUTES})", type=MINUTES_RANGE
    )
    if session.app.directory.register_call(last_name, destination, minutes):
        success("Call registered.")
    else:
        error(f"Client '{last_name}' not found.")


def cost_for_client(session: Session) -> None:
    directory = session.app.directory
    last_name = click.prompt(LAST_NAME_PROMPT)
    if (client := directory.find_client(last_name)) is None:
        raise ClientNotFound(last_name)
    total = directory.cost_for_client(client.last_name)
    for call, cost in client.itemize(directory.registry):
        priced = "no tariff" if cost is None else session.money(cost)
        click.echo(f"  {call.destination}: {call.minutes} min -> {priced}")
    click.echo(f"Total cost for {client.last_name}: {session.money(total)}")


def total_cost(session: Session) -> None:
    total = session.app.directory.total_cost_all_calls()
    click.echo(f"Total cost of all calls: {session.money(total)}")


ACTIONS: list[tuple[str, Callable[[Session], None]]] = [
    ("Set regular tariff", set_regular_tariff),
    ("Set benefit tariff", set_benefit_tariff),
    ("Show tariffs", show_tariffs),
    ("Tariff statistics", show_statistics),
    ("Clear all tariffs", clear_tariffs),
    ("Add client", add_client),
    ("Show clients", show_clients),
    ("Register call", register_call),
    ("Cost for client", cost_for_client),
    ("Total cost of all calls", total_cost),
]


def menu_text() -> str:
    lines = ["", "==== ATC menu ===="]
    lines += [f"{i}) {label}" for i, (label, _) in enumerate(ACTIONS, start=1)]
    lines.append("0) Exit")
    return "\n".join(lines)


def run_loop(session: Session) -> None:
    """Show the menu and dispatch actions until the user picks exit."""
    choice_range = click.IntRange(0, len(ACTIONS))
    while True:
        click.echo(menu_text())
        choice = click.prompt("Choose a menu item", type=choice_range)
        if choice == 0:
            click.echo("Goodbye!")
            return
        label, action = ACTIONS[choice - 1]
        logger.debug("Menu action: %s", label)
        try:
            action(session)
        except DomainError as e:
            logger.info("%s failed: %s", label, e)
            error(str(e))


@click.command()
def console() -> None:
    """Start the interactive billing console."""
    try:
        app = bootstrap()
    except (config.ConfigError, DomainError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"ATC console started with {len(app.registry)} tariff(s) loaded.")
    run_loop(Session(app=app, currency=config.get_currency()))
