"""Logging setup for the ``atc`` command line.

Two sinks are configured by the CLI group:

- a Rich console handler on stderr, whose level follows ``-v``/``-q``;
- an optional flight recorder that keeps recent records at DEBUG in memory
  and writes them to a log file once something goes wrong.

`log_startup` records the version, the active sinks and the billing
environment (seed tariffs, missing-tariff policy, currency) at the start of
every run, so a flushed flight-recorder file shows which tariff table the
session was billed against.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

from rich.console import Console
from rich.logging import RichHandler

from atc import config

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "atc"

# variables reported by log_startup, in display order
BILLING_ENV_VARS = (
    config.SEED_TARIFFS_ENV,
    config.MISSING_TARIFF_POLICY_ENV,
    config.CURRENCY_ENV,
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other packages with ``[package]``.

    Records from ``atc`` and its submodules get an empty ``record.prefix``;
    everything else gets the top-level package name in brackets, e.g.
    ``[urllib3]``. No record is dropped.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        package = record.name.partition(".")[0]
        record.prefix = "" if package == PROJECT_PREFIX else f"[{package}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown on the console. Ignored in debug mode,
            which always shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of the short third-party prefix.
        color: Let Rich pick a color system; ``False`` disables color, the
            same way click-extra's ``--no-color`` does.

    Returns:
        A `RichHandler` ready to attach to the root logger.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(name)s: %(message)s")
        )
    else:
        handler.setFormatter(logging.Formatter("%(prefix)s %(message)s"))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder.

    Up to ``capacity`` records are held in memory. The buffer is written to
    ``path`` when a record at ``flush_level`` or above arrives, when it
    fills up, or on close if ``flush_on_close`` is set. The file is
    truncated on first write, so it only ever holds the latest run.

    Returns:
        A `MemoryHandler` whose target is a lazily opened `FileHandler`.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(
        logging.Formatter(
            "[%(asctime)s] %(levelname)s %(name)s:%(lineno)d: %(message)s"
        )
    )
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def billing_environment() -> dict[str, str]:
    """Raw values of the ATC_* billing variables, ``<default>`` when unset.

    Values are reported as typed; they are parsed (and rejected) only when
    a command bootstraps the exchange.
    """
    return {name: os.environ.get(name, "<default>") for name in BILLING_ENV_VARS}


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics.

    The summary names the version, the console level and whether the flight
    recorder is on. The diagnostics cover the interpreter, the process, the
    handlers, the flight-recorder settings, per-logger overrides and the
    billing environment.
    """
    logger.info(
        "ATC %s - console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path or "<none>",
            flight_capacity,
            force_flush_fr,
        )
    overrides = {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
    logger.debug("Per-logger overrides: %s", overrides or "<none>")
    for name, value in billing_environment().items():
        logger.debug("Billing env: %s=%s", name, value)
