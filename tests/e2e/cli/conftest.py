"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, plus fixtures to register that command, obtain a CliRunner, run
tests within an isolated filesystem and pin the ATC_* environment.
"""

import logging

import click
import pytest
from click.testing import CliRunner

from atc import config
from atc.entrypoints.cli.main import atc

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests."""
    logger = logging.getLogger("atc.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command for the duration of a test."""
    atc.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(atc, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Confine filesystem side-effects (flight-recorder files) to the test."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def atc_env(monkeypatch):
    """Pin the ATC_* variables to their defaults, whatever the host has set."""
    monkeypatch.setenv(config.SEED_TARIFFS_ENV, config.DEFAULT_SEED_TARIFFS)
    monkeypatch.setenv(config.MISSING_TARIFF_POLICY_ENV, "skip")
    monkeypatch.setenv(config.CURRENCY_ENV, config.DEFAULT_CURRENCY)
    monkeypatch.delenv("ATC_LOGGER_LEVELS", raising=False)
    return monkeypatch
