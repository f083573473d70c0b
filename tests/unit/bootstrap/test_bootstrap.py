"""Unit tests for application wiring."""

import pytest

from atc import config
from atc.bootstrap import AppContainer, bootstrap
from atc.domain.errors import InvalidTariff
from atc.domain.value_objects import City, MissingTariffPolicy

# pylint: disable=magic-value-comparison


def test_bootstrap_shares_one_registry():
    app = bootstrap(seed_tariffs={"Minsk": 0.5}, policy=MissingTariffPolicy.SKIP)
    assert isinstance(app, AppContainer)
    assert app.directory.registry is app.registry
    app.registry.set_tariff(City.GOMEL, 0.4)
    app.directory.add_client("Ivanov")
    app.directory.register_call("Ivanov", City.GOMEL, 10)
    assert app.directory.cost_for_client("Ivanov") == pytest.approx(4.0)


def test_bootstrap_reads_environment(monkeypatch):
    monkeypatch.setenv(config.SEED_TARIFFS_ENV, "Brest=0.3,Grodno=0.2")
    monkeypatch.setenv(config.MISSING_TARIFF_POLICY_ENV, "fail")
    app = bootstrap()
    assert [d.name for d, _ in app.registry.list_all()] == ["Brest", "Grodno"]
    assert app.directory.policy is MissingTariffPolicy.FAIL


def test_bootstrap_default_seed(monkeypatch):
    monkeypatch.delenv(config.SEED_TARIFFS_ENV, raising=False)
    monkeypatch.delenv(config.MISSING_TARIFF_POLICY_ENV, raising=False)
    app = bootstrap()
    assert app.registry.get_tariff(City.MINSK) == 0.5
    assert app.registry.get_tariff(City.GOMEL) == 0.4
    assert app.directory.policy is MissingTariffPolicy.SKIP


def test_bootstrap_rejects_bad_seed_price():
    with pytest.raises(InvalidTariff):
        bootstrap(seed_tariffs={"Minsk": -1.0}, policy=MissingTariffPolicy.SKIP)


def test_bootstrap_builds_fresh_state_each_time():
    first = bootstrap(seed_tariffs={}, policy=MissingTariffPolicy.SKIP)
    second = bootstrap(seed_tariffs={}, policy=MissingTariffPolicy.SKIP)
    first.registry.set_tariff("Minsk", 1.0)
    assert not second.registry.has_tariff("Minsk")
