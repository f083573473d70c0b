"""Unit tests for destinations, cities and call records."""

import pytest

from atc.domain.errors import InvalidDestination, InvalidDuration
from atc.domain.value_objects import (
    MAX_CALL_MINUTES,
    CallRecord,
    City,
    Destination,
    validate_city_name,
)

# pylint: disable=magic-value-comparison


class TestCity:
    """Tests for the enumerated cities."""

    @staticmethod
    def test_indices_are_one_based_in_declaration_order():
        assert [c.index for c in City] == list(range(1, len(City) + 1))
        assert City.MINSK.index == 1
        assert City.VITEBSK.index == 6

    @staticmethod
    @pytest.mark.parametrize("index", [1, 2, 3, 4, 5, 6])
    def test_from_index_roundtrip(index):
        assert City.from_index(index).index == index

    @staticmethod
    @pytest.mark.parametrize("index", [0, 7, -1])
    def test_from_index_out_of_range(index):
        with pytest.raises(InvalidDestination, match="between 1 and 6"):
            City.from_index(index)

    @staticmethod
    @pytest.mark.parametrize("index", ["1", 1.0, True])
    def test_from_index_requires_int(index):
        with pytest.raises(InvalidDestination, match="must be an integer"):
            City.from_index(index)


class TestValidateCityName:
    """Tests for the free-text city-name validator."""

    @staticmethod
    @pytest.mark.parametrize(
        "name",
        ["Minsk", "Nizhny Novgorod", "Ivano-Frankivsk", "Брест", "a", "x" * 50],
    )
    def test_valid_names(name):
        assert validate_city_name(name) == name

    @staticmethod
    def test_surrounding_whitespace_is_trimmed():
        assert validate_city_name("  Gomel \t") == "Gomel"

    @staticmethod
    @pytest.mark.parametrize(
        ("name", "reason"),
        [
            ("", "must not be empty"),
            ("   ", "must not be empty"),
            ("x" * 51, "at most 50 characters"),
            ("Minsk2", "must not contain digits"),
            ("Min_sk", "only contain letters, spaces and hyphens"),
            ("Minsk!", "only contain letters, spaces and hyphens"),
            ("- -", "at least one letter"),
            (None, "must be a string"),
        ],
    )
    def test_invalid_names(name, reason):
        with pytest.raises(InvalidDestination, match=reason):
            validate_city_name(name)


class TestDestination:
    """Tests for the Destination value object."""

    @staticmethod
    def test_equality_is_case_insensitive():
        assert Destination("Minsk") == Destination("MINSK")
        assert hash(Destination("minsk")) == hash(Destination("Minsk"))

    @staticmethod
    def test_name_keeps_spelling():
        destination = Destination(" MINSK ")
        assert destination.name == "MINSK"
        assert destination.key == "minsk"
        assert str(destination) == "MINSK"

    @staticmethod
    def test_of_coerces_city_and_string():
        assert Destination.of(City.GOMEL) == Destination("Gomel")
        assert Destination.of("gomel") == Destination("Gomel")

    @staticmethod
    def test_of_returns_same_destination():
        destination = Destination("Brest")
        assert Destination.of(destination) is destination

    @staticmethod
    def test_invalid_name_fails_construction():
        with pytest.raises(InvalidDestination):
            Destination("123")


class TestCallRecord:
    """Tests for the CallRecord value object."""

    @staticmethod
    def test_valid_record():
        record = CallRecord(Destination("Minsk"), 10)
        assert record.destination == Destination("Minsk")
        assert record.minutes == 10

    @staticmethod
    def test_destination_is_coerced():
        record = CallRecord(City.BREST, 1)  # type: ignore[arg-type]
        assert isinstance(record.destination, Destination)
        assert record.destination.name == "Brest"

    @staticmethod
    def test_is_immutable():
        record = CallRecord(Destination("Minsk"), 10)
        with pytest.raises(AttributeError):
            record.minutes = 20  # type: ignore[misc]

    @staticmethod
    @pytest.mark.parametrize("minutes", [0, -5, MAX_CALL_MINUTES + 1])
    def test_minutes_out_of_range(minutes):
        with pytest.raises(InvalidDuration, match="between 1 and 1440"):
            CallRecord(Destination("Minsk"), minutes)

    @staticmethod
    @pytest.mark.parametrize("minutes", [1.5, "10", True])
    def test_minutes_must_be_int(minutes):
        with pytest.raises(InvalidDuration, match="must be an integer"):
            CallRecord(Destination("Minsk"), minutes)

    @staticmethod
    def test_bounds_are_inclusive():
        assert CallRecord(Destination("Minsk"), 1).minutes == 1
        assert CallRecord(Destination("Minsk"), MAX_CALL_MINUTES).minutes == 1440
