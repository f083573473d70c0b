"""Module including value objects used across the domain layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import InvalidDestination, InvalidDuration

MAX_CITY_NAME_LENGTH = 50
MAX_CALL_MINUTES = 1440  # minutes in a day

# characters allowed in a free-text city name besides letters
_NAME_PUNCTUATION = frozenset(" -")


class City(Enum):
    """Enumeration of the cities served by the exchange.

    Member order is significant: the 1-based position of a member is the
    index users type to pick it.
    """

    MINSK = "Minsk"
    GOMEL = "Gomel"
    GRODNO = "Grodno"
    BREST = "Brest"
    MOGILEV = "Mogilev"
    VITEBSK = "Vitebsk"

    @property
    def index(self) -> int:
        """1-based selection index of this city."""
        return list(City).index(self) + 1

    @classmethod
    def from_index(cls, index: int) -> City:
        """Return the city at the 1-based ``index``.

        Raises:
            InvalidDestination: If ``index`` is outside ``1..len(City)``.
        """
        members = list(cls)
        if isinstance(index, bool) or not isinstance(index, int):
            raise InvalidDestination(index, "city index must be an integer")
        if not 1 <= index <= len(members):
            raise InvalidDestination(
                index, f"city index must be between 1 and {len(members)}"
            )
        return members[index - 1]


class MissingTariffPolicy(Enum):
    """What cost aggregation does with a call whose destination has no tariff."""

    SKIP = "skip"  # contributes zero
    FAIL = "fail"  # raises TariffNotFound


def validate_city_name(name: object) -> str:
    """Validate a free-text city name and return it trimmed.

    A valid name is 1 to 50 characters long, contains only letters, spaces
    and hyphens, and has at least one letter. Letters may be any Unicode
    letters, so "Могилёв" and "Брест" are accepted.

    Args:
        name: The raw name as typed by a user.

    Returns:
        The name with surrounding whitespace removed.

    Raises:
        InvalidDestination: If the name breaks any of the rules above.
    """
    if not isinstance(name, str):
        raise InvalidDestination(name, "city name must be a string")
    trimmed = name.strip()
    if not trimmed:
        raise InvalidDestination(name, "city name must not be empty")
    if len(trimmed) > MAX_CITY_NAME_LENGTH:
        raise InvalidDestination(
            name, f"city name must be at most {MAX_CITY_NAME_LENGTH} characters"
        )
    if any(ch.isdigit() for ch in trimmed):
        raise InvalidDestination(name, "city name must not contain digits")
    if any(not ch.isalpha() and ch not in _NAME_PUNCTUATION for ch in trimmed):
        raise InvalidDestination(
            name, "city name may only contain letters, spaces and hyphens"
        )
    if not any(ch.isalpha() for ch in trimmed):
        raise InvalidDestination(name, "city name must contain at least one letter")
    return trimmed


@dataclass(frozen=True, slots=True)
class Destination:
    """A billable target, identified case-insensitively by its name.

    Conventions:
      - `name` keeps the spelling it was created with, trimmed.
      - `key` is the casefolded name; equality and hashing use only `key`,
        so ``Destination("Minsk") == Destination("MINSK")``.
    """

    name: str = field(compare=False)
    key: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        name = validate_city_name(self.name)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "key", name.casefold())

    @classmethod
    def of(cls, value: Destination | City | str) -> Destination:
        """Coerce a destination, an enumerated city or a free-text name."""
        if isinstance(value, Destination):
            return value
        if isinstance(value, City):
            return cls(value.value)
        return cls(value)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class CallRecord:
    """Value object for one call: where it went and how many whole minutes it lasted."""

    destination: Destination
    minutes: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "destination", Destination.of(self.destination))
        if isinstance(self.minutes, bool) or not isinstance(self.minutes, int):
            raise InvalidDuration(self.minutes, "minutes must be an integer")
        if not 1 <= self.minutes <= MAX_CALL_MINUTES:
            raise InvalidDuration(
                self.minutes, f"minutes must be between 1 and {MAX_CALL_MINUTES}"
            )
