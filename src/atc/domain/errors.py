"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


# ============================================================================
#                   Validation errors (raised at construction)
# ============================================================================


class InvalidDestination(DomainError):
    """Raised when a destination is empty or not a valid city name."""

    def __init__(self, destination: object, reason: str) -> None:
        super().__init__(f"Invalid destination {destination!r}: {reason}.")
        self.destination = destination
        self.reason = reason


class InvalidTariff(DomainError):
    """Raised when a base price per minute is not a positive finite number."""

    def __init__(self, destination: str, price: float) -> None:
        super().__init__(
            f"Tariff for '{destination}' must have a positive, finite price "
            f"per minute, got {price}."
        )
        self.destination = destination
        self.price = price


class InvalidDiscount(DomainError):
    """Raised when a benefit discount lies outside the allowed percent range."""

    def __init__(self, destination: str, discount: float) -> None:
        super().__init__(
            f"Discount for '{destination}' must be between 1 and 99 percent, "
            f"got {discount}."
        )
        self.destination = destination
        self.discount = discount


class InvalidLastName(DomainError):
    """Raised when a client is created with an empty or blank last name."""

    def __init__(self, last_name: object) -> None:
        super().__init__(f"Client last name must not be empty, got {last_name!r}.")
        self.last_name = last_name


class InvalidDuration(DomainError):
    """Raised when a call duration is not a whole number of minutes in range."""

    def __init__(self, minutes: object, reason: str) -> None:
        super().__init__(f"Invalid call duration {minutes!r}: {reason}.")
        self.minutes = minutes
        self.reason = reason


# ============================================================================
#                       Lookup errors (recoverable)
# ============================================================================


class TariffNotFound(DomainError):
    """Raised when a destination has no registered tariff."""

    def __init__(self, destination: str) -> None:
        super().__init__(f"No tariff is set for '{destination}'.")
        self.destination = destination


class NoTariffsError(DomainError):
    """Raised when an aggregate over tariffs is requested on an empty registry."""

    def __init__(self) -> None:
        super().__init__("No tariffs are registered.")


class ClientNotFound(DomainError):
    """Raised when no client matches the given last name."""

    def __init__(self, last_name: str) -> None:
        super().__init__(f"Client '{last_name}' not found.")
        self.last_name = last_name
