"""Domain errors raised by tariffs and the tariff registry."""


class TariffError(Exception):
    """Base class for all tariff domain errors."""


class InvalidArgumentError(TariffError, ValueError):
    """A tariff field violates its construction constraints."""


class OutOfRangeError(TariffError, ValueError):
    """A discount percentage lies outside 0..100."""


class EmptyCollectionError(TariffError, LookupError):
    """An aggregate query was run against a registry without tariffs."""
