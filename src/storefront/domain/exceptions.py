"""Domain-level exceptions.

All errors raised by the storefront are subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly
messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value or invariant was violated."""


class CatalogFetchError(DomainException):
    """The catalog could not be obtained from its source."""


class CatalogTransportError(CatalogFetchError):
    """No data reached the client (connectivity, DNS, timeout, HTTP status)."""


class CatalogDecodeError(CatalogFetchError):
    """Data was received but does not match the product schema."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""
