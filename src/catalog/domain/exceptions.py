"""Domain-level exceptions.

The catalog core reports "not found" as values rather than errors, so these
are only raised when a caller opts into strict behaviour or hands us data we
cannot interpret.  The CLI catches ``DomainException`` uniformly.
"""


class DomainException(Exception):
    """Base class for all catalog errors."""


class ValidationError(DomainException):
    """Input could not be interpreted (malformed seed record, unknown policy)."""


class EntityNotFoundError(DomainException):
    """A requested product or supplier does not exist."""
