"""Domain-level exceptions.

All expected failures are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
None of them is fatal: the session keeps running after any of them.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A field value violates a business rule."""


class EntityNotFoundError(DomainException):
    """A requested product does not exist in the catalog."""


class QueueEmptyError(DomainException):
    """A dequeue or peek was attempted on an empty queue."""


class NothingToUndoError(DomainException):
    """Undo was requested but the change log is empty."""
