"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
Each subclass carries an ``ErrorKind`` that the outer layer maps to an exit
status.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_ARGUMENT = "invalid_argument"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    INSUFFICIENT_STOCK = "insufficient_stock"
    PERSISTENCE_FAILURE = "persistence_failure"


class DomainException(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind


class ValidationError(DomainException):
    """A required field is missing or a value breaks a business rule."""

    kind = ErrorKind.INVALID_ARGUMENT


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class ConflictError(DomainException):
    """The change would duplicate a value that must be unique."""

    kind = ErrorKind.CONFLICT


class InsufficientStockError(DomainException):
    """A product does not have enough stock for the requested quantity."""

    kind = ErrorKind.INSUFFICIENT_STOCK


class PersistenceError(DomainException):
    """The document could not be written; the change did not take effect."""

    kind = ErrorKind.PERSISTENCE_FAILURE
