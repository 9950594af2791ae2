"""Translate failures into click errors with a distinct exit code per kind.

Domain errors keep their message. Anything else is logged with its
traceback and reported generically, so internals never reach the user.
"""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import Any, TypeVar

import click

from storefront.domain.exceptions import DomainException, ErrorKind

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

EXIT_CODES = {
    ErrorKind.INVALID_ARGUMENT: 2,
    ErrorKind.NOT_FOUND: 3,
    ErrorKind.CONFLICT: 4,
    ErrorKind.INSUFFICIENT_STOCK: 5,
    ErrorKind.PERSISTENCE_FAILURE: 6,
}


class CommandError(click.ClickException):

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def reports_errors(func: F) -> F:
    """Wrap a command so every failure ends as a CommandError."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except DomainException as exc:
            raise CommandError(str(exc), EXIT_CODES[exc.kind]) from exc
        except click.ClickException:
            raise
        except Exception as exc:
            logger.exception("Unexpected failure in %s", func.__name__)
            raise CommandError("An unexpected error occurred") from exc

    return wrapper  # type: ignore[return-value]
