"""Error taxonomy rendered as {"error": message} responses."""

import logging
from contextlib import contextmanager
from typing import Iterator

from fastapi import HTTPException

logger = logging.getLogger(__name__)


class BrokerageError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(BrokerageError):
    """Missing or invalid required field."""

    status_code = 400


class AuthenticationError(BrokerageError):
    """Missing, malformed or rejected bearer token."""

    status_code = 401


class AuthorizationError(BrokerageError):
    """Valid identity without the required privilege."""

    status_code = 403


class NotFoundError(BrokerageError):
    status_code = 404


class DependencyFailure(BrokerageError):
    """Identity provider, email provider or store call failed."""

    status_code = 500


@contextmanager
def unexpected_failure(message: str) -> Iterator[None]:
    """
    Convert anything that is not a typed error into a 500 with `message`.

    Usage:
        with unexpected_failure("Failed to submit inquiry"):
            ...
    """
    try:
        yield
    except (BrokerageError, HTTPException):
        raise
    except Exception:
        logger.exception(message)
        raise DependencyFailure(message)
