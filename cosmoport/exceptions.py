"""Domain exception hierarchy for structured error responses."""

from __future__ import annotations


class AppException(Exception):
    """Base exception for all domain errors.

    Subclasses set ``code`` and ``status_code`` at the class level; callers
    provide ``message`` and an optional ``details`` list.
    """

    code: str = "APP_ERROR"
    status_code: int = 500

    def __init__(self, message: str, details: list[dict] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or []


class NotFoundException(AppException):
    code = "NOT_FOUND"
    status_code = 404


class ValidationException(AppException):
    code = "VALIDATION_ERROR"
    status_code = 422


class InvalidFieldError(ValidationException):
    """A client-supplied ship field failed its validity check.

    ``field`` names the first offending field; ``details`` lists every
    rejected field so clients can fix a payload in one round trip.
    """

    code = "INVALID_FIELD"
    status_code = 400

    def __init__(self, field: str, details: list[dict] | None = None) -> None:
        super().__init__(f"Invalid value for field '{field}'", details)
        self.field = field


class RatingCalculationError(ArithmeticError):
    """Rating denominator collapsed to zero.

    Production years after the configured current year pass validation; the
    year exactly one past it (3020 by default) lands here, later years rate
    negative instead.
    """
