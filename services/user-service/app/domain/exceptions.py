"""
Custom exceptions for the user service domain.

These exceptions represent domain-level errors and are independent
of infrastructure concerns (HTTP, database, etc.).
"""

from typing import Optional


class UserServiceException(Exception):
    """Base exception for all user service errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class DomainValidationError(UserServiceException):
    """
    Raised when an entity would be built in an invalid state.

    Every concrete kind carries a fixed, human-readable message.
    """

    default_message = "Validation failed."

    def __init__(self, message: Optional[str] = None, details: Optional[dict] = None):
        super().__init__(message=message or self.default_message, details=details)


class InvalidAttributeError(DomainValidationError):
    """Raised when a named attribute holds an unusable value."""

    def __init__(self, attribute: str):
        super().__init__(
            message=f"The attribute {attribute} is invalid.",
            details={"attribute": attribute},
        )


class InvalidCpfError(DomainValidationError):
    """Raised when a CPF fails the format or check-digit rule."""

    default_message = "CPF was invalid."


class InvalidEmailError(DomainValidationError):
    """Raised when an email address cannot be parsed strictly."""

    default_message = "Email was invalid."


class CpfEmptyError(DomainValidationError):
    default_message = "CPF was null or empty."


class NameEmptyError(DomainValidationError):
    default_message = "Name was null or empty."


class SurnameEmptyError(DomainValidationError):
    default_message = "Surname was null or empty."


class EmailEmptyError(DomainValidationError):
    default_message = "Email was null or empty."


class BirthDateTooSmallError(DomainValidationError):
    default_message = "BirthDay was less than 1900-01-01."


class PasswordEmptyError(DomainValidationError):
    default_message = "Password was null or empty."


InvalidNationalIdError = InvalidCpfError

# Errors the employee workflow reports back as error responses.
EMPLOYEE_VALIDATION_ERRORS = (
    CpfEmptyError,
    InvalidCpfError,
    NameEmptyError,
    SurnameEmptyError,
    EmailEmptyError,
    InvalidEmailError,
    BirthDateTooSmallError,
    PasswordEmptyError,
)
