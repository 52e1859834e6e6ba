class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotEditableDayError(ValidationError):
    """Raised when attendance is changed on a day other than Sunday."""


class EmptySubmissionError(ValidationError):
    """Raised when submitting a sheet with nobody marked."""


class InvalidDate(ValidationError):
    """Raised when a value cannot be read as a calendar date."""


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""
