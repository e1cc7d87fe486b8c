class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class MalformedEventError(ValidationError):
    """Raised when an attendance event cannot be resolved to a date and time."""


class InvalidRuleError(ValidationError):
    """Raised when a lateness rule has a negative threshold or amount."""
