class DomainError(Exception):
    """Base exception for payroll rule violations."""


class ValidationError(DomainError):
    """Raised when input data is malformed (e.g. a clock string that is not HH:MM)."""


class ConfigurationError(DomainError):
    """Raised when a policy value or the calendar makes a calculation impossible."""
