class DomainError(Exception):
    """Base exception for business rule violations."""


class InvalidInput(DomainError):
    """Raised when input data is invalid (negative counts, bad date ranges, ...)."""


class ConfigurationMissing(DomainError):
    """Raised when no active salary configuration exists."""


class StorageError(DomainError):
    """Raised for any failure coming from the record store."""
