class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when caller input (dates, grouping, filters) is invalid."""


class DataSourceError(DomainError):
    """Raised when punches, roster or payroll documents cannot be fetched."""
