"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Form data is incomplete, malformed, or cannot be evaluated"""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field
