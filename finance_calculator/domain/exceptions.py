"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException, ValueError):
    """Input is outside its documented bound"""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ConversionUnavailable(DomainException):
    """Rate provider has no rate for the currency pair"""

    def __init__(self, source: str, target: str):
        super().__init__(f"Conversion from {source} to {target} is not supported")
        self.source = source
        self.target = target
