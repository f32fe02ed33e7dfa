"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Payment or property record is missing a required field or has an unparsable date"""

    pass


class PaymentsAPIError(DomainException):
    """Upstream RentLedger API returned an error or is unavailable"""

    pass
