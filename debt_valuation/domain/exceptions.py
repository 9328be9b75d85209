"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class RateSourceError(DomainException):
    """Rate source is unavailable or returned malformed data"""

    pass


class InvalidRateDataError(DomainException):
    """Rate observations violate the table invariants"""

    pass


class InvalidAmountError(DomainException):
    """Monthly amount must be strictly positive"""

    pass


class DebtEntryNotFoundError(DomainException):
    """No debt entry with the given id in the session store"""

    pass
