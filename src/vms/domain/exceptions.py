"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI and console layers can catch them uniformly and display
user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class AmountOutOfBoundError(ValidationError):
    """A voucher discount amount fell outside its variant's bound."""

    def __init__(self, class_name: str, amount: object, min_amount: int, max_amount: int) -> None:
        self.class_name = class_name
        self.amount = amount
        self.min_amount = min_amount
        self.max_amount = max_amount
        super().__init__(
            f"{class_name}: discount amount {amount!r} is out of bound "
            f"(expected {min_amount} to {max_amount})"
        )


class IllegalDiscountStateError(DomainException):
    """Applying a voucher would produce a negative amount."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class DataModifyingError(DomainException):
    """An update or delete statement affected no rows."""


class PersistenceError(DomainException):
    """A row could not be written (e.g. duplicate key)."""
