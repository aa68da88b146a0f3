"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class TransactionNotFoundError(DomainException):
    """No ledger entry with the given id for this user"""

    pass


class HabitNotFoundError(DomainException):
    """No habit with the given id for this user"""

    pass


class DuplicateHabitError(DomainException):
    """A habit with the same name (case-insensitive) already exists"""

    pass


class InvalidHabitError(DomainException):
    """Habit name is empty after trimming"""

    pass
