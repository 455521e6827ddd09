"""
Banking Error Taxonomy

Domain-specific exceptions raised by accounts and the bank registry.
Every precondition violation surfaces as one of these, raised before any
state is mutated.
"""


class BankError(Exception):
    """Base class for all banking errors"""


class InvalidArgumentError(BankError, ValueError):
    """Negative interest rate, non-positive amount, transfer to self"""


class NotFoundError(BankError, LookupError):
    """Unknown account number or account type"""


class DuplicateKeyError(BankError, ValueError):
    """Account type name already registered"""


class InsufficientFundsError(BankError):
    """Withdrawal or transfer amount exceeds the available balance"""
