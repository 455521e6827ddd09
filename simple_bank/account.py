"""
Account Module

A single balance-holding account with a fixed interest rate. The account
guards its own arithmetic invariants: the balance never goes negative and
the rate is never negative.
"""

from decimal import Decimal
from typing import Optional
import logging

from .errors import InvalidArgumentError, InsufficientFundsError
from .money import Numeric, ZERO, exact_add, exact_multiply, exact_subtract, to_decimal

logger = logging.getLogger(__name__)


class Account:
    """
    Bank account holding a Decimal balance

    The account number is assigned by the owning Bank after construction and
    cannot be changed once set.
    """

    def __init__(self, interest_rate: Numeric = 0):
        rate = to_decimal(interest_rate, "Interest rate")
        if rate < ZERO:
            raise InvalidArgumentError("Interest rate must be non-negative")

        self._account_number: Optional[str] = None
        self._balance = ZERO
        self._interest_rate = rate

    def __repr__(self) -> str:
        return (f"Account(account_number={self._account_number!r}, "
                f"balance={self._balance}, interest_rate={self._interest_rate})")

    @property
    def account_number(self) -> Optional[str]:
        return self._account_number

    @account_number.setter
    def account_number(self, value: str) -> None:
        if self._account_number is not None and value != self._account_number:
            raise InvalidArgumentError(
                f"Account number already assigned: {self._account_number}"
            )
        self._account_number = value

    @property
    def balance(self) -> Decimal:
        return self._balance

    @property
    def interest_rate(self) -> Decimal:
        return self._interest_rate

    def get_balance(self) -> Decimal:
        """Get the current balance"""
        return self._balance

    def deposit(self, amount: Numeric) -> None:
        """Credit a positive amount to the account"""
        value = to_decimal(amount)
        if value <= ZERO:
            raise InvalidArgumentError("Deposit amount must be positive")

        self._balance = exact_add(self._balance, value)
        logger.debug(f"Deposited {value} into {self._account_number}, balance {self._balance}")

    def withdraw(self, amount: Numeric) -> None:
        """
        Debit a positive amount from the account

        Raises:
            InvalidArgumentError: If amount is not positive
            InsufficientFundsError: If amount exceeds the balance
        """
        value = to_decimal(amount)
        if value <= ZERO:
            raise InvalidArgumentError("Withdrawal amount must be positive")
        if value > self._balance:
            raise InsufficientFundsError("Insufficient funds for withdrawal")

        self._balance = exact_subtract(self._balance, value)
        logger.debug(f"Withdrew {value} from {self._account_number}, balance {self._balance}")

    def apply_interest(self) -> Decimal:
        """
        Compound the balance once by the account's interest rate

        Returns:
            Interest credited (zero when balance or rate is zero)
        """
        interest = exact_multiply(self._balance, self._interest_rate)
        self._balance = exact_add(self._balance, interest)
        return interest

    def destroy(self) -> None:
        """Reset balance and interest rate to zero in place"""
        self._balance = ZERO
        self._interest_rate = ZERO
        logger.debug(f"Account {self._account_number} reset")
