"""
Bank Registry Module

The Bank owns every account type and every account, generates account
numbers and is the single entry point for money movement. Preconditions
that span several accounts (such as transfer solvency) are checked here
before any account is touched.

Execution is single-threaded and synchronous. A multithreaded host must
serialize all calls on one Bank instance behind a single lock, since a
transfer mutates two accounts back to back.
"""

from contextlib import contextmanager
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Dict, Iterator, Optional, Tuple
import logging
import secrets

from .account import Account
from .config import BankConfig, get_config
from .errors import (
    BankError, DuplicateKeyError, InsufficientFundsError, InvalidArgumentError, NotFoundError
)
from .logging_config import log_action
from .money import Numeric, ZERO, format_decimal, to_decimal

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccountType:
    """Named template fixing the interest rate of accounts opened under it"""
    name: str
    interest_rate: Decimal


class Bank:
    """
    Registry of account types and accounts
    """

    def __init__(
        self,
        config: Optional[BankConfig] = None,
        number_generator: Optional[Callable[[], str]] = None
    ):
        self.config = config if config is not None else get_config()
        self._account_types: Dict[str, AccountType] = {}
        self._accounts: Dict[str, Account] = {}
        self._number_generator = number_generator or self._random_account_number

    def __len__(self) -> int:
        return len(self._accounts)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self._accounts

    @property
    def accounts(self) -> Tuple[Account, ...]:
        """All accounts in the order they were opened"""
        return tuple(self._accounts.values())

    @property
    def account_types(self) -> Tuple[AccountType, ...]:
        """All registered account types in registration order"""
        return tuple(self._account_types.values())

    def add_account_type(self, name: str, interest_rate: Numeric) -> AccountType:
        """
        Register a new account type

        Args:
            name: Unique type name
            interest_rate: Non-negative rate given to accounts of this type

        Returns:
            The registered AccountType

        Raises:
            InvalidArgumentError: If interest_rate is negative
            DuplicateKeyError: If name is already registered
        """
        with self._logged_failure("add_account_type", name):
            rate = to_decimal(interest_rate, "Interest rate")
            if rate < ZERO:
                raise InvalidArgumentError("Interest rate must be non-negative")
            if name in self._account_types:
                raise DuplicateKeyError(f"Account type {name} already exists")

            account_type = AccountType(name=name, interest_rate=rate)
            self._account_types[name] = account_type

        self._log("Account type registered", "add_account_type", name,
                  {"interest_rate": str(rate)})
        return account_type

    def open_account(self, account_type: str) -> str:
        """
        Open an account of a registered type

        Args:
            account_type: Name of a registered account type

        Returns:
            The new account number

        Raises:
            NotFoundError: If the account type is not registered
        """
        with self._logged_failure("open_account", account_type):
            type_obj = self._account_types.get(account_type)
            if type_obj is None:
                raise NotFoundError(f"Account type {account_type} not found")

        account_number = self._generate_account_number()
        account = Account(interest_rate=type_obj.interest_rate)
        account.account_number = account_number
        self._accounts[account_number] = account

        self._log("Account opened", "open_account", account_number,
                  {"account_type": account_type})
        return account_number

    def get_account(self, account_number: str) -> Account:
        """Get an account by number, raising NotFoundError if unknown"""
        account = self._accounts.get(account_number)
        if account is None:
            raise NotFoundError(f"Account {account_number} not found")
        return account

    def get_balance(self, account_number: str) -> str:
        """Get an account balance rendered as an exact decimal string"""
        with self._logged_failure("get_balance", account_number):
            account = self.get_account(account_number)
        return format_decimal(account.get_balance())

    def deposit(self, account_number: str, amount: Numeric) -> None:
        with self._logged_failure("deposit", account_number):
            account = self.get_account(account_number)
            value = to_decimal(amount)
            account.deposit(value)
        self._log("Deposit posted", "deposit", account_number, {"amount": str(value)})

    def withdraw(self, account_number: str, amount: Numeric) -> None:
        with self._logged_failure("withdraw", account_number):
            account = self.get_account(account_number)
            value = to_decimal(amount)
            account.withdraw(value)
        self._log("Withdrawal posted", "withdraw", account_number, {"amount": str(value)})

    def transfer(self, from_account_number: str, to_account_number: str, amount: Numeric) -> None:
        """
        Move funds between two accounts

        All checks run before either account is mutated.

        Raises:
            InvalidArgumentError: If both numbers are equal or amount is not positive
            NotFoundError: If either account is unknown
            InsufficientFundsError: If the source balance is below amount
        """
        with self._logged_failure("transfer", from_account_number, {"to_account": to_account_number}):
            if from_account_number == to_account_number:
                raise InvalidArgumentError("Cannot transfer to the same account")
            value = to_decimal(amount)
            if value <= ZERO:
                raise InvalidArgumentError("Transfer amount must be positive")

            from_account = self.get_account(from_account_number)
            to_account = self.get_account(to_account_number)
            if from_account.get_balance() < value:
                raise InsufficientFundsError("Insufficient funds for transfer")

        from_account.withdraw(value)
        to_account.deposit(value)

        self._log("Transfer posted", "transfer", from_account_number,
                  {"to_account": to_account_number, "amount": str(value)})

    def get_interest_rate(self, account_number: str) -> Decimal:
        with self._logged_failure("get_interest_rate", account_number):
            return self.get_account(account_number).interest_rate

    def apply_interest(self, account_number: str) -> None:
        """Compound one account's balance once by its interest rate"""
        with self._logged_failure("apply_interest", account_number):
            account = self.get_account(account_number)
        interest = account.apply_interest()
        self._log("Interest applied", "apply_interest", account_number,
                  {"interest": str(interest)})

    def _generate_account_number(self) -> str:
        """Sample account numbers until one is not already in use"""
        while True:
            account_number = self._number_generator()
            if account_number not in self._accounts:
                return account_number
            logger.debug(f"Account number collision on {account_number}, retrying")

    def _random_account_number(self) -> str:
        alphabet = self.config.account_number_alphabet
        return "".join(
            secrets.choice(alphabet) for _ in range(self.config.account_number_length)
        )

    def _log(self, message: str, action: str, resource: str, extra: Optional[dict] = None) -> None:
        if self.config.enable_operation_logging:
            log_action(logger, "info", message, action=action, resource=resource, extra=extra)

    @contextmanager
    def _logged_failure(self, action: str, resource: str,
                        context: Optional[dict] = None) -> Iterator[None]:
        """Log a rejected operation before the error propagates"""
        try:
            yield
        except BankError as e:
            if self.config.enable_operation_logging:
                log_action(
                    logger, "warning", f"{action} rejected: {e}",
                    action=action, resource=str(resource),
                    extra={"error": type(e).__name__, **(context or {})}
                )
            raise
