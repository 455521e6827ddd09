"""
Simple Bank

A minimal retail banking ledger: account types, accounts, deposits,
withdrawals, transfers and on-demand interest, all in exact Decimal
arithmetic.

The package only emits log records. Applications attach output with
setup_logging(), which reads SIMPLE_BANK_LOG_LEVEL and SIMPLE_BANK_LOG_FORMAT
through BankConfig unless level and format are passed explicitly:

    from simple_bank import Bank, setup_logging

    setup_logging()
    bank = Bank()
"""

from .account import Account
from .bank import AccountType, Bank
from .config import BankConfig, get_config
from .errors import (
    BankError, DuplicateKeyError, InsufficientFundsError, InvalidArgumentError, NotFoundError
)
from .logging_config import get_logger, setup_logging

__version__ = "1.0.0"

__all__ = [
    "Account",
    "AccountType",
    "Bank",
    "BankConfig",
    "BankError",
    "DuplicateKeyError",
    "InsufficientFundsError",
    "InvalidArgumentError",
    "NotFoundError",
    "get_config",
    "get_logger",
    "setup_logging",
]
