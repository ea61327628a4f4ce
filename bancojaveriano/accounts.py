"""Bank accounts: savings accounts that earn interest and checking accounts with overdraft."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import ClassVar


class BankError(Exception):
    """Base class for errors raised by bank operations."""


class AccountNotFoundError(BankError, LookupError):
    """No account with the requested identifier exists."""


class InsufficientFundsError(BankError):
    """A withdrawal would leave the account below what it is allowed."""


class InvalidAmountError(BankError, ValueError):
    """An operation was given an amount that is not positive."""


@dataclass
class Account(ABC):
    """An account with an identifier and a whole-number balance."""

    account_id: int
    balance: int

    kind: ClassVar[str] = ""

    def apply_interest(self) -> None:
        """Apply interest to the balance; plain accounts earn none."""

    @abstractmethod
    def can_withdraw(self, amount: int) -> bool:
        """Return whether ``amount`` may be taken out of this account."""

    @abstractmethod
    def describe(self) -> str:
        """Return a one-line description of the account."""

    def __str__(self) -> str:
        return self.describe()


@dataclass
class SavingsAccount(Account):
    """An account that earns interest at ``rate`` percent and cannot go negative."""

    rate: float

    kind: ClassVar[str] = "Ahorros"

    def apply_interest(self) -> None:
        """Grow the balance by ``rate`` percent, dropping any fraction."""
        self.balance = int(self.balance * (1 + self.rate / 100))

    def can_withdraw(self, amount: int) -> bool:
        return self.balance >= amount

    def describe(self) -> str:
        return (
            f"[CUENTA DE AHORROS] ID: {self.account_id} SALDO: {self.balance} "
            f"INTERES: {self.rate:g}%"
        )


@dataclass
class CheckingAccount(Account):
    """An account that may be overdrawn down to ``-overdraft_limit``."""

    overdraft_limit: int

    kind: ClassVar[str] = "Corriente"

    def can_withdraw(self, amount: int) -> bool:
        return self.balance - amount >= -self.overdraft_limit

    def describe(self) -> str:
        return (
            f"[CUENTA DE CORRIENTE] ID: {self.account_id} SALDO: {self.balance} "
            f"LIMITE SOBREGIRO: {self.overdraft_limit}"
        )