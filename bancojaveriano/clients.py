"""Bank clients and the accounts they hold."""

from __future__ import annotations

from dataclasses import dataclass, field

from bancojaveriano.accounts import (
    Account,
    AccountNotFoundError,
    CheckingAccount,
    InsufficientFundsError,
    SavingsAccount,
)


@dataclass
class Client:
    """A client of the bank with a name, an address and a list of accounts."""

    client_id: int
    name: str
    address: str
    accounts: list[Account] = field(default_factory=list)

    def add_account(self, account: Account) -> None:
        """Attach ``account`` to this client."""
        self.accounts.append(account)

    def find_account(self, account_id: int) -> Account:
        """Return the account with ``account_id`` or raise AccountNotFoundError."""
        for account in self.accounts:
            if account.account_id == account_id:
                return account
        raise AccountNotFoundError(
            f"No se encontró ninguna cuenta con el ID: {account_id}"
        )

    def apply_interest(self) -> None:
        """Apply interest to every account of the client."""
        for account in self.accounts:
            account.apply_interest()

    def deposit(self, account_id: int, amount: int) -> Account:
        """Add ``amount`` to the account and return it."""
        account = self.find_account(account_id)
        account.balance += amount
        return account

    def withdraw(self, account_id: int, amount: int) -> Account:
        """Take ``amount`` from the account and return it.

        Raises InsufficientFundsError when the account may not cover it.
        """
        account = self.find_account(account_id)
        if not account.can_withdraw(amount):
            if isinstance(account, CheckingAccount):
                message = "No se puede retirar: supera el límite de sobregiro."
            else:
                message = (
                    f"Saldo insuficiente para retirar ${amount} "
                    f"de la cuenta: {account_id}"
                )
            raise InsufficientFundsError(message)
        account.balance -= amount
        return account

    def count_accounts(self) -> tuple[int, int]:
        """Return the number of (savings, checking) accounts."""
        savings = sum(isinstance(a, SavingsAccount) for a in self.accounts)
        checking = sum(isinstance(a, CheckingAccount) for a in self.accounts)
        return savings, checking

    def average_balance(self) -> float:
        """Return the mean balance of the accounts, or 0.0 when there are none."""
        if not self.accounts:
            return 0.0
        return sum(a.balance for a in self.accounts) / len(self.accounts)

    def describe_accounts(self) -> str:
        """Return a multi-line listing of the client's accounts."""
        lines = [f"Cuentas de {self.name} (ID: {self.client_id}):"]
        if not self.accounts:
            lines.append("  → No tiene cuentas registradas.")
        for account in self.accounts:
            lines.append(f"  → Cuenta con ID: {account.account_id}")
            lines.append(account.describe())
        return "\n".join(lines)

    def __str__(self) -> str:
        return (
            f"ID: {self.client_id} Nombre: {self.name}, Direccion: {self.address}"
        )