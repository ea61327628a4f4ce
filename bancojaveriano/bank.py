"""The bank: its clients, account numbering, statistics and JSON persistence."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from os import PathLike
from typing import Any, Union

from bancojaveriano.accounts import (
    Account,
    AccountNotFoundError,
    CheckingAccount,
    InvalidAmountError,
    SavingsAccount,
)
from bancojaveriano.clients import Client

FIRST_ACCOUNT_ID = 100

_PathType = Union[str, "PathLike[str]"]


@dataclass
class Bank:
    """A named bank holding clients, each with their own accounts."""

    name: str
    clients: list[Client] = field(default_factory=list)
    next_account_id: int = FIRST_ACCOUNT_ID

    def add_client(self, name: str, address: str) -> Client:
        """Register a new client, numbered after the ones already present."""
        client = Client(len(self.clients) + 1, name, address)
        self.clients.append(client)
        return client

    def find_client(self, client_id: int) -> Client:
        """Return the client with ``client_id`` or raise LookupError."""
        for client in self.clients:
            if client.client_id == client_id:
                return client
        raise LookupError("Cliente no encontrado.")

    def _open(self, client_id: int, make) -> Account:
        client = self.find_client(client_id)
        account = make(self.next_account_id)
        self.next_account_id += 1
        client.add_account(account)
        return account

    def open_savings_account(self, client_id: int, balance: int, rate: float) -> SavingsAccount:
        """Open a savings account for a client and return it."""
        return self._open(
            client_id, lambda account_id: SavingsAccount(account_id, balance, rate)
        )

    def open_checking_account(
        self, client_id: int, balance: int, overdraft_limit: int
    ) -> CheckingAccount:
        """Open a checking account for a client and return it."""
        return self._open(
            client_id,
            lambda account_id: CheckingAccount(account_id, balance, int(overdraft_limit)),
        )

    def list_clients(self) -> str:
        """Return a listing of all clients."""
        lines = ["Informacion de clientes:"]
        if self.clients:
            lines.extend(str(client) for client in self.clients)
        else:
            lines.append("No hay clientes.")
        return "\n".join(lines)

    def list_accounts(self) -> str:
        """Return a listing of every client's accounts."""
        if not self.clients:
            return "No hay cuentas."
        lines = []
        for client in self.clients:
            lines.append(f"Cuentas de {client.name} (ID: {client.client_id}):")
            if not client.accounts:
                lines.append("  → Este cliente no tiene cuentas registradas.")
            lines.extend(account.describe() for account in client.accounts)
        return "\n".join(lines)

    def describe(self) -> str:
        """Return a full report of the bank."""
        savings, checking = self.count_accounts()
        return "\n".join(
            [
                f"Informacion Banco: {self.name}",
                self.list_clients(),
                self.list_accounts(),
                f"Promedio de saldo de cuentas: ${self.average_balance():.2f}",
                f"Numero de cuentas Ahorros: {savings}",
                f"Numero de cuentas Corrientes: {checking}",
            ]
        )

    def apply_interest(self) -> None:
        """Apply interest to the accounts of every client."""
        for client in self.clients:
            client.apply_interest()

    def _owner_of(self, account_id: int) -> Client:
        for client in self.clients:
            if any(a.account_id == account_id for a in client.accounts):
                return client
        raise AccountNotFoundError(
            f"No se encontró ninguna cuenta con el ID: {account_id}"
        )

    def deposit(self, account_id: int, amount: int) -> Account:
        """Add a positive ``amount`` to an account and return the account."""
        if amount <= 0:
            raise InvalidAmountError("Debes ingresar un valor positivo a consignar.")
        return self._owner_of(account_id).deposit(account_id, amount)

    def withdraw(self, account_id: int, amount: int) -> Account:
        """Take a positive ``amount`` from an account and return the account."""
        if amount <= 0:
            raise InvalidAmountError("Debes ingresar un valor positivo a retirar.")
        return self._owner_of(account_id).withdraw(account_id, amount)

    def average_balance(self) -> float:
        """Return the mean balance of the first client's accounts, or 0.0."""
        if not self.clients:
            return 0.0
        return self.clients[0].average_balance()

    def count_accounts(self) -> tuple[int, int]:
        """Return the number of (savings, checking) accounts in the bank."""
        savings = checking = 0
        for client in self.clients:
            s, c = client.count_accounts()
            savings += s
            checking += c
        return savings, checking

    def client_count(self) -> int:
        """Return how many clients the bank has."""
        return len(self.clients)

    def to_dict(self) -> dict[str, Any]:
        """Return the bank's clients and accounts as JSON-ready data."""
        clients = []
        accounts = []
        for client in self.clients:
            clients.append(
                {"id": client.client_id, "nombre": client.name, "direccion": client.address}
            )
            for account in client.accounts:
                entry: dict[str, Any] = {
                    "id": account.account_id,
                    "saldo": float(account.balance),
                    "clienteId": client.client_id,
                }
                if isinstance(account, SavingsAccount):
                    entry["tipo"] = SavingsAccount.kind
                    entry["tasa"] = account.rate
                elif isinstance(account, CheckingAccount):
                    entry["tipo"] = CheckingAccount.kind
                    entry["limite"] = account.overdraft_limit
                accounts.append(entry)
        return {"clientes": clients, "cuentas": accounts}

    def from_dict(self, data: dict[str, Any]) -> None:
        """Replace the bank's clients and accounts with those in ``data``."""
        self.clients = []
        self.next_account_id = FIRST_ACCOUNT_ID
        for entry in data.get("clientes", []):
            self.clients.append(
                Client(int(entry["id"]), entry["nombre"], entry["direccion"])
            )
        for entry in data.get("cuentas", []):
            account_id = int(entry["id"])
            balance = int(entry["saldo"])
            kind = entry.get("tipo")
            account: Account | None = None
            if kind == SavingsAccount.kind:
                account = SavingsAccount(account_id, balance, float(entry["tasa"]))
            elif kind == CheckingAccount.kind:
                account = CheckingAccount(account_id, balance, int(entry["limite"]))
            self.next_account_id = max(self.next_account_id, account_id + 1)
            if account is None:
                continue
            owner_id = int(entry["clienteId"])
            owner = next((c for c in self.clients if c.client_id == owner_id), None)
            if owner is not None:
                owner.add_account(account)

    def save(self, path: _PathType) -> None:
        """Write the bank's data to ``path`` as indented JSON."""
        with open(path, "w", encoding="utf-8") as handle:
            json.dump(self.to_dict(), handle, indent=4, ensure_ascii=False)

    def load(self, path: _PathType) -> None:
        """Replace the bank's data with that read from ``path``."""
        with open(path, encoding="utf-8") as handle:
            data = json.load(handle)
        self.from_dict(data)