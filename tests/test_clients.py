import pytest

from bancojaveriano.accounts import (
    AccountNotFoundError,
    CheckingAccount,
    InsufficientFundsError,
    SavingsAccount,
)
from bancojaveriano.clients import Client


@pytest.fixture
def client():
    c = Client(1, "Ana Perez", "Calle 1")
    c.add_account(SavingsAccount(100, 1000, 10))
    c.add_account(CheckingAccount(101, 200, 300))
    return c


def test_str_format():
    c = Client(4, "Luis", "Carrera 7")
    assert str(c) == "ID: 4 Nombre: Luis, Direccion: Carrera 7"


def test_find_account(client):
    assert client.find_account(101).account_id == 101


def test_find_missing_account_raises(client):
    with pytest.raises(AccountNotFoundError):
        client.find_account(999)


def test_deposit_adds_amount(client):
    account = client.deposit(100, 250)
    assert account.balance == 1000 + 250
    assert client.find_account(100).balance == 1000 + 250


def test_deposit_missing_account(client):
    with pytest.raises(AccountNotFoundError):
        client.deposit(5, 10)


def test_withdraw_from_savings(client):
    account = client.withdraw(100, 400)
    assert account.balance == 1000 - 400


def test_withdraw_savings_insufficient_leaves_balance(client):
    with pytest.raises(InsufficientFundsError, match="Saldo insuficiente"):
        client.withdraw(100, 1001)
    assert client.find_account(100).balance == 1000


def test_withdraw_checking_into_overdraft(client):
    account = client.withdraw(101, 500)
    assert account.balance == -300


def test_withdraw_checking_beyond_limit(client):
    with pytest.raises(InsufficientFundsError, match="límite de sobregiro"):
        client.withdraw(101, 501)
    assert client.find_account(101).balance == 200


def test_withdraw_missing_account(client):
    with pytest.raises(AccountNotFoundError):
        client.withdraw(42, 1)


def test_count_accounts(client):
    client.add_account(SavingsAccount(102, 5, 1))
    assert client.count_accounts() == (2, 1)


def test_average_balance_empty():
    assert Client(2, "B", "C").average_balance() == 0.0


def test_average_balance_invariant(client):
    total = sum(a.balance for a in client.accounts)
    assert client.average_balance() * len(client.accounts) == total


def test_apply_interest_only_changes_savings(client):
    client.apply_interest()
    assert client.find_account(100).balance > 1000
    assert client.find_account(101).balance == 200


def test_describe_accounts_empty():
    text = Client(3, "Eva", "Av 3").describe_accounts()
    assert text.splitlines() == [
        "Cuentas de Eva (ID: 3):",
        "  → No tiene cuentas registradas.",
    ]


def test_describe_accounts_lists_each(client):
    lines = client.describe_accounts().splitlines()
    assert lines[0] == "Cuentas de Ana Perez (ID: 1):"
    assert "  → Cuenta con ID: 100" in lines
    assert client.find_account(101).describe() in lines
    assert len(lines) == 1 + 2 * len(client.accounts)