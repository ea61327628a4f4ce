# bancojaveriano

A small bank ledger that runs in the terminal. It stores clients, their savings
and checking accounts, and the balance of each account. All of this is saved to
a JSON file. The messages and menu are in Spanish.

## Installing

```
pip install .
```

## The interactive menu

```
bancojaveriano
bancojaveriano --file otro_archivo.json
```

At startup the program reads `BancoJaveriano.json` from the current directory,
or the file named with `--file`. If the file does not exist, it starts empty.
It then shows a numbered menu:

- **1.1 / 1.2**: add a client, or list the clients
- **2.1 / 2.2**: open an account for a client, or list the accounts. An account
  is either savings, with an interest rate in percent, or checking, with an
  overdraft limit.
- **3.1 – 3.5**: statistics. These are the number of clients, the number of
  accounts, the average balance, the number of savings accounts and the number
  of checking accounts.
- **4.1**: apply interest to every savings account. The balance grows by the
  rate, and any fraction is dropped.
- **4.2 / 4.3**: deposit into an account, or withdraw from an account. Amounts
  must be positive.
- **5.1**: save the data to the same file and quit.

If input ends before 5.1 is chosen, the program quits and does not save.

Some rules on IDs and balances:

- A new client's ID is the number of clients plus one.
- Account IDs start at 100. After the data is loaded, numbering goes on from the
  highest account ID in the file.
- A savings account cannot go below zero.
- A checking account can go down to minus its overdraft limit.
- Balances are whole numbers.

## Using it as a library

```python
from bancojaveriano.bank import Bank
from bancojaveriano.accounts import InsufficientFundsError

bank = Bank("Banco de la Republica Javeriana")
client = bank.add_client("Ana Gómez", "Calle 1 # 2-3")
savings = bank.open_savings_account(client.client_id, 1000, 5.0)
checking = bank.open_checking_account(client.client_id, 0, 500)

bank.deposit(savings.account_id, 200)
bank.apply_interest()
bank.withdraw(checking.account_id, 300)   # allowed: within the overdraft limit

try:
    bank.withdraw(savings.account_id, 10_000)
except InsufficientFundsError as exc:
    print(exc)

print(bank.describe())
bank.save("BancoJaveriano.json")

restored = Bank("copy")
restored.load("BancoJaveriano.json")
assert restored.count_accounts() == bank.count_accounts()
```

The modules:

- `bancojaveriano.accounts` has `Account`, `SavingsAccount` and
  `CheckingAccount`, and the exceptions.
- `bancojaveriano.clients` has `Client`.
- `bancojaveriano.bank` has `Bank`.
- `bancojaveriano.cli` has the menu, through `run(bank, stdin, stdout)` and
  `main()`.

A failed operation raises one of the exceptions below. All of them subclass
`BankError`:

- `AccountNotFoundError`
- `InsufficientFundsError`
- `InvalidAmountError`

If no client has the given ID, `Bank.find_client` raises `LookupError`. So do
the `open_*_account` methods.

`Bank.count_accounts()` returns a `(savings, checking)` tuple.
`Bank.average_balance()` returns the mean balance of the first client's
accounts, or `0.0` if there are no clients.

`Bank.to_dict()` and `Bank.from_dict()` produce and accept the same structure
that is written to the JSON file. It has a `clientes` list and a `cuentas` list.

## Limitations

- There is no way to remove clients or accounts.
- Nothing stops two clients from getting the same ID after a reload, because a
  new client's ID comes from the number of clients.

## Running the tests

```
pip install .[test]
pytest
```