"""Interactive menu for operating the bank from a terminal."""

from __future__ import annotations

import argparse
import sys
from typing import TextIO

from bancojaveriano.accounts import BankError, CheckingAccount
from bancojaveriano.bank import Bank

BANK_NAME = "Banco de la Republica Javeriana"
DEFAULT_FILE = "BancoJaveriano.json"

MENU = """
===== MENU BANCO JAVERIANO =====
1) MANTENIMIENTO DE CLIENTES
   1.1) Agregar Cliente
   1.2) Listar Clientes
2) MANTENIMIENTO DE CUENTAS
   2.1) Agregar Cuenta
   2.2) Listar Cuentas
3) ESTADÍSTICAS
   3.1) Total de Clientes
   3.2) Total de Cuentas
   3.3) Promedio del Saldo de las Cuentas
   3.4) Número de Cuentas de Ahorro
   3.5) Número de Cuentas Corrientes
4) OPERACIONES FINANCIERAS
   4.1) Aplicar Tasa de Interés a Cuentas de Ahorro
   4.2) Consignar Dinero en una Cuenta
   4.3) Retirar Dinero de una Cuenta
5) SALIR
   5.1) Guardar los datos en BancoJaveriano.json y cerrar el programa
================================
Seleccione una opción (ej: 1.1): """


class _EndOfInput(Exception):
    pass


class _Reader:
    """Reads whitespace-separated words or whole lines from a stream."""

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream
        self._words: list[str] = []

    def word(self) -> str:
        while not self._words:
            line = self._stream.readline()
            if not line:
                raise _EndOfInput
            self._words = line.split()
        return self._words.pop(0)

    def skip_line(self) -> None:
        self._words = []

    def line(self) -> str:
        line = self._stream.readline()
        if not line:
            raise _EndOfInput
        return line.rstrip("\r\n")


def _add_account(bank: Bank, reader: _Reader, out: TextIO) -> None:
    out.write("Ingresa el ID del cliente al cual se asociará la cuenta: ")
    client_id = int(reader.word())
    out.write("Ingrese el saldo inicial de la cuenta: ")
    balance = int(reader.word())
    bank.find_client(client_id)
    out.write("Seleccione el tipo de cuenta:\n1. Ahorros\n2. Corriente\n")
    option = int(reader.word())
    if option == 1:
        out.write("Ingrese la tasa de interés: ")
        rate = float(reader.word())
        bank.open_savings_account(client_id, balance, rate)
    elif option == 2:
        out.write("Ingrese el límite de sobregiro: ")
        limit = float(reader.word())
        bank.open_checking_account(client_id, balance, int(limit))
    else:
        out.write("Opción no válida.\n")


def _deposit(bank: Bank, reader: _Reader, out: TextIO) -> None:
    out.write("Ingresa el ID de la cuenta a la cual se va a consignar: ")
    account_id = int(reader.word())
    out.write("Ingresa la cantidad a consignar: ")
    amount = int(reader.word())
    bank.deposit(account_id, amount)
    out.write(f"${amount} consignada a la cuenta: {account_id}\n")


def _withdraw(bank: Bank, reader: _Reader, out: TextIO) -> None:
    out.write("Ingresa el ID de la cuenta de la cual se va a retirar: ")
    account_id = int(reader.word())
    out.write("Ingresa la cantidad a retirar: ")
    amount = int(reader.word())
    account = bank.withdraw(account_id, amount)
    if isinstance(account, CheckingAccount):
        out.write(
            f"[¡CUENTA EN SOBREGIRO!] Se retiraron ${amount} de la cuenta: {account_id}\n"
        )
    else:
        out.write(f"${amount} retirados de la cuenta: {account_id}\n")


def run(bank: Bank, stdin: TextIO, stdout: TextIO) -> bool:
    """Run the menu loop.

    Returns True when the user chose to save and quit, False at end of input.
    """
    reader = _Reader(stdin)
    out = stdout
    try:
        while True:
            out.write(MENU)
            command = reader.word()
            try:
                if command == "1.1":
                    out.write("Ingresa nombre completo del cliente: ")
                    reader.skip_line()
                    name = reader.line()
                    out.write("Ingresa la dirección del cliente: ")
                    address = reader.line()
                    bank.add_client(name, address)
                    out.write("Cliente agregado correctamente.\n")
                elif command == "1.2":
                    out.write(bank.list_clients() + "\n")
                elif command == "2.1":
                    _add_account(bank, reader, out)
                elif command == "2.2":
                    out.write(bank.list_accounts() + "\n")
                elif command == "3.1":
                    out.write(f"Total de clientes: {bank.client_count()}\n")
                elif command == "3.2":
                    out.write(f"Total de cuentas: {sum(bank.count_accounts())}\n")
                elif command == "3.3":
                    out.write(f"Promedio de saldo: ${bank.average_balance():g}\n")
                elif command == "3.4":
                    out.write(f"Número de cuentas de ahorro: {bank.count_accounts()[0]}\n")
                elif command == "3.5":
                    out.write(f"Número de cuentas corrientes: {bank.count_accounts()[1]}\n")
                elif command == "4.1":
                    out.write("Aplicando tasas de interes a cuentas...\n")
                    bank.apply_interest()
                    out.write(
                        "Aplicada tasa de interes correctamente a cuentas de ahorros.\n"
                    )
                elif command == "4.2":
                    _deposit(bank, reader, out)
                elif command == "4.3":
                    _withdraw(bank, reader, out)
                elif command == "5.1":
                    return True
                else:
                    out.write("Opción no válida. Intente de nuevo.\n")
            except (BankError, LookupError) as exc:
                out.write(f"{exc.args[0] if exc.args else exc}\n")
            except ValueError:
                out.write("Entrada no válida.\n")
    except _EndOfInput:
        return False


def main(argv: list[str] | None = None) -> int:
    """Load the bank's data, run the menu and save on request."""
    parser = argparse.ArgumentParser(description="Gestión del Banco Javeriano.")
    parser.add_argument("--file", default=DEFAULT_FILE, help="archivo JSON de datos")
    args = parser.parse_args(argv)

    bank = Bank(BANK_NAME)
    try:
        bank.load(args.file)
    except FileNotFoundError:
        print("No se pudo abrir el archivo/no se encontro.")
    else:
        print(f"Datos cargados correctamente desde {args.file}")
        print(f" → contadorCuentas actualizado a: {bank.next_account_id}")

    if run(bank, sys.stdin, sys.stdout):
        bank.save(args.file)
        print(f"Datos guardados exitosamente en {args.file}")
        print("Datos guardados exitosamente. Cerrando programa...")
    return 0


if __name__ == "__main__":
    sys.exit(main())