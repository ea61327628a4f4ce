"""A bank ledger with clients, savings and checking accounts, JSON storage and a terminal menu."""

__version__ = "0.1.0"
__all__ = ["accounts", "bank", "cli", "clients"]