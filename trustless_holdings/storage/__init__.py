"""Mini README: Persistence of the player's balances.

Exports ``BankDataStore`` which reads and writes the balance record, and
``PersistenceError`` which wraps every failure the store can hit so callers
handle a single exception type.
"""

from .bank_data import BankData, BankDataStore, PersistenceError

__all__ = ["BankData", "BankDataStore", "PersistenceError"]
