"""Mini README: Balance bookkeeping for Trustless Holdings.

The package holds the two-counter ledger (bank and cash) together with the
validation rules every mutation goes through. It performs no I/O and emits
no events; the economy session layers those concerns on top.
"""

from .ledger import InvalidAmount, Ledger, LedgerSnapshot, coerce_amount

__all__ = ["InvalidAmount", "Ledger", "LedgerSnapshot", "coerce_amount"]
