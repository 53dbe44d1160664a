"""Mini README: Core package initializer for the Trustless Holdings economy overlay.

The package tracks a bank and a cash balance, saves them a second after the
player stops moving money, and fades a small balance overlay in and out as
the balances change. Convenience imports expose the pieces hosts wire
together without needing to know the module layout.
"""

from .economy import EconomyEvent, EconomyEvents, EconomySession
from .finance import InvalidAmount, Ledger, LedgerSnapshot
from .logging_utils import get_logger

__all__ = [
    "EconomyEvent",
    "EconomyEvents",
    "EconomySession",
    "InvalidAmount",
    "Ledger",
    "LedgerSnapshot",
    "get_logger",
]
