"""Mini README: In-memory bank and cash ledger with exact decimal arithmetic.

Structure:
    * InvalidAmount - raised for negative or non-numeric amounts.
    * LedgerSnapshot - immutable (bank, cash) pair exchanged with storage.
    * coerce_amount - converts caller input into a validated ``Decimal``.
    * Ledger - owns both balances and enforces the non-negativity rules.

Adding never fails for a valid amount. Removing returns ``False`` when the
balance is too small, leaving it untouched; running short of money is an
everyday outcome for the player, not an error.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, Inexact, InvalidOperation, localcontext
from typing import Union

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

AmountLike = Union[Decimal, int, float, str]

CENT = Decimal("0.01")


class InvalidAmount(ValueError):
    """Raised when an amount is negative or cannot be read as a number."""


@dataclass(frozen=True, slots=True)
class LedgerSnapshot:
    """Point-in-time copy of both balances."""

    bank: Decimal
    cash: Decimal


def coerce_amount(value: AmountLike) -> Decimal:
    """Return ``value`` as a finite, non-negative ``Decimal`` in whole cents.

    Floats go through ``str`` first so ``0.1`` becomes ``Decimal("0.10")``
    rather than its binary approximation. Fractions of a cent are refused,
    never rounded.
    """

    if isinstance(value, bool):
        raise InvalidAmount(f"Amount must be numeric, got {value!r}.")
    try:
        if isinstance(value, Decimal):
            amount = value
        elif isinstance(value, float):
            amount = Decimal(str(value))
        else:
            amount = Decimal(str(value).strip())
    except (InvalidOperation, ValueError, TypeError) as error:
        raise InvalidAmount(f"Amount must be numeric, got {value!r}.") from error
    if not amount.is_finite():
        raise InvalidAmount(f"Amount must be finite, got {value!r}.")
    if amount < 0:
        raise InvalidAmount(f"Amount cannot be negative, got {amount}.")
    try:
        cents = amount.quantize(CENT)
    except InvalidOperation as error:
        raise InvalidAmount(f"Amount {amount} is too large to track exactly.") from error
    if cents != amount:
        raise InvalidAmount(f"Amount cannot include fractions of a cent, got {amount}.")
    return cents


def _exact_sum(balance: Decimal, change: Decimal) -> Decimal:
    """Return ``balance + change``, refusing any result that would be rounded."""

    with localcontext() as context:
        context.traps[Inexact] = True
        try:
            return balance + change
        except Inexact as error:
            raise InvalidAmount(f"Balance {balance} cannot absorb {change} exactly.") from error


class Ledger:
    """Track the player's bank and cash balances."""

    def __init__(self, bank: AmountLike = 0, cash: AmountLike = 0) -> None:
        self._bank = coerce_amount(bank)
        self._cash = coerce_amount(cash)
        LOGGER.debug("Ledger initialised with bank=%s cash=%s", self._bank, self._cash)

    @property
    def bank(self) -> Decimal:
        return self._bank

    @property
    def cash(self) -> Decimal:
        return self._cash

    def add_bank(self, amount: AmountLike) -> Decimal:
        """Deposit ``amount`` into the bank and return the new balance."""

        self._bank = _exact_sum(self._bank, coerce_amount(amount))
        LOGGER.debug("Bank balance now %s", self._bank)
        return self._bank

    def add_cash(self, amount: AmountLike) -> Decimal:
        """Add ``amount`` to the cash balance and return the new balance."""

        self._cash = _exact_sum(self._cash, coerce_amount(amount))
        LOGGER.debug("Cash balance now %s", self._cash)
        return self._cash

    def remove_bank(self, amount: AmountLike) -> bool:
        """Withdraw ``amount`` from the bank if it is covered."""

        value = coerce_amount(amount)
        if self._bank < value:
            LOGGER.debug("Bank withdrawal of %s refused, balance %s", value, self._bank)
            return False
        self._bank = _exact_sum(self._bank, -value)
        LOGGER.debug("Bank balance now %s", self._bank)
        return True

    def remove_cash(self, amount: AmountLike) -> bool:
        """Spend ``amount`` of cash if it is covered."""

        value = coerce_amount(amount)
        if self._cash < value:
            LOGGER.debug("Cash removal of %s refused, balance %s", value, self._cash)
            return False
        self._cash = _exact_sum(self._cash, -value)
        LOGGER.debug("Cash balance now %s", self._cash)
        return True

    def snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(bank=self._bank, cash=self._cash)

    def reconcile(self, snapshot: LedgerSnapshot) -> None:
        """Bring the ledger in line with a loaded snapshot.

        The bank moves by the difference between the saved and the current
        balance through the regular add/remove rules; cash is restored as
        saved.
        """

        delta = snapshot.bank - self._bank
        if delta >= 0:
            self.add_bank(delta)
        else:
            self.remove_bank(-delta)
        self._cash = coerce_amount(snapshot.cash)
        LOGGER.info("Ledger reconciled to bank=%s cash=%s", self._bank, self._cash)
