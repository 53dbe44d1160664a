"""Mini README: JSON balance record stored at a fixed path.

Structure:
    * PersistenceError - raised for any read, write, or validation failure.
    * BankData - Pydantic model describing the on-disk record.
    * BankDataStore - saves and loads ``LedgerSnapshot`` instances.

The record holds the two balances as decimal strings so a save followed by a
load returns exactly the same values. Saves go to a temporary file beside
the record which then replaces it, so a crash mid-write leaves the previous
record intact. The store never swallows failures; the economy session
decides how to report them to the player.
"""

from __future__ import annotations

import os
import tempfile
from decimal import Decimal
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field, ValidationError, validator

from ..finance import LedgerSnapshot, coerce_amount
from ..logging_utils import get_logger

LOGGER = get_logger(__name__)


class PersistenceError(RuntimeError):
    """Raised when the balance record cannot be written or read."""


class BankData(BaseModel):
    """Serialisable form of the balance record."""

    bank_balance: Decimal = Field(..., ge=0)
    cash_balance: Decimal = Field(..., ge=0)

    @validator("bank_balance", "cash_balance")
    def _whole_cents(cls, value: Decimal) -> Decimal:
        """Reject balances the ledger could not hold exactly."""

        return coerce_amount(value)

    @classmethod
    def from_snapshot(cls, snapshot: LedgerSnapshot) -> "BankData":
        return cls(bank_balance=snapshot.bank, cash_balance=snapshot.cash)

    def to_snapshot(self) -> LedgerSnapshot:
        return LedgerSnapshot(bank=self.bank_balance, cash=self.cash_balance)


class BankDataStore:
    """Read and write the balance record at ``path``."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def save(self, snapshot: LedgerSnapshot) -> None:
        """Write ``snapshot`` to disk, creating the directory when missing."""

        try:
            payload = BankData.from_snapshot(snapshot).model_dump_json(indent=2)
        except ValidationError as error:
            raise PersistenceError(f"Unsavable balances: {error.error_count()} error(s)") from error
        temp_name: Optional[str] = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=f".{self.path.name}.",
                suffix=".tmp",
                delete=False,
            ) as handle:
                temp_name = handle.name
                handle.write(payload)
            os.replace(temp_name, self.path)
        except OSError as error:
            if temp_name is not None and os.path.exists(temp_name):
                os.unlink(temp_name)
            raise PersistenceError(str(error)) from error
        LOGGER.info("Saved balances to %s (bank=%s cash=%s)", self.path, snapshot.bank, snapshot.cash)

    def load(self) -> Optional[LedgerSnapshot]:
        """Return the stored snapshot, or ``None`` when nothing was saved yet."""

        if not self.path.exists():
            LOGGER.debug("No balance record at %s", self.path)
            return None
        try:
            raw = self.path.read_text(encoding="utf-8")
            data = BankData.model_validate_json(raw)
        except OSError as error:
            raise PersistenceError(str(error)) from error
        except ValidationError as error:
            raise PersistenceError(f"Malformed balance record: {error.error_count()} error(s)") from error
        LOGGER.info("Loaded balances from %s", self.path)
        return data.to_snapshot()
