"""Mini README: Change notifications for code built on top of the economy.

Structure:
    * EconomyEvent - enumeration of the published notifications.
    * EconomyEvents - subscription hub handed to the session explicitly.

Balance events carry a ``Decimal`` (the moved amount for ``*_ADDED`` and
``*_REMOVED``, the new balance for ``*_BALANCE_CHANGED``); ``UI_SHOWN``
carries nothing. A subscriber that raises is logged and skipped so one
broken listener cannot stop the others.
"""

from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

Callback = Callable[..., None]


class EconomyEvent(str, Enum):
    BANK_BALANCE_CHANGED = "bank_balance_changed"
    BANK_MONEY_ADDED = "bank_money_added"
    BANK_MONEY_REMOVED = "bank_money_removed"
    CASH_BALANCE_CHANGED = "cash_balance_changed"
    CASH_MONEY_ADDED = "cash_money_added"
    CASH_MONEY_REMOVED = "cash_money_removed"
    UI_SHOWN = "ui_shown"


class EconomyEvents:
    """Register callbacks per event and publish to them in order."""

    def __init__(self) -> None:
        self._subscribers: Dict[EconomyEvent, List[Callback]] = {event: [] for event in EconomyEvent}

    def subscribe(self, event: EconomyEvent, callback: Callback) -> None:
        self._subscribers[EconomyEvent(event)].append(callback)

    def unsubscribe(self, event: EconomyEvent, callback: Callback) -> None:
        """Remove ``callback``; unknown callbacks raise ``ValueError``."""

        self._subscribers[EconomyEvent(event)].remove(callback)

    def publish(self, event: EconomyEvent, *payload: object) -> None:
        for callback in list(self._subscribers[event]):
            try:
                callback(*payload)
            except Exception:
                LOGGER.exception("Subscriber %r failed while handling %s", callback, event.value)
