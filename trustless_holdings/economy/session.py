"""Mini README: The economy session tying ledger, overlay, and persistence together.

Structure:
    * EconomySession - the single entry point hosts and the API call into.

A successful mutation updates the ledger, then annotates the overlay,
plays the gain or loss cue, publishes change events and schedules a
debounced save. A refused removal does none of that. ``InvalidAmount``
from the ledger propagates to the caller untouched.

The debounce timer fires on its own thread, so ledger and overlay access is
serialised with a re-entrant lock. Collaborators and subscribers are called
outside the lock so a slow disk or listener never stalls a frame. Saves
take a separate lock, so the countdown thread and a shutdown save never
write the record at the same time.
"""

from __future__ import annotations

import threading
import time
from decimal import Decimal
from typing import Callable, Optional

from ..configuration import HoldingsSettings
from ..finance import Ledger, LedgerSnapshot, coerce_amount
from ..finance.ledger import AmountLike
from ..host.base import GAIN_CUE, LOSS_CUE, Notifier, SoundCue, SoundPlayer, TextRenderer
from ..logging_utils import get_logger
from ..overlay import GAIN_COLOR, LOSS_COLOR, OverlayController, format_money
from ..storage import BankDataStore, PersistenceError
from ..storage.debounce import SaveDebouncer
from .events import EconomyEvent, EconomyEvents

LOGGER = get_logger(__name__)


class EconomySession:
    """Own the player's balances and everything that reacts to them."""

    def __init__(
        self,
        *,
        ledger: Ledger,
        store: BankDataStore,
        renderer: TextRenderer,
        sounds: SoundPlayer,
        notifier: Notifier,
        events: Optional[EconomyEvents] = None,
        overlay: Optional[OverlayController] = None,
        save_delay_seconds: float = 1.0,
        timer_factory: Callable[..., threading.Timer] = threading.Timer,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.ledger = ledger
        self.store = store
        self.renderer = renderer
        self.sounds = sounds
        self.notifier = notifier
        self.events = events or EconomyEvents()
        self.overlay = overlay or OverlayController(clock=clock)
        self.debouncer = SaveDebouncer(
            self._flush, delay_seconds=save_delay_seconds, timer_factory=timer_factory, clock=clock
        )
        self._lock = threading.RLock()
        self._save_lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        settings: HoldingsSettings,
        *,
        renderer: TextRenderer,
        sounds: SoundPlayer,
        notifier: Notifier,
        events: Optional[EconomyEvents] = None,
        load: bool = True,
    ) -> "EconomySession":
        """Build a session from configuration and optionally load saved balances."""

        session = cls(
            ledger=Ledger(bank=settings.starting_bank, cash=settings.starting_cash),
            store=BankDataStore(settings.save_path),
            renderer=renderer,
            sounds=sounds,
            notifier=notifier,
            events=events,
            overlay=OverlayController(
                annotation_seconds=settings.annotation_seconds,
                fade_step=settings.fade_step,
            ),
            save_delay_seconds=settings.save_delay_seconds,
        )
        if load:
            session.load()
        return session

    @property
    def bank_balance(self) -> Decimal:
        with self._lock:
            return self.ledger.bank

    @property
    def cash_balance(self) -> Decimal:
        with self._lock:
            return self.ledger.cash

    @property
    def is_ui_visible(self) -> bool:
        with self._lock:
            return self.overlay.is_visible

    def snapshot(self) -> LedgerSnapshot:
        with self._lock:
            return self.ledger.snapshot()

    def add_bank(self, amount: AmountLike) -> Decimal:
        """Deposit into the bank and return the new bank balance."""

        value = coerce_amount(amount)
        with self._lock:
            balance = self.ledger.add_bank(value)
            self.overlay.show_change_text(f"+{format_money(value)}", GAIN_COLOR, True)
        LOGGER.info("Bank +%s -> %s", value, balance)
        self._after_change(GAIN_CUE, EconomyEvent.BANK_MONEY_ADDED, EconomyEvent.BANK_BALANCE_CHANGED, value, balance)
        return balance

    def remove_bank(self, amount: AmountLike) -> bool:
        """Withdraw from the bank; ``False`` when the balance is too low."""

        value = coerce_amount(amount)
        with self._lock:
            if not self.ledger.remove_bank(value):
                return False
            balance = self.ledger.bank
            self.overlay.show_change_text(f"-{format_money(value)}", LOSS_COLOR, True)
        LOGGER.info("Bank -%s -> %s", value, balance)
        self._after_change(LOSS_CUE, EconomyEvent.BANK_MONEY_REMOVED, EconomyEvent.BANK_BALANCE_CHANGED, value, balance)
        return True

    def add_cash(self, amount: AmountLike) -> Decimal:
        """Add to the cash balance and return the new cash balance."""

        value = coerce_amount(amount)
        with self._lock:
            balance = self.ledger.add_cash(value)
            self.overlay.show_change_text(f"+{format_money(value)}", GAIN_COLOR, False)
        LOGGER.info("Cash +%s -> %s", value, balance)
        self._after_change(GAIN_CUE, EconomyEvent.CASH_MONEY_ADDED, EconomyEvent.CASH_BALANCE_CHANGED, value, balance)
        return balance

    def remove_cash(self, amount: AmountLike) -> bool:
        """Spend cash; ``False`` when there is not enough."""

        value = coerce_amount(amount)
        with self._lock:
            if not self.ledger.remove_cash(value):
                return False
            balance = self.ledger.cash
            self.overlay.show_change_text(f"-{format_money(value)}", LOSS_COLOR, False)
        LOGGER.info("Cash -%s -> %s", value, balance)
        self._after_change(LOSS_CUE, EconomyEvent.CASH_MONEY_REMOVED, EconomyEvent.CASH_BALANCE_CHANGED, value, balance)
        return True

    def show_balances(self) -> None:
        """Bring up both balance lines without an annotation."""

        with self._lock:
            self.overlay.show_both_texts()
        self.events.publish(EconomyEvent.UI_SHOWN)

    def tick(self) -> None:
        """Advance the fade by one frame and draw whatever is visible."""

        with self._lock:
            if not self.overlay.advance():
                return
            draws = self.overlay.compose(self.ledger.bank, self.ledger.cash)
        for draw in draws:
            self.renderer.draw_text(draw)

    def load(self) -> bool:
        """Reconcile the ledger with the saved record; ``True`` if one was applied."""

        try:
            snapshot = self.store.load()
        except PersistenceError as error:
            LOGGER.warning("Could not load balances: %s", error)
            self.notifier.show_subtitle(f"Error loading data: {error}")
            return False
        if snapshot is None:
            LOGGER.info("No saved balances; starting with bank=%s cash=%s", self.ledger.bank, self.ledger.cash)
            return False
        with self._lock:
            self.ledger.reconcile(snapshot)
        return True

    def save_now(self) -> bool:
        """Persist the current balances immediately; ``True`` on success."""

        with self._save_lock:
            snapshot = self.snapshot()
            try:
                self.store.save(snapshot)
            except PersistenceError as error:
                LOGGER.warning("Could not save balances: %s", error)
                self.notifier.show_subtitle(f"Error saving data: {error}")
                return False
        return True

    def shutdown(self) -> bool:
        """Drop any pending countdown and save unconditionally."""

        if self.debouncer.cancel():
            LOGGER.debug("Pending save superseded by shutdown save")
        return self.save_now()

    def _flush(self) -> None:
        self.save_now()

    def _after_change(
        self,
        cue: SoundCue,
        moved: EconomyEvent,
        changed: EconomyEvent,
        amount: Decimal,
        balance: Decimal,
    ) -> None:
        self.sounds.play(cue)
        self.debouncer.schedule()
        self.events.publish(moved, amount)
        self.events.publish(changed, balance)
