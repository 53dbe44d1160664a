"""Mini README: Key chord bindings for the economy actions.

Structure:
    * EconomyAction - the actions a key chord can trigger.
    * KeyChord - a key name plus the modifiers held with it.
    * KeyBinding - a chord mapped to an action and, for money actions, an amount.
    * KeyBindings - parses configuration and resolves incoming chords.
    * dispatch - runs a binding against an economy session.

Chords are written ``"shift+insert"``; actions ``"add_cash:500"`` or
``"show_balances"``. Key names follow ``pygame.key.name`` (``"insert"``,
``"[*]"`` for keypad multiply). Resolution prefers an exact modifier match
and otherwise falls back to the key's unmodified binding, so Ctrl+Insert
still deposits into the bank.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from typing import TYPE_CHECKING, Dict, FrozenSet, Iterable, Mapping, Optional

from ..finance import coerce_amount
from ..logging_utils import get_logger

if TYPE_CHECKING:  # pragma: no cover - typing only
    from ..economy import EconomySession

LOGGER = get_logger(__name__)

MODIFIERS = frozenset({"shift", "ctrl", "alt", "meta"})

INSUFFICIENT_CASH_MESSAGE = "Not enough cash."
INSUFFICIENT_BANK_MESSAGE = "Not enough balance in the bank."


class EconomyAction(str, Enum):
    ADD_CASH = "add_cash"
    REMOVE_CASH = "remove_cash"
    ADD_BANK = "add_bank"
    REMOVE_BANK = "remove_bank"
    SHOW_BALANCES = "show_balances"

    @property
    def needs_amount(self) -> bool:
        return self is not EconomyAction.SHOW_BALANCES


@dataclass(frozen=True, slots=True)
class KeyChord:
    key: str
    modifiers: FrozenSet[str] = frozenset()

    @classmethod
    def parse(cls, text: str) -> "KeyChord":
        """Parse ``"shift+insert"`` style text; the last part is the key."""

        parts = [part.strip().lower() for part in text.split("+")]
        # "+" itself is a valid key, which splits into two empty parts.
        if len(parts) >= 2 and parts[-1] == "" and parts[-2] == "":
            parts = parts[:-2] + ["+"]
        key, modifiers = parts[-1], frozenset(parts[:-1])
        if not key:
            raise ValueError(f"Key chord '{text}' does not name a key.")
        unknown = modifiers - MODIFIERS
        if unknown:
            raise ValueError(f"Unsupported modifier(s) {sorted(unknown)} in chord '{text}'.")
        return cls(key=key, modifiers=modifiers)


@dataclass(frozen=True, slots=True)
class KeyBinding:
    chord: KeyChord
    action: EconomyAction
    amount: Optional[Decimal] = None

    @classmethod
    def parse(cls, chord: str, action: str) -> "KeyBinding":
        """Build a binding from configuration strings."""

        name, _, raw_amount = action.partition(":")
        try:
            economy_action = EconomyAction(name.strip().lower())
        except ValueError as error:
            raise ValueError(f"Unknown action '{action}' for chord '{chord}'.") from error
        amount: Optional[Decimal] = None
        if economy_action.needs_amount:
            if not raw_amount:
                raise ValueError(f"Action '{action}' for chord '{chord}' needs an amount.")
            amount = coerce_amount(raw_amount)
        return cls(chord=KeyChord.parse(chord), action=economy_action, amount=amount)


class KeyBindings:
    """Lookup table from chords to bindings."""

    def __init__(self, bindings: Iterable[KeyBinding]) -> None:
        self._bindings: Dict[KeyChord, KeyBinding] = {}
        for binding in bindings:
            if binding.chord in self._bindings:
                raise ValueError(f"Chord {binding.chord} is bound twice.")
            self._bindings[binding.chord] = binding
        LOGGER.debug("Loaded %s key bindings", len(self._bindings))

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "KeyBindings":
        return cls(KeyBinding.parse(chord, action) for chord, action in mapping.items())

    def __len__(self) -> int:
        return len(self._bindings)

    def resolve(self, key: str, modifiers: Iterable[str] = ()) -> Optional[KeyBinding]:
        """Return the binding for a key press, or ``None`` when unbound."""

        chord = KeyChord(key=key.lower(), modifiers=frozenset(m.lower() for m in modifiers))
        binding = self._bindings.get(chord)
        if binding is None and chord.modifiers:
            binding = self._bindings.get(KeyChord(key=chord.key))
        return binding


def dispatch(session: "EconomySession", binding: KeyBinding) -> bool:
    """Run ``binding`` against ``session``; ``False`` when funds were short."""

    LOGGER.debug("Dispatching %s for %s", binding.action.value, binding.chord)
    if binding.action is EconomyAction.SHOW_BALANCES:
        session.show_balances()
    elif binding.action is EconomyAction.ADD_CASH:
        session.add_cash(binding.amount)
    elif binding.action is EconomyAction.ADD_BANK:
        session.add_bank(binding.amount)
    elif binding.action is EconomyAction.REMOVE_CASH:
        if not session.remove_cash(binding.amount):
            session.notifier.show_subtitle(INSUFFICIENT_CASH_MESSAGE)
            return False
    elif binding.action is EconomyAction.REMOVE_BANK:
        if not session.remove_bank(binding.amount):
            session.notifier.show_subtitle(INSUFFICIENT_BANK_MESSAGE)
            return False
    return True
