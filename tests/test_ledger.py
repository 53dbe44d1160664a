"""Mini README: Tests for the bank and cash ledger.

Covers the add/remove rules, rejection of negative or malformed amounts,
exact decimal arithmetic, and reconciliation against a loaded snapshot.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from trustless_holdings.finance import InvalidAmount, Ledger, LedgerSnapshot, coerce_amount


def test_start_of_session_scenario() -> None:
    """Adding, withdrawing and an uncovered removal behave as the player expects."""

    ledger = Ledger(bank=1000, cash=500)

    assert ledger.add_cash(500) == Decimal("1000")
    assert ledger.remove_bank(200) is True
    assert ledger.bank == Decimal("800")
    assert ledger.remove_cash(2000) is False
    assert ledger.cash == Decimal("1000")


@pytest.mark.parametrize("amount", ["0", "0.01", "250", "1234567.89"])
def test_add_cash_increases_by_exact_amount(amount: str) -> None:
    ledger = Ledger(cash="10.00")

    ledger.add_cash(amount)

    assert ledger.cash == Decimal("10.00") + Decimal(amount)


def test_negative_amounts_are_rejected_without_side_effects() -> None:
    ledger = Ledger(bank=100, cash=100)

    for operation in (ledger.add_bank, ledger.add_cash, ledger.remove_bank, ledger.remove_cash):
        with pytest.raises(InvalidAmount):
            operation(-1)

    assert ledger.snapshot() == LedgerSnapshot(bank=Decimal("100"), cash=Decimal("100"))


@pytest.mark.parametrize(
    ("balance", "amount", "succeeds"),
    [("50", "50", True), ("50", "49.99", True), ("50", "50.01", False), ("0", "0", True), ("0", "1", False)],
)
def test_remove_cash_succeeds_only_when_covered(balance: str, amount: str, succeeds: bool) -> None:
    ledger = Ledger(cash=balance)

    assert ledger.remove_cash(amount) is succeeds
    expected = Decimal(balance) - Decimal(amount) if succeeds else Decimal(balance)
    assert ledger.cash == expected


def test_repeated_small_amounts_do_not_drift() -> None:
    ledger = Ledger()

    for _ in range(10):
        ledger.add_bank(0.1)
    for _ in range(10):
        assert ledger.remove_bank(0.1)

    assert ledger.bank == Decimal("0")


@pytest.mark.parametrize("value", ["abc", None, True, float("nan"), "Infinity", "-0.5"])
def test_coerce_amount_rejects_unusable_values(value) -> None:
    with pytest.raises(InvalidAmount):
        coerce_amount(value)


def test_constructor_rejects_negative_balances() -> None:
    with pytest.raises(InvalidAmount):
        Ledger(bank=-5)


def test_reconcile_moves_bank_by_delta_and_restores_cash() -> None:
    ledger = Ledger(bank=1000, cash=500)

    ledger.reconcile(LedgerSnapshot(bank=Decimal("350.25"), cash=Decimal("42")))
    assert ledger.bank == Decimal("350.25")
    assert ledger.cash == Decimal("42")

    ledger.reconcile(LedgerSnapshot(bank=Decimal("5000"), cash=Decimal("0")))
    assert ledger.bank == Decimal("5000")
    assert ledger.cash == Decimal("0")


@pytest.mark.parametrize("value", ["0.004", "10.005", Decimal("0.0000000000000000000000000001"), 0.001])
def test_fractions_of_a_cent_are_rejected(value) -> None:
    ledger = Ledger(cash="10")

    with pytest.raises(InvalidAmount):
        ledger.add_cash(value)
    with pytest.raises(InvalidAmount):
        ledger.remove_cash(value)

    assert ledger.cash == Decimal("10")


def test_trailing_zeros_are_accepted_as_whole_cents() -> None:
    assert coerce_amount("1.500") == Decimal("1.50")
    assert coerce_amount(7) == Decimal("7.00")


def test_sum_that_would_round_is_refused() -> None:
    ledger = Ledger(cash="9" * 26)

    with pytest.raises(InvalidAmount):
        ledger.add_cash("9" * 26)

    assert ledger.cash == Decimal("9" * 26)
