"""Mini README: Tests for the overlay fade state machine.

Drives the controller with a fake clock to check alpha bounds, fade timing,
phase reporting, and the bank/cash/annotation draw order.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from trustless_holdings.overlay import (
    BANK_COLOR,
    CASH_COLOR,
    GAIN_COLOR,
    LOSS_COLOR,
    FadePhase,
    OverlayController,
    format_money,
)


def test_starts_hidden_and_draws_nothing(clock) -> None:
    overlay = OverlayController(clock=clock)

    assert overlay.phase is FadePhase.HIDDEN
    assert overlay.advance() is False
    assert overlay.alpha == 0.0


def test_change_text_shows_only_the_targeted_balance(clock) -> None:
    overlay = OverlayController(clock=clock)

    overlay.show_change_text("+10.00", GAIN_COLOR, is_bank=True)
    assert overlay.state.show_bank and not overlay.state.show_cash
    assert overlay.annotation.expires_at == clock.now + 5.0

    overlay.show_change_text("-10.00", LOSS_COLOR, is_bank=False)
    assert overlay.state.show_cash and not overlay.state.show_bank
    assert overlay.annotation.text == "-10.00"
    assert overlay.alpha == 0.0


def test_fade_in_saturates_then_fades_out_and_hides(clock) -> None:
    overlay = OverlayController(clock=clock)
    overlay.show_change_text("+1.00", GAIN_COLOR, is_bank=False)

    assert overlay.phase is FadePhase.FADING_IN
    for _ in range(300):
        assert overlay.advance() is True
        assert 0.0 <= overlay.alpha <= 1.0
    assert overlay.alpha == 1.0
    assert overlay.phase is FadePhase.VISIBLE

    clock.advance(5.0)
    assert overlay.phase is FadePhase.FADING_OUT
    results = [overlay.advance() for _ in range(20)]

    assert results == [True] * 19 + [False]
    assert overlay.state.show_bank is False
    assert overlay.state.show_cash is False
    assert overlay.phase is FadePhase.HIDDEN


def test_alpha_stays_bounded_across_repeated_cycles(clock) -> None:
    overlay = OverlayController(fade_step=0.07, clock=clock)

    for cycle in range(5):
        overlay.show_both_texts()
        for _ in range(40):
            overlay.advance()
            assert 0.0 <= overlay.alpha <= 1.0
            clock.advance(0.2)
    for _ in range(100):
        overlay.advance()
        assert 0.0 <= overlay.alpha <= 1.0
    assert not overlay.is_visible


def test_partial_fade_in_fades_out_from_where_it_was(clock) -> None:
    overlay = OverlayController(clock=clock)
    overlay.show_change_text("+1.00", GAIN_COLOR, is_bank=True)
    for _ in range(10):
        overlay.advance()
    assert overlay.alpha == pytest.approx(0.5)

    clock.advance(5.0)
    results = [overlay.advance() for _ in range(10)]

    assert results == [True] * 9 + [False]


def test_compose_orders_cash_above_annotation_with_alpha(clock) -> None:
    overlay = OverlayController(clock=clock)
    overlay.show_change_text("+500.00", GAIN_COLOR, is_bank=False)
    for _ in range(10):
        overlay.advance()

    draws = overlay.compose(Decimal("1000"), Decimal("1500.5"))

    assert [draw.text for draw in draws] == ["Cash: $1,500.50", "+500.00"]
    assert draws[0].y < draws[1].y
    assert draws[0].color == CASH_COLOR + (127,)
    assert draws[1].color == GAIN_COLOR + (127,)
    assert draws[1].scale < draws[0].scale


def test_show_both_texts_clears_annotation(clock) -> None:
    overlay = OverlayController(clock=clock)
    overlay.show_change_text("-5.00", LOSS_COLOR, is_bank=True)
    overlay.show_both_texts()
    for _ in range(20):
        overlay.advance()

    draws = overlay.compose(Decimal("800"), Decimal("1000"))

    assert overlay.annotation is None
    assert [draw.text for draw in draws] == ["Bank: $800.00", "Cash: $1,000.00"]
    assert draws[0].y < draws[1].y
    assert draws[0].color == BANK_COLOR + (255,)


def test_rejects_out_of_range_fade_step(clock) -> None:
    with pytest.raises(ValueError):
        OverlayController(fade_step=0, clock=clock)


@pytest.mark.parametrize(
    ("value", "expected"),
    [("0.125", "0.13"), ("2.5", "2.50"), ("1234567.005", "1,234,567.01"), ("0", "0.00")],
)
def test_format_money_rounds_half_up(value: str, expected: str) -> None:
    assert format_money(Decimal(value)) == expected
