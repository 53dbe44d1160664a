"""Mini README: Fade and visibility state machine for the balance overlay.

Structure:
    * FadePhase - HIDDEN, FADING_IN, VISIBLE and FADING_OUT.
    * ChangeAnnotation - the latest "+100.00"/"-100.00" note and its expiry.
    * OverlayState - show flags plus the current alpha.
    * TextDraw - one draw request handed to the render collaborator.
    * OverlayController - advances the fade each tick and composes draws.

Every change (or an explicit "show balances") restarts a countdown. While
it runs the alpha climbs by ``fade_step`` per tick up to 1.0; once it has
expired the alpha falls by the same step, and on reaching zero the overlay
hides itself and the frame draws nothing. Positions are fractions of the
screen so hosts can scale them to their own resolution.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Callable, List, Optional, Tuple

from ..logging_utils import get_logger

LOGGER = get_logger(__name__)

RGB = Tuple[int, int, int]
RGBA = Tuple[int, int, int, int]

BANK_COLOR: RGB = (50, 205, 50)
CASH_COLOR: RGB = (0, 255, 0)
GAIN_COLOR: RGB = (0, 255, 0)
LOSS_COLOR: RGB = (255, 0, 0)

TEXT_X = 0.985
FIRST_LINE_Y = 0.02
LINE_SPACING = 0.045
BALANCE_SCALE = 0.6
ANNOTATION_SCALE = 0.5

# Alpha is rounded after every step so a 0.05 step lands exactly on 0 and 1.
_ALPHA_PRECISION = 6


class FadePhase(str, Enum):
    """Where the overlay is in its fade cycle."""

    HIDDEN = "hidden"
    FADING_IN = "fading_in"
    VISIBLE = "visible"
    FADING_OUT = "fading_out"


@dataclass(slots=True)
class ChangeAnnotation:
    """Transient note describing the most recent balance change."""

    text: str
    color: RGB
    target_is_bank: bool
    expires_at: float


@dataclass(frozen=True, slots=True)
class OverlayState:
    show_bank: bool
    show_cash: bool
    alpha: float


@dataclass(frozen=True, slots=True)
class TextDraw:
    """Screen-space text request; ``x``/``y`` are fractions of the resolution."""

    text: str
    x: float
    y: float
    scale: float
    color: RGBA
    align_right: bool = True
    outline: bool = True


def format_money(value: Decimal) -> str:
    """Format a balance with thousands separators and two decimals, rounding half up."""

    return f"{value.quantize(Decimal('0.01'), rounding=ROUND_HALF_UP):,.2f}"


def _with_alpha(color: RGB, alpha: float) -> RGBA:
    red, green, blue = color
    return (red, green, blue, int(alpha * 255))


class OverlayController:
    """Drive the overlay's visibility from balance changes and frame ticks."""

    def __init__(
        self,
        *,
        annotation_seconds: float = 5.0,
        fade_step: float = 0.05,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if fade_step <= 0 or fade_step > 1:
            raise ValueError("fade_step must be within (0, 1].")
        self.annotation_seconds = annotation_seconds
        self.fade_step = fade_step
        self._clock = clock
        self._annotation: Optional[ChangeAnnotation] = None
        self._expires_at = float("-inf")
        self._show_bank = False
        self._show_cash = False
        self._alpha = 0.0

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def annotation(self) -> Optional[ChangeAnnotation]:
        return self._annotation

    @property
    def state(self) -> OverlayState:
        return OverlayState(show_bank=self._show_bank, show_cash=self._show_cash, alpha=self._alpha)

    @property
    def is_visible(self) -> bool:
        return self._show_bank or self._show_cash

    @property
    def phase(self) -> FadePhase:
        if not self.is_visible:
            return FadePhase.HIDDEN
        if self._clock() >= self._expires_at:
            return FadePhase.FADING_OUT
        if self._alpha >= 1.0:
            return FadePhase.VISIBLE
        return FadePhase.FADING_IN

    def show_change_text(self, text: str, color: RGB, is_bank: bool) -> None:
        """Show one balance line with ``text`` annotated underneath."""

        self._expires_at = self._clock() + self.annotation_seconds
        self._annotation = ChangeAnnotation(
            text=text, color=color, target_is_bank=is_bank, expires_at=self._expires_at
        )
        self._alpha = 0.0
        self._show_bank = is_bank
        self._show_cash = not is_bank
        LOGGER.debug("Annotation '%s' on %s until %.2f", text, "bank" if is_bank else "cash", self._expires_at)

    def show_both_texts(self) -> None:
        """Show both balance lines without an annotation."""

        self._expires_at = self._clock() + self.annotation_seconds
        self._annotation = None
        self._alpha = 0.0
        self._show_bank = True
        self._show_cash = True
        LOGGER.debug("Showing both balances until %.2f", self._expires_at)

    def advance(self) -> bool:
        """Step the fade once; return ``False`` when nothing should be drawn."""

        if self._clock() >= self._expires_at:
            self._alpha = round(self._alpha - self.fade_step, _ALPHA_PRECISION)
            if self._alpha <= 0.0:
                if self.is_visible:
                    LOGGER.debug("Overlay faded out")
                self._alpha = 0.0
                self._show_bank = False
                self._show_cash = False
                return False
        else:
            self._alpha = min(1.0, round(self._alpha + self.fade_step, _ALPHA_PRECISION))
        return True

    def compose(self, bank: Decimal, cash: Decimal) -> List[TextDraw]:
        """Build the frame's draws: bank above cash above the annotation."""

        draws: List[TextDraw] = []
        line_y = FIRST_LINE_Y
        if self._show_bank:
            draws.append(
                TextDraw(
                    text=f"Bank: ${format_money(bank)}",
                    x=TEXT_X,
                    y=line_y,
                    scale=BALANCE_SCALE,
                    color=_with_alpha(BANK_COLOR, self._alpha),
                )
            )
            line_y += LINE_SPACING
        if self._show_cash:
            draws.append(
                TextDraw(
                    text=f"Cash: ${format_money(cash)}",
                    x=TEXT_X,
                    y=line_y,
                    scale=BALANCE_SCALE,
                    color=_with_alpha(CASH_COLOR, self._alpha),
                )
            )
            line_y += LINE_SPACING
        if self._annotation is not None and self._annotation.text:
            draws.append(
                TextDraw(
                    text=self._annotation.text,
                    x=TEXT_X,
                    y=line_y,
                    scale=ANNOTATION_SCALE,
                    color=_with_alpha(self._annotation.color, self._alpha),
                )
            )
        return draws
