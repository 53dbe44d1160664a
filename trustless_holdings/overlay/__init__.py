"""Mini README: On-screen balance overlay.

The overlay controller owns what the player currently sees: which balance
lines are up, the fade alpha, and the short-lived "+500.00" annotation. It
produces ``TextDraw`` requests and leaves pixels to whichever host renders
them.
"""

from .controller import (
    BANK_COLOR,
    CASH_COLOR,
    GAIN_COLOR,
    LOSS_COLOR,
    ChangeAnnotation,
    FadePhase,
    OverlayController,
    OverlayState,
    TextDraw,
    format_money,
)

__all__ = [
    "BANK_COLOR",
    "CASH_COLOR",
    "GAIN_COLOR",
    "LOSS_COLOR",
    "ChangeAnnotation",
    "FadePhase",
    "OverlayController",
    "OverlayState",
    "TextDraw",
    "format_money",
]
