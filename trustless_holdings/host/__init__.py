"""Mini README: Game host integration points.

``base`` declares the renderer, sound and notifier interfaces plus a
headless implementation; ``bindings`` turns key chords into economy actions.
The pygame window host lives in ``pygame_host`` and is imported on demand so
servers and tests never need a display.
"""

from .base import GAIN_CUE, LOSS_CUE, HeadlessHost, Notifier, SoundCue, SoundPlayer, TextRenderer
from .bindings import EconomyAction, KeyBinding, KeyBindings, KeyChord, dispatch

__all__ = [
    "GAIN_CUE",
    "LOSS_CUE",
    "EconomyAction",
    "HeadlessHost",
    "KeyBinding",
    "KeyBindings",
    "KeyChord",
    "Notifier",
    "SoundCue",
    "SoundPlayer",
    "TextRenderer",
    "dispatch",
]
