"""Mini README: Interfaces the economy core expects from its game host.

Structure:
    * SoundCue - named frontend sound with its sound set.
    * TextRenderer - draws ``TextDraw`` requests on screen.
    * SoundPlayer - plays frontend sound cues, fire-and-forget.
    * Notifier - shows short subtitle messages to the player.
    * HeadlessHost - logging implementation of all three for servers and tests.

The core never inspects what these calls return. Hosts are free to ignore
cues they cannot play or to draw text however their engine prefers.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import deque
from dataclasses import dataclass
from typing import Deque, List, Tuple

from ..logging_utils import get_logger
from ..overlay import TextDraw

LOGGER = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class SoundCue:
    """Frontend sound identified by its name and sound set."""

    name: str
    sound_set: str


GAIN_CUE = SoundCue("LOCAL_PLYR_CASH_COUNTER_COMPLETE", "DLC_HEISTS_GENERAL_FRONTEND_SOUNDS")
LOSS_CUE = SoundCue("PS2A_MONEY_LOST", "PALETO_SCORE_2A_BANK_SS")


class TextRenderer(ABC):
    @abstractmethod
    def draw_text(self, request: TextDraw) -> None:
        """Draw ``request`` for the current frame."""


class SoundPlayer(ABC):
    @abstractmethod
    def play(self, cue: SoundCue) -> None:
        """Play ``cue`` once without waiting for it to finish."""


class Notifier(ABC):
    @abstractmethod
    def show_subtitle(self, message: str) -> None:
        """Display ``message`` briefly to the player."""


class HeadlessHost(TextRenderer, SoundPlayer, Notifier):
    """Host without a screen: logs every call and remembers recent ones."""

    def __init__(self, history: int = 256) -> None:
        self.draws: Deque[TextDraw] = deque(maxlen=history)
        self.sounds: Deque[SoundCue] = deque(maxlen=history)
        self.subtitles: Deque[str] = deque(maxlen=history)

    def draw_text(self, request: TextDraw) -> None:
        self.draws.append(request)

    def play(self, cue: SoundCue) -> None:
        LOGGER.debug("Sound cue %s/%s", cue.sound_set, cue.name)
        self.sounds.append(cue)

    def show_subtitle(self, message: str) -> None:
        LOGGER.info("Subtitle: %s", message)
        self.subtitles.append(message)

    def drawn_texts(self) -> List[Tuple[str, int]]:
        """Return ``(text, alpha)`` pairs for the recorded draws."""

        return [(draw.text, draw.color[3]) for draw in self.draws]
