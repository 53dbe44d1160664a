"""Mini README: pygame window standing in for the game host.

Structure:
    * modifiers_from_mask - converts pygame modifier bits into chord names.
    * PygameHost - renderer, sound player and notifier backed by a window.

The host owns the frame loop: each frame it drains key events into the key
bindings, ticks the economy session (which issues the overlay draws), paints
the current subtitle and flips the display. Closing the window or pressing
Escape ends the loop and triggers the session's final save.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import Dict, FrozenSet, Optional, Tuple

import pygame

from ..economy import EconomySession
from ..logging_utils import get_logger
from ..overlay import TextDraw
from .base import Notifier, SoundCue, SoundPlayer, TextRenderer
from .bindings import KeyBindings, dispatch

LOGGER = get_logger(__name__)

BACKGROUND = (24, 28, 36)
OUTLINE_COLOR = (0, 0, 0)
SUBTITLE_COLOR = (235, 235, 235)
SUBTITLE_SECONDS = 3.0


def modifiers_from_mask(mask: int) -> FrozenSet[str]:
    names = set()
    if mask & pygame.KMOD_SHIFT:
        names.add("shift")
    if mask & pygame.KMOD_CTRL:
        names.add("ctrl")
    if mask & pygame.KMOD_ALT:
        names.add("alt")
    if mask & pygame.KMOD_META:
        names.add("meta")
    return frozenset(names)


class PygameHost(TextRenderer, SoundPlayer, Notifier):
    """Render the overlay and play cues inside a pygame window."""

    def __init__(
        self,
        *,
        width: int = 1280,
        height: int = 720,
        frames_per_second: int = 60,
        sound_directory: Optional[Path] = None,
        title: str = "Trustless Holdings",
    ) -> None:
        pygame.init()
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)
        self.frames_per_second = frames_per_second
        self.sound_directory = sound_directory
        self._fonts: Dict[int, pygame.font.Font] = {}
        self._sounds: Dict[str, Optional[pygame.mixer.Sound]] = {}
        self._subtitle: Optional[Tuple[str, float]] = None
        self._audio_enabled = sound_directory is not None
        if self._audio_enabled:
            try:
                pygame.mixer.init()
            except pygame.error as error:
                LOGGER.warning("Audio unavailable, sounds disabled: %s", error)
                self._audio_enabled = False

    def _font(self, size: int) -> pygame.font.Font:
        if size not in self._fonts:
            self._fonts[size] = pygame.font.SysFont(None, size)
        return self._fonts[size]

    def draw_text(self, request: TextDraw) -> None:
        width, height = self.screen.get_size()
        font = self._font(max(8, int(request.scale * height / 20)))
        red, green, blue, alpha = request.color
        face = font.render(request.text, True, (red, green, blue))
        surface = pygame.Surface((face.get_width() + 2, face.get_height() + 2), pygame.SRCALPHA)
        if request.outline:
            shadow = font.render(request.text, True, OUTLINE_COLOR)
            for dx, dy in ((0, 1), (2, 1), (1, 0), (1, 2)):
                surface.blit(shadow, (dx, dy))
        surface.blit(face, (1, 1))
        surface.set_alpha(alpha)
        x = int(request.x * width)
        y = int(request.y * height)
        if request.align_right:
            x -= surface.get_width()
        self.screen.blit(surface, (x, y))

    def play(self, cue: SoundCue) -> None:
        if not self._audio_enabled:
            LOGGER.debug("Sound cue %s skipped, audio disabled", cue.name)
            return
        if cue.name not in self._sounds:
            self._sounds[cue.name] = self._load_sound(cue)
        sound = self._sounds[cue.name]
        if sound is not None:
            sound.play()

    def _load_sound(self, cue: SoundCue) -> Optional[pygame.mixer.Sound]:
        path = self.sound_directory / f"{cue.name}.wav"
        if not path.exists():
            LOGGER.debug("No sound file for cue %s at %s", cue.name, path)
            return None
        try:
            return pygame.mixer.Sound(str(path))
        except pygame.error as error:
            LOGGER.warning("Could not load sound %s: %s", path, error)
            return None

    def show_subtitle(self, message: str) -> None:
        LOGGER.info("Subtitle: %s", message)
        self._subtitle = (message, time.monotonic() + SUBTITLE_SECONDS)

    def _draw_subtitle(self) -> None:
        if self._subtitle is None:
            return
        message, hide_at = self._subtitle
        if time.monotonic() >= hide_at:
            self._subtitle = None
            return
        width, height = self.screen.get_size()
        face = self._font(max(12, height // 24)).render(message, True, SUBTITLE_COLOR)
        self.screen.blit(face, ((width - face.get_width()) // 2, int(height * 0.9)))

    def run(self, session: EconomySession, bindings: KeyBindings) -> None:
        """Run the frame loop until the window closes, then save."""

        clock = pygame.time.Clock()
        running = True
        LOGGER.info("Overlay host running with %s key bindings", len(bindings))
        try:
            while running:
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        running = False
                    elif event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            running = False
                            continue
                        binding = bindings.resolve(pygame.key.name(event.key), modifiers_from_mask(event.mod))
                        if binding is not None:
                            dispatch(session, binding)
                self.screen.fill(BACKGROUND)
                session.tick()
                self._draw_subtitle()
                pygame.display.flip()
                clock.tick(self.frames_per_second)
        finally:
            session.shutdown()
            pygame.quit()
            LOGGER.info("Overlay host stopped")
