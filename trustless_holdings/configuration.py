"""Mini README: Centralised configuration models and helpers for Trustless Holdings.

Structure:
    * DEFAULT_KEY_BINDINGS - chord to action mapping used when none is configured.
    * HoldingsSettings - Pydantic model describing runtime configuration.
    * get_settings - cached accessor for environment-aware settings.

Usage:
    Import ``get_settings`` to read ``HOLDINGS_*`` environment variables (or a
    ``.env`` file) covering the save location, starting balances, overlay
    timings, window and API options. Key bindings may be overridden with a
    JSON object, e.g. ``HOLDINGS_KEY_BINDINGS='{"f5": "add_cash:1000"}'``.
"""

from __future__ import annotations

from decimal import Decimal
from functools import lru_cache
from pathlib import Path
from typing import Dict, Optional

from pydantic import Field, validator
from pydantic_settings import BaseSettings

DEFAULT_KEY_BINDINGS: Dict[str, str] = {
    "shift+insert": "add_cash:500",
    "shift+delete": "remove_cash:200",
    "insert": "add_bank:500",
    "delete": "remove_bank:200",
    "[*]": "add_cash:100",
    "[/]": "remove_cash:50",
    "z": "show_balances",
}


class HoldingsSettings(BaseSettings):
    """Runtime configuration for the economy overlay and its API."""

    environment: str = Field(
        "development",
        description="Environment label controlling debug toggles and logging levels.",
    )
    log_level: Optional[str] = Field(
        None,
        description="Explicit logging level (e.g. 'INFO') overriding the environment default.",
    )
    data_directory: Path = Field(
        Path("scripts/TrustlessHoldings"),
        description="Directory holding the persisted balances.",
    )
    save_filename: str = Field(
        "data.json",
        description="File name of the balance record inside the data directory.",
    )
    starting_bank: Decimal = Field(
        Decimal("1000"),
        description="Bank balance used when no saved record exists.",
        ge=0,
    )
    starting_cash: Decimal = Field(
        Decimal("500"),
        description="Cash balance used when no saved record exists.",
        ge=0,
    )
    save_delay_seconds: float = Field(
        1.0,
        description="Quiet period after the last balance change before saving.",
        gt=0,
    )
    annotation_seconds: float = Field(
        5.0,
        description="How long the overlay stays up after a change before fading out.",
        gt=0,
    )
    fade_step: float = Field(
        0.05,
        description="Alpha change applied to the overlay on every tick.",
        gt=0,
        le=1,
    )
    interface_host: str = Field(
        "127.0.0.1",
        description="Network interface for the economy API to bind to.",
    )
    interface_port: int = Field(
        8000,
        description="Port the economy API exposes.",
        ge=1,
        le=65535,
    )
    window_width: int = Field(1280, description="Width of the overlay host window.", ge=320)
    window_height: int = Field(720, description="Height of the overlay host window.", ge=240)
    frames_per_second: int = Field(60, description="Tick rate of the overlay host.", ge=1)
    sound_directory: Optional[Path] = Field(
        None,
        description=(
            "Directory containing '<cue name>.wav' files for frontend sounds."
            " Leave unset to play no audio."
        ),
    )
    key_bindings: Dict[str, str] = Field(
        default_factory=lambda: dict(DEFAULT_KEY_BINDINGS),
        description="Mapping of key chords (e.g. 'shift+insert') to actions (e.g. 'add_cash:500').",
    )

    class Config:
        env_prefix = "HOLDINGS_"
        env_file = ".env"
        case_sensitive = False

    @validator("data_directory", pre=True)
    def _expand_path(cls, value: Optional[str | Path]) -> Path:
        """Ensure the data directory expands user paths and exists."""

        path = Path(value).expanduser().resolve()
        path.mkdir(parents=True, exist_ok=True)
        return path

    @property
    def save_path(self) -> Path:
        """Full path of the persisted balance record."""

        return self.data_directory / self.save_filename


@lru_cache()
def get_settings() -> HoldingsSettings:
    """Return cached settings, ensuring consistent configuration across modules."""

    return HoldingsSettings()
