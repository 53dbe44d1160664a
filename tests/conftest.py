"""Mini README: Shared fixtures for the economy tests.

Structure:
    * FakeClock - manually advanced replacement for ``time.monotonic``.
    * FakeTimer - records ``threading.Timer`` construction and fires on demand.
    * session fixture - economy session on a headless host with fake time.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Callable, List, Optional

import pytest

from trustless_holdings.economy import EconomySession
from trustless_holdings.finance import Ledger
from trustless_holdings.host import HeadlessHost
from trustless_holdings.overlay import OverlayController
from trustless_holdings.storage import BankDataStore


class FakeClock:
    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


class FakeTimer:
    created: List["FakeTimer"] = []

    def __init__(self, interval: float, function: Callable, args: Optional[tuple] = None) -> None:
        self.interval = interval
        self.function = function
        self.args = args or ()
        self.daemon = False
        self.started = False
        self.cancelled = False
        FakeTimer.created.append(self)

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self.function(*self.args)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def timers() -> List[FakeTimer]:
    FakeTimer.created = []
    return FakeTimer.created


@pytest.fixture
def fake_timer(timers):
    return FakeTimer


@pytest.fixture
def host() -> HeadlessHost:
    return HeadlessHost()


@pytest.fixture
def session(tmp_path, clock, timers, host) -> EconomySession:
    return EconomySession(
        ledger=Ledger(bank=Decimal("1000"), cash=Decimal("500")),
        store=BankDataStore(tmp_path / "data.json"),
        renderer=host,
        sounds=host,
        notifier=host,
        overlay=OverlayController(clock=clock),
        timer_factory=FakeTimer,
        clock=clock,
    )
