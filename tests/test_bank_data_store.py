"""Mini README: Tests for the JSON balance record.

Ensures saves round-trip exactly, a missing record loads as ``None``, the
save directory is created on demand, and corrupt records surface as
``PersistenceError``.
"""

from __future__ import annotations

import json
from decimal import Decimal

import pytest

from trustless_holdings.finance import LedgerSnapshot
from trustless_holdings.storage import BankDataStore, PersistenceError


def test_save_then_load_restores_exact_values(tmp_path) -> None:
    store = BankDataStore(tmp_path / "nested" / "data.json")
    snapshot = LedgerSnapshot(bank=Decimal("1234.56"), cash=Decimal("0.10"))

    store.save(snapshot)

    assert store.load() == snapshot
    stored = json.loads(store.path.read_text(encoding="utf-8"))
    assert set(stored) == {"bank_balance", "cash_balance"}


def test_missing_record_loads_as_none(tmp_path) -> None:
    assert BankDataStore(tmp_path / "absent.json").load() is None


@pytest.mark.parametrize(
    "content",
    ["not json", '{"bank_balance": "10"}', '{"bank_balance": "-1", "cash_balance": "0"}'],
)
def test_malformed_record_raises_persistence_error(tmp_path, content: str) -> None:
    path = tmp_path / "data.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(PersistenceError):
        BankDataStore(path).load()


def test_unwritable_location_raises_persistence_error(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("a file, not a directory", encoding="utf-8")
    store = BankDataStore(blocker / "data.json")

    with pytest.raises(PersistenceError):
        store.save(LedgerSnapshot(bank=Decimal("1"), cash=Decimal("1")))


def test_save_replaces_record_without_leaving_temp_files(tmp_path) -> None:
    store = BankDataStore(tmp_path / "data.json")

    store.save(LedgerSnapshot(bank=Decimal("1"), cash=Decimal("2")))
    store.save(LedgerSnapshot(bank=Decimal("3"), cash=Decimal("4")))

    assert [path.name for path in tmp_path.iterdir()] == ["data.json"]
    assert store.load() == LedgerSnapshot(bank=Decimal("3"), cash=Decimal("4"))


def test_failed_replace_keeps_previous_record(tmp_path, monkeypatch) -> None:
    store = BankDataStore(tmp_path / "data.json")
    store.save(LedgerSnapshot(bank=Decimal("10"), cash=Decimal("20")))

    def refuse(*_args) -> None:
        raise OSError("disk full")

    monkeypatch.setattr("trustless_holdings.storage.bank_data.os.replace", refuse)
    with pytest.raises(PersistenceError):
        store.save(LedgerSnapshot(bank=Decimal("99"), cash=Decimal("99")))
    monkeypatch.undo()

    assert store.load() == LedgerSnapshot(bank=Decimal("10"), cash=Decimal("20"))
    assert [path.name for path in tmp_path.iterdir()] == ["data.json"]


def test_record_with_fractions_of_a_cent_is_rejected(tmp_path) -> None:
    path = tmp_path / "data.json"
    path.write_text('{"bank_balance": "1.005", "cash_balance": "0"}', encoding="utf-8")

    with pytest.raises(PersistenceError):
        BankDataStore(path).load()
