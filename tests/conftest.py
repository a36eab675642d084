from __future__ import annotations

from decimal import Decimal

import pytest

from frontdesk.data import MenuCatalog, default_catalog
from frontdesk.errors import PersistenceError
from frontdesk.models import Bill, Occupant
from frontdesk.persistence import SqliteLedger
from frontdesk.room import Room


class RecordingLedger:
    """In-memory ledger that keeps every call, optionally failing chosen ones."""

    def __init__(self, fail_on: set[str] | None = None) -> None:
        self.fail_on = set(fail_on or ())
        self.calls: list[tuple[str, tuple[object, ...]]] = []

    def _record(self, name: str, *args: object) -> None:
        if name in self.fail_on:
            raise PersistenceError(name, "disk full")
        self.calls.append((name, args))

    def register_customer(self, room_number: int, occupant: Occupant) -> None:
        self._record("register_customer", room_number, occupant)

    def save_bill(self, bill: Bill) -> str:
        self._record("save_bill", bill)
        return f"bill-{len(self.calls)}"

    def append_checkout_history(self, room_number: int, occupant_name: str, total: Decimal) -> None:
        self._record("append_checkout_history", room_number, occupant_name, total)

    def names(self) -> list[str]:
        return [name for name, _ in self.calls]


@pytest.fixture
def catalog() -> MenuCatalog:
    return default_catalog()


@pytest.fixture
def ledger() -> RecordingLedger:
    return RecordingLedger()


@pytest.fixture
def occupant() -> Occupant:
    return Occupant(name="Asha Rao", phone="555-0101", email="asha@example.com", id_proof="P1234567")


@pytest.fixture
def room(catalog: MenuCatalog, ledger: RecordingLedger) -> Room:
    return Room(101, Decimal("1000.00"), catalog, ledger)


@pytest.fixture
def booked_room(room: Room, occupant: Occupant) -> Room:
    room.book(occupant)
    return room


@pytest.fixture
def sqlite_ledger(tmp_path) -> SqliteLedger:
    ledger = SqliteLedger(tmp_path / "ledger" / "frontdesk.db")
    ledger.bootstrap_schema()
    return ledger
