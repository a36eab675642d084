from __future__ import annotations

import sqlite3
from decimal import Decimal

import pytest

from frontdesk.data import default_catalog
from frontdesk.errors import PersistenceError
from frontdesk.models import Bill
from frontdesk.persistence import SqliteLedger
from frontdesk.room import Room


def _rows(ledger, sql):
    with sqlite3.connect(ledger.db_path) as conn:
        return conn.execute(sql).fetchall()


def test_bootstrap_schema_is_repeatable(sqlite_ledger):
    sqlite_ledger.bootstrap_schema()

    tables = {row[0] for row in _rows(sqlite_ledger, "SELECT name FROM sqlite_master WHERE type = 'table'")}
    assert {"customers", "bills", "checkout_history"} <= tables


def test_register_customer_writes_all_fields(sqlite_ledger, occupant):
    sqlite_ledger.register_customer(104, occupant)

    rows = _rows(sqlite_ledger, "SELECT room_number, name, phone, email, id_proof, registered_at FROM customers")
    assert len(rows) == 1
    assert rows[0][:5] == (104, "Asha Rao", "555-0101", "asha@example.com", "P1234567")
    assert rows[0][5]


def test_save_bill_stores_rounded_amounts_and_paid_marker(sqlite_ledger, occupant):
    bill = Bill.from_costs(102, occupant, Decimal("1200"), Decimal("12.5"))

    bill_id = sqlite_ledger.save_bill(bill)

    rows = _rows(
        sqlite_ledger,
        "SELECT id, room_number, occupant_name, room_cost, food_cost, total, payment_status FROM bills",
    )
    assert rows == [(bill_id, 102, "Asha Rao", "1200.00", "12.50", "1212.50", "Paid")]


def test_each_bill_gets_its_own_record(sqlite_ledger, occupant):
    bill = Bill.from_costs(102, occupant, Decimal("1200"), Decimal("0"))

    first = sqlite_ledger.save_bill(bill)
    second = sqlite_ledger.save_bill(bill)

    assert first != second
    assert len(_rows(sqlite_ledger, "SELECT id FROM bills")) == 2


def test_checkout_history_appends(sqlite_ledger):
    sqlite_ledger.append_checkout_history(101, "Asha Rao", Decimal("1012.5"))
    sqlite_ledger.append_checkout_history(101, "Ben Ode", Decimal("1000"))

    rows = _rows(sqlite_ledger, "SELECT room_number, occupant_name, total FROM checkout_history ORDER BY id")
    assert rows == [(101, "Asha Rao", "1012.50"), (101, "Ben Ode", "1000.00")]


def test_write_without_schema_raises_persistence_error(tmp_path, occupant):
    ledger = SqliteLedger(tmp_path / "empty.db")

    with pytest.raises(PersistenceError) as excinfo:
        ledger.register_customer(101, occupant)

    assert excinfo.value.target == "customers"


def test_full_stay_through_sqlite_ledger(sqlite_ledger, occupant):
    room = Room(101, Decimal("1000.00"), default_catalog(), sqlite_ledger)
    room.book(occupant)
    room.add_food_order("Burger", 2)
    room.add_food_order("Coke", 1)

    bill = room.checkout()

    assert bill.total == Decimal("1012.50")
    assert _rows(sqlite_ledger, "SELECT room_number, name FROM customers") == [(101, "Asha Rao")]
    assert _rows(sqlite_ledger, "SELECT room_cost, food_cost, total FROM bills") == [("1000.00", "12.50", "1012.50")]
    assert _rows(sqlite_ledger, "SELECT room_number, occupant_name, total FROM checkout_history") == [
        (101, "Asha Rao", "1012.50")
    ]
    assert not room.occupied
