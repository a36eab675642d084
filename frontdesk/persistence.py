"""SQLite ledger for customer registrations, bills and checkout history."""

from __future__ import annotations

import sqlite3
from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Protocol
from uuid import uuid4

from frontdesk.errors import PersistenceError
from frontdesk.models import Bill, Occupant, round_currency


class Ledger(Protocol):
    """Append-only record sink used by rooms; never read back by them."""

    def register_customer(self, room_number: int, occupant: Occupant) -> None: ...

    def save_bill(self, bill: Bill) -> str: ...

    def append_checkout_history(self, room_number: int, occupant_name: str, total: Decimal) -> None: ...


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


def _amount(value: Decimal) -> str:
    return str(round_currency(value))


class SqliteLedger:
    """Ledger backed by a local SQLite file, one transaction per record."""

    def __init__(self, db_path: str | Path) -> None:
        self.db_path = Path(db_path)

    def _connect(self) -> sqlite3.Connection:
        self.db_path.parent.mkdir(parents=True, exist_ok=True)
        return sqlite3.connect(self.db_path)

    def bootstrap_schema(self) -> None:
        """Create ledger tables if they do not already exist."""
        try:
            with self._connect() as conn:
                conn.executescript(
                    """
                    CREATE TABLE IF NOT EXISTS customers (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        room_number INTEGER NOT NULL,
                        name TEXT NOT NULL,
                        phone TEXT NOT NULL,
                        email TEXT NOT NULL,
                        id_proof TEXT NOT NULL,
                        registered_at TEXT NOT NULL
                    );

                    CREATE TABLE IF NOT EXISTS bills (
                        id TEXT PRIMARY KEY,
                        room_number INTEGER NOT NULL,
                        occupant_name TEXT NOT NULL,
                        room_cost TEXT NOT NULL,
                        food_cost TEXT NOT NULL,
                        total TEXT NOT NULL,
                        payment_status TEXT NOT NULL,
                        created_at TEXT NOT NULL
                    );

                    CREATE TABLE IF NOT EXISTS checkout_history (
                        id INTEGER PRIMARY KEY AUTOINCREMENT,
                        room_number INTEGER NOT NULL,
                        occupant_name TEXT NOT NULL,
                        total TEXT NOT NULL,
                        checked_out_at TEXT NOT NULL
                    );

                    CREATE INDEX IF NOT EXISTS idx_bills_room_number
                        ON bills(room_number);
                    """
                )
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(str(self.db_path), str(exc)) from exc

    def _write(self, target: str, sql: str, params: tuple[object, ...]) -> None:
        try:
            conn = self._connect()
            try:
                with conn:
                    conn.execute(sql, params)
            finally:
                conn.close()
        except (sqlite3.Error, OSError) as exc:
            raise PersistenceError(target, str(exc)) from exc

    def register_customer(self, room_number: int, occupant: Occupant) -> None:
        self._write(
            "customers",
            """
            INSERT INTO customers (room_number, name, phone, email, id_proof, registered_at)
            VALUES (?, ?, ?, ?, ?, ?)
            """,
            (room_number, occupant.name, occupant.phone, occupant.email, occupant.id_proof, _utc_now_iso()),
        )

    def save_bill(self, bill: Bill) -> str:
        """Persist a bill and return its record id."""
        bill_id = uuid4().hex
        self._write(
            "bills",
            """
            INSERT INTO bills (id, room_number, occupant_name, room_cost, food_cost, total, payment_status, created_at)
            VALUES (?, ?, ?, ?, ?, ?, ?, ?)
            """,
            (
                bill_id,
                bill.room_number,
                bill.occupant.name,
                _amount(bill.room_cost),
                _amount(bill.food_cost),
                _amount(bill.total),
                bill.payment_status,
                _utc_now_iso(),
            ),
        )
        return bill_id

    def append_checkout_history(self, room_number: int, occupant_name: str, total: Decimal) -> None:
        self._write(
            "checkout_history",
            "INSERT INTO checkout_history (room_number, occupant_name, total, checked_out_at) VALUES (?, ?, ?, ?)",
            (room_number, occupant_name, _amount(total), _utc_now_iso()),
        )
