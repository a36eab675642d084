from __future__ import annotations

import asyncio
import sqlite3
from decimal import Decimal

from textual.screen import ModalScreen

from frontdesk.admin import AdminCredentials
from frontdesk.admin_modal import AdminModal
from frontdesk.bill_modal import BillModal
from frontdesk.desk_app import FrontDeskApp
from frontdesk.order_modal import OrderModal
from frontdesk.rendering import format_room_summary


def test_stay_through_the_terminal_ui(tmp_path):
    db_path = tmp_path / "ui.db"

    async def scenario() -> None:
        app = FrontDeskApp(db_path=db_path)
        async with app.run_test() as pilot:
            await pilot.press("c")
            assert "Cannot checkout" in app.system_status
            assert "Room 101" in app.system_status

            await pilot.press("b", "a", "n", "n", "enter", "enter", "enter", "enter")
            room = app.inventory.find_room(101)
            assert room.occupied
            assert room.occupant.name == "ann"

            await pilot.press("o", "2", "enter", "escape")
            assert room.orders == {"Burger": 2}
            assert "$10.00" in app.system_status

            await pilot.press("c")
            assert not room.occupied
            assert isinstance(app.screen, BillModal)
            assert app.screen.bill.total == Decimal("1010.00")
            await pilot.press("enter")
            assert not isinstance(app.screen, BillModal)

    asyncio.run(scenario())

    with sqlite3.connect(db_path) as conn:
        assert conn.execute("SELECT room_number, occupant_name, total FROM checkout_history").fetchall() == [
            (101, "ann", "1010.00")
        ]


def test_failed_admin_login_is_reported(tmp_path):
    async def scenario() -> None:
        app = FrontDeskApp(db_path=tmp_path / "ui.db", credentials=AdminCredentials("root", "9"))
        async with app.run_test() as pilot:
            await pilot.press("a", "x", "enter", "y", "enter")
            assert app.system_status == "Admin login failed"

    asyncio.run(scenario())


def test_admin_reports_through_the_terminal_ui(tmp_path):
    async def scenario() -> None:
        app = FrontDeskApp(db_path=tmp_path / "ui.db", credentials=AdminCredentials("root", "9"))
        async with app.run_test() as pilot:
            await pilot.press("b", "z", "enter", "enter", "enter", "enter")
            assert app.inventory.find_room(101).occupied

            await pilot.press("a", "r", "o", "o", "t", "enter", "9", "enter")
            assert isinstance(app.screen, AdminModal)
            assert app.system_status == "Admin login successful"

            await pilot.press("1", "0", "1", "enter")
            assert app.screen.detail_room == 101
            assert app.screen.error == ""
            detail = format_room_summary(app.screen.view.room_detail(101)).plain
            assert "Name     : z" in detail
            assert "Booked" in detail

            await pilot.press("9", "9", "enter")
            assert app.screen.error == "Room 99 not found"
            assert app.screen.detail_room == 101

            await pilot.press("v")
            assert app.screen.detail_room is None
            assert app.screen.error == ""

            await pilot.press("escape")
            assert not isinstance(app.screen, AdminModal)
            assert app.inventory.find_room(101).occupied

    asyncio.run(scenario())


def test_rejected_quantity_is_shown_in_the_order_screen(tmp_path):
    async def scenario() -> None:
        app = FrontDeskApp(db_path=tmp_path / "ui.db")
        async with app.run_test() as pilot:
            await pilot.press("b", "z", "enter", "enter", "enter", "enter")
            room = app.inventory.find_room(101)

            await pilot.press("o", "0", "enter")
            assert isinstance(app.screen, OrderModal)
            assert "'Burger'" in app.screen.error
            assert "room 101" in app.screen.error
            assert "got 0" in app.screen.error
            assert room.orders == {}

            await pilot.press("escape")
            assert app.system_status == "No items ordered for room 101"
            assert room.orders == {}

    asyncio.run(scenario())


def test_actions_without_rooms_report_instead_of_failing(tmp_path):
    async def scenario() -> None:
        app = FrontDeskApp(db_path=tmp_path / "ui.db", room_rates=[])
        async with app.run_test() as pilot:
            for key in ("b", "o", "c"):
                await pilot.press(key)
                assert app.system_status == "No rooms configured"
                assert not isinstance(app.screen, ModalScreen)

    asyncio.run(scenario())
