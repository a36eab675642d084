"""Main Textual front desk app."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal
from pathlib import Path
from typing import Iterable

from rich.text import Text
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.css.query import NoMatches
from textual.reactive import reactive
from textual.screen import ModalScreen
from textual.widgets import Header, Static

from frontdesk.admin import AdminCredentials, AdminView
from frontdesk.admin_modal import AdminLoginModal, AdminModal
from frontdesk.bill_modal import BillModal
from frontdesk.booking_modal import BookingModal
from frontdesk.config import DB_PATH, DEBUG_LOG_PATH
from frontdesk.constant import HOTEL_NAME
from frontdesk.data import MenuCatalog, default_catalog, default_room_rates
from frontdesk.errors import AlreadyOccupiedError, FrontDeskError, NotOccupiedError
from frontdesk.inventory import Inventory, build_inventory
from frontdesk.models import Occupant
from frontdesk.order_modal import OrderModal
from frontdesk.persistence import SqliteLedger
from frontdesk.printer import check_printer_dependencies, print_bill
from frontdesk.rendering import format_room_row, money
from frontdesk.room import Room


class FrontDeskApp(App):
    """A Textual app for booking rooms, ordering food and checking out."""

    TITLE = HOTEL_NAME
    SUB_TITLE = "Front Desk"

    CSS = """
    Screen {
        layout: vertical;
    }

    #main-layout {
        height: 1fr;
    }

    #rooms-pane {
        width: 3fr;
        border: round $primary;
        padding: 1;
    }

    #side-pane {
        width: 2fr;
        border: round $secondary;
        padding: 1;
    }

    #status-bar {
        border: heavy $secondary;
        padding: 0 1;
        margin-bottom: 1;
        height: 4;
    }

    #rooms-list {
        height: 1fr;
        border: tall $surface;
        padding: 0 1;
    }

    #help {
        height: 1fr;
        padding: 0 1;
    }

    .pane-title {
        text-style: bold;
        margin-bottom: 1;
    }
    """

    selected_index = reactive(0)

    BINDINGS = [
        ("j", "move_selection(1)", "Next room"),
        ("k", "move_selection(-1)", "Previous room"),
        ("down", "move_selection(1)", "Next room"),
        ("up", "move_selection(-1)", "Previous room"),
        ("b", "book", "Book"),
        ("o", "order_food", "Order food"),
        ("c", "checkout", "Bill + checkout"),
        ("a", "admin", "Admin"),
        ("ctrl+q", "quit", "Quit"),
    ]

    def __init__(
        self,
        db_path: str | Path = DB_PATH,
        catalog: MenuCatalog | None = None,
        credentials: AdminCredentials | None = None,
        room_rates: Iterable[tuple[int, Decimal]] | None = None,
    ) -> None:
        super().__init__()
        self.ledger = SqliteLedger(db_path)
        self.catalog = catalog or default_catalog()
        self.inventory: Inventory = build_inventory(
            default_room_rates() if room_rates is None else room_rates, self.catalog, self.ledger
        )
        self.credentials = credentials or AdminCredentials.from_config()
        self.printer_ready = False
        self.system_status = ""
        self._debug_log_path = Path(DEBUG_LOG_PATH)
        self._log_debug("app_init")

    def _log_debug(self, message: str) -> None:
        try:
            ts = datetime.now(timezone.utc).isoformat()
            self._debug_log_path.parent.mkdir(parents=True, exist_ok=True)
            with self._debug_log_path.open("a", encoding="utf-8") as fh:
                fh.write(f"{ts} {message}\n")
        except Exception:
            # Logging must never interfere with app flow.
            return

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id="main-layout"):
            with Vertical(id="rooms-pane"):
                yield Static("Rooms", classes="pane-title")
                yield Static(id="rooms-list")
            with Vertical(id="side-pane"):
                yield Static(id="status-bar")
                yield Static(id="help")

    def on_mount(self) -> None:
        try:
            self.ledger.bootstrap_schema()
        except FrontDeskError as exc:
            self._set_status(f"Ledger unavailable: {exc}")
            self._log_debug(f"on_mount ledger_error={exc!r}")
        self.printer_ready, msg = check_printer_dependencies()
        if not self.system_status:
            self.system_status = msg
        self._log_debug(f"on_mount printer_status={msg!r}")
        self._refresh_all()

    def _modal_open(self) -> bool:
        return isinstance(self.screen, ModalScreen)

    def _set_status(self, message: str) -> None:
        self.system_status = message
        self._refresh_status()

    def _selected_room(self) -> Room | None:
        rooms = self.inventory.all_rooms()
        if not rooms:
            self._set_status("No rooms configured")
            return None
        return rooms[self.selected_index % len(rooms)]

    def action_move_selection(self, delta: int) -> None:
        if self._modal_open():
            return
        total = len(self.inventory)
        if total == 0:
            return
        self.selected_index = (self.selected_index + delta) % total
        self._refresh_rooms()

    def action_book(self) -> None:
        if self._modal_open():
            return
        room = self._selected_room()
        if room is None:
            return
        if room.occupied:
            self._report(AlreadyOccupiedError(room.room_number), "book")
            return
        self.push_screen(BookingModal(room.room_number), lambda occupant: self._finish_booking(room, occupant))

    def _finish_booking(self, room: Room, occupant: Occupant | None) -> None:
        if occupant is None:
            self._set_status(f"Booking of room {room.room_number} cancelled")
            return
        try:
            room.book(occupant)
        except FrontDeskError as exc:
            self._report(exc, "book")
            return
        self._log_debug(f"booked room={room.room_number} name={occupant.name!r}")
        self._set_status(f"Room {room.room_number} booked for {occupant.name}")
        self._refresh_rooms()

    def action_order_food(self) -> None:
        if self._modal_open():
            return
        room = self._selected_room()
        if room is None:
            return
        if not room.occupied:
            self._report(NotOccupiedError(room.room_number), "order food")
            return
        self.push_screen(
            OrderModal(room, self.catalog, log=self._log_debug),
            lambda counts: self._finish_order(room, counts),
        )

    def _finish_order(self, room: Room, counts: dict[str, int] | None) -> None:
        if not counts:
            self._set_status(f"No items ordered for room {room.room_number}")
            return
        subtotal = self.catalog.subtotal(counts)
        self._log_debug(f"order_session room={room.room_number} lines={len(counts)} subtotal={subtotal}")
        self._set_status(f"Room {room.room_number} ordered {sum(counts.values())} item(s), subtotal {money(subtotal)}")

    def action_checkout(self) -> None:
        if self._modal_open():
            return
        room = self._selected_room()
        if room is None:
            return
        self._log_debug(f"checkout_enter room={room.room_number}")
        try:
            bill = room.checkout()
        except FrontDeskError as exc:
            self._report(exc, "checkout")
            return

        self._log_debug(f"checkout_saved room={room.room_number} total={bill.total}")
        self._refresh_rooms()
        status = f"Room {room.room_number} checked out, total {money(bill.total)}"
        if self.printer_ready:
            try:
                print_bill(bill)
            except Exception as exc:
                status = f"{status} but print failed: {exc}"
                self._log_debug(f"checkout_print_failed room={room.room_number} error={exc!r}")
            else:
                self._log_debug(f"checkout_printed room={room.room_number}")
        self._set_status(status)
        self.push_screen(BillModal(bill))

    def action_admin(self) -> None:
        if self._modal_open():
            return
        self.push_screen(AdminLoginModal(self.credentials), self._finish_admin_login)

    def _finish_admin_login(self, granted: bool | None) -> None:
        if granted is None:
            return
        self._log_debug(f"admin_login granted={granted}")
        if not granted:
            self._set_status("Admin login failed")
            return
        self._set_status("Admin login successful")
        self.push_screen(AdminModal(AdminView(self.inventory), log=self._log_debug))

    def _report(self, exc: FrontDeskError, operation: str) -> None:
        self._log_debug(f"{operation.replace(' ', '_')}_failed error={exc!r}")
        self._set_status(f"Cannot {operation}: {exc}")

    def _refresh_all(self) -> None:
        self._refresh_rooms()
        self._refresh_status()
        self._refresh_help()

    def _refresh_rooms(self) -> None:
        try:
            rooms_widget = self.query_one("#rooms-list", Static)
        except NoMatches:
            return
        lines = Text()
        for idx, room in enumerate(self.inventory.all_rooms()):
            if idx > 0:
                lines.append("\n")
            pointer = "➤ " if idx == self.selected_index else "  "
            lines.append(pointer)
            lines.append_text(format_room_row(room.display()))
            if room.occupant is not None:
                lines.append(f"  {room.occupant.name}", style="dim")
        rooms_widget.update(lines)

    def _refresh_status(self) -> None:
        try:
            bar = self.query_one("#status-bar", Static)
        except NoMatches:
            return
        bar.update(Text(self.system_status or "Ready"))

    def _refresh_help(self) -> None:
        self.query_one("#help", Static).update(
            "J/K/↑/↓ select room\n"
            "B  book room\n"
            "O  order food\n"
            "C  generate bill + checkout\n"
            "A  admin login\n"
            "Ctrl+Q  exit"
        )
