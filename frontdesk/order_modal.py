"""Food ordering modal for an occupied room."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from frontdesk.data import MenuCatalog
from frontdesk.errors import FrontDeskError
from frontdesk.rendering import format_menu, format_order_summary
from frontdesk.room import Room


class OrderModal(ModalScreen[dict[str, int]]):
    """Pick menu items and quantities; dismisses with this session's order counts."""

    CSS = """
    OrderModal {
        align: center middle;
        background: $background 60%;
    }

    #order-dialog {
        width: 56;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #order-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #order-menu {
        color: white;
        margin-bottom: 1;
    }

    #order-quantity {
        border: heavy $secondary;
        padding: 0 1;
        color: white;
        margin-bottom: 1;
    }

    #order-summary {
        color: white;
        margin-bottom: 1;
    }

    #order-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #order-help {
        color: #dddddd;
    }
    """

    def __init__(self, room: Room, catalog: MenuCatalog, log: Callable[[str], None] | None = None) -> None:
        super().__init__()
        self.room = room
        self.catalog = catalog
        self.log_debug = log or (lambda message: None)
        self.menu_items = catalog.items()
        self.cursor_index = 0
        self.quantity_input = ""
        self.session_counts: dict[str, int] = {}
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="order-dialog"):
            yield Static(f"Food Menu: Room {self.room.room_number}", id="order-title")
            yield Static(id="order-menu")
            yield Static(id="order-quantity")
            yield Static(id="order-summary")
            yield Static(id="order-error")
            yield Static(
                "J/K/↑/↓ move. Digits set quantity (default 1). Enter add. Esc/q finish.",
                id="order-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        event.stop()
        if event.key in {"escape", "q", "ctrl+c"}:
            self.dismiss(dict(self.session_counts))
            return

        if event.key in {"j", "down"}:
            self._move_cursor(1)
        elif event.key in {"k", "up"}:
            self._move_cursor(-1)
        elif event.key == "enter":
            self._add_selected()
        elif event.key == "backspace":
            self.quantity_input = self.quantity_input[:-1]
            self.error = ""
        elif event.is_printable and event.character and event.character.isdigit():
            if len(self.quantity_input) < 3:
                self.quantity_input += event.character
            self.error = ""
        else:
            return
        self._refresh_content()

    def _move_cursor(self, delta: int) -> None:
        if not self.menu_items:
            return
        self.cursor_index = (self.cursor_index + delta) % len(self.menu_items)

    def _add_selected(self) -> None:
        if not self.menu_items:
            return
        item = self.menu_items[self.cursor_index]
        quantity = int(self.quantity_input) if self.quantity_input else 1
        try:
            self.room.add_food_order(item.name, quantity)
        except FrontDeskError as exc:
            self.error = str(exc)
            self.log_debug(f"order_rejected room={self.room.room_number} item={item.name!r} qty={quantity} error={exc}")
            return
        self.session_counts[item.name] = self.session_counts.get(item.name, 0) + quantity
        self.quantity_input = ""
        self.error = ""
        self.log_debug(f"order_added room={self.room.room_number} item={item.name!r} qty={quantity}")

    def _refresh_content(self) -> None:
        menu_widget = self.query_one("#order-menu", Static)
        quantity_widget = self.query_one("#order-quantity", Static)
        summary_widget = self.query_one("#order-summary", Static)
        error_widget = self.query_one("#order-error", Static)

        menu_widget.update(format_menu(self.menu_items, self.cursor_index))
        quantity_widget.update(Text(f"Quantity: {self.quantity_input or '1'}"))
        summary_widget.update(format_order_summary(self.session_counts, self.catalog))
        error_widget.update(Text(self.error))
