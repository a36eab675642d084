"""Bill display modal shown after checkout."""

from __future__ import annotations

from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from frontdesk.models import Bill
from frontdesk.rendering import format_bill


class BillModal(ModalScreen[None]):
    CSS = """
    BillModal {
        align: center middle;
        background: $background 60%;
    }

    #bill-dialog {
        width: 44;
        height: auto;
        border: round $primary;
        background: $panel;
        padding: 1 2;
    }

    #bill-body {
        color: white;
        margin-bottom: 1;
    }

    #bill-help {
        color: #dddddd;
    }
    """

    def __init__(self, bill: Bill) -> None:
        super().__init__()
        self.bill = bill

    def compose(self) -> ComposeResult:
        with Container(id="bill-dialog"):
            yield Static(format_bill(self.bill), id="bill-body")
            yield Static("Enter/Esc/q close", id="bill-help")

    def on_key(self, event: Key) -> None:
        event.stop()
        if event.key in {"escape", "enter", "q", "ctrl+c"}:
            self.dismiss(None)
