"""Admin login and read-only admin report modals."""

from __future__ import annotations

from typing import Callable

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

from frontdesk.admin import AdminCredentials, AdminView
from frontdesk.errors import RoomNotFoundError
from frontdesk.form_modal import FormModal
from frontdesk.rendering import format_room_row, format_room_summary


class AdminLoginModal(FormModal[bool]):
    """Dismisses with True on a credential match, False on a mismatch, None on cancel."""

    TITLE_TEXT = "Admin Login"
    FIELDS = (
        ("username", "Username"),
        ("password", "Password"),
    )
    MASKED_FIELDS = frozenset({"password"})

    def __init__(self, credentials: AdminCredentials) -> None:
        super().__init__()
        self.credentials = credentials

    def submit(self) -> None:
        self.dismiss(self.credentials.check(self.values["username"], self.values["password"]))


class AdminModal(ModalScreen[None]):
    """Room availability and per-room detail; never mutates rooms."""

    CSS = """
    AdminModal {
        align: center middle;
        background: $background 60%;
    }

    #admin-dialog {
        width: 64;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #admin-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #admin-body {
        color: white;
        margin-bottom: 1;
    }

    #admin-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #admin-help {
        color: #dddddd;
    }
    """

    def __init__(self, view: AdminView, log: Callable[[str], None] | None = None) -> None:
        super().__init__()
        self.view = view
        self.log_debug = log or (lambda message: None)
        self.room_input = ""
        self.error = ""
        self.detail_room: int | None = None

    def compose(self) -> ComposeResult:
        with Container(id="admin-dialog"):
            yield Static("Admin", id="admin-title")
            yield Static(id="admin-body")
            yield Static(id="admin-error")
            yield Static(
                "V availability. Digits + Enter room detail. Backspace delete. Esc/q logout.",
                id="admin-help",
            )

    def on_mount(self) -> None:
        self._refresh_content()

    def on_key(self, event: Key) -> None:
        event.stop()
        if event.key in {"escape", "q", "ctrl+c"}:
            self.log_debug("admin_logout")
            self.dismiss(None)
            return

        if event.key == "v":
            self.detail_room = None
            self.room_input = ""
            self.error = ""
        elif event.key == "enter":
            self._show_detail()
        elif event.key == "backspace":
            self.room_input = self.room_input[:-1]
            self.error = ""
        elif event.is_printable and event.character and event.character.isdigit():
            if len(self.room_input) < 6:
                self.room_input += event.character
            self.error = ""
        else:
            return
        self._refresh_content()

    def _show_detail(self) -> None:
        if not self.room_input:
            self.error = "Enter a room number first."
            return
        room_number = int(self.room_input)
        try:
            self.view.room_detail(room_number)
        except RoomNotFoundError as exc:
            self.error = str(exc)
            self.log_debug(f"admin_detail_failed room={room_number}")
            return
        self.detail_room = room_number
        self.room_input = ""
        self.error = ""
        self.log_debug(f"admin_detail room={room_number}")

    def _refresh_content(self) -> None:
        title = self.query_one("#admin-title", Static)
        body = self.query_one("#admin-body", Static)
        error_widget = self.query_one("#admin-error", Static)

        if self.detail_room is None:
            title.update("Admin: Room Availability")
            content = Text()
            for idx, status in enumerate(self.view.availability()):
                if idx > 0:
                    content.append("\n")
                content.append_text(format_room_row(status))
        else:
            title.update(f"Admin: Room {self.detail_room} Details")
            content = format_room_summary(self.view.room_detail(self.detail_room))

        content.append(f"\n\nRoom number: {self.room_input}|")
        body.update(content)
        error_widget.update(Text(self.error))
