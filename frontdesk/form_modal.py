"""Keyboard-driven text form modal shared by booking and admin login."""

from __future__ import annotations

from typing import TypeVar

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Container
from textual.events import Key
from textual.screen import ModalScreen
from textual.widgets import Static

ResultT = TypeVar("ResultT")


class FormModal(ModalScreen[ResultT]):
    """
    Centered modal with a column of single-line text fields.

    Subclasses set ``TITLE_TEXT`` (or pass a title) and ``FIELDS`` (key, label pairs), list
    masked keys in ``MASKED_FIELDS`` and implement ``submit``, which either
    dismisses the screen or sets ``self.error``.
    """

    TITLE_TEXT = "Form"
    FIELDS: tuple[tuple[str, str], ...] = ()
    MASKED_FIELDS: frozenset[str] = frozenset()
    MAX_FIELD_LENGTH = 80

    CSS = """
    FormModal {
        align: center middle;
        background: $background 60%;
    }

    #form-dialog {
        width: 60;
        height: auto;
        border: round $secondary;
        background: $panel;
        padding: 1 2;
    }

    #form-title {
        text-style: bold;
        margin-bottom: 1;
        color: white;
    }

    #form-body {
        color: white;
        margin-bottom: 1;
    }

    #form-error {
        color: #ffb3b3;
        margin-bottom: 1;
    }

    #form-help {
        color: #dddddd;
    }
    """

    def __init__(self, title: str | None = None) -> None:
        super().__init__()
        self.title_text = title or self.TITLE_TEXT
        self.values: dict[str, str] = {key: "" for key, _ in self.FIELDS}
        self.field_index = 0
        self.error = ""

    def compose(self) -> ComposeResult:
        with Container(id="form-dialog"):
            yield Static(self.title_text, id="form-title")
            yield Static(id="form-body")
            yield Static(id="form-error")
            yield Static("↑/↓ move field. Enter next/confirm. Backspace delete. Esc cancel.", id="form-help")

    def on_mount(self) -> None:
        self._refresh_content()

    def submit(self) -> None:
        raise NotImplementedError

    def cancel(self) -> None:
        self.dismiss(None)

    def on_key(self, event: Key) -> None:
        event.stop()
        if event.key in {"escape", "ctrl+c"}:
            self.cancel()
            return

        current_key = self.FIELDS[self.field_index][0]

        if event.key == "enter":
            if self.field_index < len(self.FIELDS) - 1:
                self.field_index += 1
                self._refresh_content()
                return
            self.submit()
            if self.error:
                self._refresh_content()
            return

        if event.key in {"down", "tab"}:
            self.field_index = (self.field_index + 1) % len(self.FIELDS)
        elif event.key in {"up", "shift+tab"}:
            self.field_index = (self.field_index - 1) % len(self.FIELDS)
        elif event.key == "backspace":
            self.values[current_key] = self.values[current_key][:-1]
        elif event.is_printable and event.character:
            if len(self.values[current_key]) < self.MAX_FIELD_LENGTH:
                self.values[current_key] += event.character
        else:
            return

        self.error = ""
        self._refresh_content()

    def _refresh_content(self) -> None:
        body = self.query_one("#form-body", Static)
        error_widget = self.query_one("#form-error", Static)

        content = Text(style="white")
        label_width = max(len(label) for _, label in self.FIELDS)
        for idx, (key, label) in enumerate(self.FIELDS):
            if idx > 0:
                content.append("\n")
            active = idx == self.field_index
            pointer = "➤ " if active else "  "
            value = self.values[key]
            if key in self.MASKED_FIELDS:
                value = "*" * len(value)
            cursor = "|" if active else ""
            content.append(f"{pointer}{label:<{label_width}} : {value}{cursor}", style="bold white" if active else "white")
        body.update(content)
        error_widget.update(Text(self.error))
