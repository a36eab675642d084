"""Customer check-in form modal."""

from __future__ import annotations

from frontdesk.form_modal import FormModal
from frontdesk.models import Occupant


class BookingModal(FormModal[Occupant]):
    """Collect occupant details for one room; dismisses with ``None`` on cancel."""

    FIELDS = (
        ("name", "Customer Name"),
        ("phone", "Phone Number"),
        ("email", "Email"),
        ("id_proof", "ID Proof"),
    )

    def __init__(self, room_number: int) -> None:
        super().__init__(title=f"Book Room {room_number}")
        self.room_number = room_number

    def submit(self) -> None:
        name = self.values["name"].strip()
        if not name:
            self.field_index = 0
            self.error = "Customer name is required."
            return
        self.dismiss(
            Occupant(
                name=name,
                phone=self.values["phone"].strip(),
                email=self.values["email"].strip(),
                id_proof=self.values["id_proof"].strip(),
            )
        )
