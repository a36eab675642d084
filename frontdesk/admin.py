"""Admin credentials and read-only reporting over the inventory."""

from __future__ import annotations

from dataclasses import dataclass

from frontdesk import config
from frontdesk.inventory import Inventory
from frontdesk.models import RoomStatus, RoomSummary


@dataclass(frozen=True)
class AdminCredentials:
    """Static admin login; a placeholder, not a security boundary."""

    username: str
    password: str

    @classmethod
    def from_config(cls) -> AdminCredentials:
        return cls(username=config.ADMIN_USERNAME, password=config.ADMIN_PASSWORD)

    def check(self, username: str, password: str) -> bool:
        return username == self.username and password == self.password


class AdminView:
    """Reporting over an inventory that never mutates room state."""

    def __init__(self, inventory: Inventory) -> None:
        self.inventory = inventory

    def availability(self) -> list[RoomStatus]:
        return [room.display() for room in self.inventory.all_rooms()]

    def room_detail(self, room_number: int) -> RoomSummary:
        return self.inventory.find_room(room_number).summary()
