"""Fixed room inventory."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Iterator

from frontdesk.data import MenuCatalog
from frontdesk.errors import RoomNotFoundError
from frontdesk.persistence import Ledger
from frontdesk.room import Room


class Inventory:
    """Rooms keyed by number, listed in creation order."""

    def __init__(self, rooms: Iterable[Room]) -> None:
        self._rooms: dict[int, Room] = {}
        for room in rooms:
            if room.room_number in self._rooms:
                raise ValueError(f"Duplicate room number: {room.room_number}")
            self._rooms[room.room_number] = room

    def __iter__(self) -> Iterator[Room]:
        return iter(self._rooms.values())

    def __len__(self) -> int:
        return len(self._rooms)

    def find_room(self, room_number: int) -> Room:
        try:
            return self._rooms[room_number]
        except KeyError:
            raise RoomNotFoundError(room_number) from None

    def all_rooms(self) -> list[Room]:
        return list(self._rooms.values())


def build_inventory(rates: Iterable[tuple[int, Decimal]], catalog: MenuCatalog, ledger: Ledger) -> Inventory:
    """Create one vacant room per ``(room_number, base_rate)`` pair."""
    return Inventory(Room(number, rate, catalog, ledger) for number, rate in rates)
