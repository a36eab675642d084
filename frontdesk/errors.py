"""Errors raised by the room lifecycle and its collaborators."""

from __future__ import annotations


class FrontDeskError(Exception):
    """Base class for recoverable front desk errors."""


class AlreadyOccupiedError(FrontDeskError):
    def __init__(self, room_number: int) -> None:
        super().__init__(f"Room {room_number} is already booked")
        self.room_number = room_number


class NotOccupiedError(FrontDeskError):
    def __init__(self, room_number: int) -> None:
        super().__init__(f"Room {room_number} is not booked")
        self.room_number = room_number


class RoomNotFoundError(FrontDeskError):
    def __init__(self, room_number: int) -> None:
        super().__init__(f"Room {room_number} not found")
        self.room_number = room_number


class UnknownItemError(FrontDeskError):
    def __init__(self, item_name: str) -> None:
        super().__init__(f"Unknown menu item: {item_name!r}")
        self.item_name = item_name


class NonPositiveQuantityError(FrontDeskError):
    def __init__(self, quantity: object, item_name: str | None = None, room_number: int | None = None) -> None:
        where = ""
        if item_name is not None:
            where += f" for {item_name!r}"
        if room_number is not None:
            where += f" in room {room_number}"
        super().__init__(f"Quantity{where} must be a positive integer, got {quantity!r}")
        self.quantity = quantity
        self.item_name = item_name
        self.room_number = room_number


class PersistenceError(FrontDeskError):
    """A ledger write failed; ``target`` names the record sink."""

    def __init__(self, target: str, message: str) -> None:
        super().__init__(f"Could not write {target}: {message}")
        self.target = target
