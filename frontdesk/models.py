"""Domain models for the front desk."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")
PAYMENT_STATUS_PAID = "Paid"


def round_currency(amount: Decimal) -> Decimal:
    """Round an amount to cents, halves away from zero."""
    return Decimal(amount).quantize(CENT, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class MenuItem:
    """An orderable menu item."""

    name: str
    unit_price: Decimal


@dataclass(frozen=True)
class Occupant:
    """Customer details recorded at check-in."""

    name: str
    phone: str = ""
    email: str = ""
    id_proof: str = ""


@dataclass(frozen=True)
class Bill:
    """Charges for one stay, rounded once to cents at construction."""

    room_number: int
    occupant: Occupant
    room_cost: Decimal
    food_cost: Decimal
    total: Decimal
    payment_status: str = PAYMENT_STATUS_PAID

    @classmethod
    def from_costs(cls, room_number: int, occupant: Occupant, room_cost: Decimal, food_cost: Decimal) -> Bill:
        # Total comes from the unrounded costs and is rounded on its own.
        return cls(
            room_number=room_number,
            occupant=occupant,
            room_cost=round_currency(room_cost),
            food_cost=round_currency(food_cost),
            total=round_currency(room_cost + food_cost),
        )


@dataclass(frozen=True)
class RoomStatus:
    """Public listing view of a room."""

    room_number: int
    base_rate: Decimal
    occupied: bool


@dataclass(frozen=True)
class RoomSummary:
    """Detailed admin view of a room, orders sorted by item name."""

    room_number: int
    base_rate: Decimal
    occupied: bool
    occupant: Occupant | None = None
    order_counts: dict[str, int] = field(default_factory=dict)
