"""Room booking, food ordering and checkout state machine."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from enum import Enum

from frontdesk.data import MenuCatalog
from frontdesk.errors import AlreadyOccupiedError, NonPositiveQuantityError, NotOccupiedError
from frontdesk.models import Bill, Occupant, RoomStatus, RoomSummary
from frontdesk.persistence import Ledger


class RoomState(Enum):
    VACANT = "VACANT"
    OCCUPIED = "OCCUPIED"


class Room:
    """
    A bookable room with its current stay.

    A vacant room has no occupant and no orders. Every operation validates
    before it mutates, and ledger writes happen before the state change they
    record, so a failed write leaves the room as it was.
    """

    def __init__(self, room_number: int, base_rate: Decimal, catalog: MenuCatalog, ledger: Ledger) -> None:
        if room_number <= 0:
            raise ValueError("room_number must be positive")
        try:
            rate = Decimal(base_rate)
        except (InvalidOperation, TypeError, ValueError) as exc:
            raise ValueError(f"base_rate {base_rate!r} is not a number") from exc
        if not rate.is_finite() or rate < 0:
            raise ValueError("base_rate must be a finite, non-negative amount")
        self._room_number = room_number
        self._base_rate = rate
        self._catalog = catalog
        self._ledger = ledger
        self._state = RoomState.VACANT
        self._occupant: Occupant | None = None
        self._orders: dict[str, int] = {}

    @property
    def room_number(self) -> int:
        return self._room_number

    @property
    def base_rate(self) -> Decimal:
        return self._base_rate

    @property
    def state(self) -> RoomState:
        return self._state

    @property
    def occupied(self) -> bool:
        return self._state is RoomState.OCCUPIED

    @property
    def occupant(self) -> Occupant | None:
        return self._occupant

    @property
    def orders(self) -> dict[str, int]:
        return dict(self._orders)

    def _require_occupied(self) -> Occupant:
        if not self.occupied or self._occupant is None:
            raise NotOccupiedError(self._room_number)
        return self._occupant

    def book(self, occupant: Occupant) -> None:
        """Check a customer in and register them in the ledger."""
        if self.occupied:
            raise AlreadyOccupiedError(self._room_number)
        self._ledger.register_customer(self._room_number, occupant)
        self._occupant = occupant
        self._state = RoomState.OCCUPIED

    def add_food_order(self, item_name: str, quantity: int) -> None:
        """Add ``quantity`` units of a menu item to the current stay."""
        self._require_occupied()
        self._catalog.price_of(item_name)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise NonPositiveQuantityError(quantity, item_name=item_name, room_number=self._room_number)
        self._orders[item_name] = self._orders.get(item_name, 0) + quantity

    def compute_bill(self) -> Bill:
        occupant = self._require_occupied()
        return Bill.from_costs(
            room_number=self._room_number,
            occupant=occupant,
            room_cost=self._base_rate,
            food_cost=self._catalog.subtotal(self._orders),
        )

    def checkout(self) -> Bill:
        """Bill the stay, record it, and free the room for the next customer."""
        bill = self.compute_bill()
        self._ledger.save_bill(bill)
        self._ledger.append_checkout_history(self._room_number, bill.occupant.name, bill.total)

        self._orders.clear()
        self._occupant = None
        self._state = RoomState.VACANT
        return bill

    def display(self) -> RoomStatus:
        return RoomStatus(room_number=self._room_number, base_rate=self._base_rate, occupied=self.occupied)

    def summary(self) -> RoomSummary:
        return RoomSummary(
            room_number=self._room_number,
            base_rate=self._base_rate,
            occupied=self.occupied,
            occupant=self._occupant,
            order_counts={name: self._orders[name] for name in sorted(self._orders)},
        )

    def __repr__(self) -> str:
        return f"Room({self._room_number}, {self._state.value})"
