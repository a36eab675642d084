"""Menu catalog and default room data."""

from __future__ import annotations

from decimal import Decimal
from typing import Iterable, Mapping

from frontdesk.constant import MENU_ITEMS as _MENU_ITEMS_RAW
from frontdesk.constant import ROOM_RATES as _ROOM_RATES_RAW
from frontdesk.errors import UnknownItemError
from frontdesk.models import MenuItem


class MenuCatalog:
    """Fixed, read-only set of menu items keyed by exact name."""

    def __init__(self, items: Iterable[MenuItem]) -> None:
        self._items: list[MenuItem] = []
        self._prices: dict[str, Decimal] = {}
        for item in items:
            if item.name in self._prices:
                raise ValueError(f"Duplicate menu item: {item.name!r}")
            if item.unit_price < 0:
                raise ValueError(f"Menu item {item.name!r} has a negative price")
            self._items.append(item)
            self._prices[item.name] = item.unit_price

    def __contains__(self, name: object) -> bool:
        return name in self._prices

    def __len__(self) -> int:
        return len(self._items)

    def price_of(self, name: str) -> Decimal:
        try:
            return self._prices[name]
        except KeyError:
            raise UnknownItemError(name) from None

    def items(self) -> list[MenuItem]:
        """Menu items in definition order."""
        return list(self._items)

    def subtotal(self, order_counts: Mapping[str, int]) -> Decimal:
        """Unrounded cost of ``order_counts`` at catalog prices."""
        return sum(
            (self.price_of(name) * quantity for name, quantity in order_counts.items()),
            Decimal("0"),
        )


def default_menu_items() -> list[MenuItem]:
    return [MenuItem(name=str(raw["name"]), unit_price=Decimal(raw["unit_price"])) for raw in _MENU_ITEMS_RAW]


def default_room_rates() -> list[tuple[int, Decimal]]:
    return [(number, Decimal(rate)) for number, rate in _ROOM_RATES_RAW.items()]


def default_catalog() -> MenuCatalog:
    return MenuCatalog(default_menu_items())
