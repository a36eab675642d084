"""Editable static menu and room configuration."""

from __future__ import annotations

# Prices are decimal strings so they load into Decimal without float drift.
MENU_ITEMS: list[dict[str, str]] = [
    {"name": "Burger", "unit_price": "5.00"},
    {"name": "Pizza", "unit_price": "8.00"},
    {"name": "Water", "unit_price": "2.00"},
    {"name": "Fries", "unit_price": "3.50"},
    {"name": "Coke", "unit_price": "2.50"},
    {"name": "Ice Cream", "unit_price": "4.00"},
]

# Room number -> nightly base rate, in display order.
ROOM_RATES: dict[int, str] = {
    101: "1000.00",
    102: "1200.00",
    103: "1400.00",
    104: "1600.00",
    105: "1800.00",
}

HOTEL_NAME = "Royal Palace"
