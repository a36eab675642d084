"""Rendering helpers for rooms, menus, order summaries and bills."""

from __future__ import annotations

from decimal import Decimal
from typing import Mapping

from rich.text import Text

from frontdesk.data import MenuCatalog
from frontdesk.models import Bill, MenuItem, RoomStatus, RoomSummary, round_currency

BILL_RULE = "-" * 22


def money(amount: Decimal) -> str:
    return f"${round_currency(amount)}"


def status_style(occupied: bool) -> str:
    """Return a consistent badge style for room availability."""
    if occupied:
        return "bold #ffffff on #b23a48"
    return "bold #0b1f0f on #5fbf72"


def status_label(occupied: bool) -> str:
    return "Booked" if occupied else "Available"


def format_room_row(status: RoomStatus) -> Text:
    text = Text()
    text.append(f"Room {status.room_number}  {money(status.base_rate):>10}  ")
    text.append(f" {status_label(status.occupied)} ", style=status_style(status.occupied))
    return text


def format_room_summary(summary: RoomSummary) -> Text:
    """Render the full admin detail of one room."""
    text = Text()
    text.append(f"Room {summary.room_number}\n", style="bold")
    occupant = summary.occupant
    if occupant is not None:
        text.append(f"Name     : {occupant.name}\n")
        text.append(f"Phone    : {occupant.phone}\n")
        text.append(f"Email    : {occupant.email}\n")
        text.append(f"ID Proof : {occupant.id_proof}\n")
    text.append(f"Room Price : {money(summary.base_rate)}\n")
    text.append("Status     : ")
    text.append(f" {status_label(summary.occupied)} ", style=status_style(summary.occupied))
    text.append("\n\n")
    if not summary.order_counts:
        text.append("No food ordered.", style="dim")
        return text
    text.append("Food Ordered\n", style="bold")
    for idx, (name, quantity) in enumerate(summary.order_counts.items()):
        if idx > 0:
            text.append("\n")
        text.append(f"- {name} x {quantity}")
    return text


def format_menu(items: list[MenuItem], cursor_index: int) -> Text:
    text = Text()
    for idx, item in enumerate(items):
        if idx > 0:
            text.append("\n")
        pointer = "➤ " if idx == cursor_index else "  "
        style = "bold white" if idx == cursor_index else "white"
        text.append(f"{pointer}{idx + 1}. {item.name:<16}{money(item.unit_price):>8}", style=style)
    return text


def format_order_summary(order_counts: Mapping[str, int], catalog: MenuCatalog) -> Text:
    """Render per-line costs and the subtotal of an ordering session."""
    if not order_counts:
        return Text("No items ordered.", style="dim")

    text = Text()
    for name in sorted(order_counts):
        quantity = order_counts[name]
        text.append(f"{quantity} x {name} = {money(catalog.price_of(name) * quantity)}\n")
    text.append(f"{BILL_RULE}\n")
    text.append(f"Subtotal: {money(catalog.subtotal(order_counts))}", style="bold")
    return text


def bill_lines(bill: Bill) -> list[str]:
    """Plain bill lines shared by the bill screen and the receipt printer."""
    return [
        "BILL",
        f"Room Number : {bill.room_number}",
        f"Customer    : {bill.occupant.name}",
        f"Room Cost   : {money(bill.room_cost)}",
        f"Food Cost   : {money(bill.food_cost)}",
        BILL_RULE,
        f"Total Amount: {money(bill.total)}",
        BILL_RULE,
        f"Payment Status: {bill.payment_status}",
    ]


def format_bill(bill: Bill) -> Text:
    text = Text()
    lines = bill_lines(bill)
    for idx, line in enumerate(lines):
        if idx > 0:
            text.append("\n")
        if idx == 0 or line.startswith("Total"):
            text.append(line, style="bold")
        elif line.startswith("Payment Status"):
            text.append(line, style="bold #5fbf72")
        else:
            text.append(line)
    return text
