"""Bill receipt printing on a USB ESC/POS thermal printer."""

from __future__ import annotations

import os
from pathlib import Path
from time import sleep

from frontdesk.config import (
    PRINTER_FONT_PATH,
    PRINTER_FONT_SIZE,
    PRINTER_HEADER_FONT_SIZE,
    PRINTER_LEFT_INDENT_PX,
    PRINTER_TAIL_SPACER_PX,
    PRINTER_USB_PRODUCT_ID,
    PRINTER_USB_VENDOR_ID,
    PRINTER_WIDTH_PX,
)
from frontdesk.constant import HOTEL_NAME
from frontdesk.models import Bill
from frontdesk.rendering import BILL_RULE, bill_lines

# Separator tuning values.
_SEPARATOR_HEIGHT_PX = 14
_SEPARATOR_THICKNESS_PX = 3
_SEPARATOR_STRIPE_HEIGHT_PX = 2
_SEPARATOR_PAUSE_SECONDS = 0.1
_LINE_EXTRA_PX = 12
_FONT_OVERRIDE_ENV = "FRONTDESK_PRINTER_FONT_PATH"
_LINUX_FONT_FALLBACKS = (
    "/usr/share/fonts/TTF/DejaVuSansMono.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/dejavu/DejaVuSansMono.ttf",
    "/usr/share/fonts/liberation/LiberationMono-Regular.ttf",
)


def _font_candidates() -> list[str]:
    candidates = [os.environ.get(_FONT_OVERRIDE_ENV, "").strip(), PRINTER_FONT_PATH, *_LINUX_FONT_FALLBACKS]
    return list(dict.fromkeys(path for path in candidates if path))


def resolve_printer_font_path() -> str:
    """Return the first bill font that exists: env override, configured font, then monospace fallbacks."""
    candidates = _font_candidates()
    for candidate in candidates:
        if Path(candidate).is_file():
            return candidate
    raise RuntimeError(
        f"No bill font available; point {_FONT_OVERRIDE_ENV} at a monospace .ttf. Looked in: {', '.join(candidates)}"
    )


def check_printer_dependencies() -> tuple[bool, str]:
    """Check whether printer dependencies are importable."""
    try:
        from escpos.printer import Usb  # noqa: F401
        from PIL import ImageFont

        ImageFont.truetype(resolve_printer_font_path(), PRINTER_FONT_SIZE)
    except Exception as exc:
        return (False, f"Printer unavailable: {exc}")
    return (True, "Printer ready")


def _render_line(text: str, font: object) -> object:
    from PIL import Image, ImageDraw

    probe = Image.new("1", (1, 1), color=1)
    bbox = ImageDraw.Draw(probe).textbbox((0, 0), text or " ", font=font)
    text_height = bbox[3] - bbox[1]
    canvas_height = max(12, text_height + _LINE_EXTRA_PX)

    img = Image.new("1", (PRINTER_WIDTH_PX, canvas_height), color=1)
    draw = ImageDraw.Draw(img)
    x = PRINTER_LEFT_INDENT_PX
    # Offset by bbox top so descenders are not clipped.
    y = (canvas_height - text_height) // 2 - bbox[1]
    draw.text((x, y), text, font=font, fill=0)
    return img


def _render_spacer(height_px: int) -> object:
    from PIL import Image

    return Image.new("1", (PRINTER_WIDTH_PX, max(1, height_px)), color=1)


def _render_separator() -> object:
    from PIL import Image, ImageDraw

    img = Image.new("1", (PRINTER_WIDTH_PX, _SEPARATOR_HEIGHT_PX), color=1)
    draw = ImageDraw.Draw(img)
    top = max(0, (_SEPARATOR_HEIGHT_PX - _SEPARATOR_THICKNESS_PX) // 2)
    bottom = min(_SEPARATOR_HEIGHT_PX - 1, top + _SEPARATOR_THICKNESS_PX - 1)
    draw.rectangle((PRINTER_LEFT_INDENT_PX, top, PRINTER_WIDTH_PX - PRINTER_LEFT_INDENT_PX, bottom), fill=0)
    return img


def _print_separator(printer: object) -> None:
    """
    Print the separator in short stripes with tiny pauses.

    This reduces instantaneous heat so the bar stays crisp instead of
    bleeding into adjacent dots.
    """
    separator = _render_separator()
    for top in range(0, separator.height, _SEPARATOR_STRIPE_HEIGHT_PX):
        bottom = min(separator.height, top + _SEPARATOR_STRIPE_HEIGHT_PX)
        printer.image(separator.crop((0, top, PRINTER_WIDTH_PX, bottom)))
        if bottom < separator.height:
            sleep(_SEPARATOR_PAUSE_SECONDS)


def print_bill(bill: Bill) -> None:
    """Print the bill receipt and cut the ticket at the end."""
    try:
        from escpos.printer import Usb
        from PIL import ImageFont
    except Exception as exc:
        raise RuntimeError(f"Printer dependencies unavailable: {exc}") from exc

    printer = Usb(PRINTER_USB_VENDOR_ID, PRINTER_USB_PRODUCT_ID)
    font_path = resolve_printer_font_path()
    font = ImageFont.truetype(font_path, PRINTER_FONT_SIZE)
    header_font = ImageFont.truetype(font_path, PRINTER_HEADER_FONT_SIZE)

    printer.image(_render_line(HOTEL_NAME, header_font))
    for idx, line in enumerate(bill_lines(bill)):
        if line == BILL_RULE:
            _print_separator(printer)
        elif idx == 0:
            printer.image(_render_line(line, header_font))
        else:
            printer.image(_render_line(line, font))

    printer.image(_render_spacer(PRINTER_TAIL_SPACER_PX))
    printer.cut()
