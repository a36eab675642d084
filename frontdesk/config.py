"""Runtime configuration defaults for persistence, admin access and printing."""

from __future__ import annotations

import os

DB_PATH = os.environ.get("FRONTDESK_DB_PATH", "data/frontdesk.db")
DEBUG_LOG_PATH = os.environ.get("FRONTDESK_DEBUG_LOG", "/tmp/frontdesk-debug.log")

ADMIN_USERNAME = os.environ.get("FRONTDESK_ADMIN_USERNAME", "admin")
ADMIN_PASSWORD = os.environ.get("FRONTDESK_ADMIN_PASSWORD", "1234")

# USB ids accept hex (0x28E9) or decimal.
PRINTER_USB_VENDOR_ID = int(os.environ.get("FRONTDESK_PRINTER_VENDOR_ID", "0x28E9"), 0)
PRINTER_USB_PRODUCT_ID = int(os.environ.get("FRONTDESK_PRINTER_PRODUCT_ID", "0x0289"), 0)
PRINTER_WIDTH_PX = int(os.environ.get("FRONTDESK_PRINTER_WIDTH_PX", "384"))
PRINTER_FONT_SIZE = int(os.environ.get("FRONTDESK_PRINTER_FONT_SIZE", "28"))
PRINTER_HEADER_FONT_SIZE = int(os.environ.get("FRONTDESK_PRINTER_HEADER_FONT_SIZE", "44"))
PRINTER_FONT_PATH = "/System/Library/Fonts/SFNS.ttf"
PRINTER_LEFT_INDENT_PX = 16
PRINTER_TAIL_SPACER_PX = 70
