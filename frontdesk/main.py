"""Entry point for the front desk Textual app."""

from __future__ import annotations

from frontdesk.desk_app import FrontDeskApp


def main() -> None:
    FrontDeskApp().run()


if __name__ == "__main__":
    main()
