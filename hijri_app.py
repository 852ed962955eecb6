"""Entry point — prints a Hijri month or runs the pystray tray icon."""

from __future__ import annotations

import argparse
import logging
import threading
from datetime import date

from hijri_logic import gregorian_to_hijri, upcoming_events
from hijri_settings import load_settings
from islamic_events import lookup_event
from month_view import format_catalog, format_hijri, format_month

logger = logging.getLogger("hijri.main")

_REFRESH_SECONDS = 60


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="hijri-calendar",
        description="Tabular Hijri calendar with Islamic observances.",
    )
    parser.add_argument("--date", type=date.fromisoformat, metavar="YYYY-MM-DD",
                        help="Gregorian date to treat as today")
    parser.add_argument("--month", type=int, nargs=2, metavar=("YEAR", "MONTH"),
                        help="Hijri month to show instead of the current one")
    parser.add_argument("--events", action="store_true",
                        help="list every observance in the catalog")
    parser.add_argument("--tray", action="store_true",
                        help="run as a system-tray icon")
    parser.add_argument("--log-level", choices=("DEBUG", "INFO", "WARNING", "ERROR"))
    args = parser.parse_args(argv)
    if args.month is not None and not 1 <= args.month[1] <= 12:
        parser.error("MONTH must be between 1 and 12")
    if args.month is not None and args.month[0] < 1:
        parser.error("YEAR must be 1 or later")
    return args


def run_tray(settings: dict) -> None:
    """Show today's Hijri day in the tray, refreshed when the date changes."""
    from icon_gen import create_icon_image
    from tray_icon import build_menu, create_tray

    stopping = threading.Event()

    def on_exit() -> None:
        stopping.set()
        tray.stop()

    def render(today):
        event = lookup_event(today.month, today.day)
        image = create_icon_image(today, event.color_token if event else None,
                                  settings["dark_mode"])
        upcoming = [u for u in upcoming_events(today, settings["upcoming_days"])
                    if u[2].category.value in settings["categories"]]
        return image, upcoming

    shown = gregorian_to_hijri(date.today())
    image, upcoming = render(shown)
    tray = create_tray(image, shown, upcoming, on_exit)

    def refresh(icon) -> None:
        nonlocal shown
        icon.visible = True
        while not stopping.wait(_REFRESH_SECONDS):
            today = gregorian_to_hijri(date.today())
            if today == shown:
                continue
            logger.info("Date changed to %s", tuple(today))
            shown = today
            image, upcoming = render(today)
            icon.icon = image
            icon.title = format_hijri(today)
            icon.menu = build_menu(today, upcoming, on_exit)

    tray.run(setup=refresh)
    logger.debug("Tray stopped")


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    settings = load_settings()
    logging.basicConfig(
        level=getattr(logging, args.log_level or settings["log_level"]),
        format="%(asctime)s  %(levelname)-8s  %(name)-18s  %(message)s",
        datefmt="%H:%M:%S",
    )

    if args.tray:
        run_tray(settings)
        return

    if args.events:
        print(format_catalog(settings["categories"]))
        return

    today = gregorian_to_hijri(args.date or date.today())
    logger.debug("Today is %s", tuple(today))
    year, month = args.month if args.month else (today.year, today.month)
    print(format_month(year, month, today, settings["categories"]))


if __name__ == "__main__":
    main()
