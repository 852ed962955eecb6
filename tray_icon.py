"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from hijri_logic import HijriDate
from islamic_events import IslamicEvent
from month_view import format_hijri


def _event_label(offset: int, hijri: HijriDate, event: IslamicEvent) -> str:
    when = "today" if offset == 0 else f"in {offset} d"
    return f"{event.display_icon} {event.name} – {format_hijri(hijri)} ({when})"


def create_tray(
    icon_image: Image.Image,
    today: HijriDate,
    upcoming: list[tuple[int, HijriDate, IslamicEvent]],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    icon = pystray.Icon("hijri-calendar", icon_image, format_hijri(today),
                        build_menu(today, upcoming, on_exit))
    return icon


def build_menu(
    today: HijriDate,
    upcoming: list[tuple[int, HijriDate, IslamicEvent]],
    on_exit: Callable[[], None],
) -> Menu:
    items: list[MenuItem | Menu] = [
        MenuItem(format_hijri(today), None, enabled=False),
        Menu.SEPARATOR,
    ]
    if upcoming:
        for offset, hijri, event in upcoming:
            items.append(MenuItem(_event_label(offset, hijri, event), None,
                                  enabled=False))
    else:
        items.append(MenuItem("No upcoming observances", None, enabled=False))
    items.append(Menu.SEPARATOR)
    items.append(MenuItem("Exit", lambda _icon, _item: on_exit()))
    return Menu(*items)
