"""Generate the system-tray icon (64×64 PIL Image, in-memory)."""

from functools import lru_cache

from PIL import Image, ImageDraw, ImageFont

from hijri_logic import HijriDate

ICON_SIZE = 64

# Bold faces shipped with Windows, common Linux distributions and macOS
FONT_CANDIDATES = (
    "segoeuib.ttf",
    "DejaVuSans-Bold.ttf",
    "LiberationSans-Bold.ttf",
    "Arial Bold.ttf",
    "Helvetica.ttc",
)


@lru_cache(maxsize=1)
def _installed_font() -> str | None:
    """Return the first candidate font Pillow can open, or None."""
    for name in FONT_CANDIDATES:
        try:
            ImageFont.truetype(name, 12)
        except OSError:
            continue
        return name
    return None


def _fit_font(draw: ImageDraw.ImageDraw, text: str):
    """Return the largest font whose rendering of ``text`` fits the icon."""
    name = _installed_font()
    if name is None:
        return ImageFont.load_default()
    for size in range(120, 10, -2):
        font = ImageFont.truetype(name, size)
        left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
        if right - left <= ICON_SIZE and bottom - top <= ICON_SIZE:
            break
    return font


def create_icon_image(
    today: HijriDate, color: str | None = None, dark_mode: bool = False,
) -> Image.Image:
    """Return a 64×64 RGBA image showing the Hijri day number.

    ``color`` tints the number (e.g. today's observance colour); otherwise
    it is black on white, or white on black in dark mode.
    """
    bg = "black" if dark_mode else "white"
    fg = color or ("white" if dark_mode else "black")
    img = Image.new("RGBA", (ICON_SIZE, ICON_SIZE), bg)
    draw = ImageDraw.Draw(img)

    text = str(today.day)
    font = _fit_font(draw, text)

    left, top, right, bottom = draw.textbbox((0, 0), text, font=font)
    x = (ICON_SIZE - (right - left)) / 2 - left
    y = (ICON_SIZE - (bottom - top)) / 2 - top
    draw.text((x, y), text, fill=fg, font=font)
    return img
