"""Window icon drawn in memory with Pillow (rounded badge with '#')."""

import logging
from typing import TYPE_CHECKING, Any, Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

if TYPE_CHECKING:
    import tkinter as tk

log = logging.getLogger(__name__)

ICON_SIZE = 64
ICON_COLOR = (26, 115, 232)


def draw_app_icon(size: int = ICON_SIZE, color: Tuple[int, int, int] = ICON_COLOR) -> Image.Image:
    """Draw the app icon: rounded square in color with a white '#'. RGBA, size x size."""
    img = Image.new("RGBA", (size, size), (0, 0, 0, 0))
    d = ImageDraw.Draw(img)
    margin = max(1, size // 10)
    d.rounded_rectangle(
        [margin, margin, size - margin, size - margin],
        radius=max(4, size // 5),
        fill=color + (255,),
    )
    font_size = max(8, int(size * 0.6))
    for path in (
        "/usr/share/fonts/TTF/DejaVuSans-Bold.ttf",
        "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
        "C:\\Windows\\Fonts\\segoeuib.ttf",
    ):
        try:
            font = ImageFont.truetype(path, font_size)
            break
        except (OSError, TypeError):
            continue
    else:
        font = ImageFont.load_default()
    text = "#"
    bbox = d.textbbox((0, 0), text, font=font)
    tw, th = bbox[2] - bbox[0], bbox[3] - bbox[1]
    x = (size - tw) // 2 - bbox[0]
    y = (size - th) // 2 - bbox[1]
    d.text((x, y), text, fill=(255, 255, 255, 255), font=font)
    return img


def set_window_icon(root: "tk.Tk") -> Optional[Any]:
    """
    Set the window icon. Returns the PhotoImage, which the caller must keep a
    reference to (Tk drops images that are garbage-collected).
    """
    import tkinter as tk

    from PIL import ImageTk

    try:
        photo = ImageTk.PhotoImage(draw_app_icon(), master=root)
        root.iconphoto(True, photo)
        return photo
    except (tk.TclError, OSError) as e:
        log.debug("Window icon not set: %s", e)
        return None
