"""Flat theme for the main window: fonts, colors, ttk styles, rounded buttons."""

import sys
import tkinter as tk
from tkinter import font as tkfont, ttk
from typing import Callable, Dict, Tuple

# Spacing (logical pixels)
PAD_WINDOW = 16
PAD_SECTION = 12
PAD_ROW = 6

if sys.platform == "win32":
    FONT_FAMILY, FONT_MONO = "Segoe UI", "Consolas"
elif sys.platform == "darwin":
    FONT_FAMILY, FONT_MONO = "SF Pro Text", "Menlo"
else:
    FONT_FAMILY, FONT_MONO = "Liberation Sans", "DejaVu Sans Mono"
FONT_SIZE = 10
FONT_SIZE_CAPTION = 9

COLOR_PRIMARY = "#1a73e8"
COLOR_PRIMARY_HOVER = "#1557b0"
COLOR_SURFACE = "#ffffff"
COLOR_TROUGH = "#f5f5f5"
COLOR_TEXT = "#202124"
COLOR_TEXT_MUTED = "#5f6368"
COLOR_OUTLINE = "#e0e0e0"
COLOR_BTN_SECONDARY = "#e8eaed"
# Match indicator
COLOR_MATCH = "#1e8e3e"
COLOR_MISMATCH = "#d93025"

# (fill, hover fill, text color, bold, min width, height) per button kind
_BUTTON_LOOKS: Dict[bool, Tuple[str, str, str, bool, int, int]] = {
    True: (COLOR_PRIMARY, COLOR_PRIMARY_HOVER, COLOR_SURFACE, True, 110, 34),
    False: (COLOR_BTN_SECONDARY, COLOR_OUTLINE, COLOR_TEXT, False, 96, 32),
}
_BTN_RADIUS = 8
_BTN_PADX = 18


def rounded_rect(canvas: tk.Canvas, x0: int, y0: int, x1: int, y1: int, r: int, **kw: object) -> None:
    """Fill a rounded rectangle: four corner arcs plus the two crossing bars."""
    for x, y, start in ((x0, y0, 90), (x1 - 2 * r, y0, 0), (x1 - 2 * r, y1 - 2 * r, 270), (x0, y1 - 2 * r, 180)):
        canvas.create_arc(x, y, x + 2 * r, y + 2 * r, start=start, extent=90, style=tk.PIESLICE, **kw)
    canvas.create_rectangle(x0 + r, y0, x1 - r, y1, **kw)
    canvas.create_rectangle(x0, y0 + r, x1, y1 - r, **kw)


def apply_theme(root: tk.Tk) -> None:
    """Clam theme with flat white surfaces; caption labels in a muted, smaller font."""
    style = ttk.Style(root)
    try:
        style.theme_use("clam")
    except tk.TclError:
        pass
    style.configure("TFrame", background=COLOR_SURFACE)
    style.configure(
        "Caption.TLabel",
        background=COLOR_SURFACE,
        foreground=COLOR_TEXT_MUTED,
        font=(FONT_FAMILY, FONT_SIZE_CAPTION),
    )
    style.configure("TEntry", fieldbackground=COLOR_SURFACE, foreground=COLOR_TEXT, padding=4)
    for name in ("TRadiobutton", "TCheckbutton"):
        style.configure(name, background=COLOR_SURFACE, foreground=COLOR_TEXT, font=(FONT_FAMILY, FONT_SIZE))
    style.configure(
        "Vertical.TScrollbar",
        background=COLOR_OUTLINE,
        troughcolor=COLOR_TROUGH,
        bordercolor=COLOR_SURFACE,
        arrowcolor=COLOR_TEXT_MUTED,
    )


def _rounded_btn(parent: tk.Widget, text: str, command: Callable[[], None], primary: bool, **pack_kw: object) -> tk.Frame:
    fill, hover, fg, bold, min_w, h = _BUTTON_LOOKS[primary]
    font_tuple = (FONT_FAMILY, FONT_SIZE, "bold") if bold else (FONT_FAMILY, FONT_SIZE)
    try:
        w = max(min_w, tkfont.Font(font=font_tuple).measure(text) + 2 * _BTN_PADX)
    except tk.TclError:
        w = min_w

    frame = tk.Frame(parent, bg=COLOR_SURFACE)
    canvas = tk.Canvas(frame, width=w, height=h, highlightthickness=0, bg=COLOR_SURFACE, takefocus=1, cursor="hand2")
    canvas.pack(fill=tk.BOTH, expand=True)

    def draw(color: str) -> None:
        canvas.delete("all")
        rounded_rect(canvas, 0, 0, w, h, _BTN_RADIUS, fill=color, outline=color)
        canvas.create_text(w // 2, h // 2, text=text, fill=fg, font=font_tuple)

    draw(fill)
    canvas.bind("<Enter>", lambda _e: draw(hover))
    canvas.bind("<Leave>", lambda _e: draw(fill))
    for seq in ("<Button-1>", "<Return>", "<KP_Enter>"):
        canvas.bind(seq, lambda _e: command())
    if pack_kw:
        frame.pack(**pack_kw)
    return frame


def primary_btn(parent: tk.Widget, text: str, command: Callable[[], None], **pack_kw: object) -> tk.Frame:
    """Filled blue button; packed right away when pack options are given."""
    return _rounded_btn(parent, text, command, primary=True, **pack_kw)


def secondary_btn(parent: tk.Widget, text: str, command: Callable[[], None], **pack_kw: object) -> tk.Frame:
    return _rounded_btn(parent, text, command, primary=False, **pack_kw)


def center(win: tk.Tk) -> None:
    """Move the window to the middle of the screen."""
    win.update_idletasks()
    x = (win.winfo_screenwidth() - win.winfo_width()) // 2
    y = max(0, (win.winfo_screenheight() - win.winfo_height()) // 2)
    win.geometry(f"+{x}+{y}")
