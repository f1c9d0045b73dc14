"""Warning dialogs (large file, sidecar problems, read errors)."""

import tkinter as tk
from tkinter import messagebox
from typing import List, Optional

# Files above this size are read into memory only after confirmation
LARGE_FILE_BYTES = 1024**3


def _format_size(n: int) -> str:
    """Format byte count as e.g. '1.8 GiB'."""
    if n >= 1024**3:
        return f"{n / 1024**3:.1f} GiB"
    if n >= 1024**2:
        return f"{n / 1024**2:.1f} MiB"
    if n >= 1024:
        return f"{n / 1024:.1f} KiB"
    return f"{n} B"


def confirm_large_file(size: int, parent: Optional[tk.Misc] = None) -> bool:
    """
    Warn that the whole file is loaded into memory before hashing.
    Returns True if the user wants to continue.
    """
    return messagebox.askyesno(
        "Large file",
        f"The selected file is {_format_size(size)}. It is read into memory in full "
        "before the digests are computed. Continue?",
        icon=messagebox.WARNING,
        parent=parent,
    )


def show_sidecar_errors(errors: List[str], parent: Optional[tk.Misc] = None) -> None:
    """List sidecar files whose checksum could not be loaded."""
    if not errors:
        return
    messagebox.showwarning(
        "Checksum files",
        "Some checksum files could not be used:\n\n" + "\n".join(errors),
        parent=parent,
    )


def show_error(title: str, message: str, parent: Optional[tk.Misc] = None) -> None:
    """Modal error box, e.g. when the selected file cannot be read."""
    messagebox.showerror(title, message, parent=parent)
