"""Main window: file picker, algorithm table, results and match indicators.

One grid row per algorithm: checkbox, computed digest, expected value and a
colored indicator (green match, red mismatch, blank when nothing to compare).
Widgets are bound to HashSession rows; the session holds the state.
"""

import logging
import tkinter as tk
from pathlib import Path
from tkinter import filedialog, ttk
from typing import Dict, Optional

from hashbox import config as app_config
from hashbox.compare import MatchState
from hashbox.digests.algorithms import ALGORITHMS, AlgorithmId
from hashbox.digests.formatting import LetterCase
from hashbox.session import HashSession
from hashbox.ui.dialogs import LARGE_FILE_BYTES, confirm_large_file, show_error, show_sidecar_errors
from hashbox.ui.icon import set_window_icon
from hashbox.ui.theme import (
    COLOR_MATCH,
    COLOR_MISMATCH,
    COLOR_SURFACE,
    FONT_MONO,
    FONT_SIZE,
    PAD_ROW,
    PAD_SECTION,
    PAD_WINDOW,
    apply_theme,
    center,
    primary_btn,
    secondary_btn,
)

log = logging.getLogger(__name__)

_INDICATOR_COLORS = {
    MatchState.NEUTRAL: COLOR_SURFACE,
    MatchState.MATCH: COLOR_MATCH,
    MatchState.MISMATCH: COLOR_MISMATCH,
}


class _RowWidgets:
    """Tk variables and indicator label bound to one algorithm row."""

    def __init__(self, selected: tk.BooleanVar, result: tk.StringVar, expected: tk.StringVar, indicator: tk.Label) -> None:
        self.selected = selected
        self.result = result
        self.expected = expected
        self.indicator = indicator


class MainWindow:
    """
    Hash Box main window. Calculation runs synchronously on the Tk thread; the
    window shows a busy cursor until all digests are in.
    """

    def __init__(self, root: tk.Tk, session: HashSession) -> None:
        self._root = root
        self._session = session
        self._rows: Dict[AlgorithmId, _RowWidgets] = {}
        self._file_var = tk.StringVar(value="")
        self._case_var = tk.StringVar(value=session.case.value)
        self._status_var = tk.StringVar(value="Select a file to begin.")
        self._syncing_vars = False
        self._icon = set_window_icon(root)
        self._build()

    # --- layout ---

    def _build(self) -> None:
        root = self._root
        root.title("Hash Box")
        root.configure(bg=COLOR_SURFACE)
        apply_theme(root)
        root.minsize(760, 480)

        main = ttk.Frame(root, padding=PAD_WINDOW)
        main.grid(row=0, column=0, sticky="nsew")
        root.columnconfigure(0, weight=1)
        root.rowconfigure(0, weight=1)
        main.columnconfigure(0, weight=1)
        main.rowconfigure(3, weight=1)

        # File row
        file_f = ttk.Frame(main)
        file_f.grid(row=0, column=0, sticky="ew", pady=(0, PAD_SECTION))
        file_f.columnconfigure(0, weight=1)
        ttk.Label(file_f, text="File", style="Caption.TLabel").grid(row=0, column=0, sticky="w", pady=(0, 2))
        file_entry = ttk.Entry(file_f, textvariable=self._file_var, state="readonly")
        file_entry.grid(row=1, column=0, sticky="ew", padx=(0, PAD_ROW))
        primary_btn(file_f, "Select file…", self.choose_file).grid(row=1, column=1, sticky="e")

        # Options row: case toggle and actions
        opt_f = ttk.Frame(main)
        opt_f.grid(row=1, column=0, sticky="ew", pady=(0, PAD_SECTION))
        ttk.Label(opt_f, text="Hex case:", style="Caption.TLabel").pack(side="left", padx=(0, PAD_ROW))
        for case, text in ((LetterCase.LOWER, "lower"), (LetterCase.UPPER, "UPPER")):
            ttk.Radiobutton(
                opt_f,
                text=text,
                value=case.value,
                variable=self._case_var,
                command=self._on_case_change,
            ).pack(side="left", padx=(0, PAD_ROW))
        primary_btn(opt_f, "Calculate", self.calculate, side="right")
        secondary_btn(opt_f, "Clear", self.clear, side="right", padx=(0, PAD_ROW))
        secondary_btn(opt_f, "Select none", self.select_none, side="right", padx=(0, PAD_ROW))
        secondary_btn(opt_f, "Select all", self.select_all, side="right", padx=(0, PAD_ROW))

        # Column headers
        head = ttk.Frame(main)
        head.grid(row=2, column=0, sticky="ew")
        self._configure_columns(head)
        for col, text in enumerate(("Algorithm", "Computed", "Expected", "")):
            ttk.Label(head, text=text, style="Caption.TLabel").grid(row=0, column=col, sticky="w", padx=(0, PAD_ROW))

        # Scrollable table
        table_outer = ttk.Frame(main)
        table_outer.grid(row=3, column=0, sticky="nsew")
        table_outer.columnconfigure(0, weight=1)
        table_outer.rowconfigure(0, weight=1)
        canvas = tk.Canvas(table_outer, highlightthickness=0, bg=COLOR_SURFACE)
        canvas.grid(row=0, column=0, sticky="nsew")
        scroll = ttk.Scrollbar(table_outer, orient="vertical", command=canvas.yview)
        scroll.grid(row=0, column=1, sticky="ns")
        canvas.configure(yscrollcommand=scroll.set)
        table = ttk.Frame(canvas)
        table_id = canvas.create_window((0, 0), window=table, anchor="nw")
        self._configure_columns(table)

        def _on_table_configure(_e: tk.Event) -> None:
            canvas.configure(scrollregion=canvas.bbox("all"))

        def _on_canvas_configure(ev: tk.Event) -> None:
            canvas.itemconfigure(table_id, width=ev.width)

        def _on_wheel(ev: tk.Event) -> None:
            if getattr(ev, "num", None) == 4:
                canvas.yview_scroll(-1, "units")
            elif getattr(ev, "num", None) == 5:
                canvas.yview_scroll(1, "units")
            elif ev.delta:
                canvas.yview_scroll(-1 if ev.delta > 0 else 1, "units")

        table.bind("<Configure>", _on_table_configure)
        canvas.bind("<Configure>", _on_canvas_configure)
        canvas.bind_all("<MouseWheel>", _on_wheel)
        canvas.bind_all("<Button-4>", _on_wheel)
        canvas.bind_all("<Button-5>", _on_wheel)

        for i, (algorithm, info) in enumerate(ALGORITHMS.items()):
            self._build_row(table, i, algorithm, info.label)

        ttk.Label(main, textvariable=self._status_var, style="Caption.TLabel").grid(
            row=4, column=0, sticky="w", pady=(PAD_ROW, 0)
        )
        self._refresh()

    @staticmethod
    def _configure_columns(frame: tk.Misc) -> None:
        frame.columnconfigure(0, minsize=140)
        frame.columnconfigure(1, weight=3, uniform="values")
        frame.columnconfigure(2, weight=2, uniform="values")
        frame.columnconfigure(3, minsize=24)

    def _build_row(self, table: ttk.Frame, i: int, algorithm: AlgorithmId, label: str) -> None:
        row = self._session.rows[algorithm]
        selected = tk.BooleanVar(value=row.selected)
        result = tk.StringVar(value="")
        expected = tk.StringVar(value=row.expected)

        def on_check() -> None:
            self._session.rows[algorithm].selected = selected.get()

        def on_expected(*_args: object) -> None:
            if self._syncing_vars:
                return
            self._session.rows[algorithm].expected = expected.get()
            self._update_indicator(algorithm)

        ttk.Checkbutton(table, text=label, variable=selected, command=on_check).grid(
            row=i, column=0, sticky="w", pady=1
        )
        ttk.Entry(table, textvariable=result, state="readonly", font=(FONT_MONO, FONT_SIZE)).grid(
            row=i, column=1, sticky="ew", padx=(0, PAD_ROW), pady=1
        )
        ttk.Entry(table, textvariable=expected, font=(FONT_MONO, FONT_SIZE)).grid(
            row=i, column=2, sticky="ew", padx=(0, PAD_ROW), pady=1
        )
        indicator = tk.Label(table, width=2, bg=COLOR_SURFACE, relief="flat")
        indicator.grid(row=i, column=3, sticky="nsew", pady=1)
        expected.trace_add("write", on_expected)
        self._rows[algorithm] = _RowWidgets(selected, result, expected, indicator)

    # --- state -> widgets ---

    def _update_indicator(self, algorithm: AlgorithmId) -> None:
        state = self._session.match_state(algorithm)
        self._rows[algorithm].indicator.configure(bg=_INDICATOR_COLORS[state])

    def _refresh(self) -> None:
        """Copy every session row into its widgets."""
        self._syncing_vars = True
        try:
            self._file_var.set(str(self._session.file_path or ""))
            for algorithm, widgets in self._rows.items():
                row = self._session.rows[algorithm]
                widgets.selected.set(row.selected)
                widgets.result.set(f"({row.error})" if row.error else row.result)
                if widgets.expected.get() != row.expected:
                    widgets.expected.set(row.expected)
        finally:
            self._syncing_vars = False
        for algorithm in self._rows:
            self._update_indicator(algorithm)

    # --- actions ---

    def choose_file(self) -> None:
        last_dir = app_config.get_last_directory()
        path = filedialog.askopenfilename(
            parent=self._root,
            title="Select file",
            initialdir=str(last_dir) if last_dir else None,
            filetypes=[("All files", "*.*")],
        )
        if not path:
            return
        self.open_file(Path(path))

    def open_file(self, path: Path) -> None:
        """Select path, load sidecar checksums and report any sidecar problems."""
        errors = self._session.select_file(path)
        try:
            app_config.set_last_directory(path.parent)
        except OSError as e:
            log.warning("Could not save last directory: %s", e)
        self._refresh()
        loaded = sum(1 for row in self._session.rows.values() if row.expected)
        self._status_var.set(f"{path.name}: {loaded} expected checksum(s) loaded from sidecar files.")
        if errors:
            self._status_var.set(errors[0])
            show_sidecar_errors(errors, parent=self._root)

    def select_all(self) -> None:
        self._session.select_all()
        self._refresh()

    def select_none(self) -> None:
        self._session.select_none()
        self._refresh()

    def clear(self) -> None:
        self._session.clear()
        self._refresh()
        self._status_var.set("Cleared.")

    def _on_case_change(self) -> None:
        case = LetterCase(self._case_var.get())
        self._session.set_case(case)
        try:
            app_config.set_letter_case(case)
        except OSError as e:
            log.warning("Could not save letter case: %s", e)
        self._refresh()

    def calculate(self) -> None:
        path = self._session.file_path
        if path is None:
            return
        try:
            size = path.stat().st_size
        except OSError as e:
            show_error("Hash Box", f"Could not read {path}: {e}", parent=self._root)
            return
        if size > LARGE_FILE_BYTES and not confirm_large_file(size, parent=self._root):
            return
        self._root.configure(cursor="watch")
        self._status_var.set("Calculating…")
        self._root.update_idletasks()
        try:
            err = self._session.calculate()
        finally:
            self._root.configure(cursor="")
        self._refresh()
        if err:
            self._status_var.set(err)
            show_error("Hash Box", err, parent=self._root)
            return
        failed = [ALGORITHMS[a].label for a, row in self._session.rows.items() if row.error]
        states = [self._session.match_state(a) for a in self._session.selected_algorithms()]
        msg = (
            f"Done: {states.count(MatchState.MATCH)} match, "
            f"{states.count(MatchState.MISMATCH)} mismatch."
        )
        if failed:
            msg += f" Failed: {', '.join(failed)}."
        self._status_var.set(msg)

    def on_close(self) -> None:
        try:
            app_config.set_selected_algorithms(self._session.selected_algorithms())
            app_config.set_window_geometry(self._root.geometry())
        except OSError as e:
            log.warning("Could not save settings: %s", e)
        self._root.destroy()


def show_main_window(initial_file: Optional[Path] = None) -> None:
    """Create the main window and run the Tk main loop until it is closed."""
    root = tk.Tk()
    session = HashSession(
        case=app_config.get_letter_case(),
        selected=app_config.get_selected_algorithms(),
    )
    win = MainWindow(root, session)
    geometry = app_config.get_window_geometry()
    if geometry:
        try:
            root.geometry(geometry)
        except tk.TclError:
            center(root)
    else:
        root.geometry("980x720")
        center(root)
    root.protocol("WM_DELETE_WINDOW", win.on_close)
    if initial_file is not None:
        root.after(0, lambda: win.open_file(initial_file))
    root.mainloop()
