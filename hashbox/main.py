"""Entry point: logging setup, then the main window (optionally with a file preselected)."""

import logging
import sys
from pathlib import Path
from typing import List, Optional

from hashbox.config import get_log_path


def _setup_logging() -> None:
    """Configure logging to a file in the config dir and to stderr (INFO level)."""
    log_file = get_log_path()
    log_file.parent.mkdir(parents=True, exist_ok=True)
    fmt = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    root = logging.getLogger("hashbox")
    root.setLevel(logging.DEBUG)
    root.handlers.clear()
    fh = logging.FileHandler(log_file, encoding="utf-8")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(fmt)
    root.addHandler(fh)
    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(logging.INFO)
    ch.setFormatter(fmt)
    root.addHandler(ch)
    root.info("Logging to %s", log_file)


def _initial_file(argv: List[str]) -> Optional[Path]:
    """First non-option argument, if it names an existing file."""
    for arg in argv:
        if arg.startswith("-"):
            continue
        path = Path(arg).expanduser()
        if path.is_file():
            return path.resolve()
        logging.getLogger("hashbox.main").warning("Ignoring %s: not a file", arg)
        return None
    return None


def main(argv: Optional[List[str]] = None) -> None:
    """Run the Hash Box desktop application."""
    _setup_logging()
    log = logging.getLogger("hashbox.main")
    log.info("Hash Box starting")
    args = sys.argv[1:] if argv is None else argv
    from hashbox.ui.window import show_main_window

    show_main_window(initial_file=_initial_file(args))
    log.info("Hash Box exiting")


if __name__ == "__main__":
    main()
