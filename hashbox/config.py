"""Client configuration: letter case, selected algorithms, last directory, window geometry."""

import json
import os
from pathlib import Path
from typing import List, Optional

from hashbox.digests.algorithms import ALGORITHMS, AlgorithmId
from hashbox.digests.formatting import LetterCase

# Preselected on first start
DEFAULT_ALGORITHMS = (AlgorithmId.CRC32, AlgorithmId.MD5, AlgorithmId.SHA1, AlgorithmId.SHA256)


def _config_dir() -> Path:
    """Platform-specific config directory (no admin). HASHBOX_CONFIG_DIR overrides it."""
    override = os.environ.get("HASHBOX_CONFIG_DIR", "").strip()
    if override:
        return Path(override)
    if os.name == "nt":
        base = os.environ.get("APPDATA", os.path.expanduser("~"))
        return Path(base) / "HashBox"
    if os.environ.get("XDG_CONFIG_HOME"):
        return Path(os.environ["XDG_CONFIG_HOME"]) / "hashbox"
    return Path.home() / ".config" / "hashbox"


def get_config_path() -> Path:
    """Path to config.json."""
    d = _config_dir()
    d.mkdir(parents=True, exist_ok=True)
    return d / "config.json"


def get_log_path() -> Path:
    """Path to the log file, next to the config."""
    return get_config_path().parent / "hashbox.log"


def _read_config() -> dict:
    """Config contents, or {} when missing or unreadable."""
    path = get_config_path()
    if not path.exists():
        return {}
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def _write_key(key: str, value: object) -> None:
    """Persist a single key, keeping the others."""
    data = _read_config()
    data[key] = value
    get_config_path().write_text(json.dumps(data, indent=2), encoding="utf-8")


def get_letter_case() -> LetterCase:
    """Display case for hex strings. Default is lower case."""
    try:
        return LetterCase(_read_config().get("letter_case", LetterCase.LOWER.value))
    except ValueError:
        return LetterCase.LOWER


def set_letter_case(case: LetterCase) -> None:
    """Persist display case."""
    _write_key("letter_case", LetterCase(case).value)


def get_selected_algorithms() -> List[AlgorithmId]:
    """Algorithms checked last time; unknown names are dropped."""
    raw = _read_config().get("selected_algorithms")
    if not isinstance(raw, list):
        return list(DEFAULT_ALGORITHMS)
    out: List[AlgorithmId] = []
    for name in raw:
        try:
            alg = AlgorithmId(name)
        except ValueError:
            continue
        if alg in ALGORITHMS and alg not in out:
            out.append(alg)
    return out


def set_selected_algorithms(algorithms: List[AlgorithmId]) -> None:
    """Persist checked algorithms."""
    _write_key("selected_algorithms", [AlgorithmId(a).value for a in algorithms])


def get_last_directory() -> Optional[Path]:
    """Directory of the last opened file, if it still exists."""
    raw = _read_config().get("last_directory")
    if not raw:
        return None
    path = Path(raw)
    return path if path.is_dir() else None


def set_last_directory(folder: Path) -> None:
    """Persist directory for the next file dialog."""
    _write_key("last_directory", str(Path(folder).resolve()))


def get_window_geometry() -> Optional[str]:
    """Last saved main window geometry (e.g. '900x700+100+200') or None."""
    return _read_config().get("window_geometry")


def set_window_geometry(geometry: str) -> None:
    """Save main window geometry for next time."""
    _write_key("window_geometry", geometry)
